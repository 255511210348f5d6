from importlib import reload

from fastapi.testclient import TestClient


def test_cors_allow_all(monkeypatch):
    monkeypatch.setenv('CORS_ALLOW_ALL', 'true')
    import venue_booking.core.config as config
    reload(config)
    from venue_booking import main as main_module
    reload(main_module)
    try:
        client = TestClient(main_module.app)
        response = client.options('/healthz', headers={
            'Origin': 'http://foo.com',
            'Access-Control-Request-Method': 'GET'
        })
        assert response.status_code == 200
        assert response.headers.get('access-control-allow-origin') in ('*', 'http://foo.com')
    finally:
        monkeypatch.delenv('CORS_ALLOW_ALL')
        reload(config)
        reload(main_module)
