from fastapi.testclient import TestClient

from venue_booking.main import app

client = TestClient(app)

BOOKINGS = [
    {
        "id": "b1",
        "spaceId": "hall",
        "spaceName": "Main Hall",
        "venueId": "v1",
        "venueName": "Lakeside",
        "eventName": "Gala",
        "customerName": "Acme Corp",
        "start": "2030-03-01T18:00:00",
        "end": "2030-03-01T22:00:00",
        "status": "confirmed_fully_paid",
    },
    {
        "id": "b2",
        "spaceId": "patio",
        "eventName": "Brunch",
        "eventDate": "2030-03-01",
        "startTime": "10:00",
        "endTime": "13:00",
    },
]


def test_conflict_endpoint_reports_overlaps_by_venue():
    payload = {
        "spaceIds": ["hall", "patio", "library"],
        "start": "2030-03-01T21:00:00",
        "end": "2030-03-01T23:00:00",
        "bookings": BOOKINGS,
    }
    res = client.post("/api/v1/bookings/conflicts", json=payload)
    assert res.status_code == 200
    data = res.json()
    assert data["hasConflicts"] is True
    assert data["totalConflicts"] == 1
    assert len(data["conflicts"]) == 1
    conflict = data["conflicts"][0]
    assert conflict["spaceId"] == "hall"
    assert conflict["venueName"] == "Lakeside"
    assert conflict["conflicts"][0] == {
        "bookingId": "b1",
        "eventName": "Gala",
        "customerName": "Acme Corp",
        "start": "2030-03-01T18:00:00",
        "end": "2030-03-01T22:00:00",
    }
    assert data["report"]["v1"]["spaces"] == [
        {"spaceId": "hall", "spaceName": "Main Hall", "conflictCount": 1}
    ]


def test_conflict_endpoint_unknown_venue_and_multi_date():
    payload = {
        "spaceIds": ["patio"],
        "start": "2030-03-01T12:00:00",
        "end": "2030-03-01T14:00:00",
        "additionalWindows": [{"start": "2030-03-02T12:00:00", "end": "2030-03-02T14:00:00"}],
        "bookings": BOOKINGS,
    }
    data = client.post("/api/v1/bookings/conflicts", json=payload).json()
    assert data["report"]["unknown"]["venueName"] == "Unknown venue"
    assert data["conflicts"][0]["conflicts"][0]["customerName"] == "Unknown Customer"
    assert data["totalConflicts"] == 1


def test_conflict_endpoint_excludes_booking_being_edited():
    payload = {
        "spaceIds": ["hall"],
        "start": "2030-03-01T18:00:00",
        "end": "2030-03-01T22:00:00",
        "excludeBookingId": "b1",
        "bookings": BOOKINGS,
    }
    data = client.post("/api/v1/bookings/conflicts", json=payload).json()
    assert data == {"hasConflicts": False, "totalConflicts": 0, "conflicts": [], "report": {}}


def test_conflict_endpoint_inverted_window_is_empty():
    payload = {
        "spaceIds": ["hall"],
        "start": "2030-03-01T22:00:00",
        "end": "2030-03-01T18:00:00",
        "bookings": BOOKINGS,
    }
    data = client.post("/api/v1/bookings/conflicts", json=payload).json()
    assert data["conflicts"] == []


def test_conflict_endpoint_rejects_half_window():
    payload = {"spaceIds": ["hall"], "start": "2030-03-01T18:00:00", "bookings": BOOKINGS}
    res = client.post("/api/v1/bookings/conflicts", json=payload)
    assert res.status_code == 422
    assert res.json()["detail"]["field_errors"] == {"end": "required"}
