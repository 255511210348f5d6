import os

from fastapi.openapi.utils import get_openapi
from dotenv import load_dotenv
from venue_booking.main import app

# Load environment variables for development
load_dotenv()  # This reads .env into os.environ


def custom_openapi() -> dict:
    """Return OpenAPI schema with project metadata."""
    if app.openapi_schema:
        return app.openapi_schema
    app.openapi_schema = get_openapi(
        title="Venue Booking Engine API",
        version="1.0.0",
        description="Stateless pricing breakdowns and booking conflict checks for venue bookings.",
        routes=app.routes,
    )
    return app.openapi_schema


app.openapi = custom_openapi

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "venue_booking.main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        reload=os.getenv("UVICORN_RELOAD", "1") == "1",
    )
