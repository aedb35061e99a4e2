"""Main entry point for the Item Service.

Initializes the FastAPI app and makes it runnable standalone.

Usage:
    Development: uvicorn item_service.main:app --reload --port 8000
    Production: uvicorn item_service.main:app --host 0.0.0.0 --port 8000
"""

from item_service.api import create_app

app = create_app()


def run():
    """Console entry point."""
    import uvicorn

    uvicorn.run(
        "item_service.main:app",
        host="0.0.0.0",
        port=8000,
        log_level="info",
    )


if __name__ == "__main__":
    run()
