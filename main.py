"""
Review Polisher - Web Server Entry Point
========================================

Run this to start the API server:
    python main.py

Then POST review tags to http://127.0.0.1:8000/api/polish-review

Configure the synthesis service and sinks through environment variables
or a .env file (see README.md).
"""

import logging

import uvicorn

from review_polisher.infrastructure.config import get_settings

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)


def main():
    """Start the web server."""
    settings = get_settings()

    print("\n" + "=" * 50)
    print("   Review Polisher - API Server")
    print("=" * 50)
    print(f"\n   Starting server at http://{settings.server.host}:{settings.server.port}")
    print("   Press Ctrl+C to stop\n")

    uvicorn.run(
        "review_polisher.web.app:app",
        host=settings.server.host,
        port=settings.server.port,
        log_level="info"
    )


if __name__ == "__main__":
    main()
