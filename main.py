"""
Application entry point for production deployment.

Usage:
  python main.py
  or
  uvicorn main:app --host 0.0.0.0 --port 5001
"""

import uvicorn

from app.config import settings
from app.main import app

if __name__ == "__main__":
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
