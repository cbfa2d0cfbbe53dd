"""ASGI entry point.

Run with: uvicorn users_service.main:app
"""

from users_service.app import create_app
from users_service.config import get_settings
from users_service.logging import configure_logging

configure_logging(get_settings().log_level)

app = create_app()
