from .app import CORS_HEADERS, MAX_BODY_BYTES, create_app

__all__ = ["CORS_HEADERS", "MAX_BODY_BYTES", "create_app"]
