from user_service.adapters.http.fastapi.api import create_app

__all__ = ["create_app"]
