from fastapi import Request

from kleaners.settings import Settings, settings


def get_app_settings(request: Request) -> Settings:
    return getattr(request.app.state, "app_settings", None) or settings
