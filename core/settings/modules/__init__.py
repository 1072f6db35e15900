# Settings modules
from .api_settings import ApiSettings
from .app_settings import AppSettings, get_app_settings
from .redis_settings import RedisSettings

__all__ = [
    "AppSettings",
    "get_app_settings",
    "ApiSettings",
    "RedisSettings",
]
