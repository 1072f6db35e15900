# Settings package
from core.settings.modules import ApiSettings, AppSettings, RedisSettings, get_app_settings

__all__ = ["get_app_settings", "AppSettings", "ApiSettings", "RedisSettings"]
