"""dbparam configuration loaded from environment variables."""

from datetime import tzinfo
from functools import lru_cache
from zoneinfo import ZoneInfo
from zoneinfo import ZoneInfoNotFoundError

from dateutil import tz
from pydantic import field_validator
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from ``DBPARAM_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix='DBPARAM_',
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore',
    )

    timezone: str | None = None  # IANA name; None = host local timezone
    default_dialect: str | None = None
    log_level: str = 'WARNING'

    @field_validator('timezone')
    @classmethod
    def _validate_timezone(cls, value: str | None) -> str | None:
        if value:
            try:
                ZoneInfo(value)
            except ZoneInfoNotFoundError as e:
                msg = f'Unknown timezone: {value}'
                raise ValueError(msg) from e
        return value or None

    def system_timezone(self) -> tzinfo:
        """
        Get the timezone dates without explicit offset are assumed to be in.

        Returns:
            Configured zone, or the host's local timezone (with its DST rules)
        """
        if self.timezone:
            return ZoneInfo(self.timezone)
        return tz.tzlocal()


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings.

    Call ``get_settings.cache_clear()`` after changing the environment.

    Returns:
        Settings instance
    """
    return Settings()
