"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Cross-field rules (timezone, fallback range) are
validated at load time.
"""

from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fleetdocs.core.constants import COMPLIANCE_MAX_PERCENT, COMPLIANCE_MIN_PERCENT


class Settings(BaseSettings):
    """Engine settings loaded from environment and .env.

    All settings have defaults; validate_timezone_and_fallback rejects
    unknown IANA timezones and fallback percentages outside 0..100.
    """

    # App
    app_name: str = "fleetdocs"
    app_version: str = "1.0.0"
    debug: bool = False

    # Calendar: "today" for expiry arithmetic is the local day in this zone.
    timezone: str = "Europe/Bucharest"

    # Catalog: directory holding driver.json / truck.json / trailer.json /
    # international.json. None = bundled catalogs shipped with the package.
    catalog_dir: str | None = None

    # Compliance percent reported when a catalog has no unconditionally
    # required document types (the ratio is undefined in that case).
    compliance_fallback_percent: int = 100

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_timezone_and_fallback(self) -> "Settings":
        """Validate timezone name and fallback percentage.

        - TIMEZONE must be a known IANA zone (e.g. 'Europe/Bucharest', 'UTC').
        - COMPLIANCE_FALLBACK_PERCENT must be within 0..100.
        """
        try:
            ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(
                f"TIMEZONE must be a valid IANA timezone name, got: {self.timezone!r}"
            ) from e
        if not (
            COMPLIANCE_MIN_PERCENT
            <= self.compliance_fallback_percent
            <= COMPLIANCE_MAX_PERCENT
        ):
            raise ValueError(
                "COMPLIANCE_FALLBACK_PERCENT must be between "
                f"{COMPLIANCE_MIN_PERCENT} and {COMPLIANCE_MAX_PERCENT}, "
                f"got: {self.compliance_fallback_percent}"
            )
        return self

    @property
    def tzinfo(self) -> ZoneInfo:
        """Return the configured timezone as a ZoneInfo instance."""
        return ZoneInfo(self.timezone)


@lru_cache
def get_settings() -> Settings:
    """Return cached settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
