"""Page engine configuration via environment variables."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed page engine settings."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="", case_sensitive=False)

    nav_entry_point: str = Field("sitecake.php", alias="SC_NAV_ENTRY_POINT")
    nav_page_param: str = Field("page", alias="SC_NAV_PAGE_PARAM")
    app_marker_name: str = Field("application-name", alias="SC_APP_MARKER_NAME")
    app_marker_content: str = Field("sitecake", alias="SC_APP_MARKER_CONTENT")
    draft_prefix: str = Field("sitecake-content/draft/", alias="SC_DRAFT_PREFIX")
    log_level: str = Field("INFO", alias="SC_LOG_LEVEL")

    @property
    def nav_target(self) -> str:
        """Return the router entry point with the page query parameter."""
        return f"{self.nav_entry_point}?{self.nav_page_param}="


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
