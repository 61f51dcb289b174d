"""
Application configuration loaded from environment variables.
Uses pydantic-settings for typed, validated config.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

from freelancehub.domain.enums import RecordStoreBackend


class Settings(BaseSettings):
    """All environment variables read by the application."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # ── Record store ──────────────────────────────────────────
    record_store: RecordStoreBackend = RecordStoreBackend.MEMORY
    default_page_size: int = 50

    # ── Supabase (only read when record_store=supabase) ───────
    supabase_url: str | None = None
    supabase_service_role_key: str | None = None   # bypasses RLS

    # ── Members ───────────────────────────────────────────────
    # Unset → tokens are decoded without signature verification
    member_jwt_secret: str | None = None

    # ── App ───────────────────────────────────────────────────
    app_name: str = "FreelanceHub"
    debug: bool = False


# Singleton — import this wherever config is needed
settings = Settings()
