from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App
    app_name: str = "MedOffice Calendar"
    app_env: str = "development"
    debug: bool = True

    # Database
    database_url: str = "sqlite+aiosqlite:///./medoffice.db"

    # CORS
    cors_origins: str = "http://localhost:5173,http://localhost:3000"

    # Demo mode (in-memory store instead of the database)
    demo_mode: bool = False
    demo_doctor_id: str = "demo-user-123"

    # Dashboard
    upcoming_limit: int = 5

    # PDF export - optional TTF font for non-Latin-1 text
    pdf_font_path: str = ""

    # Logfire (Observability)
    logfire_token: str = ""

    @property
    def cors_origins_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",")]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
