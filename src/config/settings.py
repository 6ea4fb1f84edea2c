"""Application settings with environment variable support."""

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL
from typing import Optional
from pathlib import Path


# Compute base_dir at module level
_BASE_DIR = Path(__file__).parent.parent.parent.resolve()


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="NAMEIQ_",  # NAMEIQ_DATABASE_URL, NAMEIQ_LOG_LEVEL, etc.
        extra="ignore",
    )

    # Server
    server_host: str = "0.0.0.0"
    server_port: int = 8080

    # Database - database_url is used unless db_host is set
    database_url: str = f"sqlite:///{_BASE_DIR / 'data' / 'persons.db'}"
    db_host: Optional[str] = None
    db_port: int = 5432
    db_user: Optional[str] = None
    db_password: Optional[str] = None
    db_name: Optional[str] = None
    db_sslmode: str = "disable"

    # Logging
    log_level: str = "info"  # debug, info, warning, error
    log_json: bool = False

    # External lookup services, {name} is replaced with the URL-escaped name
    agify_url: str = "https://api.agify.io/?name={name}"
    genderize_url: str = "https://api.genderize.io/?name={name}"
    nationalize_url: str = "https://api.nationalize.io/?name={name}"

    @property
    def dsn(self) -> str:
        """Connection URL for SQLAlchemy."""
        if not self.db_host:
            return self.database_url
        url = URL.create(
            "postgresql+psycopg2",
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
            query={"sslmode": self.db_sslmode},
        )
        return url.render_as_string(hide_password=False)

    def lookup_endpoints(self) -> dict:
        """Endpoint templates keyed by dimension value."""
        return {
            "age": self.agify_url,
            "gender": self.genderize_url,
            "nationality": self.nationalize_url,
        }


settings = Settings()
