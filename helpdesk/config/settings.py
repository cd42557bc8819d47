# helpdesk/config/settings.py
from urllib.parse import quote_plus

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # main database (PostgreSQL); db_url overrides the individual fields
    db_url: str | None = None
    db_host: str = "localhost"
    db_port: int = 5432
    db_name: str = "school_helpdesk"
    db_user: str = "postgres"
    db_password: str = ""
    db_timeout_seconds: int = 5

    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    jwt_secret: str = "dev-secret-change-me"
    jwt_access_minutes: int = 60

    refresh_token_days: int = 7
    refresh_reuse_revokes_lineage: bool = False

    api_prefix: str = "/api"

    # Ex: "http://localhost:5173,https://helpdesk.example.edu"
    cors_origins_raw: str = "http://localhost:5173"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("db_host", "db_name", "db_user", "db_password", "jwt_secret", mode="before")
    @classmethod
    def strip_strings(cls, v):
        if isinstance(v, str):
            return v.strip().strip('"').strip("'")
        return v

    @property
    def database_url(self) -> str:
        if self.db_url:
            return self.db_url

        user = quote_plus(self.db_user)
        password = quote_plus(self.db_password)
        return f"postgresql+psycopg2://{user}:{password}@{self.db_host}:{self.db_port}/{self.db_name}"

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.cors_origins_raw.split(",") if o.strip()]


settings = Settings()
