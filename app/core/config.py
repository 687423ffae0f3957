"""Configuración de la aplicación mediante variables de entorno."""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuración cargada desde .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "LABFI Prácticas API"
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]

    # Seguridad
    bcrypt_rounds: int = 10

    # PostgreSQL
    postgres_host: str = "127.0.0.1"
    postgres_port: int = 5432
    postgres_user: str = "postgres"
    postgres_password: str = ""
    postgres_db: str = "labfi_bd"

    # URL completa opcional (ej. sqlite+aiosqlite:///./labfi.db); tiene prioridad sobre postgres_*
    database_url: str | None = None

    @property
    def database_url_async(self) -> str:
        """URL para SQLAlchemy con driver asíncrono (uso en la app)."""
        if self.database_url:
            return self.database_url
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @property
    def usa_sqlite(self) -> bool:
        return self.database_url_async.startswith("sqlite")


settings = Settings()
