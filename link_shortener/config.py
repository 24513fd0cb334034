from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Loading priority (highest to lowest):
    1. Environment variables
    2. .env file
    3. Default values below
    """

    # Environment
    environment: str = "development"
    debug: bool = True

    # Application
    app_name: str = "URL Shortener"
    app_version: str = "1.0.0"
    app_description: str = "A simple API to shorten URLs and track their statistics."

    # Server
    host: str = "127.0.0.1"
    port: int = 3000

    # Mapping storage
    storage_backend: str = "mongodb"  # Options: "mongodb", "sqlalchemy"

    # MongoDB (read from MONGODB_URI)
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_database: str = "urlShortener"
    mongodb_collection: str = "urls"

    # Relational database (sqlalchemy backend)
    database_url: str = "sqlite:///./url_shortener.db"

    # Short codes are drawn from a-z, A-Z, 0-9
    short_code_length: int = 6

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    # Pydantic v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Create settings instance
settings = Settings()
