from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List

class Settings(BaseSettings):
    # Environment
    ENVIRONMENT: str = "development"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    # API Settings
    PROJECT_NAME: str = "Splitbook API"
    API_V1_STR: str = "/api/v1"
    PROJECT_VERSION: str = "0.1.0"
    DESCRIPTION: str = "Shared expense tracking and balance API"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # Text store
    DATA_DIR: str = "data"
    USERS_FILE: str = "users.txt"
    EXPENSES_FILE: str = "expenses.txt"

    # Credentials: "plaintext" keeps existing data files readable, "bcrypt" hashes
    CREDENTIAL_SCHEME: str = "plaintext"

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:8000"]

    # JWT
    SECRET_KEY: str = "change-this-in-production"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 30

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env"
    )

settings = Settings()
