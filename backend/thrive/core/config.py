# thrive/core/config.py
from typing import List, Optional
from urllib.parse import quote_plus

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # MongoDB Atlas
    DB_USER: str = ""
    DB_PASS: str = ""
    DB_HOST: str = "cluster0.mongodb.net"
    MONGO_URL: Optional[str] = None  # full connection string wins over the parts above
    DB_NAME: str = "tripThrive"

    # JWT
    ACCESS_TOKEN_SECRET: str
    ALGORITHM: str = "HS256"
    TOKEN_EXPIRE_DAYS: int = 7

    # Server
    PORT: int = 5000
    ENVIRONMENT: str = "development"
    CORS_ORIGINS: List[str] = ["http://localhost:5173"]

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"

    @property
    def mongo_url(self) -> str:
        if self.MONGO_URL:
            return self.MONGO_URL
        return (
            f"mongodb+srv://{quote_plus(self.DB_USER)}:{quote_plus(self.DB_PASS)}"
            f"@{self.DB_HOST}/?retryWrites=true&w=majority"
        )


settings = Settings()
