import os
from dotenv import load_dotenv
from pydantic import BaseModel

# Pick up a local .env before reading the environment
load_dotenv()

class Settings(BaseModel):
    # Basic
    ENV: str = os.getenv("ENV", "dev")
    DEFAULT_CURRENCY: str = os.getenv("CURRENCY", "INR")
    PORT: int = int(os.getenv("PORT", "3001"))

    # CORS
    ALLOW_ORIGINS: str = os.getenv("ALLOW_ORIGINS", "*")

    # Storage
    STORAGE_PROVIDER: str = os.getenv("STORAGE_PROVIDER", "json")  # json | memory
    DATA_DIR: str = os.getenv("DATA_DIR", "./data")

    # Auth
    JWT_SECRET: str = os.getenv("JWT_SECRET", "your-secret-key")
    JWT_ALGORITHM: str = os.getenv("JWT_ALGORITHM", "HS256")
    TOKEN_TTL_SECONDS: int = int(os.getenv("TOKEN_TTL_SECONDS", "86400"))

    # Rate limiting
    RATE_LIMIT_RPM: int = int(os.getenv("RATE_LIMIT_RPM", "60"))

    # Cache
    CACHE_TTL_SECONDS: int = int(os.getenv("CACHE_TTL_SECONDS", "120"))
    USE_REDIS: bool = os.getenv("USE_REDIS", "false").lower() == "true"
    REDIS_URL: str = os.getenv("REDIS_URL", "redis://localhost:6379/0")

    # Metrics
    PROMETHEUS_ENABLED: bool = os.getenv("PROMETHEUS_ENABLED", "true").lower() == "true"

    @property
    def cookie_secure(self) -> bool:
        return self.ENV == "production"

settings = Settings()
