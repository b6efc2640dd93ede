from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # No default: a missing connection string must stop the process at startup.
    DATABASE_URL: str
    APP_ENV: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Connection pool
    POOL_MAX_SIZE: int = 10
    POOL_MIN_IDLE: int = 2
    POOL_TIMEOUT: float = 5.0

    # Credentials
    BCRYPT_ROUNDS: int = 12

    # Schema bootstrap (no migration tooling)
    CREATE_TABLES: bool = False

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
