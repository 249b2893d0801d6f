from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "data/reviewclub.db"

    # Logging
    LOG_LEVEL: str = "INFO"

    # File Storage - All under uploads/
    UPLOADS_DIR: str = "uploads"

    # Upload limits
    MAX_UPLOAD_SIZE_MB: int = 5
    PICTURE_MAX_WIDTH: int = 1000

    # CORS
    ALLOWED_ORIGINS: str = "*"

    APP_NAME: str = "Review Club API"
    APP_VERSION: str = "1.0.0"

    class Config:
        env_file = ".env"
        extra = "allow"


settings = Settings()
