import os
from dotenv import load_dotenv

load_dotenv(override=True)

class Settings:
    PROJECT_NAME = "Camera-Access"

    # Database settings
    DATABASE_NAME = os.getenv("DATABASE_NAME", "camera_server")
    DATABASE_USER = os.getenv("DATABASE_USER", "postgres")
    DATABASE_PASSWORD = os.getenv("DATABASE_PASSWORD", "yourpassword")
    DATABASE_HOST = os.getenv("DATABASE_HOST", "postgres-db")
    DATABASE_PORT = int(os.getenv("DATABASE_PORT", 5432))
    DATABASE_URL = os.getenv(
        "DATABASE_URL",
        f"postgresql://{DATABASE_USER}:{DATABASE_PASSWORD}@{DATABASE_HOST}:{DATABASE_PORT}/{DATABASE_NAME}",
    )

    # JWT settings
    SECRET_KEY = os.getenv("SECRET_KEY", "use_random_secret_key")
    ALGORITHM = os.getenv("ALGORITHM", "HS256")
    ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", 3000))

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Comma separated list, "*" allows every origin
    CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]

settings = Settings()
