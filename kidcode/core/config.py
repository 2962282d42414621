import os
from dotenv import load_dotenv
from typing import List

# Load .env file from the repository root (parent of the 'kidcode' package)
dotenv_path = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), '.env')
load_dotenv(dotenv_path)

class Settings:
    PROJECT_NAME: str = "KidCode Lessons API"
    API_PREFIX: str = os.getenv("API_PREFIX", "/api")

    # Database
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./data/kidcode.db")

    # Auth tokens
    JWT_SECRET: str = os.getenv("JWT_SECRET", "dev-secret-change-me")
    JWT_ALGORITHM: str = os.getenv("JWT_ALGORITHM", "HS256")
    JWT_EXPIRE_DAYS: int = int(os.getenv("JWT_EXPIRE_DAYS", "7"))
    BCRYPT_ROUNDS: int = int(os.getenv("BCRYPT_ROUNDS", "12"))

    # CORS
    CORS_ALLOWED_ORIGINS_STR: str = os.getenv("CORS_ALLOWED_ORIGINS", "http://localhost:5173,http://127.0.0.1:5173")
    @property
    def CORS_ALLOWED_ORIGINS(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ALLOWED_ORIGINS_STR.split(',') if origin.strip()]

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Seed lessons, quizzes, the demo user and the achievement catalog on startup
    SEED_DEMO_DATA: bool = os.getenv("SEED_DEMO_DATA", "true").lower() == "true"

    # When false, /achievements/unlock only accepts codes already in the catalog
    ALLOW_CLIENT_ACHIEVEMENT_CODES: bool = os.getenv("ALLOW_CLIENT_ACHIEVEMENT_CODES", "true").lower() == "true"

    # Server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "4000"))
    UVICORN_LOG_LEVEL: str = os.getenv("UVICORN_LOG_LEVEL", "info")


settings = Settings()
