"""Application configuration with environment-based settings."""
import os
from pathlib import Path
from typing import List, Optional
from dotenv import load_dotenv

_DEFAULT_FLIGHTS_PATH = str(Path(__file__).resolve().parent.parent / "data" / "flights.json")


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


class Config:
    """Base configuration class following Single Responsibility Principle."""
    
    # Load environment variables
    load_dotenv()
    
    FLASK_ENV: str = os.getenv("FLASK_ENV", "development")
    
    # Flight catalog
    FLIGHTS_DATA_PATH: str = os.getenv("FLIGHTS_DATA_PATH", _DEFAULT_FLIGHTS_PATH)
    DEFAULT_DATE_RANGE_DAYS: int = int(os.getenv("DEFAULT_DATE_RANGE_DAYS", "7"))
    
    # Placeholder aircraft returned by single-flight lookups
    AIRCRAFT_MODEL: str = os.getenv("AIRCRAFT_MODEL", "Boeing 787")
    AIRCRAFT_CAPACITY: int = int(os.getenv("AIRCRAFT_CAPACITY", "300"))
    
    # Booking and account rules
    ENFORCE_BOOKING_ACCOUNT: bool = _env_bool("ENFORCE_BOOKING_ACCOUNT", "false")
    MIN_PASSWORD_LENGTH: int = int(os.getenv("MIN_PASSWORD_LENGTH", "6"))
    MIN_NAME_LENGTH: int = int(os.getenv("MIN_NAME_LENGTH", "2"))
    
    # CORS
    CORS_ORIGINS: List[str] = [
        origin.strip()
        for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
        if origin.strip()
    ]
    
    # Rate Limiting
    RATELIMIT_STORAGE_URL: str = os.getenv("RATELIMIT_STORAGE_URL", "memory://")
    RATELIMIT_ENABLED: bool = _env_bool("RATELIMIT_ENABLED", "true")
    RATELIMIT_DEFAULT: str = os.getenv("RATELIMIT_DEFAULT", "1000 per hour;100 per minute")
    
    # Monitoring
    SENTRY_DSN: Optional[str] = os.getenv("SENTRY_DSN")
    ENABLE_METRICS: bool = _env_bool("ENABLE_METRICS", "true")
    
    # Python client
    API_URL: str = os.getenv("API_URL", "http://localhost:4000/graphql")
    SESSION_FILE: str = os.getenv("SESSION_FILE", str(Path.home() / ".flightdesk" / "session.json"))
    API_TIMEOUT: int = int(os.getenv("API_TIMEOUT", "30"))
    
    # Application
    DEBUG: bool = _env_bool("DEBUG", "false")
    SECRET_KEY: str = os.getenv("SECRET_KEY", "dev-secret-key-change-in-production")
    
    @classmethod
    def validate(cls) -> None:
        """Validate configuration values."""
        problems = []
        if not Path(cls.FLIGHTS_DATA_PATH).is_file():
            problems.append(f"FLIGHTS_DATA_PATH does not exist: {cls.FLIGHTS_DATA_PATH}")
        if cls.DEFAULT_DATE_RANGE_DAYS < 0:
            problems.append("DEFAULT_DATE_RANGE_DAYS must be non-negative")
        if cls.AIRCRAFT_CAPACITY <= 0:
            problems.append("AIRCRAFT_CAPACITY must be positive")
        if cls.MIN_PASSWORD_LENGTH < 1:
            problems.append("MIN_PASSWORD_LENGTH must be at least 1")
        
        if problems:
            raise ValueError("; ".join(problems))


class DevelopmentConfig(Config):
    """Development configuration."""
    FLASK_ENV = "development"
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    FLASK_ENV = "production"
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    FLASK_ENV = "testing"
    TESTING = True
    RATELIMIT_ENABLED = False
    RATELIMIT_STORAGE_URL = "memory://"
    ENABLE_METRICS = False
    SENTRY_DSN = None


def get_config() -> type[Config]:
    """Factory method to get configuration based on environment."""
    env = os.getenv("FLASK_ENV", "development").lower()
    
    config_map = {
        "development": DevelopmentConfig,
        "production": ProductionConfig,
        "testing": TestingConfig,
    }
    
    return config_map.get(env, DevelopmentConfig)
