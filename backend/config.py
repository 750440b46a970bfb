# backend/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path

# Resolve absolute path to the .env file for reliable loading
env_path = Path(__file__).parent.parent / ".env"

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=str(env_path), extra="ignore")

    SECRET_KEY: str = "dev-secret-change-me"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    DATABASE_URL: str = "sqlite:///./database_shopstock.db"

    FRONTEND_URL: str = "http://localhost:5173"
    LOG_LEVEL: str = "INFO"

    # Inventory defaults
    DEFAULT_MIN_STOCK: int = 5

    # Import cost calculator (shipment from China, USD)
    IMPORT_BASE_RATE: float = 24.46
    IMPORT_EXTRA_KG_RATE: float = 9.08
    IMPORT_SERVICE_CHARGE: float = 4.0
    IMPORT_RECHARGE_RATE: float = 0.04
    IMPORT_OPTIMAL_WEIGHT_GRAMS: int = 5999

    # Default display rate for the calculators
    USD_TO_ARS_RATE: float = 1200.0

settings = Settings()
