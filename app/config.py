import os
from dotenv import load_dotenv

load_dotenv()


class Settings:
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./compliance.db")
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional JSON file replacing the built-in state rule table
    JURISDICTION_RULES_PATH: str = os.getenv("JURISDICTION_RULES_PATH", "")
    DEFAULT_JURISDICTIONS: list[str] = [
        code.strip()
        for code in os.getenv("DEFAULT_JURISDICTIONS", "GA").split(",")
        if code.strip()
    ]
    REPORT_TIME_RANGE_DAYS: int = int(os.getenv("REPORT_TIME_RANGE_DAYS", "30"))


settings = Settings()
