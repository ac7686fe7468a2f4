from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./renopilot.db"
    COMPANY_NAME: str = "RenoPilot Painting"
    COMPANY_EMAIL: str = "quotes@renopilot.com"
    COMPANY_PHONE: str = ""
    CURRENCY_SYMBOL: str = "$"

    # Labor rate selection. Empty means "most recent rate in any region"
    DEFAULT_REGION: str = ""

    # Quick estimate assumptions
    QUICK_ESTIMATE_COATS: int = 2
    QUICK_ESTIMATE_MINUTES_PER_M2: float = 5.0  # average prep, all categories
    QUICK_ESTIMATE_VARIANCE: float = 0.2        # ±20% cost band

    REPORT_VALID_DAYS: int = 30
    SEED_ON_STARTUP: bool = True

    class Config:
        env_file = ".env"


settings = Settings()
