import os


def split_origins(value):
    return [o.strip() for o in value.split(",") if o.strip()]


class BaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY", "change-me")
    WORKBOOK_PATH = os.getenv("WORKBOOK_PATH", "meals.xlsx")
    CONFIG_SHEET = os.getenv("CONFIG_SHEET_NAME", "Config")
    ENTRIES_SHEET = os.getenv("DATA_SHEET_NAME", "Meal_Entries")
    REPORTS_SHEET = os.getenv("REPORTS_SHEET_NAME", "Reports")
    CORS_ORIGINS = split_origins(os.getenv("CORS_ORIGINS", "*"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    MEAL_API_URL = os.getenv("MEAL_API_URL", "http://localhost:5001/")
    MEAL_API_TIMEOUT = float(os.getenv("MEAL_API_TIMEOUT", "30"))
    SUBMIT_MAX_ATTEMPTS = int(os.getenv("SUBMIT_MAX_ATTEMPTS", "3"))
    SUBMIT_BACKOFF_SCALE = float(os.getenv("SUBMIT_BACKOFF_SCALE", "1"))


class DevelopmentConfig(BaseConfig):
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")


class TestingConfig(BaseConfig):
    TESTING = True
    WORKBOOK_PATH = None
    SECRET_KEY = "test-secret"
    SUBMIT_BACKOFF_SCALE = 0


class ProductionConfig(BaseConfig):
    pass
