from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Data settings
    workbook_path: str | None = None  # Excel workbook to open at startup
    settings_store_path: str = "data/settings.json"

    # LLM settings
    llm_timeout_seconds: float = 60.0

    log_level: str = "INFO"  # Can be DEBUG, INFO, WARNING, ERROR, CRITICAL


settings = Settings()
