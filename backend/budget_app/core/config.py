from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    ENV: str = Field(default="dev")  # dev|prod

    # DB
    DATABASE_URL: str = Field(default="sqlite:///./budget.db")

    # CORS
    CORS_ORIGINS: str = Field(default="http://localhost:3000,http://localhost")

    # Files
    EXPORT_DIR: str = Field(default="./data/exports")
    COLUMN_PREFS_PATH: str = Field(default="./data/report_columns.json")

    # Report presentation
    NO_AREA_LABEL: str = Field(default="Sin Área")
    CURRENCY_PREFIX: str = Field(default="RD$")
    REPORT_TITLE_PREFIX: str = Field(default="Reporte de Proyecto")


settings = Settings()
