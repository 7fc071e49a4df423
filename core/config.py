from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    # App & logging
    ENV: str = Field(default="dev")
    LOG_LEVEL: str = Field(default="INFO")

    APP_TITLE: str = Field(default="Invest iSense")
    # Public address of the deployed app; used as the share link.
    APP_URL: str = Field(default="http://localhost:8501")

    # Export / share
    EXPORT_FILENAME: str = Field(default="invest-isense-results.txt")
    SHARE_TITLE: str = Field(default="Invest iSense - VA Loan & Investment Calculator")
    SHARE_TEXT: str = Field(
        default="Check out this powerful tool for veteran real estate investors!"
    )

    model_config = SettingsConfigDict(
        env_prefix="ISENSE_",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _upper_level(cls, v):
        level = str(v).strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {v}")
        return level

    @field_validator("EXPORT_FILENAME")
    @classmethod
    def _txt_suffix(cls, v: str) -> str:
        return v if v.endswith(".txt") else f"{v}.txt"


config = AppConfig()
