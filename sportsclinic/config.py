from enum import Enum
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class ReportFormat(Enum):
    TEXT = "text"
    HTML = "html"


class ClinicConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="CLINIC_", env_file=".env", extra="ignore")

    accounts_file: Path = Path("accounts.txt")
    report_format: ReportFormat = ReportFormat.TEXT
    log_level: str = "INFO"
