import os
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from talenthub.core.paths import resolve_repo_path


def _env_files() -> list[str]:
    env = os.getenv("TH_ENVIRONMENT", "").strip().lower()
    files = [str(resolve_repo_path(".env"))]
    if env and env != "development":
        files.append(str(resolve_repo_path(f".env.{env}")))
    else:
        files.append(str(resolve_repo_path(".env.local")))
    return files


class Settings(BaseSettings):
    app_name: str = "TalentHub"
    environment: str = "development"
    log_level: str = "INFO"

    seed_sample_data: bool = False
    upcoming_interview_days: int = 7
    # What happens to applications (and their interviews/offers) when their job is deleted.
    job_delete_policy: Literal["orphan", "cascade", "reject"] = "orphan"

    cors_origins: list[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]

    model_config = SettingsConfigDict(env_prefix="TH_", env_file=_env_files(), extra="ignore")


settings = Settings()
