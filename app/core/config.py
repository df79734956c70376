from pydantic_settings import BaseSettings
from typing import List, Optional, Union
from pydantic import field_validator
import json

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """
    Job board API settings, read from the environment or a local .env file.

    Names are case sensitive and match the environment variables exactly.
    """

    # Routes are mounted under this prefix (health checks are not)
    API_V1_STR: str = "/api/v1"
    PROJECT_NAME: str = "Job Board API"

    # Postgres holding jobs, users, resumes and applications
    POSTGRES_USER: str = "user"
    POSTGRES_PASSWORD: str = "password"
    POSTGRES_SERVER: str = "localhost"
    POSTGRES_PORT: str = "5432"
    POSTGRES_DB: str = "job_board"

    @property
    def DATABASE_URL(self) -> str:
        return f"postgresql://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"

    LOG_LEVEL: str = "INFO"
    JSON_LOGS: bool = False

    # Identity stand-in until session-based auth exists.
    # Requests without an X-User-Id header act as this user (see seed_dev_data.py).
    DEFAULT_USER_ID: Optional[int] = None

    # Front-end origins allowed to call the API; JSON list or comma separated
    BACKEND_CORS_ORIGINS: Union[List[str], str] = ["http://localhost:3000", "http://localhost:8000"]

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize to upper case and reject names logging does not know"""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")
        return level

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v: Union[List[str], str]) -> List[str]:
        """Accept a JSON array or a comma separated string"""
        if isinstance(v, str):
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                return [origin.strip() for origin in v.split(",")]
        return v

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
