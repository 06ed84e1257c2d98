from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import BaseModel, Field, field_validator

DEFAULT_TIMEOUT = 120
DEFAULT_USER_AGENT = "linkpreview/0.1 (+https://ogp.me)"

LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


class PreviewConfig(BaseModel):
    """Settings for fetching and parsing a link preview."""

    timeout: int = Field(default=DEFAULT_TIMEOUT, gt=0, description="Total request timeout in seconds")
    max_redirects: int = Field(default=5, ge=0, description="Maximum number of redirects to follow")
    user_agent: str = Field(default=DEFAULT_USER_AGENT, description="User-Agent header sent with the request")
    allow_private_hosts: bool = Field(default=False, description="Allow fetching loopback and private network addresses")
    log_level: str = "INFO"
    log_dir: Optional[str] = None # error log files are only written when set

    @field_validator("log_level", mode="before")
    @classmethod
    def check_log_level(cls, v):
        level = str(v).upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unsupported log level: {v}. Allowed: {sorted(LOG_LEVELS)}")
        return level

    def headers(self) -> dict[str, str]:
        return {"User-Agent": self.user_agent}


def load_config(path: Union[str, Path]) -> PreviewConfig:
    with open(path) as f:
        raw = yaml.safe_load(f) or {}
    return PreviewConfig(**(raw.get("preview") or {}))  # unpack
