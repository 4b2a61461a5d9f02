"""Runtime settings, read from the environment.

``POS_API_URL`` switches the checkout from the local JSON data
directory to the REST API.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from pos.domain.exceptions import ValidationError

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class Settings:
    api_url: str | None = None
    api_token: str | None = None
    http_timeout: float = DEFAULT_TIMEOUT
    data_dir: Path = DEFAULT_DATA_DIR
    log_level: int = logging.WARNING

    @property
    def uses_api(self) -> bool:
        return bool(self.api_url)

    @staticmethod
    def from_env(environ: dict[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ

        raw_timeout = env.get("POS_HTTP_TIMEOUT", "").strip()
        try:
            timeout = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT
        except ValueError as exc:
            raise ValidationError(
                f"POS_HTTP_TIMEOUT must be a number of seconds, got {raw_timeout!r}"
            ) from exc
        if timeout <= 0:
            raise ValidationError("POS_HTTP_TIMEOUT must be positive")

        level_name = env.get("POS_LOG_LEVEL", "WARNING").strip().upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            raise ValidationError(f"Unknown POS_LOG_LEVEL {level_name!r}")

        data_dir = env.get("POS_DATA_DIR", "").strip()

        return Settings(
            api_url=env.get("POS_API_URL", "").strip().rstrip("/") or None,
            api_token=env.get("POS_API_TOKEN", "").strip() or None,
            http_timeout=timeout,
            data_dir=Path(data_dir) if data_dir else DEFAULT_DATA_DIR,
            log_level=level,
        )
