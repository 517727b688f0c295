import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class NullableConfig:
    service: str = "nullable"
    version: str = "0.1.0"
    environment: str = "dev"
    log_level: str = "WARNING"
    log_dir: Optional[Path] = None
    disable_logs: bool = False

    @classmethod
    def from_env(cls) -> "NullableConfig":
        log_dir = os.getenv("NULLABLE_LOG_DIR")
        return cls(
            version=os.getenv("NULLABLE_VERSION", cls.version),
            environment=os.getenv("NULLABLE_ENV", cls.environment),
            log_level=os.getenv("NULLABLE_LOG_LEVEL", cls.log_level).upper(),
            log_dir=Path(log_dir) if log_dir else None,
            disable_logs=_env_flag("NULLABLE_DISABLE_LOGS"),
        )
