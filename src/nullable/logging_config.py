from __future__ import annotations

import sys
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional

from loguru import logger as _root_logger

from nullable.config import NullableConfig

_CONFIGURED = False
_HANDLER_IDS: List[int] = []
_METADATA: Dict[str, str] = {}

FALLBACK_LEVEL = "WARNING"


def _attach_metadata(record: dict) -> None:
    for key, value in _METADATA.items():
        record["extra"].setdefault(key, value)


# Package logger: carries service/version/env without touching the global extra
logger = _root_logger.patch(_attach_metadata)


def _is_own(record: dict) -> bool:
    return (record["name"] or "").split(".")[0] == "nullable"


def _level_filter(level: str) -> Callable[[dict], bool]:
    def _filter(record: dict) -> bool:
        return _is_own(record) and record["level"].name == level

    return _filter


def _resolve_level(name: str) -> Optional[str]:
    try:
        _root_logger.level(name)
    except ValueError:
        return None
    return name


def configure_logging(config: Optional[NullableConfig] = None, *, force: bool = False) -> None:
    """
    Configure Loguru sinks for records emitted by this package:
      • stderr at config.log_level
      • <log_dir>/YYYY-MM-DD/{debug,info,error}.json when log_dir is set
    All files are JSON lines with service/version/env metadata fields.
    Sinks added by the host application are left alone; a forced
    reconfigure only replaces the sinks added here.
    """
    global _CONFIGURED
    if _CONFIGURED and not force:
        return

    config = config or NullableConfig.from_env()

    while _HANDLER_IDS:
        _root_logger.remove(_HANDLER_IDS.pop())

    if config.disable_logs:
        _root_logger.disable("nullable")
        _CONFIGURED = True
        return

    _root_logger.enable("nullable")
    _METADATA.clear()
    _METADATA.update(service=config.service, version=config.version, env=config.environment)

    level = _resolve_level(config.log_level)
    _HANDLER_IDS.append(
        _root_logger.add(
            sys.stderr,
            level=level or FALLBACK_LEVEL,
            filter=_is_own,
            colorize=sys.stderr.isatty(),
            enqueue=False,
        )
    )

    if config.log_dir is not None:
        day_dir = config.log_dir / datetime.now(timezone.utc).strftime("%Y-%m-%d")
        day_dir.mkdir(parents=True, exist_ok=True)

        common_kwargs = {
            "serialize": True,
            "rotation": "10 MB",
            "retention": "30 days",
            "enqueue": False,
        }

        for sink_level, filename in (("DEBUG", "debug.json"), ("INFO", "info.json"), ("ERROR", "error.json")):
            _HANDLER_IDS.append(
                _root_logger.add(
                    day_dir / filename,
                    level=sink_level,
                    filter=_level_filter(sink_level),
                    **common_kwargs,
                )
            )

    _CONFIGURED = True

    if level is None:
        logger.warning(
            "Unknown log level {!r} in NULLABLE_LOG_LEVEL, using {}", config.log_level, FALLBACK_LEVEL
        )
