from __future__ import annotations

import logging
import time
from typing import Callable, Optional

from morizo_web.config import Settings
from morizo_web.services.metrics import MetricsLogger

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


class LogCategory:
    API = "api"
    VOICE = "voice"
    AUTH = "auth"


def setup_logging(settings: Settings) -> None:
    logging.basicConfig(level=settings.log_level.upper(), format=LOG_FORMAT)


def get_logger(category: str) -> logging.Logger:
    return logging.getLogger(f"morizo_web.{category}")


def mask_token(token: Optional[str]) -> str:
    """Keep only the first and last four characters of a credential."""
    if not token:
        return "<none>"
    if len(token) <= 8:
        return "*" * len(token)
    return f"{token[:4]}...{token[-4:]}"


def start_timer(name: str, category: str = LogCategory.API) -> Callable[[], float]:
    """
    Start a wall-clock timer. Calling the returned function logs and returns
    the elapsed milliseconds.
    """
    logger = get_logger(category)
    t0 = time.perf_counter()

    def stop() -> float:
        dt_ms = (time.perf_counter() - t0) * 1000.0
        logger.debug("timer %s: %.1fms", name, dt_ms)
        return dt_ms

    return stop


def log_api_call(
    method: str,
    path: str,
    status_code: int,
    duration_ms: Optional[float] = None,
    error: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> None:
    logger = get_logger(LogCategory.API)
    if error:
        logger.warning("%s %s -> %d (%s)", method, path, status_code, error)
    else:
        logger.info("%s %s -> %d", method, path, status_code)
    MetricsLogger(settings).log_api_call(method, path, status_code, duration_ms=duration_ms, error=error)
