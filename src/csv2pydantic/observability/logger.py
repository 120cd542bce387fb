import json
import logging
import os
import sys
import time
import uuid

LOGGER_NAME = "csv2pydantic"


class _C:
    RESET = "\033[0m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    CYAN = "\033[36m"
    MAGENTA = "\033[35m"


def _use_color() -> bool:
    # Color only if explicitly enabled and terminal supports it.
    return os.getenv("LOG_COLOR", "0") == "1" and sys.stderr.isatty()


def _event_color(event_type: str) -> str:
    et = (event_type or "").upper()
    if "FAILED" in et or "ERROR" in et:
        return _C.RED
    if "SKIPPED" in et:
        return _C.YELLOW
    if "STARTED" in et or "COMPLETED" in et:
        return _C.GREEN
    return _C.MAGENTA


def get_logger():
    """
    Structured logger writing to stderr; stdout is reserved for generated code.
    Level comes from LOG_LEVEL (default WARNING).
    """
    logger = logging.getLogger(LOGGER_NAME)
    if logger.handlers:
        return logger

    logger.setLevel(os.getenv("LOG_LEVEL", "WARNING").upper())
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


logger = get_logger()


def set_level(level) -> None:
    logger.setLevel(level)


# Request ID Generator
def generate_request_id():
    return str(uuid.uuid4())


# Structured Log Event
def log_event(event_type: str, payload: dict, level: int = logging.INFO):
    if not logger.isEnabledFor(level):
        return

    text = json.dumps({"event_type": event_type, **payload}, default=str)

    if _use_color():
        color = _event_color(event_type)
        logger.log(level, f"{color}{text}{_C.RESET}")
    else:
        logger.log(level, text)


# Timer Utility
class RequestTimer:
    """
    Simple execution timer.
    """
    def __init__(self):
        self.start_time = time.time()

    def duration(self):
        return round(time.time() - self.start_time, 4)
