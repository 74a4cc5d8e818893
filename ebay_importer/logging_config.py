import logging
import sys
import json
from typing import Any, Dict, Optional


SERVICE_PREFIX = "ebay-importer"


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        log_record = {
            "timestamp": self.formatTime(record, self.datefmt),
            "name": record.name,
            "level": record.levelname,
            "message": record.getMessage(),
        }
        if hasattr(record, "extra_kwargs"):
            log_record.update(record.extra_kwargs)
        if record.exc_info:
            log_record["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(log_record, default=str)


class ContextLogger:
    """Thin wrapper around stdlib logger that supports structured kwargs.

    Allows calls like `logger.info("Scraped product", item_id="123")` by
    appending key=value pairs to the message while handing the raw kwargs
    to the JSON formatter through `extra`.
    """

    def __init__(self, base: logging.Logger):
        self._base = base

    @property
    def name(self) -> str:
        return self._base.name

    def setLevel(self, level: int) -> None:
        self._base.setLevel(level)

    def _prepare(self, msg: str, kwargs: Dict[str, Any]) -> Dict[str, Any]:
        std_kwargs: Dict[str, Any] = {}
        for key in ("exc_info", "stack_info", "stacklevel", "extra"):
            if key in kwargs:
                std_kwargs[key] = kwargs.pop(key)

        if kwargs:
            extra_parts = [f"{key}={value}" for key, value in kwargs.items()]
            msg = f"{msg} - {' - '.join(extra_parts)}"
            std_kwargs["extra"] = {"extra_kwargs": kwargs}
        return {"msg": msg, "std": std_kwargs}

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        prepared = self._prepare(msg, kwargs)
        self._base.debug(prepared["msg"], *args, **prepared["std"])

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        prepared = self._prepare(msg, kwargs)
        self._base.info(prepared["msg"], *args, **prepared["std"])

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        prepared = self._prepare(msg, kwargs)
        self._base.warning(prepared["msg"], *args, **prepared["std"])

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        prepared = self._prepare(msg, kwargs)
        self._base.error(prepared["msg"], *args, **prepared["std"])

    def exception(self, msg: str, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("exc_info", True)
        prepared = self._prepare(msg, kwargs)
        self._base.error(prepared["msg"], *args, **prepared["std"])


def _standardize_logger_name(name: str) -> str:
    """Ensure logger name follows `ebay-importer:module`."""
    if ":" in name:
        return name
    module = name.rsplit(".", 1)[-1]
    return f"{SERVICE_PREFIX}:{module}"


def configure_logging(
    service_name: str,
    log_level: str = "INFO",
    log_format: Optional[str] = None,
) -> ContextLogger:
    """Configure logging and return a ContextLogger that accepts kwargs.

    Usage:
        logger = configure_logging("ebay-importer:ebay_product_scraper")
        logger.info("Started", item_id=item_id)
        logger.error("Failure", error=str(e))
    """
    service_name = _standardize_logger_name(service_name)
    if log_format == "json":
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            log_format or "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )

    base = logging.getLogger(service_name)

    # Remove any existing handlers to prevent duplicate logs on re-configuration
    for handler in base.handlers[:]:
        base.removeHandler(handler)
        handler.close()

    # stdout is reserved for command output
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    base.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    base.addHandler(handler)
    base.propagate = False

    return ContextLogger(base)


def reconfigure_service_loggers(log_level: str, log_format: Optional[str] = None) -> None:
    """Apply a level and format to every `ebay-importer:*` logger created so far."""
    for name in list(logging.root.manager.loggerDict):
        if name.startswith(f"{SERVICE_PREFIX}:"):
            configure_logging(name, log_level, log_format)
