import logging
import json
from typing import Optional

import requests

from settings.config import Settings

# ONLY exclude very noisy internals
EXCLUDED_LOGGERS = {
    "multipart",
    "httpcore",
    "urllib3",  # our own log shipping goes through requests
}

# =========================
# Datadog Logging Handler
# =========================

class DatadogLogHandler(logging.Handler):
    def __init__(self, service: str, api_key: Optional[str], log_url: str, env: str):
        super().__init__()
        self.service = service
        self.api_key = api_key
        self.log_url = log_url
        self.env = env
        self.setFormatter(logging.Formatter("%(message)s"))

    def should_log(self, record: logging.LogRecord) -> bool:
        return not any(record.name.startswith(excluded) for excluded in EXCLUDED_LOGGERS)

    def build_payload(self, record: logging.LogRecord) -> dict:
        payload = {
            "message": record.getMessage(),
            "ddsource": "python",
            "service": self.service,
            "status": record.levelname.lower(),
            "logger": record.name,
        }
        tags = [f"env:{self.env}", f"service:{self.service}"]

        # structured fields arrive as LogRecord attributes via extra=
        for attr, value in vars(record).items():
            if attr.startswith("http.") or attr in ("duration_ms", "event_type"):
                if value is not None:
                    payload[attr] = value

        if "http.method" in payload:
            tags.append(f"http.method:{str(payload['http.method']).lower()}")
        if "http.status_code" in payload:
            tags.append(f"http.status_code:{payload['http.status_code']}")
        if "event_type" in payload:
            tags.append(f"event_type:{payload['event_type']}")

        payload["ddtags"] = ",".join(tags)
        return payload

    def emit(self, record: logging.LogRecord):
        if not self.api_key or not self.should_log(record):
            return

        try:
            requests.post(
                self.log_url,
                headers={
                    "Content-Type": "application/json",
                    "DD-API-KEY": self.api_key,
                },
                data=json.dumps(self.build_payload(record), default=str),
                timeout=2,
            )
        except Exception:
            # Never break the app because of logging
            self.handleError(record)


def configure_logging(settings: Settings, service: str = "ClarityCanvas") -> logging.Logger:
    """Attach the console and Datadog handlers to the root logger."""
    root_logger = logging.getLogger()
    root_logger.setLevel(settings.log_level.upper())

    if not any(getattr(h, "_clarity_console", False) for h in root_logger.handlers):
        console = logging.StreamHandler()
        console.setFormatter(logging.Formatter(settings.log_format))
        console._clarity_console = True
        root_logger.addHandler(console)

    if settings.datadog_api_key and not any(isinstance(h, DatadogLogHandler) for h in root_logger.handlers):
        dd_handler = DatadogLogHandler(
            service=service,
            api_key=settings.datadog_api_key,
            log_url=settings.datadog_log_url,
            env=settings.environment,
        )
        dd_handler.setLevel(logging.INFO)
        root_logger.addHandler(dd_handler)

    # Ensure uvicorn.access logs propagate to root logger (no direct handler)
    uvicorn_access_logger = logging.getLogger("uvicorn.access")
    uvicorn_access_logger.setLevel(logging.INFO)
    uvicorn_access_logger.propagate = True

    return root_logger
