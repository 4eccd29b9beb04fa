from __future__ import annotations

import logging
import sys

# Domain names for structured logging (dialogue flow, progress/badges, transport).
DOMAIN_DIALOGUE = "dialogue"
DOMAIN_PROGRESS = "progress"
DOMAIN_API = "api"


def get_domain_logger(name: str, domain: str) -> logging.LoggerAdapter[logging.Logger]:
    """Return a logger that adds the given domain to every log record (for filtering by domain)."""
    base = logging.getLogger(name)
    return logging.LoggerAdapter(base, {"domain": domain})


class DomainDefaultFilter(logging.Filter):
    """Ensure record has a 'domain' attribute so format string %(domain)s never fails."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "domain"):
            record.domain = "app"  # type: ignore[attr-defined]
        return True


class SuppressHealthCheckFilter(logging.Filter):
    """Drop uvicorn access log lines for GET /health and /chat/health."""

    def filter(self, record: logging.LogRecord) -> bool:
        msg = record.getMessage() if hasattr(record, "getMessage") else str(record.msg)
        if "/health" in msg and "200" in msg:
            return False
        return True


def configure_logging(level: str = "INFO") -> None:
    domain_filter = DomainDefaultFilter()
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | [%(domain)s] | %(name)s | %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    root = logging.getLogger()
    for handler in root.handlers:
        handler.addFilter(domain_filter)
    uv_access = logging.getLogger("uvicorn.access")
    uv_access.addFilter(SuppressHealthCheckFilter())
