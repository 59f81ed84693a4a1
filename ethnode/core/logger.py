# /ethnode/core/logger.py
import logging
import structlog
import sentry_sdk
from prometheus_client import Counter
from ethnode.core.config import settings

# --- Prometheus Metrics ---
CONFIG_LOADS = Counter(
    "ethnode_config_loads_total",
    "Total number of eth node configs resolved",
    ["target"],
)

def configure_logging():
    if settings.SENTRY_DSN:
        sentry_sdk.init(dsn=settings.SENTRY_DSN.get_secret_value(), traces_sample_rate=1.0)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(settings.LOG_LEVEL.upper())),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

def get_logger(name: str):
    return structlog.get_logger(name)

configure_logging()
log = get_logger("ethnode.System")
