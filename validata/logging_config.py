import logging
import structlog
from validata.settings import get_settings


def setup_logging():
    settings = get_settings()
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        format="%(message)s",
        level=level,
    )

    if settings.log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


def get_logger(name: str = "validata", **kwargs):
    # wraps a stdlib logger, so output follows the host's logging levels and
    # handlers until setup_logging() is called; processors resolve per call
    logger = structlog.wrap_logger(logging.getLogger(name))
    return logger.bind(**kwargs) if kwargs else logger


# silent until the host configures logging
logging.getLogger("validata").addHandler(logging.NullHandler())
