import logging

from bookpoint_api.core.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def configure_sqlalchemy_logging() -> None:
    """Format SQLAlchemy engine logs with extra spacing for readability."""
    sql_logger = logging.getLogger("sqlalchemy.engine")
    sql_logger.setLevel(logging.INFO)
    sql_logger.handlers.clear()

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s\n%(message)s\n",
            datefmt=LOG_DATEFMT,
        )
    )
    sql_logger.addHandler(handler)
    sql_logger.propagate = False


def configure_logging(settings: Settings) -> logging.Logger:
    """Attach a single stream handler to the package logger."""
    app_logger = logging.getLogger("bookpoint_api")
    app_logger.setLevel(settings.log_level)
    app_logger.handlers.clear()

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
    app_logger.addHandler(handler)
    app_logger.propagate = False

    if settings.database_echo:
        configure_sqlalchemy_logging()

    return app_logger
