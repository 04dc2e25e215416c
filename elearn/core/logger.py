import logging

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: str = "INFO"):
    """Configure the root logger and the loggers used by the app server."""
    root_logger = logging.getLogger()
    root_logger.setLevel(level.upper())

    # Avoid duplicate handlers if reloaded
    if not any(getattr(h, "_elearn_handler", False) for h in root_logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._elearn_handler = True
        root_logger.addHandler(handler)

    for logger_name in ["uvicorn", "uvicorn.error", "fastapi", "elearn"]:
        logging.getLogger(logger_name).setLevel(level.upper())
