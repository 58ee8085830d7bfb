import logging.config
import sys


def configure_logging(level: str = "INFO", log_file: str = "app_errors.log"):
    handlers = ["console"]

    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,

        # Formatters: How the logs look
        "formatters": {
            "standard": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S"
            },
        },

        # Handlers: Where the logs go
        "handlers": {
            "console": {
                "level": level,
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "stream": sys.stdout,
            },
        },

        # Loggers: The configuration for specific modules
        "loggers": {
            "": {  # The "root" logger (captures everything)
                "handlers": handlers,
                "level": level,
                "propagate": True
            },
            "openai": {  # request/retry chatter from the SDK
                "level": "WARNING",
                "propagate": True
            },
            "httpx": {
                "level": "WARNING",
                "propagate": True
            },
        }
    }

    # upstream failures also land in a rotating error file
    if log_file:
        logging_config["handlers"]["file"] = {
            "level": "ERROR",
            "class": "logging.handlers.RotatingFileHandler",
            "formatter": "standard",
            "filename": log_file,
            "maxBytes": 10485760,  # 10MB
            "backupCount": 5,
        }
        handlers.append("file")

    logging.config.dictConfig(logging_config)
