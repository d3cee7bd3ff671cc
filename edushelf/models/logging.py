import logging

from colorlog import ColoredFormatter

# Model-layer logger; handlers are attached by setup_logging
logger = logging.getLogger("edushelf-models")
logger.propagate = True


def setup_logging(verbose: bool = False, verbose_level: str = "INFO") -> logging.Logger:
    global logger

    logger.handlers.clear()
    formatter = ColoredFormatter(
        "%(log_color)s%(asctime)s%(reset)s - %(name)s - %(log_color)s%(levelname)s%(reset)s - %(filename)s - %(funcName)s - line %(lineno)d - %(message)s",
        datefmt=None,
        reset=True,
        log_colors={
            "DEBUG": "cyan",
            "INFO": "green",
            "WARNING": "yellow",
            "ERROR": "red",
            "CRITICAL": "red,bg_white",
        },
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    if verbose:
        logger.setLevel(getattr(logging, verbose_level.upper(), logging.INFO))
    else:
        logger.setLevel(logging.CRITICAL)

    return logger
