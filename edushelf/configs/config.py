from edushelf.configs.logging_init import initialize_loggers, logger
from edushelf.configs.settings_models import Settings

# Overwrite priority: environment variables > default values
settings = Settings()

# Initialize all loggers with the verbosity level from settings
initialize_loggers(verbose_level=settings.logging.verbosity_level)

logger.debug(f"Settings: {settings}")
