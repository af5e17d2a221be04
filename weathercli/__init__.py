"""weathercli - current weather for a city, from the terminal."""

from loguru import logger

__version__ = "0.1.0"
__logo__ = "🌤"

# Library logging stays silent unless the CLI is asked for logs.
logger.disable("weathercli")
