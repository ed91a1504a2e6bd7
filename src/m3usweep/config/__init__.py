"""Configuration package."""

from m3usweep.config.config import Config
from m3usweep.config.paths import default_log_file

__all__ = ["Config", "default_log_file"]
