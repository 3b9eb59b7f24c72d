"""
Configuration package for the Smart Text Reader project.

This package provides centralized configuration management using Pydantic settings
and the logging setup driven by it.
"""

from .log import configure_logging
from .settings import (
    Settings,
    ExtractionSettings,
    ClassifierSettings,
    LoggingSettings,
    settings,
)

__all__ = [
    "Settings",
    "ExtractionSettings",
    "ClassifierSettings",
    "LoggingSettings",
    "configure_logging",
    "settings",
]

# Version info
__version__ = "1.0.0"
