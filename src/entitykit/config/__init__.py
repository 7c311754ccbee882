"""Configuration module using Pydantic Settings.

Provides typed configuration for the synthesizer with environment variable support.

Usage:
    from entitykit.config import EntitySettings, get_settings

    settings = EntitySettings(validate_on_declare=True)
    defaults = get_settings()
"""

from entitykit.config.settings import EntitySettings, get_settings

__all__ = [
    "EntitySettings",
    "get_settings",
]
