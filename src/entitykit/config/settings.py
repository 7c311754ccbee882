"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for the
entity synthesizer.

Usage:
    from entitykit.config import EntitySettings

    # Load from environment variables (ENTITYKIT_*)
    settings = EntitySettings()

    # Or override with explicit values
    settings = EntitySettings(validate_on_declare=True)
"""

from __future__ import annotations

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install entitykit"
    ) from e


class EntitySettings(BaseSettings):  # type: ignore[misc]
    """Configuration for the @entity synthesizer.

    Attributes:
        warn_on_redeclare: Warn when @entity is applied to an already
            synthesized type. The second application replaces is_equal()
            and copy() but keeps every earlier annotation.
        validate_on_declare: Check copyable fields against copy parameters
            when the type is synthesized instead of waiting for copy().

    Environment Variables:
        ENTITYKIT_WARN_ON_REDECLARE
        ENTITYKIT_VALIDATE_ON_DECLARE
    """

    model_config = SettingsConfigDict(
        env_prefix="ENTITYKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    warn_on_redeclare: bool = True
    validate_on_declare: bool = False


_settings: EntitySettings | None = None


def get_settings() -> EntitySettings:
    """Access the process-wide settings, loading them on first use.

    Returns:
        The shared EntitySettings instance.
    """
    global _settings
    if _settings is None:
        _settings = EntitySettings()
    return _settings
