"""Centralized configuration for tagmarshal."""

import os

VALID_LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class Config:
    """
    tagmarshal configuration with environment variable overrides.

    Values only seed defaults (Encoder.from_config, the CLI, profiles without
    an ignore_value). An Encoder never reads Config after construction.
    """

    # ========================================================================
    # Encoder Defaults
    # ========================================================================
    TARGET_TAG: str = os.getenv("TAGMARSHAL_TARGET_TAG", "json")
    IGNORE_VALUE: str = os.getenv("TAGMARSHAL_IGNORE_VALUE", "-")

    # ========================================================================
    # Profiles
    # ========================================================================
    PROFILES_PATH: str = os.getenv("TAGMARSHAL_PROFILES_PATH", "./config/profiles.yaml")

    # ========================================================================
    # Logging
    # ========================================================================
    LOG_LEVEL: str = os.getenv("TAGMARSHAL_LOG_LEVEL", "WARNING").upper()

    @classmethod
    def validate(cls) -> bool:
        """
        Validate configuration consistency.

        Checks:
        - LOG_LEVEL is a loguru level name
        - TARGET_TAG is set (warning if not)
        - IGNORE_VALUE is set (warning if not)

        Returns:
            True if validation passes

        Raises:
            ValueError: If validation fails
        """
        errors = []

        if cls.LOG_LEVEL not in VALID_LOG_LEVELS:
            errors.append(
                f"LOG_LEVEL must be one of {', '.join(VALID_LOG_LEVELS)}, got {cls.LOG_LEVEL!r}"
            )

        if not cls.TARGET_TAG:
            import warnings

            warnings.warn(
                "TARGET_TAG is empty - every record field will be emitted with key \"\"."
            )

        if not cls.IGNORE_VALUE:
            import warnings

            warnings.warn(
                "IGNORE_VALUE is empty - fields without a tag for TARGET_TAG will be dropped."
            )

        if errors:
            raise ValueError(f"Config validation failed: {'; '.join(errors)}")

        return True
