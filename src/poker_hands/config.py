"""Configuration settings for the poker hands command line."""

import os


def _env_bool(name: str, default: str) -> bool:
    return os.environ.get(name, default).lower() == "true"


def _env_seed() -> int | None:
    seed = os.environ.get("POKER_HANDS_SEED")
    return int(seed) if seed else None


class Config:
    """Base configuration class."""

    # Session settings
    ROUNDS = int(os.environ.get("POKER_HANDS_ROUNDS", "0"))  # 0 = until interrupted
    SEED = _env_seed()
    PAUSE = _env_bool("POKER_HANDS_PAUSE", "true")
    REUSE_DECK = _env_bool("POKER_HANDS_REUSE_DECK", "false")

    # Logging settings
    LOG_LEVEL = os.environ.get("POKER_HANDS_LOG_LEVEL", "WARNING")
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class DevelopmentConfig(Config):
    """Development configuration."""

    LOG_LEVEL = os.environ.get("POKER_HANDS_LOG_LEVEL", "DEBUG")


class TestingConfig(Config):
    """Testing configuration."""

    ROUNDS = 5
    SEED = 1234
    PAUSE = False
    LOG_LEVEL = "DEBUG"


class ProductionConfig(Config):
    """Production configuration."""

    LOG_LEVEL = os.environ.get("POKER_HANDS_LOG_LEVEL", "WARNING")


# Configuration mapping
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": ProductionConfig,
}


def get_config(config_name: str | None = None) -> type[Config]:
    """Get configuration class by name, falling back to the default."""
    if config_name is None:
        config_name = os.environ.get("POKER_HANDS_CONFIG", "default")
    return config.get(config_name, config["default"])
