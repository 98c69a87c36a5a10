import logging
import os
from collections.abc import Mapping
from pathlib import Path

from share_app.components.session.models import SessionConfig
from share_app.settings.loader import load_settings
from share_app.settings.models import AppSettings

logger = logging.getLogger(__name__)

CONFIG_ENV = "SHARE_APP_CONFIG"
DEFAULT_SETTINGS_PATH = "settings.yaml"

# env var -> (section, field)
ENV_OVERRIDES = {
    "SHARE_APP_AUTO_CLOSE_SECONDS": ("session", "auto_close_seconds"),
    "SHARE_APP_SETTLE_DELAY_MS": ("session", "settle_delay_ms"),
    "SHARE_APP_SHARE_CAPTION": ("share", "caption"),
    "SHARE_APP_LOG_LEVEL": ("logging", "level"),
}

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def resolve_settings(environ: Mapping[str, str] | None = None) -> AppSettings:
    """
    Load settings from the YAML file named by SHARE_APP_CONFIG (or
    settings.yaml in the working directory), then apply env overrides.

    A missing default file means built-in defaults. A missing file that
    was named explicitly is an error.
    """
    env = os.environ if environ is None else environ

    explicit = env.get(CONFIG_ENV)
    path = Path(explicit or DEFAULT_SETTINGS_PATH)

    if path.exists():
        settings = load_settings(path)
        logger.info("Settings loaded from %s", path)
    elif explicit:
        raise FileNotFoundError(f"Settings file not found at: {path}")
    else:
        settings = AppSettings()

    settings = apply_env_overrides(settings, env)
    validate_settings(settings)
    return settings


def apply_env_overrides(settings: AppSettings, env: Mapping[str, str]) -> AppSettings:
    data = settings.model_dump()
    for env_var, (section, field) in ENV_OVERRIDES.items():
        if env_var in env:
            data[section][field] = env[env_var]
    return AppSettings.model_validate(data)


def validate_settings(settings: AppSettings) -> None:
    """
    Validate operational requirements before startup.
    Raises ValueError listing every problem found.
    """
    problems = []

    if settings.session.auto_close_seconds <= 0:
        problems.append("session.auto_close_seconds must be positive")
    if settings.session.settle_delay_ms < 0:
        problems.append("session.settle_delay_ms must not be negative")
    if settings.window.width <= 0 or settings.window.height <= 0:
        problems.append("window size must be positive")
    if not settings.share.path_separator:
        problems.append("share.path_separator must not be empty")
    if settings.logging.level.upper() not in LOG_LEVELS:
        problems.append(f"logging.level must be one of {sorted(LOG_LEVELS)}")

    if problems:
        raise ValueError("Invalid settings: " + "; ".join(problems))


def session_config(settings: AppSettings) -> SessionConfig:
    return SessionConfig(
        auto_close_seconds=settings.session.auto_close_seconds,
        settle_delay_seconds=settings.session.settle_delay_ms / 1000,
        share_caption=settings.share.caption,
        path_separator=settings.share.path_separator,
    )


def configure_logging(settings: AppSettings) -> None:
    logging.basicConfig(
        level=settings.logging.level.upper(),
        format=settings.logging.format,
    )
