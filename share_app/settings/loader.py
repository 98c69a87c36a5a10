from pathlib import Path

import yaml
from pydantic import ValidationError

from share_app.settings.models import AppSettings


def load_settings(path: Path) -> AppSettings:
    """
    Load and validate the settings file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if YAML or schema invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Settings file not found at: {path}")

    with open(path, encoding="utf-8") as f:
        content = f.read()

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in settings file: {e}") from e

    # An empty file means defaults
    if data is None:
        data = {}

    try:
        return AppSettings.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Settings validation failed:\n{e}") from e
