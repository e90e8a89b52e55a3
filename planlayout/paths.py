from __future__ import annotations

import os
from pathlib import Path

APP_ENV_CONFIG = "PLANLAYOUT_CONFIG"


def project_root() -> Path:
    """
    Repository/project root directory.
    Contains planlayout/, cli/, config/, tests/.
    """
    return Path(__file__).parent.parent.resolve()


def default_config_path() -> Path:
    return project_root() / "config" / "layout.yaml"


def config_path() -> Path:
    """
    Layout configuration file.

    Resolution order:
    1. PLANLAYOUT_CONFIG env var (explicit override)
    2. <project root>/config/layout.yaml (default)
    """
    if os.environ.get(APP_ENV_CONFIG):
        return Path(os.environ[APP_ENV_CONFIG]).expanduser().resolve()
    return default_config_path()
