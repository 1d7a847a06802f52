"""
Settings Resolution for the Portfolio Page

Loads settings.yaml with OmegaConf and layers environment and dotlist overrides
on top. Later layers win:

    settings.yaml  <  environment variables  <  dotlist overrides

Examples:
    >>> settings = load_settings()
    >>> settings.navigation.header_offset
    80

    >>> settings = load_settings(overrides=["navigation.header_offset=64"])
    >>> settings.navigation.header_offset
    64
"""

import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from omegaconf import DictConfig, OmegaConf

load_dotenv()
PACKAGE_ROOT = Path(__file__).resolve().parents[1]
SETTINGS_PATH = Path(os.getenv("FOLIO_SETTINGS_PATH", PACKAGE_ROOT / "config" / "settings.yaml"))
SITE_ROOT = Path(os.getenv("FOLIO_SITE_ROOT", PACKAGE_ROOT / "site"))
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

# Environment variable -> settings key
ENV_OVERRIDES = {
    "PORT": "server.port",
    "FOLIO_CONTENT_SOURCE": "content.source",
}


def _env_dotlist() -> List[str]:
    """Collect set environment overrides as OmegaConf dotlist entries."""
    dotlist = []
    for env_name, key in ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value:
            dotlist.append(f"{key}={value}")
    return dotlist


def load_settings(
    config_path: Optional[Path] = None,
    overrides: Optional[List[str]] = None,
) -> DictConfig:
    """
    Load page settings.

    Args:
        config_path: Optional path to a settings file (defaults to SETTINGS_PATH)
        overrides: Optional dotlist overrides (e.g., ["server.port=8080"])

    Returns:
        Merged settings as a DictConfig

    Raises:
        FileNotFoundError: If the settings file does not exist
    """
    if config_path is None:
        config_path = SETTINGS_PATH

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Settings file not found: {config_path}")

    settings = OmegaConf.load(config_path)

    env_dotlist = _env_dotlist()
    if env_dotlist:
        settings = OmegaConf.merge(settings, OmegaConf.from_dotlist(env_dotlist))

    if overrides:
        settings = OmegaConf.merge(settings, OmegaConf.from_dotlist(list(overrides)))

    return settings
