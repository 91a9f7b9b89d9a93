"""Paths and settings derived from the environment."""
import os
from dataclasses import dataclass
from pathlib import Path

SYSTEM_APP_DIRS = (
    Path("/usr/share/applications"),
    Path("/usr/local/share/applications"),
)
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class LauncherConfig:
    home_dir: Path
    config_dir: Path
    data_dir: Path
    config_file: Path
    app_dirs: tuple
    log_level: str = "WARNING"


def _log_level(value):
    value = value.strip().upper()
    return value if value in LOG_LEVELS else "WARNING"


def load_config(environ=None):
    env = os.environ if environ is None else environ
    home = Path(env["HOME"]) if env.get("HOME") else Path.home()
    config_dir = Path(env["XDG_CONFIG_HOME"]) if env.get("XDG_CONFIG_HOME") else home / ".config"
    data_dir = Path(env["XDG_DATA_HOME"]) if env.get("XDG_DATA_HOME") else home / ".local" / "share"
    return LauncherConfig(
        home_dir=home,
        config_dir=config_dir,
        data_dir=data_dir,
        config_file=config_dir / "launcher.conf",
        app_dirs=SYSTEM_APP_DIRS + (data_dir / "applications",),
        log_level=_log_level(env.get("LAUNCHER_LOG_LEVEL", "")),
    )
