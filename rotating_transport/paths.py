"""Default log file location per platform."""

import logging
import os
import sys

logger = logging.getLogger(__name__)

LOG_FILE_NAME = "log.log"


def log_directory(app_name: str, platform: str, environ) -> str:
    home = environ.get("HOME") or os.path.expanduser("~")
    if platform == "darwin":
        return os.path.join(home, "Library", "Logs", app_name)
    if platform.startswith("win"):
        profile = environ.get("USERPROFILE") or home
        return os.path.join(profile, "AppData", "Roaming", app_name)
    config_home = environ.get("XDG_CONFIG_HOME") or os.path.join(home, ".config")
    return os.path.join(config_home, app_name)


def find_log_path(app_name: str | None, platform: str | None = None, environ=None) -> str | None:
    """Return <platform log dir>/<app_name>/log.log, creating the directory.

    Returns None when there is no app name or the directory cannot be created.
    """
    if not app_name:
        return None
    platform = platform or sys.platform
    environ = os.environ if environ is None else environ

    directory = log_directory(app_name, platform, environ)
    try:
        os.makedirs(directory, exist_ok=True)
    except OSError as e:
        logger.warning("Cannot create log directory %s: %s", directory, e)
        return None
    return os.path.join(directory, LOG_FILE_NAME)
