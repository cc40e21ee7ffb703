import json
import logging
import os

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "todotui")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")
LOG_PATH = os.path.join(CONFIG_DIR, "todotui.log")

# default settings
LOG_LEVEL_DEFAULT = "WARNING"
ESC_DELAY_MS_DEFAULT = 25

logger = logging.getLogger(__name__)

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def ensure_config_dirs():
    os.makedirs(CONFIG_DIR, exist_ok=True)


def load_config():
    cfg = {
        "LOG_LEVEL": LOG_LEVEL_DEFAULT,
        "LOG_FILE": LOG_PATH,
        "ESC_DELAY_MS": ESC_DELAY_MS_DEFAULT,
    }

    if not os.path.exists(CONFIG_JSON):
        return cfg

    try:
        with open(CONFIG_JSON, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as exc:
        logger.warning("ignoring %s: %s", CONFIG_JSON, exc)
        return cfg

    if not isinstance(data, dict):
        return cfg

    level = data.get("log_level")
    if isinstance(level, str) and level.upper() in _LOG_LEVELS:
        cfg["LOG_LEVEL"] = level.upper()

    log_file = data.get("log_file")
    if isinstance(log_file, str) and log_file.strip():
        cfg["LOG_FILE"] = os.path.expanduser(log_file.strip())

    delay = data.get("esc_delay_ms")
    if isinstance(delay, int) and not isinstance(delay, bool) and delay >= 0:
        cfg["ESC_DELAY_MS"] = delay

    return cfg
