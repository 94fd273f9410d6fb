import json
import logging
import os

log = logging.getLogger(__name__)

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "cursive")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")
LOG_FILENAME = "cursive.log"

# default settings
FPS_DEFAULT = 0
LOG_LEVEL_DEFAULT = "WARNING"
# None: keep $ESCDELAY from the environment, else 25
ESCDELAY_DEFAULT = None

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def ensure_config_dirs():
    try:
        os.makedirs(CONFIG_DIR, exist_ok=True)
    except OSError as e:
        log.warning("cannot create %s: %s", CONFIG_DIR, e)


def load_config():
    cfg = {
        "FPS": FPS_DEFAULT,
        "LOG_LEVEL": LOG_LEVEL_DEFAULT,
        "LOG_FILE": os.path.join(CONFIG_DIR, LOG_FILENAME),
        "ESCDELAY": ESCDELAY_DEFAULT,
    }

    if not os.path.exists(CONFIG_JSON):
        return cfg

    try:
        with open(CONFIG_JSON, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        log.warning("ignoring unreadable config %s: %s", CONFIG_JSON, e)
        return cfg

    if not isinstance(data, dict):
        log.warning("ignoring config %s: top level is not an object", CONFIG_JSON)
        return cfg

    fps = data.get("fps")
    if isinstance(fps, int) and not isinstance(fps, bool) and 0 <= fps <= 1000:
        cfg["FPS"] = fps

    level = data.get("log_level")
    if isinstance(level, str) and level.upper() in _LOG_LEVELS:
        cfg["LOG_LEVEL"] = level.upper()

    log_file = data.get("log_file")
    if isinstance(log_file, str) and log_file.strip():
        cfg["LOG_FILE"] = os.path.expanduser(log_file.strip())

    escdelay = data.get("escdelay")
    if isinstance(escdelay, int) and not isinstance(escdelay, bool) and escdelay >= 0:
        cfg["ESCDELAY"] = escdelay

    return cfg
