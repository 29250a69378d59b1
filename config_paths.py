import json
import os

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "kvedit")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")
LOG_PATH = os.path.join(CONFIG_DIR, "kvedit.log")

# default settings
OUTPUT_INDENT_DEFAULT = None
SORT_KEYS_DEFAULT = False
LOG_LEVEL_DEFAULT = "INFO"
ESCDELAY_DEFAULT = 25

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR"}


def ensure_config_dirs():
    os.makedirs(CONFIG_DIR, exist_ok=True)


def _non_negative_int(value):
    # bool is an int subclass; reject it explicitly
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def load_config():
    cfg = {
        "OUTPUT_INDENT": OUTPUT_INDENT_DEFAULT,
        "SORT_KEYS": SORT_KEYS_DEFAULT,
        "LOG_LEVEL": LOG_LEVEL_DEFAULT,
        "ESCDELAY": ESCDELAY_DEFAULT,
    }

    if not os.path.exists(CONFIG_JSON):
        return cfg

    try:
        with open(CONFIG_JSON, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError):
        return cfg

    if not isinstance(data, dict):
        return cfg

    output = data.get("output")
    if isinstance(output, dict):
        indent = output.get("indent")
        if _non_negative_int(indent):
            cfg["OUTPUT_INDENT"] = indent
        sort_keys = output.get("sort_keys")
        if isinstance(sort_keys, bool):
            cfg["SORT_KEYS"] = sort_keys

    level = data.get("log_level")
    if isinstance(level, str) and level.upper() in LOG_LEVELS:
        cfg["LOG_LEVEL"] = level.upper()

    escdelay = data.get("escdelay")
    if _non_negative_int(escdelay):
        cfg["ESCDELAY"] = escdelay

    return cfg
