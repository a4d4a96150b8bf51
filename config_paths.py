import json
import os

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "csvi")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")

# default settings
DEFAULT_COLUMN_NAME_DEFAULT = ""
DATE_FORMAT_DEFAULT = "%Y-%m-%d"
ROW_JUMP_DEFAULT = 5


def default_config():
    return {
        "DEFAULT_COLUMN_NAME": DEFAULT_COLUMN_NAME_DEFAULT,
        "DATE_FORMAT": DATE_FORMAT_DEFAULT,
        "ROW_JUMP": ROW_JUMP_DEFAULT,
    }


def load_config():
    cfg = default_config()

    if not os.path.exists(CONFIG_JSON):
        return cfg

    try:
        with open(CONFIG_JSON, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError):
        return cfg

    if not isinstance(data, dict):
        return cfg

    name = data.get("default_column_name")
    if isinstance(name, str):
        cfg["DEFAULT_COLUMN_NAME"] = name

    date_format = data.get("date_format")
    if isinstance(date_format, str) and date_format.strip():
        cfg["DATE_FORMAT"] = date_format

    row_jump = data.get("row_jump")
    if isinstance(row_jump, int) and not isinstance(row_jump, bool) and row_jump > 0:
        cfg["ROW_JUMP"] = row_jump

    return cfg
