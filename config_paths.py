import json
import logging
import os

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "tabview")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")
LOG_PATH = os.path.join(CONFIG_DIR, "tabview.log")

# default settings
SHRINK_WIDTH_DEFAULT = 24
ROW_SPACING_DEFAULT = 1
COL_SPACING_DEFAULT = 1
LOG_LEVEL_DEFAULT = "WARNING"

logger = logging.getLogger(__name__)


def _int_setting(data, key, minimum):
    value = data.get(key)
    if isinstance(value, bool) or not isinstance(value, int):
        if value is not None:
            logger.warning("ignoring %s=%r: expected an integer", key, value)
        return None
    if value < minimum:
        logger.warning("ignoring %s=%r: must be >= %d", key, value, minimum)
        return None
    return value


def load_config():
    cfg = {
        "SHRINK_WIDTH": SHRINK_WIDTH_DEFAULT,
        "ROW_SPACING": ROW_SPACING_DEFAULT,
        "COL_SPACING": COL_SPACING_DEFAULT,
        "KEY_BINDINGS": {},
        "LOG_LEVEL": LOG_LEVEL_DEFAULT,
    }

    if not os.path.exists(CONFIG_JSON):
        return cfg

    try:
        with open(CONFIG_JSON, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("ignoring unreadable config %s: %s", CONFIG_JSON, exc)
        return cfg

    if not isinstance(data, dict):
        logger.warning("ignoring config %s: top level must be an object", CONFIG_JSON)
        return cfg

    shrink = _int_setting(data, "shrink_width", 1)
    if shrink is not None:
        cfg["SHRINK_WIDTH"] = shrink
    row_spacing = _int_setting(data, "row_spacing", 0)
    if row_spacing is not None:
        cfg["ROW_SPACING"] = row_spacing
    col_spacing = _int_setting(data, "col_spacing", 0)
    if col_spacing is not None:
        cfg["COL_SPACING"] = col_spacing

    bindings = data.get("key_bindings")
    if isinstance(bindings, dict):
        cfg["KEY_BINDINGS"] = {
            str(cmd): keys for cmd, keys in bindings.items() if isinstance(cmd, str)
        }

    level = data.get("log_level")
    if isinstance(level, str) and isinstance(
        logging.getLevelName(level.upper()), int
    ):
        cfg["LOG_LEVEL"] = level.upper()

    return cfg


def setup_logging(level=LOG_LEVEL_DEFAULT, log_file=None):
    """Send logs to a file; the terminal belongs to curses while running."""
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    log_file = log_file or LOG_PATH
    log_dir = os.path.dirname(log_file)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(level)
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    )
    root_logger.addHandler(file_handler)
    return root_logger


def set_log_level(level):
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)
