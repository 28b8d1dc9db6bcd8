import curses
import logging

from navigation import NavigationController


logger = logging.getLogger(__name__)


def _ctrl(ch: str) -> int:
    return ord(ch) & 0x1F


DEFAULT_BINDINGS = {
    "close": ["q"],
    "move_up": ["k", "KEY_UP"],
    "move_down": ["j", "KEY_DOWN"],
    "move_left": ["h", "KEY_LEFT"],
    "move_right": ["l", "KEY_RIGHT"],
    "page_up": ["ctrl+u", "KEY_PPAGE"],
    "page_down": ["ctrl+d", "KEY_NPAGE"],
    "toggle_select_mode": ["v"],
    "toggle_row_select": ["V"],
    "toggle_col_select": ["c"],
    "toggle_expansion": ["e"],
}


def parse_key(name):
    """Translate a key name from the config into a curses key code.

    Accepts a single character, ``ctrl+<letter>`` or a curses constant name
    such as ``KEY_UP``. Returns None for anything else.
    """
    if not isinstance(name, str) or not name:
        return None
    if len(name) == 1:
        return ord(name)
    lowered = name.lower()
    if lowered.startswith("ctrl+") and len(name) == 6 and name[5].isalpha():
        return _ctrl(name[5].lower())
    if name.startswith("KEY_"):
        code = getattr(curses, name, None)
        if isinstance(code, int):
            return code
    return None


def build_key_map(overrides=None) -> dict[int, str]:
    """Map key codes to command names; user overrides win key conflicts."""
    bindings = {cmd: list(keys) for cmd, keys in DEFAULT_BINDINGS.items()}
    overridden = []

    if isinstance(overrides, dict):
        for cmd, keys in overrides.items():
            if cmd not in NavigationController.COMMANDS:
                logger.warning("ignoring binding for unknown command %r", cmd)
                continue
            if isinstance(keys, str):
                keys = [keys]
            if not isinstance(keys, list):
                logger.warning("ignoring binding for %s: expected a list of keys", cmd)
                continue
            bindings[cmd] = keys
            overridden.append(cmd)

    order = [c for c in bindings if c not in overridden] + overridden
    key_map: dict[int, str] = {}
    for cmd in order:
        for name in bindings[cmd]:
            code = parse_key(name)
            if code is None:
                logger.warning("ignoring unknown key %r for %s", name, cmd)
                continue
            key_map[code] = cmd
    return key_map
