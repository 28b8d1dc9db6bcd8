import json
import logging
import tempfile
from pathlib import Path

import config_paths


def _load_with(cfg_dir, cfg_path):
    orig_dir = config_paths.CONFIG_DIR
    orig_json = config_paths.CONFIG_JSON
    try:
        config_paths.CONFIG_DIR = str(cfg_dir)
        config_paths.CONFIG_JSON = str(cfg_path)
        return config_paths.load_config()
    finally:
        config_paths.CONFIG_DIR = orig_dir
        config_paths.CONFIG_JSON = orig_json


def test_load_config_defaults_without_json():
    with tempfile.TemporaryDirectory() as tmp:
        cfg_dir = Path(tmp) / "tabview"
        cfg_dir.mkdir(parents=True, exist_ok=True)
        cfg = _load_with(cfg_dir, cfg_dir / "config.json")
        assert cfg["SHRINK_WIDTH"] == 24
        assert cfg["ROW_SPACING"] == 1
        assert cfg["COL_SPACING"] == 1
        assert cfg["KEY_BINDINGS"] == {}
        assert cfg["LOG_LEVEL"] == "WARNING"


def test_load_config_reads_json_overrides():
    with tempfile.TemporaryDirectory() as tmp:
        cfg_dir = Path(tmp) / "tabview"
        cfg_dir.mkdir(parents=True, exist_ok=True)
        cfg_path = cfg_dir / "config.json"
        cfg_path.write_text(
            json.dumps(
                {
                    "shrink_width": 40,
                    "row_spacing": 0,
                    "col_spacing": 2,
                    "key_bindings": {"close": ["x"]},
                    "log_level": "debug",
                }
            )
        )
        cfg = _load_with(cfg_dir, cfg_path)
        assert cfg["SHRINK_WIDTH"] == 40
        assert cfg["ROW_SPACING"] == 0
        assert cfg["COL_SPACING"] == 2
        assert cfg["KEY_BINDINGS"] == {"close": ["x"]}
        assert cfg["LOG_LEVEL"] == "DEBUG"


def test_load_config_ignores_invalid_values():
    with tempfile.TemporaryDirectory() as tmp:
        cfg_dir = Path(tmp) / "tabview"
        cfg_dir.mkdir(parents=True, exist_ok=True)
        cfg_path = cfg_dir / "config.json"
        cfg_path.write_text(
            json.dumps(
                {
                    "shrink_width": 0,
                    "row_spacing": "wide",
                    "col_spacing": True,
                    "key_bindings": ["q"],
                    "log_level": "chatty",
                }
            )
        )
        cfg = _load_with(cfg_dir, cfg_path)
        assert cfg["SHRINK_WIDTH"] == 24
        assert cfg["ROW_SPACING"] == 1
        assert cfg["COL_SPACING"] == 1
        assert cfg["KEY_BINDINGS"] == {}
        assert cfg["LOG_LEVEL"] == "WARNING"


def test_load_config_survives_broken_json():
    with tempfile.TemporaryDirectory() as tmp:
        cfg_dir = Path(tmp) / "tabview"
        cfg_dir.mkdir(parents=True, exist_ok=True)
        cfg_path = cfg_dir / "config.json"
        cfg_path.write_text("{not json")
        cfg = _load_with(cfg_dir, cfg_path)
        assert cfg["SHRINK_WIDTH"] == 24


def test_setup_logging_writes_to_file():
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    with tempfile.TemporaryDirectory() as tmp:
        log_file = Path(tmp) / "logs" / "tabview.log"
        try:
            config_paths.setup_logging("INFO", str(log_file))
            logging.getLogger("tabview.test").info("hello log")
            for handler in root.handlers:
                handler.flush()
            assert "hello log" in log_file.read_text(encoding="utf-8")
        finally:
            for handler in root.handlers[:]:
                handler.close()
                root.removeHandler(handler)
            for handler in saved_handlers:
                root.addHandler(handler)
            root.setLevel(saved_level)


def test_set_log_level_updates_file_handler():
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    with tempfile.TemporaryDirectory() as tmp:
        log_file = Path(tmp) / "tabview.log"
        try:
            config_paths.setup_logging("WARNING", str(log_file))
            config_paths.set_log_level("DEBUG")
            logging.getLogger("tabview.test").debug("debug line")
            for handler in root.handlers:
                handler.flush()
            assert root.level == logging.DEBUG
            assert "debug line" in log_file.read_text(encoding="utf-8")
        finally:
            for handler in root.handlers[:]:
                handler.close()
                root.removeHandler(handler)
            for handler in saved_handlers:
                root.addHandler(handler)
            root.setLevel(saved_level)
