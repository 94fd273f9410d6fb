import json
import logging
import tempfile
from pathlib import Path

import config_paths
from log_setup import configure_logging


def _with_config_dir(cfg_dir, fn):
    orig_dir = config_paths.CONFIG_DIR
    orig_json = config_paths.CONFIG_JSON
    try:
        config_paths.CONFIG_DIR = str(cfg_dir)
        config_paths.CONFIG_JSON = str(cfg_dir / "config.json")
        return fn()
    finally:
        config_paths.CONFIG_DIR = orig_dir
        config_paths.CONFIG_JSON = orig_json


def test_load_config_defaults_without_json():
    with tempfile.TemporaryDirectory() as tmp:
        cfg_dir = Path(tmp) / "cursive"
        cfg_dir.mkdir(parents=True, exist_ok=True)
        cfg = _with_config_dir(cfg_dir, config_paths.load_config)
        assert cfg["FPS"] == 0
        assert cfg["LOG_LEVEL"] == "WARNING"
        assert cfg["ESCDELAY"] is None
        assert cfg["LOG_FILE"] == str(cfg_dir / "cursive.log")


def test_load_config_reads_json_overrides():
    with tempfile.TemporaryDirectory() as tmp:
        cfg_dir = Path(tmp) / "cursive"
        cfg_dir.mkdir(parents=True, exist_ok=True)
        (cfg_dir / "config.json").write_text(
            json.dumps(
                {
                    "fps": 30,
                    "log_level": "debug",
                    "log_file": str(Path(tmp) / "other.log"),
                    "escdelay": 100,
                }
            )
        )
        cfg = _with_config_dir(cfg_dir, config_paths.load_config)
        assert cfg["FPS"] == 30
        assert cfg["LOG_LEVEL"] == "DEBUG"
        assert cfg["LOG_FILE"] == str(Path(tmp) / "other.log")
        assert cfg["ESCDELAY"] == 100


def test_load_config_ignores_invalid_values():
    with tempfile.TemporaryDirectory() as tmp:
        cfg_dir = Path(tmp) / "cursive"
        cfg_dir.mkdir(parents=True, exist_ok=True)
        (cfg_dir / "config.json").write_text(
            json.dumps({"fps": 5000, "log_level": "loud", "escdelay": True})
        )
        cfg = _with_config_dir(cfg_dir, config_paths.load_config)
        assert cfg["FPS"] == 0
        assert cfg["LOG_LEVEL"] == "WARNING"
        assert cfg["ESCDELAY"] is None


def test_load_config_survives_broken_json():
    with tempfile.TemporaryDirectory() as tmp:
        cfg_dir = Path(tmp) / "cursive"
        cfg_dir.mkdir(parents=True, exist_ok=True)
        (cfg_dir / "config.json").write_text("{not json")
        cfg = _with_config_dir(cfg_dir, config_paths.load_config)
        assert cfg["FPS"] == 0


def test_configure_logging_writes_to_file():
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "logs" / "cursive.log"
        root = logging.getLogger()
        orig_level = root.level
        handler = configure_logging({"LOG_FILE": str(path), "LOG_LEVEL": "DEBUG"})
        try:
            assert handler is not None
            logging.getLogger("stack_view").debug("hello from test")
            handler.flush()
            assert "hello from test" in path.read_text(encoding="utf-8")
        finally:
            configure_logging({})
            root.setLevel(orig_level)
