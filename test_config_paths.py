import json
import tempfile
from pathlib import Path

import config_paths


def _load_with(cfg_dir: Path):
    orig_dir = config_paths.CONFIG_DIR
    orig_json = config_paths.CONFIG_JSON
    try:
        config_paths.CONFIG_DIR = str(cfg_dir)
        config_paths.CONFIG_JSON = str(cfg_dir / "config.json")
        return config_paths.load_config()
    finally:
        config_paths.CONFIG_DIR = orig_dir
        config_paths.CONFIG_JSON = orig_json


def test_load_config_defaults_without_json():
    with tempfile.TemporaryDirectory() as tmp:
        cfg = _load_with(Path(tmp) / "kvedit")
        assert cfg == {
            "OUTPUT_INDENT": None,
            "SORT_KEYS": False,
            "LOG_LEVEL": "INFO",
            "ESCDELAY": 25,
        }


def test_load_config_reads_json_overrides():
    with tempfile.TemporaryDirectory() as tmp:
        cfg_dir = Path(tmp) / "kvedit"
        cfg_dir.mkdir(parents=True, exist_ok=True)
        (cfg_dir / "config.json").write_text(
            json.dumps(
                {
                    "output": {"indent": 2, "sort_keys": True},
                    "log_level": "debug",
                    "escdelay": 100,
                }
            )
        )
        cfg = _load_with(cfg_dir)
        assert cfg["OUTPUT_INDENT"] == 2
        assert cfg["SORT_KEYS"] is True
        assert cfg["LOG_LEVEL"] == "DEBUG"
        assert cfg["ESCDELAY"] == 100


def test_load_config_ignores_invalid_values():
    with tempfile.TemporaryDirectory() as tmp:
        cfg_dir = Path(tmp) / "kvedit"
        cfg_dir.mkdir(parents=True, exist_ok=True)
        (cfg_dir / "config.json").write_text(
            json.dumps(
                {
                    "output": {"indent": -1, "sort_keys": "yes"},
                    "log_level": "LOUD",
                    "escdelay": True,
                }
            )
        )
        cfg = _load_with(cfg_dir)
        assert cfg["OUTPUT_INDENT"] is None
        assert cfg["SORT_KEYS"] is False
        assert cfg["LOG_LEVEL"] == "INFO"
        assert cfg["ESCDELAY"] == 25


def test_load_config_survives_malformed_json():
    with tempfile.TemporaryDirectory() as tmp:
        cfg_dir = Path(tmp) / "kvedit"
        cfg_dir.mkdir(parents=True, exist_ok=True)
        (cfg_dir / "config.json").write_text("{not json")
        cfg = _load_with(cfg_dir)
        assert cfg["LOG_LEVEL"] == "INFO"


def test_load_config_ignores_non_object_json():
    with tempfile.TemporaryDirectory() as tmp:
        cfg_dir = Path(tmp) / "kvedit"
        cfg_dir.mkdir(parents=True, exist_ok=True)
        (cfg_dir / "config.json").write_text("[1, 2, 3]")
        cfg = _load_with(cfg_dir)
        assert cfg["OUTPUT_INDENT"] is None


def test_ensure_config_dirs_creates_directory():
    with tempfile.TemporaryDirectory() as tmp:
        cfg_dir = Path(tmp) / "nested" / "kvedit"
        orig_dir = config_paths.CONFIG_DIR
        try:
            config_paths.CONFIG_DIR = str(cfg_dir)
            config_paths.ensure_config_dirs()
            config_paths.ensure_config_dirs()
        finally:
            config_paths.CONFIG_DIR = orig_dir
        assert cfg_dir.is_dir()
