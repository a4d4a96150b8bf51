import json
import tempfile
from pathlib import Path

import config_paths


def _load_with(json_text=None):
    with tempfile.TemporaryDirectory() as tmp:
        cfg_dir = Path(tmp) / "csvi"
        cfg_dir.mkdir(parents=True, exist_ok=True)
        cfg_path = cfg_dir / "config.json"
        if json_text is not None:
            cfg_path.write_text(json_text)

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
    cfg = _load_with()
    assert cfg == {
        "DEFAULT_COLUMN_NAME": "",
        "DATE_FORMAT": "%Y-%m-%d",
        "ROW_JUMP": 5,
    }


def test_load_config_reads_json_overrides():
    cfg = _load_with(
        json.dumps(
            {
                "default_column_name": "untitled",
                "date_format": "%d/%m/%Y",
                "row_jump": 10,
            }
        )
    )
    assert cfg["DEFAULT_COLUMN_NAME"] == "untitled"
    assert cfg["DATE_FORMAT"] == "%d/%m/%Y"
    assert cfg["ROW_JUMP"] == 10


def test_load_config_ignores_values_of_wrong_type():
    cfg = _load_with(
        json.dumps(
            {
                "default_column_name": 3,
                "date_format": "  ",
                "row_jump": True,
            }
        )
    )
    assert cfg == config_paths.default_config()

    cfg = _load_with(json.dumps({"row_jump": -2}))
    assert cfg["ROW_JUMP"] == 5


def test_load_config_survives_broken_json():
    assert _load_with("{not json") == config_paths.default_config()
    assert _load_with("[1, 2]") == config_paths.default_config()
