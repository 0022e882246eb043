from __future__ import annotations

from pathlib import Path

from hostbridge.core.config import (
    FilesConfig,
    HubConfig,
    JSONCodecConfig,
    LoggingConfig,
    PathsConfig,
)


def test_accessors_read_loaded_workspace_config(tmp_path):
    overlay = tmp_path / ".hostbridge" / "config.yaml"
    overlay.parent.mkdir()
    overlay.write_text("files:\n  include_hidden: false\nlogging:\n  level: DEBUG\n", encoding="utf-8")

    assert FilesConfig(tmp_path).include_hidden is False
    assert LoggingConfig(tmp_path).level == "DEBUG"


def test_json_codec_config():
    cfg = JSONCodecConfig(Path("/ws"), config={"json": {"indent": 4, "ensure_ascii": True}})

    assert cfg.get_all_settings() == {"indent": 4, "ensure_ascii": True}


def test_missing_section_falls_back_to_defaults():
    cfg = {}

    assert JSONCodecConfig(Path("/ws"), config=cfg).indent == 2
    assert FilesConfig(Path("/ws"), config=cfg).encoding == "utf-8"
    assert FilesConfig(Path("/ws"), config=cfg).sort_listing is False
    assert HubConfig(Path("/ws"), config=cfg).async_delivery is True
    assert LoggingConfig(Path("/ws"), config=cfg).file is None
    assert PathsConfig(Path("/ws"), config=cfg).config_dir == ".hostbridge"


def test_logging_file_resolves_against_workspace(tmp_path):
    cfg = LoggingConfig(tmp_path, config={"logging": {"file": "logs/hb.log"}})

    assert cfg.file == tmp_path / "logs" / "hb.log"


def test_paths_base_dir_is_absolute():
    assert PathsConfig(Path("/ws"), config={"paths": {"base_dir": "/opt/tool"}}).base_dir == Path("/opt/tool")
    assert PathsConfig(Path("/ws"), config={}).base_dir.is_absolute()
