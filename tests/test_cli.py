import json
import sys
from pathlib import Path

import pytest
import yaml
from loguru import logger

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from appconfig.cli import main


@pytest.fixture(autouse=True)
def _reset_logger():
    yield
    logger.remove()


def _clear_env(monkeypatch):
    for name in ("APPCONFIG_CONFIG", "APPCONFIG_APP", "APPCONFIG_EXE", "APPCONFIG_HOME", "APPCONFIG_MODE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("APPCONFIG_APP", "MyApp")


def test_show_prints_merged_yaml(tmp_path, monkeypatch, capsys):
    _clear_env(monkeypatch)
    (tmp_path / "my_app.conf").write_text("foo: bar\nmusic_dir: /x\n", encoding="utf-8")
    (tmp_path / "my_app.production.conf").write_text("foo: baz\n", encoding="utf-8")

    assert main(["show", "--home", str(tmp_path), "--mode", "production"]) == 0
    assert yaml.safe_load(capsys.readouterr().out) == {"foo": "baz", "music_dir": "/x"}


def test_show_json(tmp_path, monkeypatch, capsys):
    _clear_env(monkeypatch)
    (tmp_path / "settings.json").write_text('{"a": 1}', encoding="utf-8")

    assert main(["show", "--home", str(tmp_path), "--file", "settings.json", "--format", "json"]) == 0
    assert json.loads(capsys.readouterr().out) == {"a": 1}


def test_paths(tmp_path, monkeypatch, capsys):
    _clear_env(monkeypatch)
    (tmp_path / "my_app.conf").write_text("a: 1\n", encoding="utf-8")

    assert main(["paths", "--home", str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert f"primary: {tmp_path / 'my_app.conf'} (present)" in out
    assert "mode: -" in out


def test_missing_config_exits_with_error(tmp_path, monkeypatch, capsys):
    _clear_env(monkeypatch)
    assert main(["show", "--home", str(tmp_path)]) == 1
    assert "missing, maybe you need to create it?" in capsys.readouterr().err


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "usage" in capsys.readouterr().out
