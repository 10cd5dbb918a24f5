import sys
from pathlib import Path

import pytest
from loguru import logger

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from appconfig.errors import ConfigIOError, ParseError
from appconfig.loader import load


@pytest.fixture
def log_messages():
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


def test_load_reads_utf8(tmp_path, log_messages):
    path = tmp_path / "myapp.conf"
    path.write_text("greeting: héllo wörld\n", encoding="utf-8")

    assert load(path) == {"greeting": "héllo wörld"}
    assert f'Reading config file "{path}".' in log_messages


def test_load_missing_file_raises_io_error(tmp_path):
    path = tmp_path / "absent.conf"
    with pytest.raises(ConfigIOError) as excinfo:
        load(path)
    assert f'Couldn\'t open config file "{path}"' in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_load_directory_raises_io_error(tmp_path):
    with pytest.raises(ConfigIOError):
        load(tmp_path)


def test_load_invalid_utf8_is_parse_error(tmp_path):
    path = tmp_path / "latin1.conf"
    path.write_bytes(b"name: caf\xe9\n")
    with pytest.raises(ParseError):
        load(path)


def test_load_passes_bindings(tmp_path):
    path = tmp_path / "myapp.conf"
    path.write_text("dir: ${home}/data\n", encoding="utf-8")
    assert load(path, {"home": "/opt/app"}) == {"dir": "/opt/app/data"}
