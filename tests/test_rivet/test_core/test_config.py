import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from rivet.core.config import RivetConfig
from rivet.core.rect import Size

def test_defaults(config):
    assert config.width == 320
    assert config.height == 200
    assert config.scale_factor == 2
    assert config.log_retention == 200
    assert config.start_app == "shell"
    assert config.font_path is None
    assert config.screen_size == Size(320, 200)

def test_validation():
    with pytest.raises(ValidationError):
        RivetConfig(scale_factor=0)
    with pytest.raises(ValidationError):
        RivetConfig(width=-1)
    with pytest.raises(ValidationError):
        RivetConfig(unknown_field=True)

def test_validate_assignment(config):
    with pytest.raises(ValidationError):
        config.scale_factor = 99

def test_from_file(tmp_path):
    path = tmp_path / "rivet.json"
    path.write_text(json.dumps({"start_app": "calculator", "font_path": "fonts/small.fontbin"}))

    config = RivetConfig.from_file(path)
    assert config.start_app == "calculator"
    assert config.font_path == Path("fonts/small.fontbin")

def test_log_level_must_be_known():
    with pytest.raises(ValidationError):
        RivetConfig(log_level="LOUD")
    assert RivetConfig(log_level="DEBUG").log_level == "DEBUG"

def test_start_app_must_be_registered(config):
    with pytest.raises(ValidationError, match="Unknown application"):
        RivetConfig(start_app="nope")
    with pytest.raises(ValidationError):
        config.start_app = "fontedit"
    config.start_app = "logviewer"

def test_bad_values_in_file_rejected(tmp_path):
    path = tmp_path / "rivet.json"
    path.write_text(json.dumps({"start_app": "nope", "log_level": "LOUD"}))
    with pytest.raises(ValidationError):
        RivetConfig.from_file(path)
