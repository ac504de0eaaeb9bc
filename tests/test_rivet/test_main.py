import json
from unittest.mock import patch

import pytest

from rivet.__main__ import build_config, main, parse_args

def test_defaults():
    config = build_config(parse_args([]))
    assert config.start_app == "shell"
    assert config.scale_factor == 2

def test_command_line_overrides_config_file(tmp_path):
    path = tmp_path / "rivet.json"
    path.write_text(json.dumps({"start_app": "about", "scale_factor": 4, "target_fps": 20}))

    config = build_config(parse_args(["--config", str(path), "--scale", "3", "--log-level", "DEBUG"]))

    assert config.start_app == "about"
    assert config.scale_factor == 3
    assert config.target_fps == 20
    assert config.log_level == "DEBUG"

def test_unknown_app_rejected():
    with pytest.raises(SystemExit):
        parse_args(["--app", "fontedit"])

@pytest.mark.parametrize("argv", [
    ["--scale", "20"],
    ["--config", "missing.json"],
    ["--config", "bad_app.json"],
    ["--config", "bad_level.json"],
])
def test_invalid_configuration_exits_with_2(argv, tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "bad_app.json").write_text(json.dumps({"start_app": "nope"}))
    (tmp_path / "bad_level.json").write_text(json.dumps({"log_level": "LOUD"}))
    with patch("rivet.runtime.desktop.Desktop") as desktop:
        assert main(argv) == 2

    desktop.assert_not_called()
    assert "Invalid configuration" in capsys.readouterr().err

def test_main_runs_desktop():
    with patch("rivet.runtime.desktop.Desktop") as desktop, patch("logging.basicConfig"):
        assert main(["--app", "calculator"]) == 0

    config = desktop.call_args[0][0]
    assert config.start_app == "calculator"
    desktop.return_value.run.assert_called_once()
