import json

import pytest
import yaml
from pydantic import ValidationError

from polyobj.cli import cli, load_config, main, validate_config

SCENARIO = {
    "name": "file-scenario",
    "objects": [{"kind": "special", "data": "alpha"}],
    "rerender": [0],
    "duplicate": 0,
    "capability_check": 0,
    "demonstrate_failures": False,
}


def test_main_without_config_runs_default_scenario(capsys):
    result = main(run_id="cli-1")

    assert result["status"] == "success"
    assert result["exit_code"] == 0
    assert result["run_id"] == "cli-1"
    assert result["name"] == "default"
    assert len(result["lines"]) == 9
    assert capsys.readouterr().out.splitlines() == result["lines"]


def test_main_with_config_dict():
    result = main(config_dict=SCENARIO)

    assert result["name"] == "file-scenario"
    assert result["lines"] == [
        "Special Object ID: 0, Data: alpha",
        "Object 1 (Special): Special Object ID: 0, Data: alpha",
        "Cloned Object 1: Special Object ID: 0, Data: alpha",
        "Dynamic cast successful. Object is a SpecialObject.",
    ]


def test_load_config_reads_json_and_yaml(tmp_path):
    json_path = tmp_path / "scenario.json"
    json_path.write_text(json.dumps(SCENARIO))
    yaml_path = tmp_path / "scenario.yaml"
    yaml_path.write_text(yaml.safe_dump(SCENARIO))

    assert load_config(str(json_path)) == SCENARIO
    assert load_config(str(yaml_path)) == SCENARIO


def test_load_config_rejects_missing_file_and_unknown_suffix(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "missing.json"))

    toml_path = tmp_path / "scenario.toml"
    toml_path.write_text("name = 'x'")
    with pytest.raises(ValueError, match="Unsupported config format"):
        load_config(str(toml_path))


def test_validate_config_accepts_valid_and_raises_on_invalid(tmp_path):
    good = tmp_path / "good.json"
    good.write_text(json.dumps(SCENARIO))
    bad = tmp_path / "bad.json"
    bad.write_text(json.dumps({"objects": [{"kind": "mystery", "data": "x"}]}))

    assert validate_config(str(good)) is True
    with pytest.raises(ValidationError):
        validate_config(str(bad))


def test_cli_run_default_exits_zero(capsys):
    with pytest.raises(SystemExit) as exc:
        cli(["run"])

    assert exc.value.code == 0
    assert len(capsys.readouterr().out.splitlines()) == 9


def test_cli_run_with_invalid_config_exits_one(tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text(json.dumps({"duplicate": 10}))

    with pytest.raises(SystemExit) as exc:
        cli(["run", str(bad)])

    assert exc.value.code == 1


def test_cli_validate_exit_codes(tmp_path):
    good = tmp_path / "good.yml"
    good.write_text(yaml.safe_dump(SCENARIO))
    bad = tmp_path / "bad.json"
    bad.write_text(json.dumps({"rerender": [5]}))

    with pytest.raises(SystemExit) as ok:
        cli(["validate", str(good)])
    with pytest.raises(SystemExit) as failed:
        cli(["validate", str(bad)])

    assert ok.value.code == 0
    assert failed.value.code == 1


def test_cli_without_command_prints_help(capsys):
    with pytest.raises(SystemExit) as exc:
        cli([])

    assert exc.value.code == 0
    assert "usage: polyobj" in capsys.readouterr().out
