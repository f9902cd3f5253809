import json

import pytest

from emoji_ftl import cli
from emoji_ftl.config import INTERNAL_DEFAULTS, build_run_config, load_and_merge_config


def test_load_and_merge_config_defaults_without_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    assert load_and_merge_config() == INTERNAL_DEFAULTS


def test_load_and_merge_config_reads_working_directory_file(tmp_path, monkeypatch, capsys):
    (tmp_path / "emoji_ftl_config.json").write_text(json.dumps({"ftl_filename": "emoji.ftl"}), encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    config = load_and_merge_config()

    assert config["ftl_filename"] == "emoji.ftl"
    assert config["format"] == "ftl"
    assert "Loaded custom defaults" in capsys.readouterr().out


@pytest.mark.parametrize(
    "content, warning",
    [
        ("{not json", "Could not parse"),
        ("[]", "does not contain an object"),
        (json.dumps({"format": "xml"}), "unsupported format"),
        (json.dumps({"colour": "red"}), "unknown config key"),
        (json.dumps({"json_filename": ""}), "empty or non-string"),
    ],
)
def test_load_and_merge_config_warns_and_keeps_defaults(tmp_path, capsys, content, warning):
    config_file = tmp_path / "custom.json"
    config_file.write_text(content, encoding="utf-8")

    assert load_and_merge_config(config_file) == INTERNAL_DEFAULTS
    assert warning in capsys.readouterr().err


def test_load_and_merge_config_missing_explicit_file(tmp_path, capsys):
    assert load_and_merge_config(tmp_path / "missing.json") == INTERNAL_DEFAULTS
    assert "not found" in capsys.readouterr().err


def test_build_run_config_format_override(tmp_path):
    config = build_run_config("a/*.json", None, tmp_path, {"format": "ftl"}, output_format="json")

    assert config["format"] == "json"
    assert config["derived_pattern"] is None
    assert config["output_dir"] == tmp_path


def write_primary(tmp_path, emojis):
    path = tmp_path / "annotations" / "en" / "annotations.json"
    path.parent.mkdir(parents=True)
    path.write_text(json.dumps({"annotations": {"annotations": emojis}}, ensure_ascii=False), encoding="utf-8")
    return path


def test_main_single_source(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    write_primary(tmp_path, {"😀": {"default": ["grinning face"], "tts": ["grinning face"]}})

    cli.main(["annotations/*/annotations.json", "out"])

    output = (tmp_path / "out" / "en" / "cosmic_applet_emoji_selector.ftl").read_text(encoding="utf-8")
    assert output == "default-1f600 = grinning face\ntts-1f600 = grinning face\n"
    assert "Success" in capsys.readouterr().out


def test_main_exits_on_fatal_error(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    write_primary(tmp_path, {"😀": {"default": ["grinning face"]}})
    (tmp_path / "loose.json").write_text("{}", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["annotations/*/annotations.json", "loose.json", "out"])

    assert excinfo.value.code == 1
    assert "Could not determine the locale of 'loose.json'" in capsys.readouterr().err


def test_main_exits_on_invalid_json(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "annotations" / "en" / "annotations.json"
    path.parent.mkdir(parents=True)
    path.write_text("{broken", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["annotations/*/annotations.json", "out"])

    assert excinfo.value.code == 1
    assert capsys.readouterr().err.startswith("Error:")


@pytest.mark.parametrize("argv", [["only-one"], ["a", "b", "c", "d"]])
def test_main_rejects_wrong_number_of_paths(argv):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(argv)

    assert excinfo.value.code == 2


def test_main_exits_on_file_that_is_not_utf8(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "annotations" / "en" / "annotations.json"
    path.parent.mkdir(parents=True)
    path.write_bytes(b'{"annotations":{"annotations":{"\xff":{}}}}')

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["annotations/*/annotations.json", "out"])

    assert excinfo.value.code == 1
    assert capsys.readouterr().err.startswith("Error:")


def test_load_and_merge_config_warns_on_file_that_is_not_utf8(tmp_path, capsys):
    config_file = tmp_path / "custom.json"
    config_file.write_bytes(b'{"ftl_filename": "\xff.ftl"}')

    assert load_and_merge_config(config_file) == INTERNAL_DEFAULTS
    assert "Could not parse" in capsys.readouterr().err
