from pathlib import Path

import pytest

from configs import BatchSettings, Config


def test_env_overrides_are_coerced(monkeypatch):
    monkeypatch.setenv("DOOR_TREE_ROOT_ID", "3")
    monkeypatch.setenv("DOOR_TREE_VERBOSE", "yes")
    monkeypatch.setenv("DOOR_TREE_RENDER_DPI", "80")
    monkeypatch.setenv("DOOR_TREE_RUN_NAME", "nightly")
    config = Config().update_from_env()
    assert config.root_id == 3
    assert config.verbose is True
    assert config.render_dpi == 80
    assert config.label() == "nightly"


def test_optional_fields_accept_none(monkeypatch):
    monkeypatch.setenv("DOOR_TREE_INPUT_PATH", "none")
    config = Config(input_path="puzzle.txt").update_from_env()
    assert config.input_path is None
    assert config.label() == "stdin"


def test_bad_env_value_names_the_variable(monkeypatch):
    monkeypatch.setenv("DOOR_TREE_ROOT_ID", "first")
    with pytest.raises(ValueError, match="DOOR_TREE_ROOT_ID"):
        Config().update_from_env()


def test_output_path_creates_directory(tmp_path):
    config = Config(output_dir=str(tmp_path / "nested" / "out"))
    path = config.output_path("run.json")
    assert path.parent.is_dir()
    assert path.name == "run.json"


def test_batch_settings_yield_one_config_per_file(tmp_path):
    for name in ("b.txt", "a.txt", "notes.md"):
        (tmp_path / name).write_text("", encoding="utf-8")
    settings = BatchSettings(input_dir=str(tmp_path), output_root=str(tmp_path / "runs"))
    configs = list(settings.iter_configs())
    assert [config.run_name for config in configs] == ["a", "b"]
    assert Path(configs[0].output_dir) == tmp_path / "runs" / "a"
