import json

import pytest

from jarpack.core.config.settings import settings
from jarpack.core.exceptions import ConfigError
from jarpack.features.project_config.domain.models import ProjectConfig
from jarpack.features.project_config.service.api import load_project_config, save_project_config

@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "jarpack.json"
    path.write_text(json.dumps({
        "name": "demo",
        "namespace": "com.example",
        "version": "1.4.2",
        "repository": "https://github.com/example/demo",
        "dependencies": {"kotlin-stdlib": "1.9.0"},
    }))
    return path

def test_load_config(config_file):
    config = load_project_config(config_file)

    assert config.name == "demo"
    assert config.namespace == "com.example"
    assert config.current_version == "1.4.2"

def test_missing_file_returns_none(tmp_path):
    assert load_project_config(tmp_path / "jarpack.json") is None

def test_default_path_is_working_directory(config_file, monkeypatch):
    monkeypatch.chdir(config_file.parent)
    assert settings.config_path.resolve() == config_file.resolve()
    assert load_project_config().name == "demo"

def test_invalid_json_raises(tmp_path):
    path = tmp_path / "jarpack.json"
    path.write_text("{ not json")

    with pytest.raises(ConfigError) as exc:
        load_project_config(path)
    assert "Invalid jarpack.json" in str(exc.value)

def test_non_object_raises(tmp_path):
    path = tmp_path / "jarpack.json"
    path.write_text("[1, 2, 3]")

    with pytest.raises(ConfigError):
        load_project_config(path)

def test_wrong_field_type_raises(tmp_path):
    path = tmp_path / "jarpack.json"
    path.write_text(json.dumps({"namespace": ["com", "example"]}))

    with pytest.raises(ConfigError):
        load_project_config(path)

def test_version_defaults_to_zero():
    assert ProjectConfig(name="x").current_version == "0.0.0"

def test_save_keeps_unknown_keys(config_file):
    config = load_project_config(config_file)
    config.version = "1.4.3"
    save_project_config(config, config_file)

    data = json.loads(config_file.read_text())
    assert data["version"] == "1.4.3"
    assert data["dependencies"] == {"kotlin-stdlib": "1.9.0"}
    assert data["name"] == "demo"

def test_save_omits_unset_fields(tmp_path):
    path = tmp_path / "jarpack.json"
    save_project_config(ProjectConfig(name="bare"), path)

    assert json.loads(path.read_text()) == {"name": "bare"}
