import pytest
from pathlib import Path

from iconswap.codemod.errors import ConfigError
from iconswap.codemod.manifest import FileTarget
from iconswap.config.config import load_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ("ICONSWAP_CONFIG", "ICONSWAP_PROJECT_DIR", "ICONSWAP_SOURCE_DIR",
                 "ICONSWAP_REPLACEMENT_MODULE", "ICONSWAP_STRICT_USAGE"):
        monkeypatch.delenv(name, raising=False)
    # relative paths resolve against a scratch cwd
    monkeypatch.chdir(tmp_path)


def write_config(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "iconswap.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_load_config_defaults(tmp_path):
    """Only 'files' is required; everything else has a default"""
    path = write_config(tmp_path, "files:\n  - src/App.tsx\n")

    config = load_config(path)

    assert config.project_dir == tmp_path.resolve()
    assert config.source_dir == "src"
    assert config.replacement_module == "components/LocalIcon"
    assert config.binding == "Icon"
    assert config.local_name == "LocalIcon"
    assert config.icon_module == "@iconify/react"
    assert config.strict_usage is False
    assert config.files == [FileTarget("src/App.tsx")]


def test_load_config_full(tmp_path):
    """Mapping entries carry declared depths; skip becomes part of the manifest"""
    path = write_config(tmp_path, """
project_dir: web
source_dir: app
replacement_module: ui/Glyph
strict_usage: true
files:
  - src/components/Layout.tsx
  - path: src/pages/auth/login.tsx
    depth: 3
skip:
  - src/components/Layout.tsx
""")

    config = load_config(path)
    manifest = config.manifest()

    assert config.project_dir == tmp_path.resolve() / "web"
    assert config.source_dir == "app"
    assert config.replacement_module == "ui/Glyph"
    assert config.strict_usage is True
    assert list(manifest) == [
        FileTarget("src/components/Layout.tsx"),
        FileTarget("src/pages/auth/login.tsx", 3),
    ]
    assert manifest.is_skipped(FileTarget("src/components/Layout.tsx"))
    assert not manifest.is_skipped(FileTarget("src/pages/auth/login.tsx"))


def test_environment_overrides_yaml(tmp_path, monkeypatch):
    path = write_config(tmp_path, "project_dir: web\nsource_dir: src\nfiles: []\n")
    monkeypatch.setenv("ICONSWAP_SOURCE_DIR", "lib")
    monkeypatch.setenv("ICONSWAP_STRICT_USAGE", "yes")
    monkeypatch.setenv("ICONSWAP_REPLACEMENT_MODULE", "icons/Local")

    config = load_config(path)

    assert config.source_dir == "lib"
    assert config.strict_usage is True
    assert config.replacement_module == "icons/Local"


def test_arguments_override_environment(tmp_path, monkeypatch):
    path = write_config(tmp_path, "files: []\n")
    monkeypatch.setenv("ICONSWAP_SOURCE_DIR", "lib")
    monkeypatch.setenv("ICONSWAP_STRICT_USAGE", "1")

    config = load_config(path, project_dir=str(tmp_path / "elsewhere"), source_dir="app", strict_usage=False)

    assert config.project_dir == tmp_path / "elsewhere"
    assert config.source_dir == "app"
    assert config.strict_usage is False


def test_config_path_from_environment(tmp_path, monkeypatch):
    path = write_config(tmp_path, "files:\n  - src/A.tsx\n")
    monkeypatch.setenv("ICONSWAP_CONFIG", str(path))

    assert load_config().files == [FileTarget("src/A.tsx")]


@pytest.mark.parametrize("text, message", [
    ("- just\n- a list\n", "mapping"),
    ("project_dir: web\n", "'files'"),
    ("files: src/App.tsx\n", "'files'"),
    ("files:\n  - 42\n", "files[0]"),
    ("files:\n  - path: src/A.tsx\n    depth: -1\n", "non-negative"),
    ("files:\n  - path: src/A.tsx\n    depth: two\n", "non-negative"),
    ("files: []\nskip: src/A.tsx\n", "'skip'"),
    ("files: [\n", "Invalid YAML"),
    ("files: []\nlocal_name: 5\n", "'local_name'"),
    ("files: []\nlocal_name: Local-Icon\n", "component name"),
    ("files: []\nbinding: [Icon]\n", "'binding'"),
    ("files: []\nsource_dir: 3\n", "'source_dir'"),
    ("files: []\nproject_dir: {web: 1}\n", "'project_dir'"),
    ("files: []\nreplacement_module: 7\n", "'replacement_module'"),
    ("files: []\nicon_module: ''\n", "'icon_module'"),
    ("files: []\nstrict_usage: \"false\"\n", "true or false"),
])
def test_malformed_config_raises(tmp_path, text, message):
    path = write_config(tmp_path, text)

    with pytest.raises(ConfigError) as exc_info:
        load_config(path)

    assert message in str(exc_info.value)


def test_missing_config_file(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "absent.yaml")


def test_shipped_manifest_loads():
    """The repository's config.yaml is a valid manifest"""
    repo_config = Path(__file__).resolve().parents[2] / "config.yaml"

    config = load_config(repo_config)

    assert len(config.files) == 17
    assert config.manifest().is_skipped(FileTarget("src/components/LanguageSwitcher.tsx"))
