"""Tests for AssetIOConfig."""

import pytest

from assetio.config import AssetIOConfig

ENV_VARS = (
    "ASSETIO_PROJECT_PATH",
    "ASSETIO_BACKEND",
    "ASSETIO_LOCK_TIMEOUT",
    "ASSETIO_DATA_PATH",
)


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestDefaults:
    """Test default values and explicit overrides."""

    def test_defaults(self):
        config = AssetIOConfig()

        assert config.project_path == "."
        assert config.backend == "local"
        assert config.lock_timeout == 30.0
        assert config.data_path is None

    def test_kwargs_override_defaults(self):
        config = AssetIOConfig(project_path="./MyGame", lock_timeout=5)

        assert config.project_path == "./MyGame"
        assert config.lock_timeout == 5

    def test_unknown_option_raises(self):
        with pytest.raises(ValueError, match="Unknown configuration option"):
            AssetIOConfig(asset_root="Assets")

    def test_unknown_backend_raises(self):
        with pytest.raises(ValueError, match="Unknown backend"):
            AssetIOConfig(backend="cloud")


class TestEnvironment:
    """Test loading from ASSETIO_* variables."""

    def test_env_values(self, monkeypatch):
        monkeypatch.setenv("ASSETIO_PROJECT_PATH", "/games/demo")
        monkeypatch.setenv("ASSETIO_BACKEND", "Memory")
        monkeypatch.setenv("ASSETIO_LOCK_TIMEOUT", "2.5")
        monkeypatch.setenv("ASSETIO_DATA_PATH", "/games/demo/Assets")

        config = AssetIOConfig.from_env()

        assert config.project_path == "/games/demo"
        assert config.backend == "memory"
        assert config.lock_timeout == 2.5
        assert config.data_path == "/games/demo/Assets"

    def test_kwargs_win_over_env(self, monkeypatch):
        monkeypatch.setenv("ASSETIO_PROJECT_PATH", "/games/demo")
        assert AssetIOConfig(project_path="/games/other").project_path == "/games/other"

    def test_invalid_env_backend_raises(self, monkeypatch):
        monkeypatch.setenv("ASSETIO_BACKEND", "cloud")
        with pytest.raises(ValueError):
            AssetIOConfig()


class TestFiles:
    """Test TOML loading and saving."""

    def test_from_file_sections(self, tmp_path):
        path = tmp_path / "assetio.toml"
        path.write_text(
            '[project]\npath = "./MyGame"\n\n[database]\nbackend = "memory"\nlock_timeout = 10\n'
        )

        config = AssetIOConfig.from_file(path)

        assert config.project_path == "./MyGame"
        assert config.backend == "memory"
        assert config.lock_timeout == 10

    def test_from_file_flat_keys(self, tmp_path):
        path = tmp_path / "assetio.toml"
        path.write_text('project_path = "./MyGame"\nlock_timeout = 1.5\n')

        config = AssetIOConfig.from_file(path)

        assert config.project_path == "./MyGame"
        assert config.lock_timeout == 1.5

    def test_from_file_overrides_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("ASSETIO_PROJECT_PATH", "/games/demo")
        path = tmp_path / "assetio.toml"
        path.write_text('[project]\npath = "./MyGame"\n')

        assert AssetIOConfig.from_file(path).project_path == "./MyGame"

    def test_from_file_missing_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            AssetIOConfig.from_file(tmp_path / "missing.toml")

    def test_to_file_round_trip(self, tmp_path):
        original = AssetIOConfig(project_path="./MyGame", backend="memory", lock_timeout=4.0)
        path = tmp_path / "nested" / "assetio.toml"

        original.to_file(path)
        loaded = AssetIOConfig.from_file(path)

        assert path.read_text().startswith("# AssetIO Configuration")
        assert "data_path" not in path.read_text()
        assert loaded.project_path == "./MyGame"
        assert loaded.backend == "memory"
        assert loaded.lock_timeout == 4.0
        assert loaded.data_path is None


class TestWithOverrides:
    """Test copying a config with changes."""

    def test_with_overrides_returns_copy(self):
        config = AssetIOConfig(lock_timeout=5)
        changed = config.with_overrides(project_path="/games/demo")

        assert changed is not config
        assert changed.project_path == "/games/demo"
        assert changed.lock_timeout == 5
        assert config.project_path == "."

    def test_with_overrides_rejects_unknown_backend(self):
        with pytest.raises(ValueError, match="Unknown backend"):
            AssetIOConfig().with_overrides(backend="cloud")

    def test_with_overrides_rejects_unknown_option(self):
        with pytest.raises(ValueError, match="Unknown configuration option"):
            AssetIOConfig().with_overrides(asset_root="Assets")
