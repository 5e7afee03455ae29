import tomli_w

import config
from config import Config, load_config


def _use_home(monkeypatch, home):
    monkeypatch.setenv("HOME", str(home))


class TestLoadConfig:
    """Tests for configuration loading."""

    def test_creates_default_config(self, tmp_path, monkeypatch):
        _use_home(monkeypatch, tmp_path)

        loaded = load_config()

        assert config.get_config_path() == tmp_path / ".config" / "passbook.toml"
        assert config.get_config_path().exists()
        assert loaded == Config.default()
        assert loaded.accounts_dir == tmp_path / "data" / "passbook" / "accounts"

    def test_reads_existing_config(self, tmp_path, monkeypatch):
        _use_home(monkeypatch, tmp_path)
        config_path = tmp_path / ".config" / "passbook.toml"
        config_path.parent.mkdir(parents=True)
        with open(config_path, "wb") as f:
            tomli_w.dump(
                {
                    "base_dir": str(tmp_path / "pb"),
                    "storage": {"history_dir": str(tmp_path / "elsewhere")},
                    "logging": {"level": "DEBUG"},
                    "session": {"default_owner": "alice"},
                },
                f,
            )

        loaded = load_config()

        assert loaded.base_dir == tmp_path / "pb"
        assert loaded.accounts_dir == tmp_path / "pb" / "accounts"
        assert loaded.history_dir == tmp_path / "elsewhere"
        assert loaded.log_level == "DEBUG"
        assert loaded.log_dir == tmp_path / "pb" / "logs"
        assert loaded.default_owner == "alice"

    def test_round_trip_of_written_defaults(self, tmp_path, monkeypatch):
        _use_home(monkeypatch, tmp_path)

        first = load_config()
        second = load_config()

        assert first == second
