"""Tests for configuration loading."""

from showdown import config as config_module
from showdown.config import Config, get_config


class TestConfig:
    def test_defaults(self):
        cfg = Config()
        assert cfg.evaluation.max_workers == 1
        assert cfg.display.unicode_suits is True

    def test_from_file(self, tmp_path):
        path = tmp_path / "showdown.toml"
        path.write_text("[evaluation]\nmax_workers = 4\n\n[display]\nunicode_suits = false\n")

        cfg = Config._from_file(path)
        assert cfg.evaluation.max_workers == 4
        assert cfg.display.unicode_suits is False

    def test_partial_file_keeps_defaults(self, tmp_path):
        path = tmp_path / "showdown.toml"
        path.write_text("[display]\nunicode_suits = false\n")

        cfg = Config._from_file(path)
        assert cfg.evaluation.max_workers == 1

    def test_workers_floor_at_one(self, tmp_path):
        path = tmp_path / "showdown.toml"
        path.write_text("[evaluation]\nmax_workers = 0\n")

        assert Config._from_file(path).evaluation.max_workers == 1

    def test_load_from_cwd(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("HOME", str(tmp_path / "home"))
        (tmp_path / ".showdown.toml").write_text("[evaluation]\nmax_workers = 2\n")

        assert Config.load().evaluation.max_workers == 2

    def test_load_without_files(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("HOME", str(tmp_path / "home"))

        assert Config.load() == Config()

    def test_get_config_is_cached(self, monkeypatch):
        monkeypatch.setattr(config_module, "_config", None)
        first = get_config()
        assert get_config() is first
