import json

from core import fetch_config as fc
from core.fetch_config import FetchConfig, FetchMode


def test_mode_from_credential():
    assert FetchConfig().mode == FetchMode.PLACEHOLDER
    assert FetchConfig(access_key="").mode == FetchMode.PLACEHOLDER
    assert FetchConfig(access_key="   ").mode == FetchMode.PLACEHOLDER
    assert FetchConfig(access_key="abc").mode == FetchMode.LIVE


def test_from_env():
    config = FetchConfig.from_env({
        "UNSPLASH_ACCESS_KEY": "abc",
        "RABBIT_IMAGES_DIR": "out/img",
        "RABBIT_REQUEST_DELAY": "0.5",
    })
    assert config.is_live_mode()
    assert config.images_dir == "out/img"
    assert config.request_delay == 0.5
    assert config.placeholder_file == "data/image_placeholders.json"


def test_from_env_without_key():
    config = FetchConfig.from_env({})
    assert config.is_placeholder_mode()
    assert config.images_dir == "public/rabbits"
    assert config.request_delay == 1.0


def test_key_is_never_exposed():
    config = FetchConfig(access_key="secret-key")
    assert "secret-key" not in repr(config)
    assert "secret-key" not in json.dumps(config.to_dict())
    assert config.to_dict()["has_access_key"] is True


def test_load_overrides(tmp_path):
    path = tmp_path / "fetch_config.json"
    path.write_text(json.dumps({"images_dir": "static/rabbits", "per_page": 5,
                                "api_base_url": "https://example.invalid/"}), encoding="utf-8")
    config = FetchConfig()
    assert config.load(path) is True
    assert config.images_dir == "static/rabbits"
    assert config.per_page == 5
    assert config.api_base_url == "https://example.invalid"


def test_load_missing_file(tmp_path):
    assert FetchConfig().load(tmp_path / "nope.json") is False


def test_update_ignores_none_and_mode():
    config = FetchConfig()
    config.update(images_dir=None, request_delay=2.0, mode="live", unknown=1)
    assert config.images_dir == "public/rabbits"
    assert config.request_delay == 2.0
    assert config.mode == FetchMode.PLACEHOLDER


def test_global_config(monkeypatch, tmp_path):
    monkeypatch.setenv("UNSPLASH_ACCESS_KEY", "abc")
    monkeypatch.setattr(FetchConfig, "CONFIG_FILE", tmp_path / "missing.json")
    config = fc.reset_fetch_config()
    assert config.is_live_mode()
    assert fc.get_fetch_config() is config

    monkeypatch.delenv("UNSPLASH_ACCESS_KEY")
    assert fc.reset_fetch_config().is_placeholder_mode()


def test_bad_delay_falls_back_to_default():
    assert FetchConfig.from_env({"RABBIT_REQUEST_DELAY": "fast"}).request_delay == 1.0
    assert FetchConfig.from_env({"RABBIT_REQUEST_DELAY": "-2"}).request_delay == 1.0
    assert FetchConfig.from_env({"RABBIT_REQUEST_DELAY": "0"}).request_delay == 0.0


def test_config_file_is_relative_to_working_directory(monkeypatch, tmp_path):
    assert not FetchConfig.CONFIG_FILE.is_absolute()
    (tmp_path / "config").mkdir()
    (tmp_path / "config" / "fetch_config.json").write_text('{"images_dir": "site/rabbits"}', encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    config = FetchConfig()
    assert config.load() is True
    assert config.images_dir == "site/rabbits"
