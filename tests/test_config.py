import logging

from coins_collector.config import Config


def test_load_defaults_when_missing(isolated_config_dir):
    cfg = Config.load()
    assert cfg == Config()
    assert cfg.strict is True
    assert not (isolated_config_dir / "config.json").exists()


def test_save_and_load_round_trip(isolated_config_dir):
    Config(resolver_url="http://resolver.example.edu/openurl", strict=False, timeout=5.0).save()
    cfg = Config.load()
    assert cfg.resolver_url == "http://resolver.example.edu/openurl"
    assert cfg.strict is False
    assert cfg.timeout == 5.0


def test_load_ignores_unknown_keys(tmp_path):
    path = tmp_path / "config.json"
    path.write_text('{"resolver_url": "http://r", "legacy": 1}', encoding="utf-8")
    assert Config.load(path) == Config(resolver_url="http://r")


def test_load_bad_json_falls_back_to_defaults(tmp_path, caplog):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="coins_collector.config"):
        assert Config.load(path) == Config()
    assert "Failed to load config" in caplog.text


def test_load_non_object_json_falls_back_to_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[1, 2]", encoding="utf-8")
    assert Config.load(path) == Config()
