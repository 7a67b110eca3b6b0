from core.config import DEFAULT_VOLUME, AppConfig


class TestAppConfig:
    def test_defaults(self):
        config = AppConfig.from_env({})

        assert config.catalog_path is None
        assert config.music_dir is None
        assert config.volume == DEFAULT_VOLUME
        assert config.autoplay is False
        assert config.log_level == "INFO"
        assert config.is_development is False

    def test_values(self):
        config = AppConfig.from_env({
            "PLAYSTATE_CATALOG": "/data/songs.json",
            "PLAYSTATE_VOLUME": "0.4",
            "PLAYSTATE_AUTOPLAY": "1",
            "PLAYSTATE_LOG_LEVEL": "debug",
            "PLAYSTATE_ENV": "Development",
        })

        assert config.catalog_path == "/data/songs.json"
        assert config.volume == 0.4
        assert config.autoplay is True
        assert config.log_level == "DEBUG"
        assert config.is_development is True

    def test_volume_clamped(self):
        assert AppConfig.from_env({"PLAYSTATE_VOLUME": "3"}).volume == 1.0
        assert AppConfig.from_env({"PLAYSTATE_VOLUME": "-1"}).volume == 0.0

    def test_invalid_volume_falls_back(self):
        assert AppConfig.from_env({"PLAYSTATE_VOLUME": "loud"}).volume == DEFAULT_VOLUME
        assert AppConfig.from_env({"PLAYSTATE_VOLUME": "nan"}).volume == DEFAULT_VOLUME
