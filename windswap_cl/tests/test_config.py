"""
Settings 테스트
"""

import importlib

import pytest

from .. import config


@pytest.fixture
def reload_config(monkeypatch):
    """환경변수를 바꾼 뒤 config 모듈을 다시 읽고, 끝나면 원래 객체로 복원"""
    original_settings = config.settings
    original_class = config.Settings

    def _reload(**env):
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        return importlib.reload(config).settings

    yield _reload

    config.settings = original_settings
    config.Settings = original_class


class TestSettings:
    """Settings 기본값 테스트"""

    def test_defaults(self):
        """기본 상수"""
        settings = config.Settings()
        assert settings.POOL_APR_MULTIPLIER_CAP == 500
        assert settings.RANGE_APR_MULTIPLIER_CAP == 1000
        assert settings.OUT_OF_RANGE_APR_FACTOR == 0.5
        assert settings.MIN_STAKED_RATIO == 0.0001
        assert settings.REWARD_TOKEN_DECIMALS == 18
        assert settings.FULL_RANGE_THRESHOLD == 0.9
        assert settings.EXTREME_TICK == 800000

    def test_multiplier_cap(self):
        """배수 상한 종류별 조회"""
        settings = config.Settings()
        assert settings.multiplier_cap("pool") == 500
        assert settings.multiplier_cap("range") == 1000

    def test_multiplier_cap_unknown(self):
        """알 수 없는 종류는 ValueError"""
        with pytest.raises(ValueError):
            config.Settings().multiplier_cap("staked")

    def test_env_override(self, reload_config):
        """WINDSWAP_* 환경변수로 덮어쓰기"""
        settings = reload_config(
            WINDSWAP_POOL_APR_MULTIPLIER_CAP="250",
            WINDSWAP_EXTREME_TICK="700000",
        )
        assert settings.POOL_APR_MULTIPLIER_CAP == 250
        assert settings.EXTREME_TICK == 700000
        assert isinstance(settings.EXTREME_TICK, int)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
