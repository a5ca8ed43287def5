"""Tests for SDK configuration."""

import pytest
from solders.pubkey import Pubkey

from ambient_auction_sdk import PROGRAM_ID, ChainDepthError, ConfigError, SdkConfig
from ambient_auction_sdk.program.config import (
    ENV_ADDITIONAL_BUNDLES,
    ENV_GLOBAL_CONFIG,
    ENV_PROGRAM_ID,
)


class TestSdkConfig:
    def test_default_config(self):
        config = SdkConfig.default()

        assert config.program_id == PROGRAM_ID
        assert config.global_config is False
        assert config.additional_bundles == 8

    def test_builder_pattern(self):
        program_id = Pubkey.new_unique()
        config = (
            SdkConfig.default()
            .with_program_id(program_id)
            .with_global_config()
            .with_additional_bundles(4)
        )

        assert config.program_id == program_id
        assert config.global_config is True
        assert config.additional_bundles == 4

    def test_additional_bundles_bounds(self):
        with pytest.raises(ChainDepthError):
            SdkConfig.default().with_additional_bundles(9)


class TestSdkConfigFromEnv:
    def test_empty_environment_uses_defaults(self):
        assert SdkConfig.from_env({}) == SdkConfig.default()

    def test_reads_all_variables(self):
        program_id = Pubkey.new_unique()
        config = SdkConfig.from_env(
            {
                ENV_PROGRAM_ID: str(program_id),
                ENV_GLOBAL_CONFIG: "true",
                ENV_ADDITIONAL_BUNDLES: "2",
            }
        )

        assert config.program_id == program_id
        assert config.global_config is True
        assert config.additional_bundles == 2

    @pytest.mark.parametrize("value", ["1", "TRUE", "yes", " on "])
    def test_truthy_flags(self, value):
        assert SdkConfig.from_env({ENV_GLOBAL_CONFIG: value}).global_config is True

    @pytest.mark.parametrize("value", ["0", "false", "No", ""])
    def test_falsy_flags(self, value):
        assert SdkConfig.from_env({ENV_GLOBAL_CONFIG: value}).global_config is False

    def test_invalid_flag_raises(self):
        with pytest.raises(ConfigError):
            SdkConfig.from_env({ENV_GLOBAL_CONFIG: "maybe"})

    def test_invalid_program_id_raises(self):
        with pytest.raises(ConfigError) as exc_info:
            SdkConfig.from_env({ENV_PROGRAM_ID: "not-a-pubkey"})
        assert exc_info.value.__cause__ is not None

    def test_non_integer_bundles_raises(self):
        with pytest.raises(ConfigError):
            SdkConfig.from_env({ENV_ADDITIONAL_BUNDLES: "many"})

    def test_out_of_range_bundles_raises(self):
        with pytest.raises(ConfigError) as exc_info:
            SdkConfig.from_env({ENV_ADDITIONAL_BUNDLES: "12"})
        assert isinstance(exc_info.value.__cause__, ChainDepthError)

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv(ENV_GLOBAL_CONFIG, "1")
        monkeypatch.delenv(ENV_PROGRAM_ID, raising=False)
        monkeypatch.delenv(ENV_ADDITIONAL_BUNDLES, raising=False)

        assert SdkConfig.from_env().global_config is True
