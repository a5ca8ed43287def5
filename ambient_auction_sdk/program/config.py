"""Configuration for the Ambient auction SDK."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from solders.pubkey import Pubkey

from .bundles import validate_chain_depth
from .constants import DEFAULT_ADDITIONAL_BUNDLES, PROGRAM_ID
from .errors import ChainDepthError, ConfigError

ENV_PROGRAM_ID = "AMBIENT_AUCTION_PROGRAM_ID"
ENV_GLOBAL_CONFIG = "AMBIENT_AUCTION_GLOBAL_CONFIG"
ENV_ADDITIONAL_BUNDLES = "AMBIENT_AUCTION_ADDITIONAL_BUNDLES"

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off", "")


@dataclass
class SdkConfig:
    """Configuration shared by instruction builders.

    `global_config` switches on the optional config subsystem: request_job
    then carries the config account, and init_config becomes available.
    """

    program_id: Pubkey = PROGRAM_ID
    global_config: bool = False
    additional_bundles: int = DEFAULT_ADDITIONAL_BUNDLES

    @classmethod
    def default(cls) -> "SdkConfig":
        """Create default config (mainnet program, no global config)."""
        return cls()

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SdkConfig":
        """Load config from environment variables, falling back to defaults.

        Raises:
            ConfigError: If a variable is set to an unparseable value
        """
        env = os.environ if environ is None else environ
        config = cls()

        program_id = env.get(ENV_PROGRAM_ID)
        if program_id:
            try:
                config.program_id = Pubkey.from_string(program_id)
            except ValueError as exc:
                raise ConfigError(f"{ENV_PROGRAM_ID} is not a valid pubkey: {exc}") from exc

        flag = env.get(ENV_GLOBAL_CONFIG)
        if flag is not None:
            value = flag.strip().lower()
            if value in _TRUE_VALUES:
                config.global_config = True
            elif value in _FALSE_VALUES:
                config.global_config = False
            else:
                raise ConfigError(f"{ENV_GLOBAL_CONFIG} must be a boolean, got {flag!r}")

        additional = env.get(ENV_ADDITIONAL_BUNDLES)
        if additional:
            try:
                config.with_additional_bundles(int(additional))
            except (ValueError, ChainDepthError) as exc:
                raise ConfigError(f"{ENV_ADDITIONAL_BUNDLES}: {exc}") from exc

        return config

    def with_program_id(self, program_id: Pubkey) -> "SdkConfig":
        """Set the auction program id."""
        self.program_id = program_id
        return self

    def with_global_config(self, enabled: bool = True) -> "SdkConfig":
        """Enable or disable the global config subsystem."""
        self.global_config = enabled
        return self

    def with_additional_bundles(self, count: int) -> "SdkConfig":
        """Set the default number of bundle links request_job provisions."""
        validate_chain_depth(count)
        self.additional_bundles = count
        return self
