"""Custom exceptions for the Ambient auction program module."""


class AmbientAuctionError(Exception):
    """Base exception for all Ambient auction SDK errors."""

    pass


class AddressDerivationError(AmbientAuctionError):
    """Raised when no bump seed yields an off-curve program address."""

    def __init__(self, program_id: str):
        self.program_id = program_id
        super().__init__(
            f"Unable to find a viable program address bump seed for program {program_id}"
        )


class InvalidSeedsError(AmbientAuctionError):
    """Raised when a seed set with an explicit bump lands on the ed25519 curve."""

    def __init__(self, bump: int):
        self.bump = bump
        super().__init__(f"Invalid seeds: address with bump {bump} is on the curve")


class TooManySeedsError(AmbientAuctionError):
    """Raised when more seeds are supplied than the runtime accepts."""

    def __init__(self, count: int, max_count: int):
        self.count = count
        self.max_count = max_count
        super().__init__(f"Too many seeds: {count} (maximum: {max_count})")


class InvalidTierError(AmbientAuctionError):
    """Raised when a request tier ordinal or encoding is not recognised."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid request tier: {value!r}")


class InvalidArgumentError(AmbientAuctionError):
    """Raised when an instruction argument cannot be encoded."""

    def __init__(self, name: str, message: str):
        self.name = name
        super().__init__(f"Invalid argument '{name}': {message}")


class ChainDepthError(AmbientAuctionError):
    """Raised when a bundle chain depth falls outside the supported range."""

    def __init__(self, depth: int, max_depth: int):
        self.depth = depth
        self.max_depth = max_depth
        super().__init__(
            f"Invalid bundle chain depth: {depth} (valid range: 0-{max_depth})"
        )


class ConfigError(AmbientAuctionError):
    """Raised when SDK configuration cannot be loaded."""

    def __init__(self, message: str):
        super().__init__(f"Invalid configuration: {message}")


class GlobalConfigDisabledError(AmbientAuctionError):
    """Raised when a config-only operation is used without global config support."""

    def __init__(self):
        super().__init__("Global config support is disabled for this client")
