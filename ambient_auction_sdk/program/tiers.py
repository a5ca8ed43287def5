"""Request tier encoding.

Tiers appear both as PDA seeds and as instruction fields, always as the
8-byte little-endian ordinal. Every component goes through these two
functions.
"""

from typing import Union

from .constants import TIER_SIZE
from .errors import InvalidTierError
from .types import RequestTier
from .utils import decode_u64, encode_u64


def encode_tier(tier: Union[RequestTier, int]) -> bytes:
    """Encode a tier as its u64 little-endian ordinal.

    Raises:
        InvalidTierError: If the ordinal does not name a tier
    """
    if isinstance(tier, bool):
        raise InvalidTierError(tier)
    try:
        tier = RequestTier(tier)
    except ValueError:
        raise InvalidTierError(tier) from None
    return encode_u64(tier.value)


def decode_tier(data: bytes) -> RequestTier:
    """Decode an 8-byte little-endian ordinal into a tier.

    Raises:
        InvalidTierError: If the length is wrong or the ordinal is unknown
    """
    if len(data) != TIER_SIZE:
        raise InvalidTierError(bytes(data))
    value = decode_u64(data)
    try:
        return RequestTier(value)
    except ValueError:
        raise InvalidTierError(value) from None
