"""Sealed-bid price commitments.

A bid publishes only `sha256(price_hash_seed || price_le8)` while the auction
is open. At reveal time the bidder discloses the seed and price, and anyone
can recompute the hash to check the bid was fixed before it was revealed.

The bidder's address is not part of the hash; the commitment is tied to the
bidder only through the bid PDA it is stored in. A seed reused across bids
therefore makes those sealed prices comparable as soon as one of them is
revealed. Use a fresh seed per bid (see `generate_price_hash_seed`).
"""

import hmac

import nacl.utils

from .constants import HASH_SIZE, PRICE_HASH_SEED_SIZE
from .utils import encode_fixed_bytes, encode_u64, sha256


def generate_price_hash_seed() -> bytes:
    """Generate a random 32-byte secret for a single bid."""
    return nacl.utils.random(PRICE_HASH_SEED_SIZE)


def hash_bid_price(price_hash_seed: bytes, price_per_output_token: int) -> bytes:
    """Compute the commitment for a sealed bid price.

    Returns a 32-byte hash.
    """
    seed = encode_fixed_bytes(price_hash_seed, PRICE_HASH_SEED_SIZE, "price_hash_seed")
    return sha256(seed, encode_u64(price_per_output_token))


def verify_bid_reveal(
    price_hash_seed: bytes,
    price_per_output_token: int,
    commitment: bytes,
) -> bool:
    """Check that a revealed seed and price match an earlier commitment.

    A seed or commitment of the wrong length never matches.
    """
    if len(price_hash_seed) != PRICE_HASH_SEED_SIZE or len(commitment) != HASH_SIZE:
        return False
    expected = hash_bid_price(price_hash_seed, price_per_output_token)
    return hmac.compare_digest(expected, bytes(commitment))
