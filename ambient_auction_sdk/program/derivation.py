"""Program derived address computation for the Ambient auction SDK.

The on-chain program recomputes every PDA it is handed from the same seeds,
so the algorithm here must stay bit-identical to the runtime's:

    address = sha256(seed_0 || ... || seed_n || bump || program_id || "ProgramDerivedAddress")

and an address is only usable when it is *not* a valid ed25519 point.
`find_program_address` walks bumps from 255 down to 1 and keeps the first
off-curve result.
"""

import logging
from typing import List, Sequence, Tuple

from solders.pubkey import Pubkey

from .constants import MAX_BUMP_SEED, MAX_SEED_LEN, MAX_SEEDS, PDA_MARKER
from .errors import AddressDerivationError, InvalidSeedsError, TooManySeedsError
from .utils import encode_u8, sha256

logger = logging.getLogger(__name__)


def normalize_seeds(seeds: Sequence[bytes]) -> List[bytes]:
    """Truncate each seed to MAX_SEED_LEN bytes.

    Over-long seeds are not an error: they are cut to their first 32 bytes
    and a warning is logged.
    """
    normalized = []
    for index, seed in enumerate(seeds):
        seed = bytes(seed)
        if len(seed) > MAX_SEED_LEN:
            logger.warning(
                f"Seed {index} is {len(seed)} bytes; truncated to {MAX_SEED_LEN}"
            )
            seed = seed[:MAX_SEED_LEN]
        normalized.append(seed)
    return normalized


def _hash_program_address(seeds: Sequence[bytes], program_id: Pubkey) -> Pubkey:
    return Pubkey.from_bytes(sha256(*seeds, bytes(program_id), PDA_MARKER))


def create_program_address(
    seeds: Sequence[bytes],
    bump: int,
    program_id: Pubkey,
) -> Pubkey:
    """Compute the address for an explicit bump seed.

    Raises:
        TooManySeedsError: If the seeds plus bump exceed MAX_SEEDS
        InvalidSeedsError: If the resulting address is on the curve
    """
    seeds = normalize_seeds(seeds)
    if len(seeds) + 1 > MAX_SEEDS:
        raise TooManySeedsError(len(seeds), MAX_SEEDS - 1)

    address = _hash_program_address([*seeds, encode_u8(bump)], program_id)
    if address.is_on_curve():
        raise InvalidSeedsError(bump)
    return address


def find_program_address(
    seeds: Sequence[bytes],
    program_id: Pubkey,
) -> Tuple[Pubkey, int]:
    """Find the canonical program address and bump for a seed set.

    Returns the (address, bump) pair for the highest bump in 255..1 whose
    address is off the curve.

    Raises:
        TooManySeedsError: If more than MAX_SEEDS - 1 seeds are given
        AddressDerivationError: If every bump yields an on-curve address
    """
    seeds = normalize_seeds(seeds)
    if len(seeds) + 1 > MAX_SEEDS:
        raise TooManySeedsError(len(seeds), MAX_SEEDS - 1)

    for bump in range(MAX_BUMP_SEED, 0, -1):
        address = _hash_program_address([*seeds, encode_u8(bump)], program_id)
        if not address.is_on_curve():
            return address, bump

    raise AddressDerivationError(str(program_id))
