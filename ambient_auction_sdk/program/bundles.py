"""Bundle chain planning.

Bundles form a hash chain: each bundle address is derived from the previous
one, and each bundle has exactly one auction derived from it. Nothing is
stored; the chain is recomputed from its root whenever it is needed.

    bundle_0 = root
    bundle_{i+1} = PDA["request_bundle", bundle_i]
    auction_i = PDA["auction", bundle_i]

The program reads the chain positionally, so the order returned here is
the order the accounts must appear in.
"""

import logging
from typing import List

from solders.instruction import AccountMeta
from solders.pubkey import Pubkey

from .constants import MAX_ADDITIONAL_BUNDLES, PROGRAM_ID
from .errors import ChainDepthError
from .pda import get_auction_pda, get_next_bundle_pda
from .types import BundleLink

logger = logging.getLogger(__name__)


def validate_chain_depth(depth: int, max_depth: int = MAX_ADDITIONAL_BUNDLES) -> None:
    """Validate that a bundle chain depth is within bounds."""
    if depth < 0 or depth > max_depth:
        raise ChainDepthError(depth, max_depth)


def plan_bundle_chain(
    root: Pubkey,
    depth: int,
    program_id: Pubkey = PROGRAM_ID,
) -> List[BundleLink]:
    """Derive `depth + 1` (bundle, auction) pairs starting at `root`.

    `depth` counts the links after the root; the root pair is always first.
    No upper bound is applied here; instruction builders check their own.
    """
    if depth < 0:
        raise ChainDepthError(depth, MAX_ADDITIONAL_BUNDLES)

    chain = []
    bundle = root
    for i in range(depth + 1):
        if i > 0:
            bundle, _ = get_next_bundle_pda(bundle, program_id)
        auction, _ = get_auction_pda(bundle, program_id)
        chain.append(BundleLink(bundle=bundle, auction=auction))

    logger.debug(f"Planned bundle chain from {root}: {len(chain)} links")
    return chain


def chain_tail(chain: List[BundleLink], program_id: Pubkey = PROGRAM_ID) -> Pubkey:
    """Derive the bundle that would follow the last link of a chain."""
    if not chain:
        raise ValueError("Bundle chain is empty")
    tail, _ = get_next_bundle_pda(chain[-1].bundle, program_id)
    return tail


def bundle_chain_account_metas(chain: List[BundleLink]) -> List[AccountMeta]:
    """Flatten a chain into writable metas: bundle_0, auction_0, bundle_1, ..."""
    accounts = []
    for link in chain:
        accounts.append(AccountMeta(pubkey=link.bundle, is_signer=False, is_writable=True))
        accounts.append(AccountMeta(pubkey=link.auction, is_signer=False, is_writable=True))
    return accounts
