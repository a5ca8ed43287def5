"""PDA (Program Derived Address) derivation functions for the Ambient auction SDK."""

from typing import Tuple, Union

from solders.pubkey import Pubkey

from .constants import (
    AUCTION_SEED,
    BID_SEED,
    BUNDLE_REGISTRY_SEED,
    CONFIG_SEED,
    JOB_REQUEST_SEED,
    PROGRAM_ID,
    REQUEST_BUNDLE_SEED,
)
from .derivation import find_program_address
from .tiers import encode_tier
from .types import RequestTier

Tier = Union[RequestTier, int]


def get_auction_pda(
    bundle: Pubkey,
    program_id: Pubkey = PROGRAM_ID,
) -> Tuple[Pubkey, int]:
    """Derive the auction PDA for a bundle.

    Seeds: ["auction", bundle]
    """
    return find_program_address([AUCTION_SEED, bytes(bundle)], program_id)


def get_bid_pda(
    auction: Pubkey,
    bidder: Pubkey,
    program_id: Pubkey = PROGRAM_ID,
) -> Tuple[Pubkey, int]:
    """Derive the bid PDA for a bidder in an auction.

    Seeds: ["bid", auction, bidder]
    """
    return find_program_address(
        [BID_SEED, bytes(auction), bytes(bidder)],
        program_id,
    )


def get_next_bundle_pda(
    bundle: Pubkey,
    program_id: Pubkey = PROGRAM_ID,
) -> Tuple[Pubkey, int]:
    """Derive the bundle that follows `bundle` in its chain.

    Seeds: ["request_bundle", bundle]
    """
    return find_program_address([REQUEST_BUNDLE_SEED, bytes(bundle)], program_id)


def get_root_bundle_pda(
    context_length_tier: Tier,
    expiry_duration_tier: Tier,
    program_id: Pubkey = PROGRAM_ID,
) -> Tuple[Pubkey, int]:
    """Derive the first bundle of a tier pair.

    Seeds: ["request_bundle", context_length_tier (u64 LE), expiry_duration_tier (u64 LE)]
    """
    return find_program_address(
        [
            REQUEST_BUNDLE_SEED,
            encode_tier(context_length_tier),
            encode_tier(expiry_duration_tier),
        ],
        program_id,
    )


def get_registry_pda(
    context_length_tier: Tier,
    expiry_duration_tier: Tier,
    program_id: Pubkey = PROGRAM_ID,
) -> Tuple[Pubkey, int]:
    """Derive the bundle registry PDA for a tier pair.

    Seeds: ["bundle_registry", context_length_tier (u64 LE), expiry_duration_tier (u64 LE)]
    """
    return find_program_address(
        [
            BUNDLE_REGISTRY_SEED,
            encode_tier(context_length_tier),
            encode_tier(expiry_duration_tier),
        ],
        program_id,
    )


def get_job_request_pda(
    context_length_tier: Tier,
    expiry_duration_tier: Tier,
    authority: Pubkey,
    job_request_seed: bytes,
    program_id: Pubkey = PROGRAM_ID,
) -> Tuple[Pubkey, int]:
    """Derive the job request PDA.

    Seeds: ["job_request", context_length_tier (u64 LE),
            expiry_duration_tier (u64 LE), authority, job_request_seed]
    """
    return find_program_address(
        [
            JOB_REQUEST_SEED,
            encode_tier(context_length_tier),
            encode_tier(expiry_duration_tier),
            bytes(authority),
            job_request_seed,
        ],
        program_id,
    )


def get_config_pda(program_id: Pubkey = PROGRAM_ID) -> Tuple[Pubkey, int]:
    """Derive the global config PDA.

    Seeds: ["config"]
    """
    return find_program_address([CONFIG_SEED], program_id)
