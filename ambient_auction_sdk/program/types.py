"""Type definitions for the Ambient auction program module."""

from dataclasses import dataclass
from enum import IntEnum
from ipaddress import IPv4Address, IPv6Address
from typing import Optional, Union

from solders.pubkey import Pubkey

IpAddress = Union[str, IPv4Address, IPv6Address]


class RequestTier(IntEnum):
    """Discrete bucket for a job's context length or expiry duration.

    The ordinal is part of the wire format and of PDA seeds, so existing
    values must never be renumbered.
    """

    SHORT = 0
    MEDIUM = 1
    LONG = 2
    EXTENDED = 3


@dataclass(frozen=True)
class BundleLink:
    """One pre-provisioned (bundle, auction) pair in a bundle chain."""

    bundle: Pubkey
    auction: Pubkey


@dataclass(frozen=True)
class NodeEndpoint:
    """Network endpoint a bidding node serves jobs from."""

    ip: IpAddress
    port: int


# ============================================================================
# INSTRUCTION ARGS
# ============================================================================


@dataclass
class AppendDataArgs:
    """Header of an append_data payload; the data chunk follows it."""

    offset: int
    seed: bytes  # zero padded to 32 bytes
    seed_len: int
    decompressed_data_length: Optional[int] = None  # None when uncompressed


@dataclass
class RequestJobArgs:
    """Arguments of the request_job instruction."""

    max_price_per_output_token: int
    authority: Pubkey
    input_hash: bytes
    job_request_seed: bytes
    input_tokens: int
    max_output_tokens: int
    context_length_tier: RequestTier
    expiry_duration_tier: RequestTier
    new_bundle_lamports: int
    new_auction_lamports: int
    bump: int
    input_hash_iv: Optional[bytes] = None
    input_data_account: Optional[Pubkey] = None


@dataclass
class PlaceBidArgs:
    """Arguments of the place_bid instruction."""

    price_hash: bytes
    authority: Pubkey
    endpoint: NodeEndpoint
    node_encryption_publickey: Optional[bytes] = None


@dataclass
class RevealBidArgs:
    """Price and secret disclosed when revealing a sealed bid."""

    price_per_output_token: int
    price_hash_seed: bytes


@dataclass
class SubmitJobOutputArgs:
    """Result summary submitted by the winning provider."""

    output_tokens: int
    output_hash: bytes
    output_hash_iv: Optional[bytes] = None


@dataclass
class SubmitValidationArgs:
    """A validator's attestation about a submitted job output."""

    output_hash: bytes
    is_valid: bool


@dataclass
class CancelBundleArgs:
    """Arguments of the cancel_bundle instruction."""

    parent_bundle_key: Pubkey
    bundle_bump: int
    context_length_tier: RequestTier
    expiry_duration_tier: RequestTier
    child_bundle_bump: int
    bundle_lamports: int


@dataclass
class CloseRequestArgs:
    """Arguments of the close_request instruction."""

    new_bundle_lamports: int
    new_auction_lamports: int
    new_bundle_bump: int


@dataclass
class InitBundleArgs:
    """Arguments of the init_bundle instruction."""

    context_length_tier: RequestTier
    expiry_duration_tier: RequestTier
    bundle_lamports: int
    bundle_bump: int
    registry_bump: int
    registry_lamports: int


@dataclass
class InitConfigArgs:
    """Global protocol parameters stored in the config account."""

    authority: Pubkey
    auction_duration_slots: int
    reveal_duration_slots: int
    min_bid_price: int


# ============================================================================
# CLIENT PARAMS
# ============================================================================


@dataclass
class AppendDataParams:
    """Parameters for appending a chunk of off-band data."""

    payer: Pubkey
    data_account: Pubkey
    seed: Union[str, bytes]  # truncated to 32 bytes
    offset: int
    account_data: bytes
    decompressed_data_length: Optional[int] = None


@dataclass
class RequestJobParams:
    """Parameters for opening a job request."""

    authority: Pubkey
    bundle_key: Pubkey
    input_hash: bytes
    job_request_seed: bytes
    input_tokens: int
    max_output_tokens: int
    max_price_per_output_token: int
    new_bundle_lamports: int
    new_auction_lamports: int
    context_length_tier: RequestTier
    expiry_duration_tier: RequestTier
    input_hash_iv: Optional[bytes] = None
    input_data_account: Optional[Pubkey] = None
    additional_bundles: Optional[int] = None  # None uses the configured default


@dataclass
class PlaceBidParams:
    """Parameters for placing a sealed bid."""

    authority: Pubkey
    auction: Pubkey
    price_per_output_token: int
    price_hash_seed: bytes
    endpoint: NodeEndpoint
    node_encryption_publickey: Optional[bytes] = None


@dataclass
class CancelBundleParams:
    """Parameters for cancelling a bundle and its pre-provisioned child."""

    signer: Pubkey
    parent_bundle_key: Pubkey
    bundle_key: Pubkey
    bundle_bump: int
    context_length_tier: RequestTier
    expiry_duration_tier: RequestTier
    bundle_lamports: int


@dataclass
class CloseRequestParams:
    """Parameters for closing a fulfilled job request."""

    request_authority: Pubkey
    job_request_key: Pubkey
    bundle_payer: Pubkey
    bundle_key: Pubkey
    auction_key: Pubkey
    auction_payer: Pubkey
    context_length_tier: RequestTier
    expiry_duration_tier: RequestTier
    new_bundle_lamports: int
    new_auction_lamports: int
