"""On-chain program interaction module for the Ambient auction.

This module provides address derivation, argument encoding and instruction
builders for the auction program on Solana.
"""

from .bundles import (
    bundle_chain_account_metas,
    chain_tail,
    plan_bundle_chain,
    validate_chain_depth,
)
from .client import AmbientAuctionClient
from .codec import (
    decode_ip_address,
    encode_ip_address,
    pad_seed,
    serialize_append_data_args,
    serialize_cancel_bundle_args,
    serialize_close_bid_args,
    serialize_close_request_args,
    serialize_end_auction_args,
    serialize_init_bundle_args,
    serialize_init_config_args,
    serialize_place_bid_args,
    serialize_request_job_args,
    serialize_reveal_bid_args,
    serialize_submit_job_output_args,
    serialize_submit_validation_args,
)
from .commitment import generate_price_hash_seed, hash_bid_price, verify_bid_reveal
from .config import SdkConfig
from .constants import (
    APPEND_DATA_ARGS_SIZE,
    AUCTION_SEED,
    BID_SEED,
    BUNDLE_REGISTRY_SEED,
    CANCEL_BUNDLE_ARGS_SIZE,
    CLOSE_BID_ARGS_SIZE,
    CLOSE_REQUEST_ARGS_SIZE,
    CONFIG_SEED,
    DEFAULT_ADDITIONAL_BUNDLES,
    END_AUCTION_ARGS_SIZE,
    INIT_BUNDLE_ARGS_SIZE,
    INIT_CONFIG_ARGS_SIZE,
    JOB_REQUEST_SEED,
    MAX_ADDITIONAL_BUNDLES,
    MAX_SEED_LEN,
    MAX_SEEDS,
    NULL_PUBKEY,
    PLACE_BID_ARGS_SIZE,
    PROGRAM_ID,
    REQUEST_BUNDLE_SEED,
    REQUEST_JOB_ARGS_SIZE,
    REVEAL_BID_ARGS_SIZE,
    SUBMIT_JOB_OUTPUT_ARGS_SIZE,
    SUBMIT_VALIDATION_ARGS_SIZE,
    SYSTEM_PROGRAM_ID,
    VOTE_PROGRAM_ID,
)
from .derivation import create_program_address, find_program_address, normalize_seeds
from .errors import (
    AddressDerivationError,
    AmbientAuctionError,
    ChainDepthError,
    ConfigError,
    GlobalConfigDisabledError,
    InvalidArgumentError,
    InvalidSeedsError,
    InvalidTierError,
    TooManySeedsError,
)
from .instructions import (
    assemble_instruction,
    build_append_data_instruction,
    build_cancel_bundle_instruction,
    build_close_bid_instruction,
    build_close_request_instruction,
    build_end_auction_instruction,
    build_init_bundle_instruction,
    build_init_config_instruction,
    build_place_bid_instruction,
    build_request_job_instruction,
    build_reveal_bid_instruction,
    build_submit_job_output_instruction,
    build_submit_validation_instruction,
)
from .pda import (
    get_auction_pda,
    get_bid_pda,
    get_config_pda,
    get_job_request_pda,
    get_next_bundle_pda,
    get_registry_pda,
    get_root_bundle_pda,
)
from .tiers import decode_tier, encode_tier
from .types import (
    AppendDataArgs,
    AppendDataParams,
    BundleLink,
    CancelBundleArgs,
    CancelBundleParams,
    CloseRequestArgs,
    CloseRequestParams,
    InitBundleArgs,
    InitConfigArgs,
    NodeEndpoint,
    PlaceBidArgs,
    PlaceBidParams,
    RequestJobArgs,
    RequestJobParams,
    RequestTier,
    RevealBidArgs,
    SubmitJobOutputArgs,
    SubmitValidationArgs,
)

__all__ = [
    # Client
    "AmbientAuctionClient",
    "SdkConfig",
    # Address Derivation
    "find_program_address",
    "create_program_address",
    "normalize_seeds",
    # PDA Functions
    "get_auction_pda",
    "get_bid_pda",
    "get_next_bundle_pda",
    "get_root_bundle_pda",
    "get_registry_pda",
    "get_job_request_pda",
    "get_config_pda",
    # Tiers
    "encode_tier",
    "decode_tier",
    # Bundle Chain
    "plan_bundle_chain",
    "chain_tail",
    "bundle_chain_account_metas",
    "validate_chain_depth",
    # Commitments
    "generate_price_hash_seed",
    "hash_bid_price",
    "verify_bid_reveal",
    # Codec
    "pad_seed",
    "encode_ip_address",
    "decode_ip_address",
    "serialize_append_data_args",
    "serialize_request_job_args",
    "serialize_place_bid_args",
    "serialize_reveal_bid_args",
    "serialize_end_auction_args",
    "serialize_submit_job_output_args",
    "serialize_submit_validation_args",
    "serialize_close_bid_args",
    "serialize_close_request_args",
    "serialize_cancel_bundle_args",
    "serialize_init_bundle_args",
    "serialize_init_config_args",
    # Instruction Builders
    "assemble_instruction",
    "build_append_data_instruction",
    "build_request_job_instruction",
    "build_place_bid_instruction",
    "build_reveal_bid_instruction",
    "build_submit_job_output_instruction",
    "build_end_auction_instruction",
    "build_cancel_bundle_instruction",
    "build_close_bid_instruction",
    "build_close_request_instruction",
    "build_submit_validation_instruction",
    "build_init_bundle_instruction",
    "build_init_config_instruction",
    # Types
    "RequestTier",
    "BundleLink",
    "NodeEndpoint",
    "AppendDataArgs",
    "RequestJobArgs",
    "PlaceBidArgs",
    "RevealBidArgs",
    "SubmitJobOutputArgs",
    "SubmitValidationArgs",
    "CancelBundleArgs",
    "CloseRequestArgs",
    "InitBundleArgs",
    "InitConfigArgs",
    "AppendDataParams",
    "RequestJobParams",
    "PlaceBidParams",
    "CancelBundleParams",
    "CloseRequestParams",
    # Errors
    "AmbientAuctionError",
    "AddressDerivationError",
    "InvalidSeedsError",
    "TooManySeedsError",
    "InvalidTierError",
    "InvalidArgumentError",
    "ChainDepthError",
    "ConfigError",
    "GlobalConfigDisabledError",
    # Constants
    "PROGRAM_ID",
    "SYSTEM_PROGRAM_ID",
    "VOTE_PROGRAM_ID",
    "NULL_PUBKEY",
    "AUCTION_SEED",
    "BID_SEED",
    "REQUEST_BUNDLE_SEED",
    "BUNDLE_REGISTRY_SEED",
    "JOB_REQUEST_SEED",
    "CONFIG_SEED",
    "MAX_SEED_LEN",
    "MAX_SEEDS",
    "DEFAULT_ADDITIONAL_BUNDLES",
    "MAX_ADDITIONAL_BUNDLES",
    "APPEND_DATA_ARGS_SIZE",
    "REQUEST_JOB_ARGS_SIZE",
    "PLACE_BID_ARGS_SIZE",
    "REVEAL_BID_ARGS_SIZE",
    "END_AUCTION_ARGS_SIZE",
    "SUBMIT_JOB_OUTPUT_ARGS_SIZE",
    "SUBMIT_VALIDATION_ARGS_SIZE",
    "CLOSE_BID_ARGS_SIZE",
    "CLOSE_REQUEST_ARGS_SIZE",
    "CANCEL_BUNDLE_ARGS_SIZE",
    "INIT_BUNDLE_ARGS_SIZE",
    "INIT_CONFIG_ARGS_SIZE",
]
