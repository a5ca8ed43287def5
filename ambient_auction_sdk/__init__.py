"""Ambient Auction SDK - Python SDK for the Ambient compute-job auction on Solana.

The `program` module derives the auction program's addresses and builds its
instructions. Signing and submitting transactions is left to the caller.

Example:
    from ambient_auction_sdk import AmbientAuctionClient, RequestTier

    # Or import from the program module
    from ambient_auction_sdk.program import build_request_job_instruction
"""

__version__ = "0.1.0"

# ============================================================================
# MODULE IMPORTS
# ============================================================================

from . import program

# ============================================================================
# CONVENIENCE RE-EXPORTS FROM PROGRAM MODULE
# ============================================================================

from .program import (
    AmbientAuctionClient,
    SdkConfig,
    # Address Derivation
    find_program_address,
    create_program_address,
    # PDA Functions
    get_auction_pda,
    get_bid_pda,
    get_next_bundle_pda,
    get_root_bundle_pda,
    get_registry_pda,
    get_job_request_pda,
    get_config_pda,
    # Tiers
    encode_tier,
    decode_tier,
    # Bundle Chain
    plan_bundle_chain,
    chain_tail,
    # Commitments
    generate_price_hash_seed,
    hash_bid_price,
    verify_bid_reveal,
    # Instruction Builders
    assemble_instruction,
    build_append_data_instruction,
    build_request_job_instruction,
    build_place_bid_instruction,
    build_reveal_bid_instruction,
    build_submit_job_output_instruction,
    build_end_auction_instruction,
    build_cancel_bundle_instruction,
    build_close_bid_instruction,
    build_close_request_instruction,
    build_submit_validation_instruction,
    build_init_bundle_instruction,
    build_init_config_instruction,
    # Types
    RequestTier,
    BundleLink,
    NodeEndpoint,
    RevealBidArgs,
    SubmitJobOutputArgs,
    SubmitValidationArgs,
    InitConfigArgs,
    AppendDataParams,
    RequestJobParams,
    PlaceBidParams,
    CancelBundleParams,
    CloseRequestParams,
    # Errors
    AmbientAuctionError,
    AddressDerivationError,
    InvalidSeedsError,
    TooManySeedsError,
    InvalidTierError,
    InvalidArgumentError,
    ChainDepthError,
    ConfigError,
    GlobalConfigDisabledError,
    # Constants
    PROGRAM_ID,
    SYSTEM_PROGRAM_ID,
    VOTE_PROGRAM_ID,
    NULL_PUBKEY,
    DEFAULT_ADDITIONAL_BUNDLES,
    MAX_ADDITIONAL_BUNDLES,
)

__all__ = [
    # Version
    "__version__",
    # Modules
    "program",
    # Client
    "AmbientAuctionClient",
    "SdkConfig",
    # Address Derivation
    "find_program_address",
    "create_program_address",
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
    # Commitments
    "generate_price_hash_seed",
    "hash_bid_price",
    "verify_bid_reveal",
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
    "RevealBidArgs",
    "SubmitJobOutputArgs",
    "SubmitValidationArgs",
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
    "DEFAULT_ADDITIONAL_BUNDLES",
    "MAX_ADDITIONAL_BUNDLES",
]
