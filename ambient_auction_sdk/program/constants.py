"""Constants for the Ambient auction program."""

from solders.pubkey import Pubkey

# ============================================================================
# PROGRAM IDS
# ============================================================================

PROGRAM_ID = Pubkey.from_string("Auction111111111111111111111111111111111111")
SYSTEM_PROGRAM_ID = Pubkey.from_string("11111111111111111111111111111111")
VOTE_PROGRAM_ID = Pubkey.from_string("Vote111111111111111111111111111111111111111")

# All-zero address marking an unused optional account slot
NULL_PUBKEY = Pubkey.default()

# ============================================================================
# PDA SEEDS
# ============================================================================

AUCTION_SEED = b"auction"
BID_SEED = b"bid"
REQUEST_BUNDLE_SEED = b"request_bundle"
BUNDLE_REGISTRY_SEED = b"bundle_registry"
JOB_REQUEST_SEED = b"job_request"
CONFIG_SEED = b"config"

# Runtime limits for program derived addresses
MAX_SEED_LEN = 32
MAX_SEEDS = 16
MAX_BUMP_SEED = 255
PDA_MARKER = b"ProgramDerivedAddress"

# ============================================================================
# INSTRUCTION DISCRIMINATORS
# ============================================================================

INSTRUCTION_REQUEST_JOB = 0
INSTRUCTION_PLACE_BID = 1
INSTRUCTION_REVEAL_BID = 2
INSTRUCTION_END_AUCTION = 3
INSTRUCTION_SUBMIT_JOB_OUTPUT = 4
INSTRUCTION_SUBMIT_VALIDATION = 5
INSTRUCTION_CLOSE_BID = 6
INSTRUCTION_CLOSE_REQUEST = 7
INSTRUCTION_CANCEL_BUNDLE = 8
INSTRUCTION_INIT_BUNDLE = 9
INSTRUCTION_APPEND_DATA = 10
INSTRUCTION_INIT_CONFIG = 11

# ============================================================================
# SIZES
# ============================================================================

PUBKEY_SIZE = 32
HASH_SIZE = 32
PRICE_HASH_SEED_SIZE = 32
JOB_REQUEST_SEED_SIZE = 32
IV_SIZE = 16
IP_ADDRESS_SIZE = 16
ENCRYPTION_KEY_SIZE = 32
TIER_SIZE = 8

# Serialized args sizes, discriminator included
REQUEST_JOB_ARGS_SIZE = 210
PLACE_BID_ARGS_SIZE = 116
REVEAL_BID_ARGS_SIZE = 41
END_AUCTION_ARGS_SIZE = 1
SUBMIT_JOB_OUTPUT_ARGS_SIZE = 57
SUBMIT_VALIDATION_ARGS_SIZE = 34
CLOSE_BID_ARGS_SIZE = 1
CLOSE_REQUEST_ARGS_SIZE = 25
CANCEL_BUNDLE_ARGS_SIZE = 73
INIT_BUNDLE_ARGS_SIZE = 49
APPEND_DATA_ARGS_SIZE = 57
INIT_CONFIG_ARGS_SIZE = 57

# ============================================================================
# BUNDLE CHAIN
# ============================================================================

# Links requested after the root bundle when the caller does not say
DEFAULT_ADDITIONAL_BUNDLES = 8
# Most links whose accounts still fit in one request_job instruction
MAX_ADDITIONAL_BUNDLES = 8
