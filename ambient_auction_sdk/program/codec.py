"""Instruction data serialization for the Ambient auction SDK.

Every payload is a 1-byte discriminator followed by packed little-endian
fields. Optional fields follow one of three conventions, fixed per field:

- optional 32-byte key: presence byte (0 or 1) then 32 bytes, zeroed when absent
- optional IV: 16 zero bytes when absent, no presence byte
- optional non-zero u64: 0 when absent

There is no versioning; the program decodes these layouts byte for byte.
"""

import logging
from ipaddress import IPv4Address, IPv6Address, ip_address
from typing import Optional, Tuple, Union

from solders.pubkey import Pubkey

from .constants import (
    ENCRYPTION_KEY_SIZE,
    HASH_SIZE,
    INSTRUCTION_APPEND_DATA,
    INSTRUCTION_CANCEL_BUNDLE,
    INSTRUCTION_CLOSE_BID,
    INSTRUCTION_CLOSE_REQUEST,
    INSTRUCTION_END_AUCTION,
    INSTRUCTION_INIT_BUNDLE,
    INSTRUCTION_INIT_CONFIG,
    INSTRUCTION_PLACE_BID,
    INSTRUCTION_REQUEST_JOB,
    INSTRUCTION_REVEAL_BID,
    INSTRUCTION_SUBMIT_JOB_OUTPUT,
    INSTRUCTION_SUBMIT_VALIDATION,
    IP_ADDRESS_SIZE,
    IV_SIZE,
    JOB_REQUEST_SEED_SIZE,
    MAX_SEED_LEN,
    PRICE_HASH_SEED_SIZE,
    PUBKEY_SIZE,
)
from .errors import InvalidArgumentError
from .tiers import encode_tier
from .types import (
    AppendDataArgs,
    CancelBundleArgs,
    CloseRequestArgs,
    InitBundleArgs,
    InitConfigArgs,
    IpAddress,
    PlaceBidArgs,
    RequestJobArgs,
    RevealBidArgs,
    SubmitJobOutputArgs,
    SubmitValidationArgs,
)
from .utils import encode_bool, encode_fixed_bytes, encode_u16, encode_u64, encode_u8

logger = logging.getLogger(__name__)


# ============================================================================
# FIELD ENCODERS
# ============================================================================


def pad_seed(seed: Union[str, bytes]) -> Tuple[bytes, int]:
    """Zero pad a data-account seed to 32 bytes.

    Returns the padded seed and the number of meaningful bytes. Seeds
    longer than 32 bytes are truncated with a warning.
    """
    raw = seed.encode("utf-8") if isinstance(seed, str) else bytes(seed)
    if len(raw) > MAX_SEED_LEN:
        logger.warning(f"Seed too long ({len(raw)} bytes); truncated to {MAX_SEED_LEN}")
        raw = raw[:MAX_SEED_LEN]
    return raw + b"\x00" * (MAX_SEED_LEN - len(raw)), len(raw)


def encode_option_key(
    value: Optional[Union[Pubkey, bytes]], name: str, size: int = PUBKEY_SIZE
) -> bytes:
    """Encode an optional fixed-size key as presence byte + key, zeroed when absent."""
    if value is None:
        return encode_u8(0) + bytes(size)
    return encode_u8(1) + encode_fixed_bytes(bytes(value), size, name)


def encode_iv_or_default(value: Optional[bytes], name: str) -> bytes:
    """Encode an optional 16-byte IV, zero filled when absent."""
    if value is None:
        return bytes(IV_SIZE)
    return encode_fixed_bytes(value, IV_SIZE, name)


def encode_nonzero_u64(value: Optional[int], name: str) -> bytes:
    """Encode an optional non-zero u64, where 0 stands for absent."""
    if value is None:
        return encode_u64(0)
    if value == 0:
        raise InvalidArgumentError(name, "must be non-zero when provided")
    return encode_u64(value)


def encode_ip_address(ip: IpAddress) -> bytes:
    """Encode an IP address as 16 bytes; IPv4 is stored IPv4-mapped."""
    address = ip if isinstance(ip, (IPv4Address, IPv6Address)) else ip_address(ip)
    if isinstance(address, IPv4Address):
        address = IPv6Address(f"::ffff:{address}")
    return address.packed


def decode_ip_address(data: bytes) -> Union[IPv4Address, IPv6Address]:
    """Decode a 16-byte IP address, unmapping IPv4-mapped addresses."""
    address = IPv6Address(encode_fixed_bytes(data, IP_ADDRESS_SIZE, "ip"))
    return address.ipv4_mapped or address


# ============================================================================
# INSTRUCTION ARGS
# ============================================================================


def serialize_append_data_args(args: AppendDataArgs) -> bytes:
    """Serialize append_data args (the data chunk is appended by the builder).

    Layout (57 bytes):
    - [0]: discriminator
    - [1..9]: offset (u64)
    - [9..41]: seed (32, zero padded)
    - [41..49]: seed_len (u64)
    - [49..57]: decompressed_data_length (u64, 0 = uncompressed)
    """
    data = bytearray()
    data.append(INSTRUCTION_APPEND_DATA)
    data.extend(encode_u64(args.offset))
    data.extend(encode_fixed_bytes(args.seed, MAX_SEED_LEN, "seed"))
    data.extend(encode_u64(args.seed_len))
    data.extend(encode_nonzero_u64(args.decompressed_data_length, "decompressed_data_length"))
    return bytes(data)


def serialize_request_job_args(args: RequestJobArgs) -> bytes:
    """Serialize request_job args.

    Layout (210 bytes):
    - [0]: discriminator
    - [1..9]: max_price_per_output_token (u64)
    - [9..41]: authority
    - [41..73]: input_hash
    - [73..89]: input_hash_iv (zeros if absent)
    - [89..121]: job_request_seed
    - [121..129]: input_tokens (u64)
    - [129..137]: max_output_tokens (u64)
    - [137..145]: context_length_tier (u64)
    - [145..153]: expiry_duration_tier (u64)
    - [153..161]: new_bundle_lamports (u64)
    - [161..169]: new_auction_lamports (u64)
    - [169..177]: bump (u64)
    - [177]: input_data_account present flag
    - [178..210]: input_data_account (zeros if absent)
    """
    data = bytearray()
    data.append(INSTRUCTION_REQUEST_JOB)
    data.extend(encode_u64(args.max_price_per_output_token))
    data.extend(bytes(args.authority))
    data.extend(encode_fixed_bytes(args.input_hash, HASH_SIZE, "input_hash"))
    data.extend(encode_iv_or_default(args.input_hash_iv, "input_hash_iv"))
    data.extend(
        encode_fixed_bytes(args.job_request_seed, JOB_REQUEST_SEED_SIZE, "job_request_seed")
    )
    data.extend(encode_u64(args.input_tokens))
    data.extend(encode_u64(args.max_output_tokens))
    data.extend(encode_tier(args.context_length_tier))
    data.extend(encode_tier(args.expiry_duration_tier))
    data.extend(encode_u64(args.new_bundle_lamports))
    data.extend(encode_u64(args.new_auction_lamports))
    data.extend(encode_u64(args.bump))
    data.extend(encode_option_key(args.input_data_account, "input_data_account"))
    return bytes(data)


def serialize_place_bid_args(args: PlaceBidArgs) -> bytes:
    """Serialize place_bid args.

    Layout (116 bytes):
    - [0]: discriminator
    - [1..33]: price_hash
    - [33..65]: authority
    - [65..81]: ip (IPv6, IPv4-mapped for IPv4)
    - [81..83]: port (u16)
    - [83]: node_encryption_publickey present flag
    - [84..116]: node_encryption_publickey (zeros if absent)
    """
    data = bytearray()
    data.append(INSTRUCTION_PLACE_BID)
    data.extend(encode_fixed_bytes(args.price_hash, HASH_SIZE, "price_hash"))
    data.extend(bytes(args.authority))
    data.extend(encode_ip_address(args.endpoint.ip))
    data.extend(encode_u16(args.endpoint.port))
    data.extend(
        encode_option_key(
            args.node_encryption_publickey, "node_encryption_publickey", ENCRYPTION_KEY_SIZE
        )
    )
    return bytes(data)


def serialize_reveal_bid_args(args: RevealBidArgs) -> bytes:
    """Serialize reveal_bid args.

    Layout (41 bytes): discriminator | price_per_output_token (u64) | price_hash_seed (32)
    """
    data = bytearray()
    data.append(INSTRUCTION_REVEAL_BID)
    data.extend(encode_u64(args.price_per_output_token))
    data.extend(
        encode_fixed_bytes(args.price_hash_seed, PRICE_HASH_SEED_SIZE, "price_hash_seed")
    )
    return bytes(data)


def serialize_end_auction_args() -> bytes:
    """end_auction carries no arguments."""
    return bytes([INSTRUCTION_END_AUCTION])


def serialize_submit_job_output_args(args: SubmitJobOutputArgs) -> bytes:
    """Serialize submit_job_output args.

    Layout (57 bytes): discriminator | output_tokens (u64) | output_hash (32) |
    output_hash_iv (16, zeros if absent)
    """
    data = bytearray()
    data.append(INSTRUCTION_SUBMIT_JOB_OUTPUT)
    data.extend(encode_u64(args.output_tokens))
    data.extend(encode_fixed_bytes(args.output_hash, HASH_SIZE, "output_hash"))
    data.extend(encode_iv_or_default(args.output_hash_iv, "output_hash_iv"))
    return bytes(data)


def serialize_submit_validation_args(args: SubmitValidationArgs) -> bytes:
    """Serialize submit_validation args.

    Layout (34 bytes): discriminator | output_hash (32) | is_valid (u8)
    """
    data = bytearray()
    data.append(INSTRUCTION_SUBMIT_VALIDATION)
    data.extend(encode_fixed_bytes(args.output_hash, HASH_SIZE, "output_hash"))
    data.extend(encode_bool(args.is_valid))
    return bytes(data)


def serialize_close_bid_args() -> bytes:
    """close_bid carries no arguments."""
    return bytes([INSTRUCTION_CLOSE_BID])


def serialize_close_request_args(args: CloseRequestArgs) -> bytes:
    """Serialize close_request args.

    Layout (25 bytes): discriminator | new_bundle_lamports (u64) |
    new_auction_lamports (u64) | new_bundle_bump (u64)
    """
    data = bytearray()
    data.append(INSTRUCTION_CLOSE_REQUEST)
    data.extend(encode_u64(args.new_bundle_lamports))
    data.extend(encode_u64(args.new_auction_lamports))
    data.extend(encode_u64(args.new_bundle_bump))
    return bytes(data)


def serialize_cancel_bundle_args(args: CancelBundleArgs) -> bytes:
    """Serialize cancel_bundle args.

    Layout (73 bytes):
    - [0]: discriminator
    - [1..33]: parent_bundle_key
    - [33..41]: bundle_bump (u64)
    - [41..49]: context_length_tier (u64)
    - [49..57]: expiry_duration_tier (u64)
    - [57..65]: child_bundle_bump (u64)
    - [65..73]: bundle_lamports (u64)
    """
    data = bytearray()
    data.append(INSTRUCTION_CANCEL_BUNDLE)
    data.extend(bytes(args.parent_bundle_key))
    data.extend(encode_u64(args.bundle_bump))
    data.extend(encode_tier(args.context_length_tier))
    data.extend(encode_tier(args.expiry_duration_tier))
    data.extend(encode_u64(args.child_bundle_bump))
    data.extend(encode_u64(args.bundle_lamports))
    return bytes(data)


def serialize_init_bundle_args(args: InitBundleArgs) -> bytes:
    """Serialize init_bundle args.

    Layout (49 bytes): discriminator | context_length_tier | expiry_duration_tier |
    bundle_lamports | bundle_bump | registry_bump | registry_lamports (all u64)
    """
    data = bytearray()
    data.append(INSTRUCTION_INIT_BUNDLE)
    data.extend(encode_tier(args.context_length_tier))
    data.extend(encode_tier(args.expiry_duration_tier))
    data.extend(encode_u64(args.bundle_lamports))
    data.extend(encode_u64(args.bundle_bump))
    data.extend(encode_u64(args.registry_bump))
    data.extend(encode_u64(args.registry_lamports))
    return bytes(data)


def serialize_init_config_args(args: InitConfigArgs) -> bytes:
    """Serialize init_config args.

    Layout (57 bytes): discriminator | authority (32) | auction_duration_slots |
    reveal_duration_slots | min_bid_price (all u64)
    """
    data = bytearray()
    data.append(INSTRUCTION_INIT_CONFIG)
    data.extend(bytes(args.authority))
    data.extend(encode_u64(args.auction_duration_slots))
    data.extend(encode_u64(args.reveal_duration_slots))
    data.extend(encode_u64(args.min_bid_price))
    return bytes(data)
