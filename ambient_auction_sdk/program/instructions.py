"""Instruction builders for the Ambient auction SDK.

This module provides functions to build all auction program instructions.
Account order is part of each instruction's schema: slots are never
reordered or dropped, and an absent optional account is passed as
NULL_PUBKEY.
"""

import logging
from typing import Optional, Sequence, Union

from solders.instruction import AccountMeta, Instruction
from solders.pubkey import Pubkey

from .bundles import bundle_chain_account_metas, chain_tail, plan_bundle_chain, validate_chain_depth
from .codec import (
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
from .commitment import hash_bid_price
from .constants import (
    DEFAULT_ADDITIONAL_BUNDLES,
    NULL_PUBKEY,
    PROGRAM_ID,
    SYSTEM_PROGRAM_ID,
    VOTE_PROGRAM_ID,
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
from .types import (
    AppendDataArgs,
    CancelBundleArgs,
    CloseRequestArgs,
    CloseRequestParams,
    InitBundleArgs,
    InitConfigArgs,
    NodeEndpoint,
    PlaceBidArgs,
    RequestJobArgs,
    RequestTier,
    RevealBidArgs,
    SubmitJobOutputArgs,
    SubmitValidationArgs,
)

logger = logging.getLogger(__name__)


def assemble_instruction(
    program_id: Pubkey,
    accounts: Sequence[AccountMeta],
    data: bytes,
) -> Instruction:
    """Combine a program id, ordered account metas and payload.

    No schema checks happen here; each builder owns its account order.
    """
    return Instruction(program_id=program_id, accounts=list(accounts), data=bytes(data))


def build_append_data_instruction(
    payer: Pubkey,
    data_account: Pubkey,
    seed: Union[str, bytes],
    offset: int,
    account_data: bytes,
    decompressed_data_length: Optional[int] = None,
    program_id: Pubkey = PROGRAM_ID,
) -> Instruction:
    """Build the append_data instruction.

    Writes `account_data` at `offset` in a data account. Seeds longer than
    32 bytes are truncated. Pass `decompressed_data_length` only when the
    data is compressed.

    Accounts:
    0. data_authority (signer, writable)
    1. data_account (writable)
    2. system_program

    Data: [10, offset, seed (32), seed_len, decompressed_len] + account_data
    """
    padded_seed, seed_len = pad_seed(seed)

    data = bytearray(
        serialize_append_data_args(
            AppendDataArgs(
                offset=offset,
                seed=padded_seed,
                seed_len=seed_len,
                decompressed_data_length=decompressed_data_length,
            )
        )
    )
    data.extend(account_data)

    accounts = [
        AccountMeta(pubkey=payer, is_signer=True, is_writable=True),
        AccountMeta(pubkey=data_account, is_signer=False, is_writable=True),
        AccountMeta(pubkey=SYSTEM_PROGRAM_ID, is_signer=False, is_writable=False),
    ]

    return assemble_instruction(program_id, accounts, bytes(data))


def build_request_job_instruction(
    authority: Pubkey,
    bundle_key: Pubkey,
    input_hash: bytes,
    job_request_seed: bytes,
    input_tokens: int,
    max_output_tokens: int,
    max_price_per_output_token: int,
    new_bundle_lamports: int,
    new_auction_lamports: int,
    context_length_tier: RequestTier,
    expiry_duration_tier: RequestTier,
    input_hash_iv: Optional[bytes] = None,
    input_data_account: Optional[Pubkey] = None,
    additional_bundles: Optional[int] = None,
    global_config: bool = False,
    program_id: Pubkey = PROGRAM_ID,
) -> Instruction:
    """Build the request_job instruction.

    Opens a job request against `bundle_key` and pre-provisions the bundle
    chain after it. `additional_bundles` is the number of links after the
    root (default 8, at most MAX_ADDITIONAL_BUNDLES).

    Accounts:
    0. payer (signer, writable)
    1. job_request (writable)
    2. registry (writable)
    3. input_data (writable, NULL_PUBKEY if absent)
    4. system_program
    [5. config (writable), only with global_config]
    Then (bundle, auction) pairs for the chain (writable), root first
    Last: the bundle after the chain (writable)
    """
    depth = DEFAULT_ADDITIONAL_BUNDLES if additional_bundles is None else additional_bundles
    validate_chain_depth(depth)

    job_request, bump = get_job_request_pda(
        context_length_tier, expiry_duration_tier, authority, job_request_seed, program_id
    )
    registry, _ = get_registry_pda(context_length_tier, expiry_duration_tier, program_id)
    chain = plan_bundle_chain(bundle_key, depth, program_id)
    last_bundle = chain_tail(chain, program_id)

    accounts = [
        AccountMeta(pubkey=authority, is_signer=True, is_writable=True),
        AccountMeta(pubkey=job_request, is_signer=False, is_writable=True),
        AccountMeta(pubkey=registry, is_signer=False, is_writable=True),
        AccountMeta(
            pubkey=input_data_account if input_data_account is not None else NULL_PUBKEY,
            is_signer=False,
            is_writable=True,
        ),
        AccountMeta(pubkey=SYSTEM_PROGRAM_ID, is_signer=False, is_writable=False),
    ]
    if global_config:
        config, _ = get_config_pda(program_id)
        accounts.append(AccountMeta(pubkey=config, is_signer=False, is_writable=True))
    accounts.extend(bundle_chain_account_metas(chain))
    accounts.append(AccountMeta(pubkey=last_bundle, is_signer=False, is_writable=True))

    data = serialize_request_job_args(
        RequestJobArgs(
            max_price_per_output_token=max_price_per_output_token,
            authority=authority,
            input_hash=input_hash,
            job_request_seed=job_request_seed,
            input_tokens=input_tokens,
            max_output_tokens=max_output_tokens,
            context_length_tier=context_length_tier,
            expiry_duration_tier=expiry_duration_tier,
            new_bundle_lamports=new_bundle_lamports,
            new_auction_lamports=new_auction_lamports,
            bump=bump,
            input_hash_iv=input_hash_iv,
            input_data_account=input_data_account,
        )
    )

    logger.debug(
        f"Built request_job for {job_request} with {len(chain)} bundle links"
    )
    return assemble_instruction(program_id, accounts, data)


def build_place_bid_instruction(
    authority: Pubkey,
    auction: Pubkey,
    price_per_output_token: int,
    price_hash_seed: bytes,
    endpoint: NodeEndpoint,
    node_encryption_publickey: Optional[bytes] = None,
    program_id: Pubkey = PROGRAM_ID,
) -> Instruction:
    """Build the place_bid instruction.

    Only the commitment sha256(price_hash_seed || price) goes on chain; keep
    `price_hash_seed` to reveal the bid later. `node_encryption_publickey`
    may be raw bytes or a `nacl.public.PublicKey`.

    Accounts:
    0. payer (signer, writable)
    1. bid (writable)
    2. auction (writable)
    3. system_program
    """
    price_hash = hash_bid_price(price_hash_seed, price_per_output_token)
    bid, _ = get_bid_pda(auction, authority, program_id)

    accounts = [
        AccountMeta(pubkey=authority, is_signer=True, is_writable=True),
        AccountMeta(pubkey=bid, is_signer=False, is_writable=True),
        AccountMeta(pubkey=auction, is_signer=False, is_writable=True),
        AccountMeta(pubkey=SYSTEM_PROGRAM_ID, is_signer=False, is_writable=False),
    ]

    data = serialize_place_bid_args(
        PlaceBidArgs(
            price_hash=price_hash,
            authority=authority,
            endpoint=endpoint,
            node_encryption_publickey=node_encryption_publickey,
        )
    )

    return assemble_instruction(program_id, accounts, data)


def build_reveal_bid_instruction(
    bidder: Pubkey,
    auction: Pubkey,
    bundle: Pubkey,
    vote_account: Pubkey,
    vote_authority: Pubkey,
    args: RevealBidArgs,
    program_id: Pubkey = PROGRAM_ID,
) -> Instruction:
    """Build the reveal_bid instruction.

    Accounts:
    0. bid_authority (signer, writable)
    1. bid (writable)
    2. auction (writable)
    3. bundle (writable)
    4. vote_account (writable)
    5. vote_authority (signer, writable)
    """
    bid, _ = get_bid_pda(auction, bidder, program_id)

    accounts = [
        AccountMeta(pubkey=bidder, is_signer=True, is_writable=True),
        AccountMeta(pubkey=bid, is_signer=False, is_writable=True),
        AccountMeta(pubkey=auction, is_signer=False, is_writable=True),
        AccountMeta(pubkey=bundle, is_signer=False, is_writable=True),
        AccountMeta(pubkey=vote_account, is_signer=False, is_writable=True),
        AccountMeta(pubkey=vote_authority, is_signer=True, is_writable=True),
    ]

    return assemble_instruction(program_id, accounts, serialize_reveal_bid_args(args))


def build_submit_job_output_instruction(
    authority: Pubkey,
    bundle: Pubkey,
    job_request: Pubkey,
    args: SubmitJobOutputArgs,
    output_data_account: Optional[Pubkey] = None,
    program_id: Pubkey = PROGRAM_ID,
) -> Instruction:
    """Build the submit_job_output instruction.

    `output_data_account` is required by the program when the request used
    an input data account.

    Accounts:
    0. bid_authority (signer, writable)
    1. bundle (writable)
    2. job_request (writable)
    3. bid (readonly)
    4. auction (readonly)
    5. output_data (writable, NULL_PUBKEY if absent)
    """
    auction, _ = get_auction_pda(bundle, program_id)
    bid, _ = get_bid_pda(auction, authority, program_id)

    accounts = [
        AccountMeta(pubkey=authority, is_signer=True, is_writable=True),
        AccountMeta(pubkey=bundle, is_signer=False, is_writable=True),
        AccountMeta(pubkey=job_request, is_signer=False, is_writable=True),
        AccountMeta(pubkey=bid, is_signer=False, is_writable=False),
        AccountMeta(pubkey=auction, is_signer=False, is_writable=False),
        AccountMeta(
            pubkey=output_data_account if output_data_account is not None else NULL_PUBKEY,
            is_signer=False,
            is_writable=True,
        ),
    ]

    return assemble_instruction(program_id, accounts, serialize_submit_job_output_args(args))


def build_end_auction_instruction(
    payer: Pubkey,
    bundle: Pubkey,
    vote_account: Pubkey,
    program_id: Pubkey = PROGRAM_ID,
) -> Instruction:
    """Build the end_auction instruction.

    Accounts:
    0. auction (writable)
    1. bundle (writable)
    2. vote_account (writable)
    3. payer (signer, writable)
    """
    auction, _ = get_auction_pda(bundle, program_id)

    accounts = [
        AccountMeta(pubkey=auction, is_signer=False, is_writable=True),
        AccountMeta(pubkey=bundle, is_signer=False, is_writable=True),
        AccountMeta(pubkey=vote_account, is_signer=False, is_writable=True),
        AccountMeta(pubkey=payer, is_signer=True, is_writable=True),
    ]

    return assemble_instruction(program_id, accounts, serialize_end_auction_args())


def build_cancel_bundle_instruction(
    signer: Pubkey,
    parent_bundle_key: Pubkey,
    bundle_key: Pubkey,
    bundle_bump: int,
    context_length_tier: RequestTier,
    expiry_duration_tier: RequestTier,
    bundle_lamports: int,
    program_id: Pubkey = PROGRAM_ID,
) -> Instruction:
    """Build the cancel_bundle instruction.

    Cancels `bundle_key` (the child of `parent_bundle_key`) together with
    its own pre-provisioned child.

    Accounts:
    0. payer (signer, writable)
    1. bundle (writable)
    2. child_bundle (writable)
    3. registry (writable)
    4. system_program
    """
    registry, _ = get_registry_pda(context_length_tier, expiry_duration_tier, program_id)
    child_bundle, child_bundle_bump = get_next_bundle_pda(bundle_key, program_id)

    accounts = [
        AccountMeta(pubkey=signer, is_signer=True, is_writable=True),
        AccountMeta(pubkey=bundle_key, is_signer=False, is_writable=True),
        AccountMeta(pubkey=child_bundle, is_signer=False, is_writable=True),
        AccountMeta(pubkey=registry, is_signer=False, is_writable=True),
        AccountMeta(pubkey=SYSTEM_PROGRAM_ID, is_signer=False, is_writable=False),
    ]

    data = serialize_cancel_bundle_args(
        CancelBundleArgs(
            parent_bundle_key=parent_bundle_key,
            bundle_bump=bundle_bump,
            context_length_tier=context_length_tier,
            expiry_duration_tier=expiry_duration_tier,
            child_bundle_bump=child_bundle_bump,
            bundle_lamports=bundle_lamports,
        )
    )

    return assemble_instruction(program_id, accounts, data)


def build_close_bid_instruction(
    bid_authority: Pubkey,
    auction_payer: Pubkey,
    bid: Pubkey,
    auction: Pubkey,
    bundle: Pubkey,
    vote_account: Pubkey,
    vote_authority: Pubkey,
    program_id: Pubkey = PROGRAM_ID,
) -> Instruction:
    """Build the close_bid instruction.

    Accounts:
    0. bid_authority (signer, writable)
    1. bid (readonly)
    2. auction_payer (signer, writable)
    3. auction (writable)
    4. bundle (readonly)
    5. vote_account (writable)
    6. vote_authority (signer, writable)
    7. vote_program
    """
    accounts = [
        AccountMeta(pubkey=bid_authority, is_signer=True, is_writable=True),
        AccountMeta(pubkey=bid, is_signer=False, is_writable=False),
        AccountMeta(pubkey=auction_payer, is_signer=True, is_writable=True),
        AccountMeta(pubkey=auction, is_signer=False, is_writable=True),
        AccountMeta(pubkey=bundle, is_signer=False, is_writable=False),
        AccountMeta(pubkey=vote_account, is_signer=False, is_writable=True),
        AccountMeta(pubkey=vote_authority, is_signer=True, is_writable=True),
        AccountMeta(pubkey=VOTE_PROGRAM_ID, is_signer=False, is_writable=False),
    ]

    return assemble_instruction(program_id, accounts, serialize_close_bid_args())


def build_close_request_instruction(
    params: CloseRequestParams,
    program_id: Pubkey = PROGRAM_ID,
) -> Instruction:
    """Build the close_request instruction.

    Closes a fulfilled request and re-provisions the bundle after
    `bundle_key`, paid for by the request authority.

    Accounts:
    0. request_authority (signer, writable)
    1. job_request (writable)
    2. bundle_payer (writable)
    3. bundle (writable)
    4. registry (writable)
    5. auction (writable)
    6. auction_payer (writable)
    7. child_bundle (writable)
    8. child_auction (writable)
    9. child_bundle_payer = request_authority (signer, writable)
    """
    registry, _ = get_registry_pda(
        params.context_length_tier, params.expiry_duration_tier, program_id
    )
    child_bundle, new_bundle_bump = get_next_bundle_pda(params.bundle_key, program_id)
    child_auction, _ = get_auction_pda(child_bundle, program_id)

    accounts = [
        AccountMeta(pubkey=params.request_authority, is_signer=True, is_writable=True),
        AccountMeta(pubkey=params.job_request_key, is_signer=False, is_writable=True),
        AccountMeta(pubkey=params.bundle_payer, is_signer=False, is_writable=True),
        AccountMeta(pubkey=params.bundle_key, is_signer=False, is_writable=True),
        AccountMeta(pubkey=registry, is_signer=False, is_writable=True),
        AccountMeta(pubkey=params.auction_key, is_signer=False, is_writable=True),
        AccountMeta(pubkey=params.auction_payer, is_signer=False, is_writable=True),
        AccountMeta(pubkey=child_bundle, is_signer=False, is_writable=True),
        AccountMeta(pubkey=child_auction, is_signer=False, is_writable=True),
        AccountMeta(pubkey=params.request_authority, is_signer=True, is_writable=True),
    ]

    data = serialize_close_request_args(
        CloseRequestArgs(
            new_bundle_lamports=params.new_bundle_lamports,
            new_auction_lamports=params.new_auction_lamports,
            new_bundle_bump=new_bundle_bump,
        )
    )

    return assemble_instruction(program_id, accounts, data)


def build_submit_validation_instruction(
    bundle: Pubkey,
    vote_account: Pubkey,
    vote_authority: Pubkey,
    job_request: Pubkey,
    args: SubmitValidationArgs,
    program_id: Pubkey = PROGRAM_ID,
) -> Instruction:
    """Build the submit_validation instruction.

    Accounts:
    0. bundle (writable)
    1. vote_account (writable)
    2. vote_program
    3. vote_authority (signer, writable)
    4. job_request (writable)
    """
    accounts = [
        AccountMeta(pubkey=bundle, is_signer=False, is_writable=True),
        AccountMeta(pubkey=vote_account, is_signer=False, is_writable=True),
        AccountMeta(pubkey=VOTE_PROGRAM_ID, is_signer=False, is_writable=False),
        AccountMeta(pubkey=vote_authority, is_signer=True, is_writable=True),
        AccountMeta(pubkey=job_request, is_signer=False, is_writable=True),
    ]

    return assemble_instruction(program_id, accounts, serialize_submit_validation_args(args))


def build_init_bundle_instruction(
    payer: Pubkey,
    context_length_tier: RequestTier,
    expiry_duration_tier: RequestTier,
    bundle_lamports: int,
    registry_lamports: int,
    program_id: Pubkey = PROGRAM_ID,
) -> Instruction:
    """Build the init_bundle instruction.

    Creates the root bundle and the registry for a tier pair.

    Accounts:
    0. payer (signer, writable)
    1. bundle (writable)
    2. registry (writable)
    3. system_program
    """
    bundle, bundle_bump = get_root_bundle_pda(
        context_length_tier, expiry_duration_tier, program_id
    )
    registry, registry_bump = get_registry_pda(
        context_length_tier, expiry_duration_tier, program_id
    )

    accounts = [
        AccountMeta(pubkey=payer, is_signer=True, is_writable=True),
        AccountMeta(pubkey=bundle, is_signer=False, is_writable=True),
        AccountMeta(pubkey=registry, is_signer=False, is_writable=True),
        AccountMeta(pubkey=SYSTEM_PROGRAM_ID, is_signer=False, is_writable=False),
    ]

    data = serialize_init_bundle_args(
        InitBundleArgs(
            context_length_tier=context_length_tier,
            expiry_duration_tier=expiry_duration_tier,
            bundle_lamports=bundle_lamports,
            bundle_bump=bundle_bump,
            registry_bump=registry_bump,
            registry_lamports=registry_lamports,
        )
    )

    return assemble_instruction(program_id, accounts, data)


def build_init_config_instruction(
    payer: Pubkey,
    args: InitConfigArgs,
    program_id: Pubkey = PROGRAM_ID,
) -> Instruction:
    """Build the init_config instruction.

    Accounts:
    0. payer (signer, writable)
    1. config (writable)
    2. system_program
    """
    config, _ = get_config_pda(program_id)

    accounts = [
        AccountMeta(pubkey=payer, is_signer=True, is_writable=True),
        AccountMeta(pubkey=config, is_signer=False, is_writable=True),
        AccountMeta(pubkey=SYSTEM_PROGRAM_ID, is_signer=False, is_writable=False),
    ]

    return assemble_instruction(program_id, accounts, serialize_init_config_args(args))
