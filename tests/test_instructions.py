"""Tests for instruction builders."""

import pytest
from solders.instruction import AccountMeta, Instruction
from solders.pubkey import Pubkey

from ambient_auction_sdk import (
    NULL_PUBKEY,
    PROGRAM_ID,
    SYSTEM_PROGRAM_ID,
    VOTE_PROGRAM_ID,
    ChainDepthError,
    InitConfigArgs,
    RequestTier,
    RevealBidArgs,
    SubmitJobOutputArgs,
    SubmitValidationArgs,
    CloseRequestParams,
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
    chain_tail,
    get_auction_pda,
    get_bid_pda,
    get_config_pda,
    get_job_request_pda,
    get_next_bundle_pda,
    get_registry_pda,
    get_root_bundle_pda,
    hash_bid_price,
    plan_bundle_chain,
)
from ambient_auction_sdk.program.utils import decode_u64


def flags(meta):
    return (meta.is_signer, meta.is_writable)


SIGNER_WRITABLE = (True, True)
WRITABLE = (False, True)
READONLY = (False, False)


def request_job(params, **overrides):
    fields = dict(
        authority=params.authority,
        bundle_key=params.bundle_key,
        input_hash=params.input_hash,
        job_request_seed=params.job_request_seed,
        input_tokens=params.input_tokens,
        max_output_tokens=params.max_output_tokens,
        max_price_per_output_token=params.max_price_per_output_token,
        new_bundle_lamports=params.new_bundle_lamports,
        new_auction_lamports=params.new_auction_lamports,
        context_length_tier=params.context_length_tier,
        expiry_duration_tier=params.expiry_duration_tier,
    )
    fields.update(overrides)
    return build_request_job_instruction(**fields)


class TestAssembleInstruction:
    def test_preserves_inputs(self):
        program_id = Pubkey.new_unique()
        accounts = [
            AccountMeta(pubkey=Pubkey.new_unique(), is_signer=True, is_writable=False),
            AccountMeta(pubkey=Pubkey.new_unique(), is_signer=False, is_writable=True),
        ]

        ix = assemble_instruction(program_id, accounts, b"\x01\x02")

        assert isinstance(ix, Instruction)
        assert ix.program_id == program_id
        assert ix.accounts == accounts
        assert ix.data == b"\x01\x02"


class TestBuildRequestJobInstruction:
    def test_default_chain_account_count(self, request_job_params):
        ix = request_job(request_job_params)

        # 5 fixed + 9 (bundle, auction) pairs + trailing bundle
        assert len(ix.accounts) == 24

    def test_global_config_adds_config_account(self, request_job_params):
        ix = request_job(request_job_params, global_config=True)

        assert len(ix.accounts) == 25
        assert ix.accounts[5].pubkey == get_config_pda()[0]
        assert flags(ix.accounts[5]) == WRITABLE

    def test_fixed_accounts(self, request_job_params):
        p = request_job_params
        ix = request_job(p)

        job_request, _ = get_job_request_pda(
            p.context_length_tier, p.expiry_duration_tier, p.authority, p.job_request_seed
        )
        registry, _ = get_registry_pda(p.context_length_tier, p.expiry_duration_tier)

        assert ix.program_id == PROGRAM_ID
        assert ix.accounts[0].pubkey == p.authority
        assert flags(ix.accounts[0]) == SIGNER_WRITABLE
        assert ix.accounts[1].pubkey == job_request
        assert flags(ix.accounts[1]) == WRITABLE
        assert ix.accounts[2].pubkey == registry
        assert flags(ix.accounts[2]) == WRITABLE
        assert ix.accounts[4].pubkey == SYSTEM_PROGRAM_ID
        assert flags(ix.accounts[4]) == READONLY

    def test_absent_input_data_uses_null_pubkey(self, request_job_params):
        ix = request_job(request_job_params)

        assert ix.accounts[3].pubkey == NULL_PUBKEY
        assert ix.accounts[3].pubkey == Pubkey.default()
        assert flags(ix.accounts[3]) == WRITABLE

    def test_present_input_data(self, request_job_params):
        input_data = Pubkey.new_unique()
        ix = request_job(request_job_params, input_data_account=input_data)

        assert ix.accounts[3].pubkey == input_data
        assert ix.data[177] == 1
        assert ix.data[178:210] == bytes(input_data)

    def test_chain_accounts_follow_fixed_slots(self, request_job_params):
        ix = request_job(request_job_params)
        chain = plan_bundle_chain(request_job_params.bundle_key, 8)

        expected = []
        for link in chain:
            expected.extend([link.bundle, link.auction])
        expected.append(chain_tail(chain))

        assert [meta.pubkey for meta in ix.accounts[5:]] == expected
        for meta in ix.accounts[5:]:
            assert flags(meta) == WRITABLE

    def test_custom_depth(self, request_job_params):
        ix = request_job(request_job_params, additional_bundles=3)

        assert len(ix.accounts) == 5 + 2 * 4 + 1
        tail = chain_tail(plan_bundle_chain(request_job_params.bundle_key, 3))
        assert ix.accounts[-1].pubkey == tail

    def test_zero_depth(self, request_job_params):
        ix = request_job(request_job_params, additional_bundles=0)

        assert len(ix.accounts) == 8
        assert ix.accounts[-1].pubkey == get_next_bundle_pda(request_job_params.bundle_key)[0]

    def test_depth_above_max_raises(self, request_job_params):
        with pytest.raises(ChainDepthError):
            request_job(request_job_params, additional_bundles=9)

    def test_bump_matches_job_request_derivation(self, request_job_params):
        p = request_job_params
        ix = request_job(p)

        _, bump = get_job_request_pda(
            p.context_length_tier, p.expiry_duration_tier, p.authority, p.job_request_seed
        )

        assert ix.data[0] == 0
        assert decode_u64(ix.data, 169) == bump

    def test_deterministic(self, request_job_params):
        ix1 = request_job(request_job_params)
        ix2 = request_job(request_job_params)

        assert ix1.accounts == ix2.accounts
        assert ix1.data == ix2.data

    def test_custom_program_id(self, request_job_params):
        program_id = Pubkey.new_unique()
        ix = request_job(request_job_params, program_id=program_id)

        assert ix.program_id == program_id
        assert ix.accounts[1].pubkey != request_job(request_job_params).accounts[1].pubkey


class TestBuildPlaceBidInstruction:
    def test_accounts(self, authority, endpoint):
        auction = Pubkey.new_unique()
        ix = build_place_bid_instruction(authority, auction, 100, bytes(32), endpoint)

        assert len(ix.accounts) == 4
        assert ix.accounts[0].pubkey == authority
        assert flags(ix.accounts[0]) == SIGNER_WRITABLE
        assert ix.accounts[1].pubkey == get_bid_pda(auction, authority)[0]
        assert flags(ix.accounts[1]) == WRITABLE
        assert ix.accounts[2].pubkey == auction
        assert flags(ix.accounts[2]) == WRITABLE
        assert ix.accounts[3].pubkey == SYSTEM_PROGRAM_ID
        assert flags(ix.accounts[3]) == READONLY

    def test_data_carries_commitment_not_price(self, authority, endpoint):
        seed = bytes([4] * 32)
        ix = build_place_bid_instruction(authority, Pubkey.new_unique(), 777, seed, endpoint)

        assert ix.data[0] == 1
        assert ix.data[1:33] == hash_bid_price(seed, 777)
        assert ix.data[33:65] == bytes(authority)

    def test_encryption_key(self, authority, endpoint):
        key = bytes([8] * 32)
        ix = build_place_bid_instruction(
            authority, Pubkey.new_unique(), 1, bytes(32), endpoint, key
        )

        assert ix.data[83] == 1
        assert ix.data[84:116] == key


class TestBuildRevealBidInstruction:
    def test_accounts_and_data(self):
        bidder = Pubkey.new_unique()
        auction = Pubkey.new_unique()
        bundle = Pubkey.new_unique()
        vote_account = Pubkey.new_unique()
        vote_authority = Pubkey.new_unique()
        seed = bytes([1] * 32)

        ix = build_reveal_bid_instruction(
            bidder, auction, bundle, vote_account, vote_authority, RevealBidArgs(900, seed)
        )

        assert [meta.pubkey for meta in ix.accounts] == [
            bidder,
            get_bid_pda(auction, bidder)[0],
            auction,
            bundle,
            vote_account,
            vote_authority,
        ]
        assert [flags(meta) for meta in ix.accounts] == [
            SIGNER_WRITABLE,
            WRITABLE,
            WRITABLE,
            WRITABLE,
            WRITABLE,
            SIGNER_WRITABLE,
        ]
        assert ix.data[0] == 2
        assert decode_u64(ix.data, 1) == 900
        assert ix.data[9:41] == seed


class TestBuildSubmitJobOutputInstruction:
    def test_accounts(self, authority, bundle_key):
        job_request = Pubkey.new_unique()
        ix = build_submit_job_output_instruction(
            authority, bundle_key, job_request, SubmitJobOutputArgs(10, bytes(32))
        )

        auction, _ = get_auction_pda(bundle_key)
        bid, _ = get_bid_pda(auction, authority)

        assert [meta.pubkey for meta in ix.accounts] == [
            authority,
            bundle_key,
            job_request,
            bid,
            auction,
            NULL_PUBKEY,
        ]
        assert [flags(meta) for meta in ix.accounts] == [
            SIGNER_WRITABLE,
            WRITABLE,
            WRITABLE,
            READONLY,
            READONLY,
            WRITABLE,
        ]
        assert ix.data[0] == 4

    def test_output_data_account(self, authority, bundle_key):
        output_data = Pubkey.new_unique()
        ix = build_submit_job_output_instruction(
            authority,
            bundle_key,
            Pubkey.new_unique(),
            SubmitJobOutputArgs(10, bytes(32)),
            output_data_account=output_data,
        )

        assert ix.accounts[5].pubkey == output_data


class TestBuildEndAuctionInstruction:
    def test_accounts(self, bundle_key):
        payer = Pubkey.new_unique()
        vote_account = Pubkey.new_unique()
        ix = build_end_auction_instruction(payer, bundle_key, vote_account)

        assert [meta.pubkey for meta in ix.accounts] == [
            get_auction_pda(bundle_key)[0],
            bundle_key,
            vote_account,
            payer,
        ]
        assert flags(ix.accounts[3]) == SIGNER_WRITABLE
        assert ix.data == bytes([3])


class TestBuildCancelBundleInstruction:
    def test_accounts_and_child_bump(self, bundle_key):
        signer = Pubkey.new_unique()
        parent = Pubkey.new_unique()
        ix = build_cancel_bundle_instruction(
            signer, parent, bundle_key, 251, RequestTier.SHORT, RequestTier.MEDIUM, 5000
        )

        child, child_bump = get_next_bundle_pda(bundle_key)
        registry, _ = get_registry_pda(RequestTier.SHORT, RequestTier.MEDIUM)

        assert [meta.pubkey for meta in ix.accounts] == [
            signer,
            bundle_key,
            child,
            registry,
            SYSTEM_PROGRAM_ID,
        ]
        assert flags(ix.accounts[0]) == SIGNER_WRITABLE
        assert flags(ix.accounts[4]) == READONLY
        assert ix.data[0] == 8
        assert ix.data[1:33] == bytes(parent)
        assert decode_u64(ix.data, 33) == 251
        assert decode_u64(ix.data, 57) == child_bump


class TestBuildCloseBidInstruction:
    def test_accounts(self):
        bid_authority = Pubkey.new_unique()
        auction_payer = Pubkey.new_unique()
        bid = Pubkey.new_unique()
        auction = Pubkey.new_unique()
        bundle = Pubkey.new_unique()
        vote_account = Pubkey.new_unique()
        vote_authority = Pubkey.new_unique()

        ix = build_close_bid_instruction(
            bid_authority=bid_authority,
            auction_payer=auction_payer,
            bid=bid,
            auction=auction,
            bundle=bundle,
            vote_account=vote_account,
            vote_authority=vote_authority,
        )

        assert [meta.pubkey for meta in ix.accounts] == [
            bid_authority,
            bid,
            auction_payer,
            auction,
            bundle,
            vote_account,
            vote_authority,
            VOTE_PROGRAM_ID,
        ]
        assert [flags(meta) for meta in ix.accounts] == [
            SIGNER_WRITABLE,
            READONLY,
            SIGNER_WRITABLE,
            WRITABLE,
            READONLY,
            WRITABLE,
            SIGNER_WRITABLE,
            READONLY,
        ]
        assert ix.data == bytes([6])


class TestBuildCloseRequestInstruction:
    def test_accounts_and_data(self, authority, bundle_key):
        params = CloseRequestParams(
            request_authority=authority,
            job_request_key=Pubkey.new_unique(),
            bundle_payer=Pubkey.new_unique(),
            bundle_key=bundle_key,
            auction_key=get_auction_pda(bundle_key)[0],
            auction_payer=Pubkey.new_unique(),
            context_length_tier=RequestTier.LONG,
            expiry_duration_tier=RequestTier.LONG,
            new_bundle_lamports=111,
            new_auction_lamports=222,
        )
        ix = build_close_request_instruction(params)

        child, child_bump = get_next_bundle_pda(bundle_key)

        assert [meta.pubkey for meta in ix.accounts] == [
            authority,
            params.job_request_key,
            params.bundle_payer,
            bundle_key,
            get_registry_pda(RequestTier.LONG, RequestTier.LONG)[0],
            params.auction_key,
            params.auction_payer,
            child,
            get_auction_pda(child)[0],
            authority,
        ]
        assert flags(ix.accounts[0]) == SIGNER_WRITABLE
        assert flags(ix.accounts[9]) == SIGNER_WRITABLE
        for meta in ix.accounts[1:9]:
            assert flags(meta) == WRITABLE

        assert ix.data[0] == 7
        assert decode_u64(ix.data, 1) == 111
        assert decode_u64(ix.data, 9) == 222
        assert decode_u64(ix.data, 17) == child_bump


class TestBuildSubmitValidationInstruction:
    def test_accounts(self):
        bundle = Pubkey.new_unique()
        vote_account = Pubkey.new_unique()
        vote_authority = Pubkey.new_unique()
        job_request = Pubkey.new_unique()

        ix = build_submit_validation_instruction(
            bundle,
            vote_account,
            vote_authority,
            job_request,
            SubmitValidationArgs(bytes(32), True),
        )

        assert [meta.pubkey for meta in ix.accounts] == [
            bundle,
            vote_account,
            VOTE_PROGRAM_ID,
            vote_authority,
            job_request,
        ]
        assert flags(ix.accounts[2]) == READONLY
        assert flags(ix.accounts[3]) == SIGNER_WRITABLE
        assert ix.data[0] == 5


class TestBuildInitBundleInstruction:
    def test_accounts_and_bumps(self):
        payer = Pubkey.new_unique()
        ix = build_init_bundle_instruction(
            payer, RequestTier.MEDIUM, RequestTier.SHORT, 1000, 2000
        )

        bundle, bundle_bump = get_root_bundle_pda(RequestTier.MEDIUM, RequestTier.SHORT)
        registry, registry_bump = get_registry_pda(RequestTier.MEDIUM, RequestTier.SHORT)

        assert [meta.pubkey for meta in ix.accounts] == [
            payer,
            bundle,
            registry,
            SYSTEM_PROGRAM_ID,
        ]
        assert ix.data[0] == 9
        assert decode_u64(ix.data, 25) == bundle_bump
        assert decode_u64(ix.data, 33) == registry_bump


class TestBuildInitConfigInstruction:
    def test_accounts(self):
        payer = Pubkey.new_unique()
        ix = build_init_config_instruction(payer, InitConfigArgs(payer, 150, 50, 10))

        assert [meta.pubkey for meta in ix.accounts] == [
            payer,
            get_config_pda()[0],
            SYSTEM_PROGRAM_ID,
        ]
        assert ix.data[0] == 11


class TestBuildAppendDataInstruction:
    def test_accounts(self):
        payer = Pubkey.new_unique()
        data_account = Pubkey.new_unique()
        ix = build_append_data_instruction(payer, data_account, "input", 0, b"hello")

        assert [meta.pubkey for meta in ix.accounts] == [
            payer,
            data_account,
            SYSTEM_PROGRAM_ID,
        ]
        assert flags(ix.accounts[0]) == SIGNER_WRITABLE
        assert flags(ix.accounts[1]) == WRITABLE

    def test_data_chunk_follows_header(self):
        ix = build_append_data_instruction(
            Pubkey.new_unique(), Pubkey.new_unique(), b"input", 128, b"chunk-bytes"
        )

        assert ix.data[0] == 10
        assert decode_u64(ix.data, 1) == 128
        assert ix.data[9:41] == b"input" + bytes(27)
        assert decode_u64(ix.data, 41) == 5
        assert ix.data[57:] == b"chunk-bytes"

    def test_long_seed_truncated(self):
        ix = build_append_data_instruction(
            Pubkey.new_unique(), Pubkey.new_unique(), b"k" * 48, 0, b""
        )

        assert ix.data[9:41] == b"k" * 32
        assert decode_u64(ix.data, 41) == 32
