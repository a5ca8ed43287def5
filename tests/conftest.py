"""Shared pytest fixtures."""

import pytest
from solders.pubkey import Pubkey

from ambient_auction_sdk import NodeEndpoint, RequestJobParams, RequestTier


@pytest.fixture
def authority():
    return Pubkey.new_unique()


@pytest.fixture
def bundle_key():
    return Pubkey.new_unique()


@pytest.fixture
def job_request_seed():
    return bytes(range(32))


@pytest.fixture
def endpoint():
    return NodeEndpoint(ip="10.0.0.7", port=8080)


@pytest.fixture
def request_job_params(authority, bundle_key, job_request_seed):
    return RequestJobParams(
        authority=authority,
        bundle_key=bundle_key,
        input_hash=bytes([7] * 32),
        job_request_seed=job_request_seed,
        input_tokens=1024,
        max_output_tokens=512,
        max_price_per_output_token=1500,
        new_bundle_lamports=2_000_000,
        new_auction_lamports=3_000_000,
        context_length_tier=RequestTier.MEDIUM,
        expiry_duration_tier=RequestTier.LONG,
    )
