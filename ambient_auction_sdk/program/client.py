"""Client facade for the Ambient auction SDK."""

import logging
from typing import List, Optional

from solders.instruction import Instruction
from solders.pubkey import Pubkey

from .bundles import plan_bundle_chain
from .commitment import hash_bid_price, verify_bid_reveal
from .config import SdkConfig
from .errors import GlobalConfigDisabledError
from .instructions import (
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
    get_registry_pda,
    get_root_bundle_pda,
)
from .types import (
    AppendDataParams,
    BundleLink,
    CancelBundleParams,
    CloseRequestParams,
    InitConfigArgs,
    PlaceBidParams,
    RequestJobParams,
    RequestTier,
    RevealBidArgs,
    SubmitJobOutputArgs,
    SubmitValidationArgs,
)

logger = logging.getLogger(__name__)


class AmbientAuctionClient:
    """Instruction builder bound to one program id and configuration.

    The client never talks to the network; hand the returned instructions
    to whatever signs and submits transactions.
    """

    def __init__(self, config: Optional[SdkConfig] = None):
        """Initialize the client.

        Args:
            config: SDK configuration (defaults to SdkConfig.default())
        """
        self.config = config if config is not None else SdkConfig.default()
        logger.debug(
            f"Auction client for program {self.config.program_id} "
            f"(global_config={self.config.global_config})"
        )

    @property
    def program_id(self) -> Pubkey:
        return self.config.program_id

    # =========================================================================
    # Instruction Builders
    # =========================================================================

    def append_data(self, params: AppendDataParams) -> Instruction:
        """Build an append_data instruction."""
        return build_append_data_instruction(
            payer=params.payer,
            data_account=params.data_account,
            seed=params.seed,
            offset=params.offset,
            account_data=params.account_data,
            decompressed_data_length=params.decompressed_data_length,
            program_id=self.program_id,
        )

    def request_job(self, params: RequestJobParams) -> Instruction:
        """Build a request_job instruction.

        Uses the configured chain depth unless the params set one, and
        includes the config account when global config is enabled.
        """
        additional_bundles = params.additional_bundles
        if additional_bundles is None:
            additional_bundles = self.config.additional_bundles

        return build_request_job_instruction(
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
            input_hash_iv=params.input_hash_iv,
            input_data_account=params.input_data_account,
            additional_bundles=additional_bundles,
            global_config=self.config.global_config,
            program_id=self.program_id,
        )

    def place_bid(self, params: PlaceBidParams) -> Instruction:
        """Build a place_bid instruction."""
        return build_place_bid_instruction(
            authority=params.authority,
            auction=params.auction,
            price_per_output_token=params.price_per_output_token,
            price_hash_seed=params.price_hash_seed,
            endpoint=params.endpoint,
            node_encryption_publickey=params.node_encryption_publickey,
            program_id=self.program_id,
        )

    def reveal_bid(
        self,
        bidder: Pubkey,
        auction: Pubkey,
        bundle: Pubkey,
        vote_account: Pubkey,
        vote_authority: Pubkey,
        args: RevealBidArgs,
    ) -> Instruction:
        """Build a reveal_bid instruction."""
        return build_reveal_bid_instruction(
            bidder, auction, bundle, vote_account, vote_authority, args, self.program_id
        )

    def submit_job_output(
        self,
        authority: Pubkey,
        bundle: Pubkey,
        job_request: Pubkey,
        args: SubmitJobOutputArgs,
        output_data_account: Optional[Pubkey] = None,
    ) -> Instruction:
        """Build a submit_job_output instruction."""
        return build_submit_job_output_instruction(
            authority=authority,
            bundle=bundle,
            job_request=job_request,
            args=args,
            output_data_account=output_data_account,
            program_id=self.program_id,
        )

    def end_auction(
        self, payer: Pubkey, bundle: Pubkey, vote_account: Pubkey
    ) -> Instruction:
        """Build an end_auction instruction."""
        return build_end_auction_instruction(payer, bundle, vote_account, self.program_id)

    def cancel_bundle(self, params: CancelBundleParams) -> Instruction:
        """Build a cancel_bundle instruction."""
        return build_cancel_bundle_instruction(
            signer=params.signer,
            parent_bundle_key=params.parent_bundle_key,
            bundle_key=params.bundle_key,
            bundle_bump=params.bundle_bump,
            context_length_tier=params.context_length_tier,
            expiry_duration_tier=params.expiry_duration_tier,
            bundle_lamports=params.bundle_lamports,
            program_id=self.program_id,
        )

    def close_bid(
        self,
        bid_authority: Pubkey,
        auction_payer: Pubkey,
        auction: Pubkey,
        bundle: Pubkey,
        vote_account: Pubkey,
        vote_authority: Pubkey,
    ) -> Instruction:
        """Build a close_bid instruction for the bid_authority's bid."""
        bid, _ = get_bid_pda(auction, bid_authority, self.program_id)
        return build_close_bid_instruction(
            bid_authority=bid_authority,
            auction_payer=auction_payer,
            bid=bid,
            auction=auction,
            bundle=bundle,
            vote_account=vote_account,
            vote_authority=vote_authority,
            program_id=self.program_id,
        )

    def close_request(self, params: CloseRequestParams) -> Instruction:
        """Build a close_request instruction."""
        return build_close_request_instruction(params, self.program_id)

    def submit_validation(
        self,
        bundle: Pubkey,
        vote_account: Pubkey,
        vote_authority: Pubkey,
        job_request: Pubkey,
        args: SubmitValidationArgs,
    ) -> Instruction:
        """Build a submit_validation instruction."""
        return build_submit_validation_instruction(
            bundle, vote_account, vote_authority, job_request, args, self.program_id
        )

    def init_bundle(
        self,
        payer: Pubkey,
        context_length_tier: RequestTier,
        expiry_duration_tier: RequestTier,
        bundle_lamports: int,
        registry_lamports: int,
    ) -> Instruction:
        """Build an init_bundle instruction."""
        return build_init_bundle_instruction(
            payer=payer,
            context_length_tier=context_length_tier,
            expiry_duration_tier=expiry_duration_tier,
            bundle_lamports=bundle_lamports,
            registry_lamports=registry_lamports,
            program_id=self.program_id,
        )

    def init_config(self, payer: Pubkey, args: InitConfigArgs) -> Instruction:
        """Build an init_config instruction.

        Raises:
            GlobalConfigDisabledError: If the client config has global config off
        """
        if not self.config.global_config:
            raise GlobalConfigDisabledError()
        return build_init_config_instruction(payer, args, self.program_id)

    # =========================================================================
    # Commitment Helpers
    # =========================================================================

    def hash_bid_price(self, price_hash_seed: bytes, price_per_output_token: int) -> bytes:
        """Compute the sealed-bid commitment for a price."""
        return hash_bid_price(price_hash_seed, price_per_output_token)

    def verify_bid_reveal(
        self, price_hash_seed: bytes, price_per_output_token: int, commitment: bytes
    ) -> bool:
        """Check a revealed price against its commitment."""
        return verify_bid_reveal(price_hash_seed, price_per_output_token, commitment)

    # =========================================================================
    # Utility Methods
    # =========================================================================

    def plan_bundle_chain(
        self, root: Pubkey, depth: Optional[int] = None
    ) -> List[BundleLink]:
        """Plan a bundle chain, using the configured depth by default."""
        if depth is None:
            depth = self.config.additional_bundles
        return plan_bundle_chain(root, depth, self.program_id)

    def get_job_request_address(
        self,
        context_length_tier: RequestTier,
        expiry_duration_tier: RequestTier,
        authority: Pubkey,
        job_request_seed: bytes,
    ) -> Pubkey:
        """Get a job request PDA address."""
        pda, _ = get_job_request_pda(
            context_length_tier, expiry_duration_tier, authority, job_request_seed, self.program_id
        )
        return pda

    def get_registry_address(
        self, context_length_tier: RequestTier, expiry_duration_tier: RequestTier
    ) -> Pubkey:
        """Get the bundle registry PDA address for a tier pair."""
        pda, _ = get_registry_pda(context_length_tier, expiry_duration_tier, self.program_id)
        return pda

    def get_root_bundle_address(
        self, context_length_tier: RequestTier, expiry_duration_tier: RequestTier
    ) -> Pubkey:
        """Get the root bundle PDA address for a tier pair."""
        pda, _ = get_root_bundle_pda(context_length_tier, expiry_duration_tier, self.program_id)
        return pda

    def get_auction_address(self, bundle: Pubkey) -> Pubkey:
        """Get the auction PDA address for a bundle."""
        pda, _ = get_auction_pda(bundle, self.program_id)
        return pda

    def get_bid_address(self, auction: Pubkey, bidder: Pubkey) -> Pubkey:
        """Get a bid PDA address."""
        pda, _ = get_bid_pda(auction, bidder, self.program_id)
        return pda

    def get_config_address(self) -> Pubkey:
        """Get the global config PDA address."""
        pda, _ = get_config_pda(self.program_id)
        return pda
