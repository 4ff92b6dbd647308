"""
Booth app

Wires the booth commands to the database, the Algorand clients, and the sponsor account.
"""
from pathlib import Path

from algosdk.v2client.algod import AlgodClient
from algosdk.v2client.indexer import IndexerClient
from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import sessionmaker

from mintbooth.algorand.accounts import SponsorAccount
from mintbooth.booth.auth import AdminAuth
from mintbooth.booth.commands.algorand.build_sponsored_mint_group import (
    BuildSponsoredMintGroup,
)
from mintbooth.booth.commands.algorand.get_free_mint_status import GetFreeMintStatus
from mintbooth.booth.commands.data.create_print_request import CreatePrintRequest
from mintbooth.booth.commands.data.free_mint_claim import (
    GetFreeMintClaim,
    StoreFreeMintClaim,
)
from mintbooth.booth.commands.data.queries.get_print_request import GetPrintRequest
from mintbooth.booth.commands.data.queries.search_print_requests import (
    SearchPrintRequests,
)
from mintbooth.booth.commands.data.settings import (
    GetOrInitSettings,
    GetBoothSettings,
    GetBoothStatus,
    UpdateSettings,
)
from mintbooth.booth.commands.data.update_print_request_status import (
    UpdatePrintRequestStatus,
)
from mintbooth.booth.config import BoothConfig
from mintbooth.booth.data import create_schema
from mintbooth.booth.healthchecks.algorand_indexer_healthcheck import (
    AlgorandIndexerHealthCheck,
)
from mintbooth.booth.healthchecks.algorand_node_healthcheck import (
    AlgorandNodeHealthCheck,
)
from mintbooth.booth.healthchecks.database_healthcheck import DatabaseHealthCheck
from mintbooth.core.health_check import HealthCheck
from mintbooth.core.logging import get_logger


class App:
    """
    Booth app

    The Algorand clients and the database engine can be injected, otherwise they are created from the config.
    """

    # pylint: disable=too-many-instance-attributes

    def __init__(
        self,
        config: BoothConfig,
        algod_client: AlgodClient | None = None,
        indexer_client: IndexerClient | None = None,
        engine: Engine | None = None,
    ):
        self.config = config

        self.engine = (
            engine if engine is not None else create_engine(config.database_url)
        )
        self.session_factory = sessionmaker(self.engine)

        self.algod_client = (
            algod_client
            if algod_client is not None
            else AlgodClient(
                algod_token=config.algod.token,
                algod_address=config.algod.url,
            )
        )
        self.indexer_client = (
            indexer_client
            if indexer_client is not None
            else IndexerClient(
                indexer_token=config.indexer.token,
                indexer_address=config.indexer.url,
            )
        )

        self.sponsor = SponsorAccount.from_mnemonic(config.sponsor_mnemonic)
        self.admin_auth = AdminAuth(config.admin)

        # settings
        self.get_or_init_settings = GetOrInitSettings(self.session_factory)
        self.get_booth_settings = GetBoothSettings(
            self.session_factory, self.get_or_init_settings
        )
        self.get_booth_status = GetBoothStatus(self.get_booth_settings)
        self.update_settings = UpdateSettings(self.session_factory)

        # print requests
        self.create_print_request = CreatePrintRequest(
            self.session_factory, self.get_or_init_settings
        )
        self.get_print_request = GetPrintRequest(self.session_factory)
        self.search_print_requests = SearchPrintRequests(self.session_factory)
        self.update_print_request_status = UpdatePrintRequestStatus(
            self.session_factory
        )

        # free mint
        self.get_free_mint_status = GetFreeMintStatus(
            indexer_client=self.indexer_client,
            sponsor_address=self.sponsor.address,
            get_free_mint_claim=GetFreeMintClaim(self.session_factory),
        )
        self.build_sponsored_mint_group = BuildSponsoredMintGroup(
            algod_client=self.algod_client,
            sponsor=self.sponsor,
            get_free_mint_status=self.get_free_mint_status,
            store_free_mint_claim=StoreFreeMintClaim(self.session_factory),
        )

        self.health_checks: list[HealthCheck] = [
            DatabaseHealthCheck(self.session_factory),
            AlgorandNodeHealthCheck(self.algod_client),
            AlgorandIndexerHealthCheck(self.indexer_client),
        ]

        get_logger(self).info(
            "booth app initialized: sponsor=%s algod=%s indexer=%s",
            self.sponsor.address,
            config.algod.url,
            config.indexer.url,
        )

    @classmethod
    def from_config_file(cls, file: Path) -> "App":
        """
        Constructs a new app instance from the specified TOML config file
        """
        return cls(BoothConfig.from_config_file(file))

    def create_schema(self):
        """
        Creates the booth database tables that do not exist
        """
        create_schema(self.engine)
