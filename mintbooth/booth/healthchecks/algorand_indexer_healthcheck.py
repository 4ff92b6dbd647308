"""
Algorand Indexer HealthCheck
"""
from dataclasses import dataclass

from algosdk.v2client.indexer import IndexerClient

from mintbooth.core.health_check import (
    HealthCheck,
    HealthCheckImpact,
    YellowHealthCheck,
)


@dataclass
class IndexerReportedErrors(YellowHealthCheck):
    """
    Indicates the indexer is running, but reports errors, e.g., it is not importing new rounds.

    Free mint status lookups may report a claimed mint as not claimed while the indexer is unhealthy.
    """

    errors: list[str]


class AlgorandIndexerHealthCheck(HealthCheck):
    """
    Algorand Indexer HealthCheck
    """

    def __init__(self, indexer_client: IndexerClient):
        super().__init__(
            name="indexer",
            impact=HealthCheckImpact.MEDIUM,
            description="Retrieves the Indexer health",
            tags={"algorand", "indexer"},
        )

        self.__indexer_client = indexer_client

    def execute(self):
        result = self.__indexer_client.health()
        if errors := result.get("errors"):
            raise IndexerReportedErrors(errors)
