"""
Algorand node health check
"""
from dataclasses import dataclass

from algosdk.v2client.algod import AlgodClient

from mintbooth.core.health_check import HealthCheck, HealthCheckImpact, RedHealthCheck


@dataclass(slots=True)
class AlgorandNodeNotCaughtUp(RedHealthCheck):
    """
    Indicates the node is in catchup mode.
    While in catchup mode, transactions will not be accepted, i.e., free mint groups cannot be built.
    """

    catchup_time: int


class AlgorandNodeHealthCheck(HealthCheck):
    """
    Algorand node health check
    """

    def __init__(self, algod_client: AlgodClient):
        super().__init__(
            name="algod",
            impact=HealthCheckImpact.HIGH,
            description="Checks that the node is caught up with the rest of the blockchain.",
            tags={"algorand", "algod"},
        )

        self.__algod_client = algod_client

    def execute(self):
        result = self.__algod_client.status()
        if (catchup_time := result["catchup-time"]) > 0:
            raise AlgorandNodeNotCaughtUp(catchup_time)
