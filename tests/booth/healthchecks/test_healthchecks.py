import unittest

from algosdk.error import IndexerHTTPError
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from mintbooth.booth.healthchecks.algorand_indexer_healthcheck import (
    AlgorandIndexerHealthCheck,
    IndexerReportedErrors,
)
from mintbooth.booth.healthchecks.algorand_node_healthcheck import (
    AlgorandNodeHealthCheck,
    AlgorandNodeNotCaughtUp,
)
from mintbooth.booth.healthchecks.database_healthcheck import DatabaseHealthCheck
from mintbooth.booth.data import create_schema
from mintbooth.core.health_check import HealthCheckStatus
from tests.algorand.test_support import FakeAlgodClient, FakeIndexerClient
from tests.test_support import MintBoothTestCase


class DatabaseHealthCheckTestCase(MintBoothTestCase):
    def test_healthcheck(self):
        engine = create_engine("sqlite:///:memory:", echo=False)
        healthcheck = DatabaseHealthCheck(sessionmaker(engine))

        # tables do not exist
        result = healthcheck()
        self.assertEqual(HealthCheckStatus.RED, result.status)

        create_schema(engine)
        result = healthcheck()
        self.assertEqual(HealthCheckStatus.GREEN, result.status)
        engine.dispose()


class AlgorandNodeHealthCheckTestCase(MintBoothTestCase):
    def test_healthcheck(self):
        algod_client = FakeAlgodClient()
        healthcheck = AlgorandNodeHealthCheck(algod_client)  # type: ignore
        self.assertEqual(HealthCheckStatus.GREEN, healthcheck().status)

        with self.subTest("node is catching up"):
            algod_client.catchup_time = 5_000
            result = healthcheck()
            self.assertEqual(HealthCheckStatus.RED, result.status)
            self.assertIsInstance(result.error, AlgorandNodeNotCaughtUp)

        with self.subTest("node is unreachable"):
            algod_client.catchup_time = 0
            algod_client.error = ConnectionRefusedError()
            self.assertEqual(HealthCheckStatus.RED, healthcheck().status)


class AlgorandIndexerHealthCheckTestCase(MintBoothTestCase):
    def test_healthcheck(self):
        indexer_client = FakeIndexerClient()
        healthcheck = AlgorandIndexerHealthCheck(indexer_client)  # type: ignore
        self.assertEqual(HealthCheckStatus.GREEN, healthcheck().status)

        with self.subTest("indexer reports errors"):
            indexer_client.errors = ["failed to import round"]
            result = healthcheck()
            self.assertEqual(HealthCheckStatus.YELLOW, result.status)
            self.assertIsInstance(result.error, IndexerReportedErrors)

        with self.subTest("indexer is down"):
            indexer_client.error = IndexerHTTPError("unavailable")
            self.assertEqual(HealthCheckStatus.RED, healthcheck().status)


if __name__ == "__main__":
    unittest.main()
