from mintbooth.booth.app import App
from mintbooth.booth.config import BoothConfig
from tests.algorand.test_support import (
    FakeAlgodClient,
    FakeIndexerClient,
    generate_test_mnemonic,
)
from tests.test_support import create_test_engine

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "booth-password"
JWT_SECRET = "jwt-test-secret-that-is-at-least-32-bytes"


def create_test_booth_app(admin: dict | None = None) -> App:
    """
    Booth app backed by an in-memory database and fake Algorand clients
    """
    sponsor_mnemonic, _sponsor_address = generate_test_mnemonic()
    config = BoothConfig.from_dict(
        {
            "database": {"url": "sqlite://"},
            "algod": {"url": "http://localhost:4001"},
            "indexer": {"url": "http://localhost:8980"},
            "sponsor": {"mnemonic": sponsor_mnemonic},
            "admin": (
                admin
                if admin is not None
                else {
                    "username": ADMIN_USERNAME,
                    "password": ADMIN_PASSWORD,
                    "jwt_secret": JWT_SECRET,
                }
            ),
        }
    )
    return App(
        config,
        algod_client=FakeAlgodClient(),  # type: ignore
        indexer_client=FakeIndexerClient(),  # type: ignore
        engine=create_test_engine(),
    )
