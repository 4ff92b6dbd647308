"""
Booth database healthcheck
"""
from sqlalchemy import select
from sqlalchemy.orm import sessionmaker

from mintbooth.booth.data.free_mint_claim import TFreeMintClaim
from mintbooth.booth.data.print_request import TPrintRequest
from mintbooth.booth.data.settings import TSettings
from mintbooth.core.health_check import HealthCheck, HealthCheckImpact


class DatabaseHealthCheck(HealthCheck):
    def __init__(self, session_factory: sessionmaker):
        super().__init__(
            name="database",
            impact=HealthCheckImpact.HIGH,
            description="Queries each of the booth database tables",
            tags={"database"},
        )

        self.__session_factory = session_factory

    def execute(self):
        with self.__session_factory() as session:
            session.scalar(select(TSettings).limit(1))
            session.scalar(select(TPrintRequest).limit(1))
            session.scalar(select(TFreeMintClaim).limit(1))
