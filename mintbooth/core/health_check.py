"""
Health Checks
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timedelta, UTC
from enum import IntEnum, auto
from typing import Any


class HealthCheckStatus(IntEnum):
    """
    HealthCheckStatus
    """

    # healthy
    GREEN = auto()

    # service is functioning but requires attention, e.g.,
    # - the indexer is lagging behind the node
    # - degraded performance
    YELLOW = auto()

    # unhealthy, e.g.
    # - database tables are missing
    # - the node is in catchup mode and will reject transactions
    RED = auto()


class HealthCheckImpact(IntEnum):
    """
    Used to indicate the impact of health check failures, e.g., the booth cannot accept print requests
    without its database (HIGH), but print requests still work while the indexer is down (MEDIUM).
    """

    HIGH = auto()
    MEDIUM = auto()
    LOW = auto()


class YellowHealthCheck(Exception):
    """
    Indicates HealthCheck is in a YELLOW state
    """


class RedHealthCheck(Exception):
    """
    Indicates HealthCheck is in a RED state
    """


@dataclass(slots=True)
class HealthCheckResult:
    """
    HealthCheckResult
    """

    # HealthCheck.name
    name: str

    status: HealthCheckStatus

    # when the health check was run
    timestamp: datetime
    # how long it took to run the health check
    duration: timedelta

    error: Exception | None = None

    def to_dict(self) -> dict[str, Any]:
        """
        JSON friendly representation.

        Only the error type is reported, i.e., error messages may contain connection details.
        """
        return {
            "status": self.status.name,
            "timestamp": self.timestamp.isoformat(),
            "duration_ms": int(self.duration.total_seconds() * 1000),
            "error": None if self.error is None else self.error.__class__.__name__,
        }


@dataclass(slots=True)
class HealthCheck(ABC):
    """
    HealthCheck
    """

    name: str

    # used to categorize healthchecks, e.g database, algod, indexer
    tags: set[str]
    description: str

    impact: HealthCheckImpact

    last_result: HealthCheckResult | None = field(default=None, init=False)

    def __call__(self) -> HealthCheckResult:
        start = datetime.now(UTC)
        status = HealthCheckStatus.GREEN
        error: Exception | None = None
        try:
            self.execute()
        except YellowHealthCheck as err:
            status = HealthCheckStatus.YELLOW
            error = err
        except Exception as err:  # pylint: disable=broad-exception-caught
            status = HealthCheckStatus.RED
            error = err

        self.last_result = HealthCheckResult(
            name=self.name,
            status=status,
            timestamp=start,
            duration=datetime.now(UTC) - start,
            error=error,
        )
        return self.last_result

    @abstractmethod
    def execute(self):
        """
        Execute the health check

        :exception YellowHealthCheck: indicates healthcheck current status is `YELLLOW`
        :exception RedHealthCheck: indicates healthcheck current status is `RED`
        :exception Exception: any other exception is treated as `RED`
        """


def run_health_checks(health_checks: list[HealthCheck]) -> list[HealthCheckResult]:
    """
    Runs the health checks in order and returns their results
    """
    return [health_check() for health_check in health_checks]


def overall_status(results: list[HealthCheckResult]) -> HealthCheckStatus:
    """
    The overall status is the worst status reported, i.e., RED > YELLOW > GREEN
    """
    return max(
        (result.status for result in results),
        default=HealthCheckStatus.GREEN,
    )
