"""
Booth settings domain model
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Final

# the settings table holds a single row with this ID
SETTINGS_ID: Final[int] = 1

DEFAULT_IS_PAUSED: Final[bool] = False
DEFAULT_MAX_PRINT_REQUESTS: Final[int] = 100


@dataclass(slots=True)
class Settings:
    """
    Global booth configuration
    """

    id: int  # pylint: disable=invalid-name
    # when paused, new print requests are rejected
    is_paused: bool
    # capacity of the print queue
    max_print_requests: int
    created_at: datetime
    updated_at: datetime


@dataclass(slots=True)
class SettingsUpdate:
    """
    Partial settings update - only fields that are not None are applied
    """

    is_paused: bool | None = None
    max_print_requests: int | None = None


@dataclass(slots=True)
class BoothSettings:
    """
    Settings together with the live print request count, which is derived and never stored
    """

    settings: Settings
    current_count: int


@dataclass(slots=True)
class BoothStatus:
    """
    Public view of the booth
    """

    is_paused: bool
    max_print_requests: int
    current_count: int

    @property
    def available(self) -> bool:
        """
        :return: True if a new print request would currently be admitted
        """
        return not self.is_paused and self.current_count < self.max_print_requests
