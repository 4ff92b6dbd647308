"""
Booth settings commands
"""
import math
from numbers import Real
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from mintbooth.booth.commands.data import SqlAlchemySupport, count_print_requests
from mintbooth.booth.data.settings import TSettings
from mintbooth.booth.domain.settings import (
    Settings,
    SettingsUpdate,
    BoothSettings,
    BoothStatus,
    SETTINGS_ID,
)
from mintbooth.booth.errors import ValidationError
from mintbooth.core.command import Command


def get_or_init_settings(session: Session) -> TSettings:
    """
    Returns the settings row, adding it with default values if it does not exist.

    NOTE: the new row is flushed, i.e., if another transaction inserted the row concurrently, then
    an IntegrityError is raised here.
    """
    settings = session.get(TSettings, SETTINGS_ID)
    if settings is None:
        settings = TSettings.create_default()
        session.add(settings)
        session.flush()
    return settings


class GetOrInitSettings(SqlAlchemySupport):
    """
    Returns the booth settings, which are initialized with default values on first access.

    Concurrent callers race on the settings primary key. The losing transaction retries and reads the winner's row.
    """

    def __call__(self) -> Settings:
        try:
            with self._session_factory.begin() as session:
                return get_or_init_settings(session).to_settings()
        except IntegrityError:
            with self._session_factory() as session:
                settings = session.get(TSettings, SETTINGS_ID)
                if settings is None:
                    raise
                return settings.to_settings()


class GetBoothSettings(SqlAlchemySupport):
    """
    Returns the booth settings together with the live print request count
    """

    def __init__(self, session_factory, get_or_init_settings_cmd: GetOrInitSettings):
        super().__init__(session_factory)
        self._get_or_init_settings = get_or_init_settings_cmd

    def __call__(self) -> BoothSettings:
        settings = self._get_or_init_settings()
        with self._session_factory() as session:
            return BoothSettings(
                settings=settings,
                current_count=count_print_requests(session),
            )


class GetBoothStatus:
    """
    Public booth status
    """

    def __init__(self, get_booth_settings: GetBoothSettings):
        self._get_booth_settings = get_booth_settings

    def __call__(self) -> BoothStatus:
        booth_settings = self._get_booth_settings()
        return BoothStatus(
            is_paused=booth_settings.settings.is_paused,
            max_print_requests=booth_settings.settings.max_print_requests,
            current_count=booth_settings.current_count,
        )


def parse_settings_update(patch: dict[str, Any]) -> SettingsUpdate:
    """
    Validates a partial settings update.

    - `is_paused` must be a bool
    - `max_print_requests` must be a whole number >= 1

    Unknown fields are ignored.

    :exception ValidationError: if a field is invalid
    """
    update = SettingsUpdate()

    if (is_paused := patch.get("is_paused")) is not None:
        if not isinstance(is_paused, bool):
            raise ValidationError("is_paused must be a boolean")
        update.is_paused = is_paused

    if (max_print_requests := patch.get("max_print_requests")) is not None:
        # bool is a subclass of int, but true/false is not a capacity
        if (
            isinstance(max_print_requests, bool)
            or not isinstance(max_print_requests, Real)
            or not math.isfinite(max_print_requests)
            or max_print_requests != int(max_print_requests)
            or max_print_requests < 1
        ):
            raise ValidationError("max_print_requests must be a number >= 1")
        update.max_print_requests = int(max_print_requests)

    return update


class UpdateSettings(
    Command[SettingsUpdate, BoothSettings],
    SqlAlchemySupport,
):
    """
    Applies a partial settings update.

    Lowering `max_print_requests` below the current count does not delete any print requests.
    It only blocks new ones.
    """

    def __call__(self, update: SettingsUpdate) -> BoothSettings:
        try:
            result = self._update(update)
        except IntegrityError:
            # lost the race to initialize the settings row - the row exists now
            result = self._update(update)

        self.get_logger().info(
            "booth settings updated: is_paused=%s max_print_requests=%s",
            result.settings.is_paused,
            result.settings.max_print_requests,
        )
        return result

    def _update(self, update: SettingsUpdate) -> BoothSettings:
        with self._session_factory.begin() as session:
            settings = get_or_init_settings(session)
            settings.update(update)
            session.flush()
            return BoothSettings(
                settings=settings.to_settings(),
                current_count=count_print_requests(session),
            )
