"""
Booth settings data model
"""
from datetime import datetime, UTC
from typing import cast

from sqlalchemy.orm import Mapped, mapped_column

from mintbooth.booth.data import Base
from mintbooth.booth.data.support import as_utc
from mintbooth.booth.domain.settings import (
    Settings,
    SETTINGS_ID,
    DEFAULT_IS_PAUSED,
    DEFAULT_MAX_PRINT_REQUESTS,
    SettingsUpdate,
)


class TSettings(Base):
    """
    Settings database table model.

    The table holds a single row. The singleton is enforced by the primary key, i.e., the row ID is always `SETTINGS_ID`.
    """

    __tablename__ = "settings"

    id: Mapped[int] = mapped_column(primary_key=True)  # pylint: disable=invalid-name
    is_paused: Mapped[bool] = mapped_column()
    max_print_requests: Mapped[int] = mapped_column()
    created_at: Mapped[datetime] = mapped_column()
    updated_at: Mapped[datetime] = mapped_column()

    @classmethod
    def create_default(cls) -> "TSettings":
        """
        :return: settings row initialized with default values
        """
        now = datetime.now(UTC)
        return cls(
            id=SETTINGS_ID,
            is_paused=DEFAULT_IS_PAUSED,
            max_print_requests=DEFAULT_MAX_PRINT_REQUESTS,
            created_at=now,
            updated_at=now,
        )

    def update(self, update: SettingsUpdate):
        """
        Applies the fields that are set
        """
        if update.is_paused is not None:
            self.is_paused = cast(Mapped[bool], update.is_paused)
        if update.max_print_requests is not None:
            self.max_print_requests = cast(Mapped[int], update.max_print_requests)
        self.updated_at = cast(Mapped[datetime], datetime.now(UTC))

    def to_settings(self) -> Settings:
        """
        Converts this instance into a Settings instance
        """
        return Settings(
            id=self.id,
            is_paused=self.is_paused,
            max_print_requests=self.max_print_requests,
            created_at=as_utc(self.created_at),
            updated_at=as_utc(self.updated_at),
        )
