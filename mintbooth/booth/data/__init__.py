"""
Booth data model

Notes
-----
Data model class names are prefixed with a 'T', which identifies them as classes that map to database tables.
This naming convention also avoids name collision with other similarly named domain model classes, e.g.,

`TPrintRequest` is a data model class vs `PrintRequest` is a domain model class

"""
from datetime import datetime
from enum import Enum as PyEnum

from sqlalchemy import DateTime, Enum, Engine
from sqlalchemy.orm import DeclarativeBase, MappedAsDataclass

from mintbooth.booth.domain.print_request import PrintRequestStatus, TShirtSize


def _enum_values(enum_class: type[PyEnum]) -> list[str]:
    # persist enum values, e.g. 'in_progress', instead of member names
    return [member.value for member in enum_class]


class Base(MappedAsDataclass, DeclarativeBase):
    """
    Data model base class.

    All data model classes should extend Base.
    """

    # pylint: disable=too-few-public-methods

    type_annotation_map = {
        datetime: DateTime(timezone=True),
        PrintRequestStatus: Enum(
            PrintRequestStatus,
            native_enum=False,
            length=20,
            values_callable=_enum_values,
        ),
        TShirtSize: Enum(
            TShirtSize,
            native_enum=False,
            length=4,
            values_callable=_enum_values,
        ),
    }


def create_schema(engine: Engine) -> None:
    """
    Creates the booth tables if they do not exist
    """
    # pylint: disable=import-outside-toplevel,unused-import
    # table modules must be imported to register their tables with the metadata
    from mintbooth.booth.data import (  # noqa: F401
        free_mint_claim,
        print_request,
        settings,
    )

    Base.metadata.create_all(engine)
