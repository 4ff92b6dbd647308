"""
Command to move a print request through its fulfillment lifecycle
"""
from dataclasses import dataclass
from typing import Any

from mintbooth.booth.commands.data import MAX_SQL_INTEGER, SqlAlchemySupport
from mintbooth.booth.data.print_request import TPrintRequest
from mintbooth.booth.domain.print_request import PrintRequest, PrintRequestStatus
from mintbooth.booth.errors import ValidationError, PrintRequestNotFound
from mintbooth.core.command import Command


@dataclass(slots=True)
class PrintRequestStatusUpdate:
    id: int  # pylint: disable=invalid-name
    status: PrintRequestStatus

    @classmethod
    def parse(
        cls, id: Any, status: Any  # pylint: disable=redefined-builtin
    ) -> "PrintRequestStatusUpdate":
        """
        Checked in order: status is present, id is a whole number, status is valid

        :exception ValidationError:
        """
        if not status:
            raise ValidationError("status is required")

        if isinstance(id, bool):
            raise ValidationError("Invalid ID format")
        try:
            id = int(id)
        except (TypeError, ValueError) as err:
            raise ValidationError("Invalid ID format") from err

        try:
            status = PrintRequestStatus(status)
        except ValueError as err:
            raise ValidationError(
                f"Invalid status. Must be one of: {', '.join(PrintRequestStatus.values())}"
            ) from err

        return cls(id=id, status=status)


class UpdatePrintRequestStatus(
    Command[PrintRequestStatusUpdate, PrintRequest],
    SqlAlchemySupport,
):
    """
    Any status may follow any status.

    :exception PrintRequestNotFound:
    """

    def __call__(self, update: PrintRequestStatusUpdate) -> PrintRequest:
        if abs(update.id) > MAX_SQL_INTEGER:
            # no row can have an ID that does not fit in an INTEGER column
            raise PrintRequestNotFound

        with self._session_factory.begin() as session:
            print_request = session.get(TPrintRequest, update.id)
            if print_request is None:
                raise PrintRequestNotFound

            previous_status = print_request.status
            print_request.update_status(update.status)
            session.flush()
            result = print_request.to_print_request()

        self.get_logger().info(
            "print request status updated: id=%s %s -> %s",
            result.id,
            previous_status,
            result.status,
        )
        return result
