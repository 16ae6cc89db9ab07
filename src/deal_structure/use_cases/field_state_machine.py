"""Edit/save lifecycle of a single deal field.

    IDLE --focus/change--> EDITING --blur--> SAVING --> IDLE | ERROR
    ERROR --change--> EDITING

Every transition replaces the immutable `Field` held by the machine.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from enum import Enum

from deal_structure.domain.currency import commit_format, sanitize
from deal_structure.domain.deal import (
    Field,
    FieldBusyError,
    FieldId,
    FieldStatus,
    SaveRejectedError,
)
from deal_structure.ports.field_saver import FieldSaver

logger = logging.getLogger(__name__)


class CommitOutcome(str, Enum):
    SKIPPED = "skipped"  # value did not change numerically; nothing saved
    COMMITTED = "committed"
    REJECTED = "rejected"


class FieldStateMachine:
    """
    Controller for one field: focus snapshot, live edits and commit on blur.

    At most one save is in flight per field. While SAVING the field refuses
    further input with FieldBusyError; other fields are independent.
    """

    def __init__(self, field_id: FieldId, initial_value: str, saver: FieldSaver) -> None:
        self._field = Field.initial(field_id, initial_value)
        self._saver = saver

    @property
    def field(self) -> Field:
        return self._field

    @property
    def field_id(self) -> FieldId:
        return self._field.field_id

    def focus(self) -> Field:
        """Remember the current value so blur can detect a no-op edit."""
        self._transition(snapshot_on_focus=self._field.value)
        return self._field

    def change(self, raw: str) -> Field:
        """
        Store sanitized input and clear any previous error.

        Raises:
            FieldBusyError: If the field is still saving
        """
        self._ensure_not_saving("change")
        self._transition(
            value=sanitize(raw),
            status=FieldStatus.EDITING,
            error_message=None,
        )
        return self._field

    async def blur(self) -> CommitOutcome:
        """
        Run the commit protocol.

        Returns:
            SKIPPED when the value matches the focus snapshot, otherwise
            COMMITTED or REJECTED depending on the saver

        Raises:
            FieldBusyError: If a previous save of this field is still in flight
        """
        self._ensure_not_saving("blur")

        field = self._field
        formatted = commit_format(field.value)
        snapshot = (
            field.snapshot_on_focus
            if field.snapshot_on_focus is not None
            else field.committed_value
        )

        if formatted == snapshot:
            # Cosmetic reformat only; an untouched rejected value stays flagged
            status = FieldStatus.ERROR if field.has_error else FieldStatus.IDLE
            self._transition(value=formatted, status=status, snapshot_on_focus=None)
            return CommitOutcome.SKIPPED

        self._transition(
            value=formatted,
            status=FieldStatus.SAVING,
            snapshot_on_focus=None,
            error_message=None,
        )
        logger.info(
            "Saving field",
            extra={"field_id": self.field_id.value, "value": formatted},
        )

        try:
            await self._saver.save(self.field_id, formatted)
        except SaveRejectedError as exc:
            logger.info(
                "Field save rejected",
                extra={"field_id": self.field_id.value, "value": formatted, "reason": exc.reason},
            )
            return self._reject(formatted, exc.reason)
        except Exception as exc:
            logger.error(
                "Field save failed unexpectedly",
                exc_info=exc,
                extra={"field_id": self.field_id.value, "value": formatted},
            )
            return self._reject(formatted, "Could not save value")

        self._transition(
            value=formatted,
            committed_value=formatted,
            status=FieldStatus.IDLE,
            error_message=None,
        )
        logger.info(
            "Field committed",
            extra={"field_id": self.field_id.value, "value": formatted},
        )
        return CommitOutcome.COMMITTED

    def _reject(self, attempted: str, reason: str) -> CommitOutcome:
        # Keep what the user tried, not the pre-edit value
        self._transition(value=attempted, status=FieldStatus.ERROR, error_message=reason)
        return CommitOutcome.REJECTED

    def _ensure_not_saving(self, event: str) -> None:
        if self._field.is_saving:
            logger.warning(
                "Field busy, event refused",
                extra={"field_id": self.field_id.value, "event": event},
            )
            raise FieldBusyError(self.field_id)

    def _transition(self, **changes) -> None:
        self._field = replace(self._field, **changes)
        logger.debug(
            "Field transition",
            extra={"field_id": self.field_id.value, "status": self._field.status.value},
        )
