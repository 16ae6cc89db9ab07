from __future__ import annotations

import logging
from typing import Mapping

from deal_structure.domain.deal import INITIAL_VALUES, Field, FieldId, FieldView
from deal_structure.domain.errors import NotFoundError
from deal_structure.ports.field_saver import FieldSaver
from deal_structure.use_cases.compute_amount_financed import compute_amount_financed
from deal_structure.use_cases.field_state_machine import CommitOutcome, FieldStateMachine

logger = logging.getLogger(__name__)


class DealStructureForm:
    """
    The deal structure form: five money fields and the amount financed.

    Responsibilities:
    - Own one FieldStateMachine per line item (sole owner of field state)
    - Route focus / change / blur events to the right field
    - Recompute the amount financed from committed values after every
      successful commit, and only then

    Fields commit independently; saves of different fields may overlap and
    finish in any order.
    """

    def __init__(
        self,
        saver: FieldSaver,
        initial_values: Mapping[FieldId, str] = INITIAL_VALUES,
    ) -> None:
        self._machines: dict[FieldId, FieldStateMachine] = {
            field_id: FieldStateMachine(field_id, initial_values[field_id], saver)
            for field_id in FieldId
        }
        self._amount_financed = self._recompute()

    @property
    def amount_financed(self) -> str:
        return self._amount_financed

    def field(self, field_id: FieldId | str) -> Field:
        return self._machine(field_id).field

    def fields(self) -> list[Field]:
        return [machine.field for machine in self._machines.values()]

    def view(self, field_id: FieldId | str) -> FieldView:
        return FieldView.of(self.field(field_id))

    def views(self) -> list[FieldView]:
        return [FieldView.of(field) for field in self.fields()]

    def focus(self, field_id: FieldId | str) -> Field:
        return self._machine(field_id).focus()

    def change(self, field_id: FieldId | str, raw: str) -> Field:
        """
        Raises:
            NotFoundError: If field_id is not a deal field
            FieldBusyError: If the field is still saving
        """
        return self._machine(field_id).change(raw)

    async def blur(self, field_id: FieldId | str) -> CommitOutcome:
        """
        Commit the field and, on success, republish the amount financed.

        Raises:
            NotFoundError: If field_id is not a deal field
            FieldBusyError: If the field is still saving
        """
        machine = self._machine(field_id)
        outcome = await machine.blur()

        if outcome is CommitOutcome.COMMITTED:
            self._amount_financed = self._recompute()
            logger.info(
                "Amount financed recomputed",
                extra={"field_id": machine.field_id.value, "amount_financed": self._amount_financed},
            )
        return outcome

    def _recompute(self) -> str:
        # Snapshot-and-replace over committed values only
        return compute_amount_financed(
            {field_id: machine.field.committed_value for field_id, machine in self._machines.items()}
        )

    def _machine(self, field_id: FieldId | str) -> FieldStateMachine:
        try:
            return self._machines[FieldId(field_id)]
        except ValueError:
            raise NotFoundError(resource="Field", identifier=str(field_id)) from None
