from __future__ import annotations

from deal_structure.domain.deal import FieldId, validate_saved_value
from deal_structure.ports.field_saver import FieldSaver


class InMemoryFieldSaver(FieldSaver):
    """
    Canonical contract implementation for tests.

    - Applies the same business rules as the remote side
    - Resolves immediately (no suspension beyond the await itself)
    - Keeps every accepted value, latest per field in `saved`
    """

    def __init__(self) -> None:
        self.saved: dict[FieldId, str] = {}
        self.calls: list[tuple[FieldId, str]] = []

    async def save(self, field_id: FieldId, value: str) -> None:
        self.calls.append((field_id, value))
        validate_saved_value(field_id, value)
        self.saved[field_id] = value
