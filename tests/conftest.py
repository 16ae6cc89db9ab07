from __future__ import annotations

import asyncio

import pytest

from deal_structure.domain.deal import FieldId, SaveRejectedError
from deal_structure.ports.field_saver import FieldSaver


class GatedFieldSaver(FieldSaver):
    """
    Saver whose calls stay pending until the test resolves them.

    Lets tests observe the SAVING state and finish saves in any order.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[FieldId, str]] = []
        self._pending: dict[FieldId, asyncio.Future[None]] = {}

    async def save(self, field_id: FieldId, value: str) -> None:
        self.calls.append((field_id, value))
        future: asyncio.Future[None] = asyncio.get_running_loop().create_future()
        self._pending[field_id] = future
        await future

    def accept(self, field_id: FieldId) -> None:
        self._pending.pop(field_id).set_result(None)

    def reject(self, field_id: FieldId, reason: str = "Rejected") -> None:
        self._pending.pop(field_id).set_exception(SaveRejectedError(field_id, reason))

    def fail(self, field_id: FieldId, exc: Exception) -> None:
        self._pending.pop(field_id).set_exception(exc)


async def settle() -> None:
    """Let scheduled tasks run until they block on the saver."""
    for _ in range(5):
        await asyncio.sleep(0)


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def gated_saver() -> GatedFieldSaver:
    return GatedFieldSaver()


@pytest.fixture
def settle_tasks():
    return settle
