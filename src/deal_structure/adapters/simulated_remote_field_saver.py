from __future__ import annotations

import asyncio
import logging

from deal_structure.domain.deal import FieldId, validate_saved_value
from deal_structure.ports.field_saver import FieldSaver

logger = logging.getLogger(__name__)

DEFAULT_DELAY_SECONDS = 1.5


class SimulatedRemoteFieldSaver(FieldSaver):
    """
    Stand-in for the dealership back office.

    Waits a fixed delay to mimic network latency, then applies the back
    office validation rules. Nothing is persisted beyond the process.
    """

    def __init__(self, delay_seconds: float = DEFAULT_DELAY_SECONDS) -> None:
        if delay_seconds < 0:
            raise ValueError("delay_seconds must be >= 0")
        self._delay_seconds = delay_seconds

    @property
    def delay_seconds(self) -> float:
        return self._delay_seconds

    async def save(self, field_id: FieldId, value: str) -> None:
        logger.debug(
            "Simulating remote save",
            extra={"field_id": field_id.value, "value": value, "delay": self._delay_seconds},
        )
        await asyncio.sleep(self._delay_seconds)
        validate_saved_value(field_id, value)
