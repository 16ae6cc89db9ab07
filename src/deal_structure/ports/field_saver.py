from __future__ import annotations

from abc import ABC, abstractmethod

from deal_structure.domain.deal import FieldId


class FieldSaver(ABC):
    """
    Port for persisting a single deal field.

    Contract:
        - `value` is already commit-formatted ("12500.00")
        - Returning normally means the value was accepted
        - Refusals raise SaveRejectedError with a human-readable reason
        - Implementations may suspend for as long as the remote side takes;
          callers never cancel an in-flight save
    """

    @abstractmethod
    async def save(self, field_id: FieldId, value: str) -> None:
        """
        Validate and persist `value` for `field_id`.

        Raises:
            SaveRejectedError: If the remote side refuses the value
        """
        ...
