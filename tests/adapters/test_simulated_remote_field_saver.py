from __future__ import annotations

from unittest.mock import AsyncMock, patch

import pytest

from deal_structure.adapters.simulated_remote_field_saver import (
    DEFAULT_DELAY_SECONDS,
    SimulatedRemoteFieldSaver,
)
from deal_structure.domain.deal import FieldId, SaveRejectedError


def test_default_delay() -> None:
    assert SimulatedRemoteFieldSaver().delay_seconds == DEFAULT_DELAY_SECONDS == 1.5


def test_rejects_negative_delay() -> None:
    with pytest.raises(ValueError, match="delay_seconds must be >= 0"):
        SimulatedRemoteFieldSaver(delay_seconds=-1)


@pytest.mark.anyio
async def test_waits_configured_delay_before_answering() -> None:
    saver = SimulatedRemoteFieldSaver(delay_seconds=2.0)

    with patch(
        "deal_structure.adapters.simulated_remote_field_saver.asyncio.sleep",
        new_callable=AsyncMock,
    ) as mock_sleep:
        await saver.save(FieldId.WARRANTY, "500.00")

    mock_sleep.assert_awaited_once_with(2.0)


@pytest.mark.anyio
async def test_rejects_low_sales_price_after_delay() -> None:
    saver = SimulatedRemoteFieldSaver(delay_seconds=0)

    with pytest.raises(SaveRejectedError, match="Sales price must be at least"):
        await saver.save(FieldId.SALES_PRICE, "9999.00")


@pytest.mark.anyio
async def test_accepts_valid_sales_price() -> None:
    saver = SimulatedRemoteFieldSaver(delay_seconds=0)

    await saver.save(FieldId.SALES_PRICE, "10000.00")
