#!/usr/bin/env python3
"""
Walk the deal structure form through a typical editing session.

Scenarios:
- A: initial amount financed
- B: sales price set below the minimum is rejected, total unchanged
- C: editing the rejected field clears the error right away, then a valid
     price is committed and the total moves

Usage:
    python scripts/simulate_deal.py
    DEAL_SAVE_DELAY_SECONDS=0 python scripts/simulate_deal.py
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from deal_structure.adapters.simulated_remote_field_saver import SimulatedRemoteFieldSaver
from deal_structure.domain.deal import FieldId
from deal_structure.infra.config import save_delay_seconds
from deal_structure.infra.logging_setup import configure_logging
from deal_structure.use_cases.deal_structure_form import DealStructureForm


def print_form(title: str, form: DealStructureForm) -> None:
    print(f"\n== {title}")
    for view in form.views():
        flags = []
        if view.is_saving:
            flags.append("saving")
        if view.has_error:
            flags.append(f"error: {view.error_message}")
        suffix = f"  [{', '.join(flags)}]" if flags else ""
        print(f"  {view.label:<20} {view.display_value:>14}{suffix}")
    print(f"  {'Amount Financed':<20} {form.amount_financed:>14}")


async def main() -> None:
    configure_logging()
    form = DealStructureForm(saver=SimulatedRemoteFieldSaver(save_delay_seconds()))

    print_form("A: initial deal", form)

    form.focus(FieldId.SALES_PRICE)
    form.change(FieldId.SALES_PRICE, "9999")
    outcome = await form.blur(FieldId.SALES_PRICE)
    print_form(f"B: sales price 9999 ({outcome.value})", form)

    form.focus(FieldId.SALES_PRICE)
    form.change(FieldId.SALES_PRICE, "$30,000")
    print_form("C: editing again clears the error", form)

    outcome = await form.blur(FieldId.SALES_PRICE)
    print_form(f"C: sales price 30000 ({outcome.value})", form)


if __name__ == "__main__":
    asyncio.run(main())
