"""
Dependency injection for FastAPI routes.

The deal form lives for the whole session, so one instance is created per
app (in build_app) and kept on app.state. Routes never construct it.
"""

from __future__ import annotations

from fastapi import Request

from deal_structure.adapters.simulated_remote_field_saver import SimulatedRemoteFieldSaver
from deal_structure.infra.config import save_delay_seconds
from deal_structure.ports.field_saver import FieldSaver
from deal_structure.use_cases.deal_structure_form import DealStructureForm


def build_default_saver() -> FieldSaver:
    """Simulated back office with the latency configured in the environment."""
    return SimulatedRemoteFieldSaver(delay_seconds=save_delay_seconds())


def get_deal_form(request: Request) -> DealStructureForm:
    """
    Returns the session's deal form.

    Args:
        request: Current request (gives access to app.state)

    Returns:
        DealStructureForm: The form created at app startup
    """
    return request.app.state.deal_form
