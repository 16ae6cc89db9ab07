from __future__ import annotations

from deal_structure.domain.deal import FieldView
from deal_structure.entrypoints.http.dtos.deal import (
    BlurFieldResponseDTO,
    DealStructureDTO,
    FieldViewDTO,
)
from deal_structure.use_cases.deal_structure_form import DealStructureForm
from deal_structure.use_cases.field_state_machine import CommitOutcome


class DealMapper:
    """Maps between the deal form and REST DTOs."""

    @staticmethod
    def to_field_dto(view: FieldView) -> FieldViewDTO:
        return FieldViewDTO(
            field_id=view.field_id.value,
            label=view.label,
            display_value=view.display_value,
            is_saving=view.is_saving,
            has_error=view.has_error,
            error=view.error_message,
        )

    @staticmethod
    def to_deal_dto(form: DealStructureForm) -> DealStructureDTO:
        return DealStructureDTO(
            amount_financed=form.amount_financed,
            fields=[DealMapper.to_field_dto(view) for view in form.views()],
        )

    @staticmethod
    def to_blur_response(
        outcome: CommitOutcome, view: FieldView, amount_financed: str
    ) -> BlurFieldResponseDTO:
        return BlurFieldResponseDTO(
            outcome=outcome.value,
            field=DealMapper.to_field_dto(view),
            amount_financed=amount_financed,
        )
