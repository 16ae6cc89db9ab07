from fastapi import APIRouter, Depends

from deal_structure.entrypoints.http.dependencies import get_deal_form
from deal_structure.entrypoints.http.dtos.deal import (
    BlurFieldResponseDTO,
    ChangeFieldRequestDTO,
    DealStructureDTO,
    FieldViewDTO,
)
from deal_structure.entrypoints.http.error_responses import ErrorResponse
from deal_structure.entrypoints.http.mappers.deal_mapper import DealMapper
from deal_structure.use_cases.deal_structure_form import DealStructureForm


# All handlers are async so form state is only touched from the event loop
router = APIRouter(tags=["Deal"])

_FIELD_ERRORS = {
    404: {"model": ErrorResponse, "description": "Unknown field identifier"},
    409: {"model": ErrorResponse, "description": "Field is still saving its previous value"},
}


@router.get(
    "/deal",
    response_model=DealStructureDTO,
    summary="Get deal structure",
    description="""
    Current state of every field and the amount financed.

    The amount financed only moves after a successful save:
    sales price - down payment + warranty + CPI + GAP.
    """,
)
async def get_deal(form: DealStructureForm = Depends(get_deal_form)) -> DealStructureDTO:
    return DealMapper.to_deal_dto(form)


@router.get(
    "/deal/fields/{field_id}",
    response_model=FieldViewDTO,
    summary="Get one field",
    responses={404: _FIELD_ERRORS[404]},
)
async def get_field(field_id: str, form: DealStructureForm = Depends(get_deal_form)) -> FieldViewDTO:
    return DealMapper.to_field_dto(form.view(field_id))


@router.post(
    "/deal/fields/{field_id}/focus",
    response_model=FieldViewDTO,
    summary="Focus a field",
    description="Marks the start of an edit; the current value becomes the no-op reference for blur.",
    responses={404: _FIELD_ERRORS[404]},
)
async def focus_field(field_id: str, form: DealStructureForm = Depends(get_deal_form)) -> FieldViewDTO:
    form.focus(field_id)
    return DealMapper.to_field_dto(form.view(field_id))


@router.post(
    "/deal/fields/{field_id}/change",
    response_model=FieldViewDTO,
    summary="Edit a field",
    description="""
    Replace the field's text with the sanitized input.

    Anything but digits and the first decimal point is dropped, and
    cents beyond two digits are truncated. Editing clears a previous error.
    """,
    responses=_FIELD_ERRORS,
)
async def change_field(
    field_id: str,
    payload: ChangeFieldRequestDTO,
    form: DealStructureForm = Depends(get_deal_form),
) -> FieldViewDTO:
    form.change(field_id, payload.raw)
    return DealMapper.to_field_dto(form.view(field_id))


@router.post(
    "/deal/fields/{field_id}/blur",
    response_model=BlurFieldResponseDTO,
    summary="Commit a field",
    description="""
    Format the value to cents and save it if it changed.

    Waits for the save to finish. While it is in flight the field reports
    is_saving and refuses further edits with 409.
    """,
    responses=_FIELD_ERRORS,
)
async def blur_field(
    field_id: str, form: DealStructureForm = Depends(get_deal_form)
) -> BlurFieldResponseDTO:
    outcome = await form.blur(field_id)
    return DealMapper.to_blur_response(outcome, form.view(field_id), form.amount_financed)
