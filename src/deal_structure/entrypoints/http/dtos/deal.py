from pydantic import BaseModel, ConfigDict, Field


class FieldViewDTO(BaseModel):
    """What the UI renders for one deal field."""

    field_id: str = Field(
        description="Field identifier",
        examples=["salesPrice"],
    )
    label: str = Field(
        description="Human-readable label",
        examples=["Sales Price"],
    )
    display_value: str = Field(
        description="Value formatted for the input, with dollar sign and thousands separators",
        examples=["$27,537.00"],
    )
    is_saving: bool = Field(description="A save of this field is in flight")
    has_error: bool = Field(description="The last save of this field was rejected")
    error: str | None = Field(
        default=None,
        description="Rejection reason while has_error is true",
        examples=["Sales price must be at least $10,000"],
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field_id": "salesPrice",
                "label": "Sales Price",
                "display_value": "$9,999.00",
                "is_saving": False,
                "has_error": True,
                "error": "Sales price must be at least $10,000",
            }
        }
    )


class DealStructureDTO(BaseModel):
    """Whole form: every field plus the derived total."""

    amount_financed: str = Field(
        description="Sales price - down payment + warranty + CPI + GAP, as committed",
        examples=["$25,037.00"],
    )
    fields: list[FieldViewDTO]


class ChangeFieldRequestDTO(BaseModel):
    """Raw text currently in the input."""

    raw: str = Field(
        description="Input text as typed; anything but digits and '.' is ignored",
        examples=["$12,500.5"],
        max_length=64,
    )


class BlurFieldResponseDTO(BaseModel):
    """Result of committing a field on blur."""

    outcome: str = Field(
        description="skipped (no numeric change), committed or rejected",
        examples=["committed"],
    )
    field: FieldViewDTO
    amount_financed: str = Field(examples=["$25,037.00"])
