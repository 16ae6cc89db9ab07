"""REST API error response models.

Structured error responses that provide consistent format for all HTTP errors.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Individual error detail for field-level errors."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "raw",
                "message": "String should have at most 64 characters",
                "code": "string_too_long",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Simple error:
            {
                "detail": "Field with identifier 'tradeIn' not found",
                "code": "NOT_FOUND"
            }

        Request validation error:
            {
                "detail": "Invalid request parameters",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {
                        "field": "raw",
                        "message": "Field required",
                        "code": "missing"
                    }
                ]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Field with identifier 'tradeIn' not found", "code": "NOT_FOUND"},
                {"detail": "Field 'salesPrice' is still saving", "code": "CONFLICT"},
                {
                    "detail": "Invalid request parameters",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {"field": "raw", "message": "Field required", "code": "missing"},
                    ],
                },
            ]
        }
    )
