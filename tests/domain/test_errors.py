"""Tests for domain error classes."""

from deal_structure.domain.errors import (
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)


class TestDomainError:
    """Tests for base DomainError class."""

    def test_creates_error_with_message(self) -> None:
        """DomainError stores message and has correct error code."""
        error = DomainError("Something went wrong")

        assert error.message == "Something went wrong"
        assert error.error_code == "DOMAIN_ERROR"
        assert error.context == {}

    def test_creates_error_with_context(self) -> None:
        """DomainError stores additional context."""
        error = DomainError("Error occurred", resource="Field", action="blur")

        assert error.context == {"resource": "Field", "action": "blur"}

    def test_to_dict_returns_structured_format(self) -> None:
        """DomainError.to_dict() returns structured error format."""
        error = DomainError("Test error", field="salesPrice", value="9999.00")

        assert error.to_dict() == {
            "message": "Test error",
            "code": "DOMAIN_ERROR",
            "field": "salesPrice",
            "value": "9999.00",
        }

    def test_str_representation(self) -> None:
        """DomainError string representation is the message."""
        assert str(DomainError("Test message")) == "Test message"


class TestValidationError:
    """Tests for ValidationError class."""

    def test_creates_simple_validation_error(self) -> None:
        error = ValidationError("Invalid input")

        assert error.message == "Invalid input"
        assert error.error_code == "VALIDATION_ERROR"
        assert isinstance(error, DomainError)

    def test_to_dict_returns_message_and_code(self) -> None:
        assert ValidationError("Simple error").to_dict() == {
            "message": "Simple error",
            "code": "VALIDATION_ERROR",
        }


class TestNotFoundError:
    """Tests for NotFoundError class."""

    def test_creates_not_found_error_with_identifier(self) -> None:
        error = NotFoundError("Field", "tradeIn")

        assert error.message == "Field with identifier 'tradeIn' not found"
        assert error.error_code == "NOT_FOUND"
        assert error.context == {"resource": "Field", "identifier": "tradeIn"}

    def test_creates_not_found_error_without_identifier(self) -> None:
        error = NotFoundError("Deal")

        assert error.message == "Deal not found"
        assert error.context["identifier"] is None


class TestConflictError:
    """Tests for ConflictError class."""

    def test_creates_conflict_error(self) -> None:
        error = ConflictError("Field is busy")

        assert error.message == "Field is busy"
        assert error.error_code == "CONFLICT"
