"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class InvalidInputError(ValidationError):
    """Input rejected before any transaction record is constructed."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


def transaction_not_found(transaction_id: int) -> str:
    """Return message for missing transaction."""
    return f"Transaction {transaction_id} not found"


def invalid_choice(kind: str, value: object, choices: list[str]) -> str:
    """Return message for a value outside a closed set."""
    return f"Unknown {kind} '{value}'. Expected one of: {', '.join(choices)}"


def installment_count_too_low(count: int) -> str:
    """Return message for an installment count below two."""
    return f"Installment count must be at least 2, got {count}"


def installments_require_expense() -> str:
    """Return message when income is passed to the installment splitter."""
    return "Only expenses can be split into installments"
