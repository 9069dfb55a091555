# utxo_validator/validation/errors.py
from dataclasses import dataclass, field
from typing import Dict, List, Any
from enum import Enum


class ValidationErrorKind(Enum):
    UTXO_NOT_FOUND = "UTXO_NOT_FOUND"
    INVALID_SIGNATURE = "INVALID_SIGNATURE"
    DOUBLE_SPENDING = "DOUBLE_SPENDING"
    NEGATIVE_AMOUNT = "NEGATIVE_AMOUNT"
    AMOUNT_MISMATCH = "AMOUNT_MISMATCH"


def _context_value_to_dict(value: Any) -> Any:
    if hasattr(value, 'to_dict'):
        return value.to_dict()
    return value


@dataclass
class ValidationError:
    """One rule violation found in a transaction. Returned, never raised."""
    kind: ValidationErrorKind
    message: str
    context: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'kind': self.kind.value,
            'message': self.message,
            'context': {key: _context_value_to_dict(value) for key, value in self.context.items()}
        }


@dataclass
class ValidationResult:
    valid: bool
    errors: List[ValidationError] = field(default_factory=list)

    def error_kinds(self) -> List[ValidationErrorKind]:
        """Kinds of all errors, in the order the checks found them"""
        return [error.kind for error in self.errors]

    def errors_of(self, kind: ValidationErrorKind) -> List[ValidationError]:
        return [error for error in self.errors if error.kind == kind]

    def has_error(self, kind: ValidationErrorKind) -> bool:
        return any(error.kind == kind for error in self.errors)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'valid': self.valid,
            'errors': [error.to_dict() for error in self.errors]
        }


def create_validation_error(kind: ValidationErrorKind, message: str,
                            context: Dict[str, Any] = None) -> ValidationError:
    return ValidationError(kind=kind, message=message, context=dict(context or {}))
