# utxo_validator/validation/__init__.py
from utxo_validator.validation.errors import (
    ValidationError,
    ValidationErrorKind,
    ValidationResult,
    create_validation_error
)
from utxo_validator.validation.transaction_validator import TransactionValidator

__all__ = [
    'ValidationError',
    'ValidationErrorKind',
    'ValidationResult',
    'create_validation_error',
    'TransactionValidator'
]
