# utxo_validator/exceptions/__init__.py
from utxo_validator.exceptions.custom_errors import (
    UTXOValidatorError,
    SerializationError,
    DeserializationError,
    SigningError,
    DuplicateUTXOError,
    ConfigurationError
)

__all__ = [
    'UTXOValidatorError',
    'SerializationError',
    'DeserializationError',
    'SigningError',
    'DuplicateUTXOError',
    'ConfigurationError'
]
