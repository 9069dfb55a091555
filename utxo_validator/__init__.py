# utxo_validator/__init__.py
from utxo_validator.models import UTXO, UtxoId, Transaction, TransactionInput, TransactionOutput
from utxo_validator.interfaces import UTXOLookup, SignatureVerifier
from utxo_validator.pool import InMemoryUTXOPool
from utxo_validator.crypto import ECDSAVerifier, generate_private_key, public_key_hex, sign_transaction
from utxo_validator.serialization import SIGNING_PAYLOAD_VERSION, create_signing_payload
from utxo_validator.validation import (
    TransactionValidator,
    ValidationError,
    ValidationErrorKind,
    ValidationResult
)
from utxo_validator.config import ValidatorConfig
from utxo_validator.exceptions import (
    UTXOValidatorError,
    SerializationError,
    DeserializationError,
    SigningError,
    DuplicateUTXOError,
    ConfigurationError
)

__version__ = "1.0.0"
__all__ = [
    'UTXO',
    'UtxoId',
    'Transaction',
    'TransactionInput',
    'TransactionOutput',
    'UTXOLookup',
    'SignatureVerifier',
    'InMemoryUTXOPool',
    'ECDSAVerifier',
    'generate_private_key',
    'public_key_hex',
    'sign_transaction',
    'SIGNING_PAYLOAD_VERSION',
    'create_signing_payload',
    'TransactionValidator',
    'ValidationError',
    'ValidationErrorKind',
    'ValidationResult',
    'ValidatorConfig',
    'UTXOValidatorError',
    'SerializationError',
    'DeserializationError',
    'SigningError',
    'DuplicateUTXOError',
    'ConfigurationError'
]
