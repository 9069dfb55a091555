# utxo_validator/serialization/__init__.py
from utxo_validator.serialization.canonical import (
    SIGNING_PAYLOAD_VERSION,
    create_signing_payload,
    unsigned_transaction_document
)

__all__ = ['SIGNING_PAYLOAD_VERSION', 'create_signing_payload', 'unsigned_transaction_document']
