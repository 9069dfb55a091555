# utxo_validator/crypto/__init__.py
from utxo_validator.crypto.signatures import (
    ECDSAVerifier,
    generate_private_key,
    get_curve,
    public_key_hex,
    sign_payload,
    sign_transaction
)

__all__ = [
    'ECDSAVerifier',
    'generate_private_key',
    'get_curve',
    'public_key_hex',
    'sign_payload',
    'sign_transaction'
]
