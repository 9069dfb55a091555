# utxo_validator/interfaces/__init__.py
from utxo_validator.interfaces.utxo_lookup import UTXOLookup
from utxo_validator.interfaces.signature_verifier import SignatureVerifier

__all__ = ['UTXOLookup', 'SignatureVerifier']
