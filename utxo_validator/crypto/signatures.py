# utxo_validator/crypto/signatures.py
import logging
from typing import Dict, Iterable, Optional
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives import serialization
from cryptography.exceptions import InvalidSignature
from utxo_validator.interfaces.signature_verifier import SignatureVerifier
from utxo_validator.models.transaction import Transaction
from utxo_validator.serialization.canonical import create_signing_payload
from utxo_validator.exceptions import SigningError

logger = logging.getLogger(__name__)

SUPPORTED_CURVES = {
    'secp256k1': ec.SECP256K1
}


def get_curve(name: str) -> ec.EllipticCurve:
    try:
        return SUPPORTED_CURVES[name.lower()]()
    except KeyError:
        raise ValueError(f"Unsupported curve: {name}") from None


def generate_private_key(curve: Optional[ec.EllipticCurve] = None) -> ec.EllipticCurvePrivateKey:
    """Generate a new signing key (SECP256K1 unless told otherwise)"""
    return ec.generate_private_key(curve or ec.SECP256K1())


def public_key_hex(private_key: ec.EllipticCurvePrivateKey) -> str:
    """Owner identity for ``private_key``: hex of the uncompressed X9.62 public point"""
    return private_key.public_key().public_bytes(
        encoding=serialization.Encoding.X962,
        format=serialization.PublicFormat.UncompressedPoint
    ).hex()


def sign_payload(private_key: ec.EllipticCurvePrivateKey, payload: bytes) -> str:
    """ECDSA/SHA-256 sign ``payload`` and return the DER signature as hex"""
    try:
        signature = private_key.sign(payload, ec.ECDSA(hashes.SHA256()))
    except (TypeError, ValueError) as e:
        raise SigningError(f"Signing failed: {e}") from e
    return signature.hex()


def sign_transaction(transaction: Transaction,
                     private_keys: Iterable[ec.EllipticCurvePrivateKey]) -> Transaction:
    """Sign every input of ``transaction`` in place with the key matching its owner.

    All inputs share one canonical payload because signatures are excluded
    from it, so the payload is computed once.
    """
    keys_by_owner: Dict[str, ec.EllipticCurvePrivateKey] = {
        public_key_hex(key): key for key in private_keys
    }
    payload = create_signing_payload(transaction)

    for index, tx_input in enumerate(transaction.inputs):
        key = keys_by_owner.get(tx_input.owner)
        if key is None:
            raise SigningError(f"No private key for owner of input {index} ({tx_input.utxo_id})")
        tx_input.signature = sign_payload(key, payload)

    return transaction


class ECDSAVerifier(SignatureVerifier):
    """Verifies hex DER ECDSA/SHA-256 signatures against hex X9.62 public keys"""

    def __init__(self, curve: Optional[ec.EllipticCurve] = None):
        self.curve = curve or ec.SECP256K1()

    def verify(self, payload: bytes, signature: str, owner: str) -> bool:
        try:
            signature_bytes = bytes.fromhex(signature)
            public_key = ec.EllipticCurvePublicKey.from_encoded_point(
                self.curve, bytes.fromhex(owner)
            )
            public_key.verify(signature_bytes, payload, ec.ECDSA(hashes.SHA256()))
            return True
        except InvalidSignature:
            logger.debug("Signature does not match payload for owner %s", owner[:16])
            return False
        except (ValueError, TypeError) as e:
            # Malformed hex or a point that is not on the curve
            logger.debug("Unusable signature or owner key: %s", e)
            return False
