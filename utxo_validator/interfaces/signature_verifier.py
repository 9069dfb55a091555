# utxo_validator/interfaces/signature_verifier.py
from abc import ABC, abstractmethod

class SignatureVerifier(ABC):
    """Checks a signature over a payload against a claimed owner identity"""

    @abstractmethod
    def verify(self, payload: bytes, signature: str, owner: str) -> bool:
        """Return True if ``signature`` is authentic for ``payload`` under ``owner``"""
        pass
