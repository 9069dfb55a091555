# utxo_validator/interfaces/utxo_lookup.py
from abc import ABC, abstractmethod
from typing import Optional
from utxo_validator.models.utxo import UTXO

class UTXOLookup(ABC):
    """Read access to the current view of unspent outputs"""

    @abstractmethod
    def get_utxo(self, tx_id: str, output_index: int) -> Optional[UTXO]:
        """Return the unspent output at (tx_id, output_index), or None if absent"""
        pass
