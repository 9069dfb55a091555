# utxo_validator/pool/memory_pool.py
import logging
import threading
from typing import Dict, Iterable, List, Optional
from utxo_validator.interfaces.utxo_lookup import UTXOLookup
from utxo_validator.models.utxo import UTXO, UtxoId
from utxo_validator.models.transaction import Transaction
from utxo_validator.exceptions import DuplicateUTXOError

logger = logging.getLogger(__name__)


class InMemoryUTXOPool(UTXOLookup):
    """Thread-safe dictionary-backed UTXO pool"""

    def __init__(self, utxos: Optional[Iterable[UTXO]] = None):
        self._utxos: Dict[UtxoId, UTXO] = {}
        self.lock = threading.RLock()
        for utxo in utxos or ():
            self.add_utxo(utxo)

    def __len__(self) -> int:
        with self.lock:
            return len(self._utxos)

    def __contains__(self, utxo_id: UtxoId) -> bool:
        with self.lock:
            return utxo_id in self._utxos

    def add_utxo(self, utxo: UTXO) -> None:
        """Add a UTXO to the pool"""
        with self.lock:
            if utxo.utxo_id in self._utxos:
                raise DuplicateUTXOError(f"UTXO already in pool: {utxo.utxo_id}")
            self._utxos[utxo.utxo_id] = utxo

    def remove_utxo(self, tx_id: str, output_index: int) -> bool:
        """Remove a UTXO; returns False if it was not present"""
        with self.lock:
            return self._utxos.pop(UtxoId(tx_id, output_index), None) is not None

    def get_utxo(self, tx_id: str, output_index: int) -> Optional[UTXO]:
        with self.lock:
            return self._utxos.get(UtxoId(tx_id, output_index))

    def has_utxo(self, tx_id: str, output_index: int) -> bool:
        return self.get_utxo(tx_id, output_index) is not None

    def all_utxos(self) -> List[UTXO]:
        with self.lock:
            return list(self._utxos.values())

    def get_utxos_for_owner(self, owner: str) -> List[UTXO]:
        with self.lock:
            return [utxo for utxo in self._utxos.values() if utxo.owner == owner]

    def get_balance(self, owner: str) -> int:
        return sum(utxo.amount for utxo in self.get_utxos_for_owner(owner))

    def apply_transaction(self, transaction: Transaction) -> None:
        """
        Spend the inputs of ``transaction`` and add its outputs as new UTXOs.

        No validation is performed; callers validate first. The update is
        all-or-nothing: if an output id collides with an existing UTXO the
        pool is left untouched.
        """
        with self.lock:
            new_utxos = [
                UTXO(utxo_id=UtxoId(transaction.id, index), amount=output.amount, owner=output.recipient)
                for index, output in enumerate(transaction.outputs)
            ]
            spent_ids = set(transaction.get_input_ids())
            for utxo in new_utxos:
                if utxo.utxo_id in self._utxos and utxo.utxo_id not in spent_ids:
                    raise DuplicateUTXOError(f"UTXO already in pool: {utxo.utxo_id}")

            for utxo_id in spent_ids:
                if self._utxos.pop(utxo_id, None) is None:
                    logger.warning("Applied transaction %s spends unknown UTXO %s", transaction.id, utxo_id)

            for utxo in new_utxos:
                self._utxos[utxo.utxo_id] = utxo

            logger.debug("Applied transaction %s: %d spent, %d created",
                         transaction.id, len(spent_ids), len(new_utxos))
