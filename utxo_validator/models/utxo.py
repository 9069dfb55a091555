# utxo_validator/models/utxo.py
from typing import Dict, Any
from dataclasses import dataclass
from utxo_validator.exceptions import DeserializationError
from utxo_validator.utils.helpers import is_integral_amount


@dataclass(frozen=True)
class UtxoId:
    """Points at one output of a prior transaction.

    Frozen so that equality and hashing are by value; duplicate-input
    detection relies on two separately built ids comparing equal.
    """
    tx_id: str
    output_index: int

    def __str__(self) -> str:
        return f"{self.tx_id}:{self.output_index}"

    @classmethod
    def parse(cls, text: str) -> 'UtxoId':
        """Parse the ``tx_id:output_index`` form produced by ``str()``"""
        tx_id, sep, index = text.rpartition(':')
        if not sep or not tx_id:
            raise ValueError(f"Malformed UTXO id: {text!r}")
        try:
            output_index = int(index)
        except ValueError:
            raise ValueError(f"Malformed output index in UTXO id: {text!r}") from None
        return cls(tx_id=tx_id, output_index=output_index)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'tx_id': self.tx_id,
            'output_index': self.output_index
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'UtxoId':
        try:
            tx_id = data['tx_id']
            output_index = data['output_index']
        except (KeyError, TypeError) as e:
            raise DeserializationError(f"Invalid UTXO id data: {e}") from e
        if not isinstance(tx_id, str) or not isinstance(output_index, int) or isinstance(output_index, bool):
            raise DeserializationError("UTXO id requires a string tx_id and an integer output_index")
        return cls(tx_id=tx_id, output_index=output_index)


@dataclass(frozen=True)
class UTXO:
    """An unspent output record as held by a UTXO pool"""
    utxo_id: UtxoId
    amount: int
    owner: str

    @property
    def tx_id(self) -> str:
        return self.utxo_id.tx_id

    @property
    def output_index(self) -> int:
        return self.utxo_id.output_index

    def to_dict(self) -> Dict[str, Any]:
        return {
            'utxo_id': self.utxo_id.to_dict(),
            'amount': self.amount,
            'owner': self.owner
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'UTXO':
        try:
            utxo_id = UtxoId.from_dict(data['utxo_id'])
            amount = data['amount']
            owner = data['owner']
        except (KeyError, TypeError) as e:
            raise DeserializationError(f"Invalid UTXO data: {e}") from e
        if not is_integral_amount(amount) or amount < 0:
            raise DeserializationError(f"UTXO amount must be a non-negative integer, got {amount!r}")
        return cls(utxo_id=utxo_id, amount=amount, owner=owner)
