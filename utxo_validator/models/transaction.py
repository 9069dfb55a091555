# utxo_validator/models/transaction.py
from typing import List, Dict, Any
from dataclasses import dataclass, field
from utxo_validator.models.utxo import UtxoId
from utxo_validator.exceptions import DeserializationError
from utxo_validator.utils.helpers import current_timestamp_ms, is_integral_amount


@dataclass
class TransactionInput:
    """Spends the output named by ``utxo_id``.

    ``signature`` covers the transaction's canonical unsigned payload and
    must authenticate under ``owner``.
    """
    utxo_id: UtxoId
    owner: str
    signature: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            'utxo_id': self.utxo_id.to_dict(),
            'owner': self.owner,
            'signature': self.signature
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TransactionInput':
        try:
            return cls(
                utxo_id=UtxoId.from_dict(data['utxo_id']),
                owner=data['owner'],
                signature=data.get('signature', '')
            )
        except (KeyError, TypeError, AttributeError) as e:
            raise DeserializationError(f"Invalid transaction input data: {e}") from e


@dataclass
class TransactionOutput:
    """Value sent to ``recipient``. Non-positive amounts are representable so they can be reported."""
    amount: int
    recipient: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'amount': self.amount,
            'recipient': self.recipient
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TransactionOutput':
        try:
            amount = data['amount']
            recipient = data['recipient']
        except (KeyError, TypeError) as e:
            raise DeserializationError(f"Invalid transaction output data: {e}") from e
        if not is_integral_amount(amount):
            raise DeserializationError(f"Output amount must be an integer, got {amount!r}")
        return cls(amount=amount, recipient=recipient)


@dataclass
class Transaction:
    """A candidate transaction submitted for validation"""
    id: str
    inputs: List[TransactionInput] = field(default_factory=list)
    outputs: List[TransactionOutput] = field(default_factory=list)
    timestamp: int = field(default_factory=current_timestamp_ms)

    def get_input_ids(self) -> List[UtxoId]:
        return [inp.utxo_id for inp in self.inputs]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'inputs': [inp.to_dict() for inp in self.inputs],
            'outputs': [out.to_dict() for out in self.outputs],
            'timestamp': self.timestamp
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Transaction':
        try:
            tx_id = data['id']
            inputs = [TransactionInput.from_dict(inp) for inp in data.get('inputs', [])]
            outputs = [TransactionOutput.from_dict(out) for out in data.get('outputs', [])]
            timestamp = data['timestamp']
        except (KeyError, TypeError, AttributeError) as e:
            raise DeserializationError(f"Invalid transaction data: {e}") from e
        return cls(id=tx_id, inputs=inputs, outputs=outputs, timestamp=timestamp)
