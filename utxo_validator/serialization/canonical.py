# utxo_validator/serialization/canonical.py
"""
Canonical unsigned encoding of a transaction.

This is the exact byte string that transaction creators sign and that the
validator verifies against. Changing the layout breaks every existing
signature, so any change must bump SIGNING_PAYLOAD_VERSION and be rolled out
to signers and validators together.

Layout (compact JSON, keys in this order, signatures excluded)::

    {"id":...,"inputs":[{"utxoId":{"txId":...,"outputIndex":...},"owner":...}],
     "outputs":[{"amount":...,"recipient":...}],"timestamp":...}
"""
import json
from typing import Dict, Any
from utxo_validator.models.transaction import Transaction
from utxo_validator.exceptions import SerializationError

SIGNING_PAYLOAD_VERSION = 1


def unsigned_transaction_document(transaction: Transaction) -> Dict[str, Any]:
    """Build the signature-free document; insertion order is part of the encoding"""
    return {
        'id': transaction.id,
        'inputs': [
            {
                'utxoId': {
                    'txId': inp.utxo_id.tx_id,
                    'outputIndex': inp.utxo_id.output_index
                },
                'owner': inp.owner
            }
            for inp in transaction.inputs
        ],
        'outputs': [
            {
                'amount': out.amount,
                'recipient': out.recipient
            }
            for out in transaction.outputs
        ],
        'timestamp': transaction.timestamp
    }


def create_signing_payload(transaction: Transaction) -> bytes:
    """Serialize ``transaction`` without signatures to its canonical bytes"""
    try:
        text = json.dumps(
            unsigned_transaction_document(transaction),
            separators=(',', ':'),
            ensure_ascii=False,
            allow_nan=False
        )
        return text.encode('utf-8')
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Cannot encode transaction {transaction.id!r} for signing: {e}") from e
