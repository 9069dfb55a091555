"""
Tests for the canonical signing payload.
"""

import json
import pytest
from utxo_validator.exceptions import SerializationError
from utxo_validator.models.transaction import Transaction, TransactionInput, TransactionOutput
from utxo_validator.models.utxo import UtxoId
from utxo_validator.serialization.canonical import (
    SIGNING_PAYLOAD_VERSION,
    create_signing_payload,
    unsigned_transaction_document
)


@pytest.fixture
def sample_transaction():
    return Transaction(
        id="tx-42",
        inputs=[
            TransactionInput(utxo_id=UtxoId("prev", 0), owner="02ab", signature="sig-a"),
            TransactionInput(utxo_id=UtxoId("prev", 3), owner="02cd", signature="sig-b"),
        ],
        outputs=[TransactionOutput(amount=15, recipient="bob")],
        timestamp=1700000000000
    )


def test_exact_layout(sample_transaction):
    expected = (
        '{"id":"tx-42",'
        '"inputs":[{"utxoId":{"txId":"prev","outputIndex":0},"owner":"02ab"},'
        '{"utxoId":{"txId":"prev","outputIndex":3},"owner":"02cd"}],'
        '"outputs":[{"amount":15,"recipient":"bob"}],'
        '"timestamp":1700000000000}'
    )
    assert create_signing_payload(sample_transaction) == expected.encode("utf-8")


def test_signatures_excluded(sample_transaction):
    before = create_signing_payload(sample_transaction)
    sample_transaction.inputs[0].signature = "something-else"

    assert create_signing_payload(sample_transaction) == before
    assert b"sig-a" not in before


def test_equal_transactions_encode_identically(sample_transaction):
    copy = Transaction.from_dict(sample_transaction.to_dict())

    assert create_signing_payload(copy) == create_signing_payload(sample_transaction)


def test_input_order_matters(sample_transaction):
    before = create_signing_payload(sample_transaction)
    sample_transaction.inputs.reverse()

    assert create_signing_payload(sample_transaction) != before


def test_non_ascii_kept_as_utf8():
    tx = Transaction(id="ü", inputs=[], outputs=[TransactionOutput(amount=1, recipient="zoë")], timestamp=0)

    payload = create_signing_payload(tx)

    assert "zoë".encode("utf-8") in payload
    assert json.loads(payload.decode("utf-8"))["id"] == "ü"


def test_document_is_plain_json(sample_transaction):
    document = unsigned_transaction_document(sample_transaction)

    assert list(document) == ["id", "inputs", "outputs", "timestamp"]
    assert document["inputs"][1] == {"utxoId": {"txId": "prev", "outputIndex": 3}, "owner": "02cd"}


def test_unencodable_value_raises(sample_transaction):
    sample_transaction.outputs[0].amount = float("nan")

    with pytest.raises(SerializationError):
        create_signing_payload(sample_transaction)


def test_version_constant():
    assert SIGNING_PAYLOAD_VERSION == 1


def test_unencodable_text_raises_serialization_error():
    tx = Transaction(id="bad\ud800", inputs=[], outputs=[], timestamp=0)

    with pytest.raises(SerializationError):
        create_signing_payload(tx)
