"""
Shared fixtures for the utxo_validator tests.
"""

import pytest
from utxo_validator.config import ValidatorConfig
from utxo_validator.crypto.signatures import generate_private_key, public_key_hex, sign_transaction
from utxo_validator.models.transaction import Transaction, TransactionInput, TransactionOutput
from utxo_validator.models.utxo import UTXO, UtxoId
from utxo_validator.pool.memory_pool import InMemoryUTXOPool
from utxo_validator.validation.transaction_validator import TransactionValidator

FUNDING_TX = "a1" * 32


@pytest.fixture(scope="session")
def alice_key():
    return generate_private_key()


@pytest.fixture(scope="session")
def bob_key():
    return generate_private_key()


@pytest.fixture
def alice(alice_key):
    return public_key_hex(alice_key)


@pytest.fixture
def bob(bob_key):
    return public_key_hex(bob_key)


@pytest.fixture
def pool(alice):
    """Pool holding three UTXOs owned by alice: 50, 20 and 30."""
    return InMemoryUTXOPool([
        UTXO(utxo_id=UtxoId(FUNDING_TX, 0), amount=50, owner=alice),
        UTXO(utxo_id=UtxoId(FUNDING_TX, 1), amount=20, owner=alice),
        UTXO(utxo_id=UtxoId(FUNDING_TX, 2), amount=30, owner=alice),
    ])


@pytest.fixture
def config():
    return ValidatorConfig()


@pytest.fixture
def validator(pool, config):
    return TransactionValidator(pool, config=config)


@pytest.fixture
def make_transaction(alice, bob, alice_key):
    """Build a transaction spending ``utxo_ids`` from alice, signed by alice."""
    def _make(utxo_ids, amounts, tx_id="tx-1", timestamp=1700000000000, sign=True):
        tx = Transaction(
            id=tx_id,
            inputs=[TransactionInput(utxo_id=utxo_id, owner=alice) for utxo_id in utxo_ids],
            outputs=[TransactionOutput(amount=amount, recipient=bob) for amount in amounts],
            timestamp=timestamp
        )
        if sign:
            sign_transaction(tx, [alice_key])
        return tx
    return _make
