# utxo_validator/models/__init__.py
from utxo_validator.models.utxo import UTXO, UtxoId
from utxo_validator.models.transaction import Transaction, TransactionInput, TransactionOutput

__all__ = ['UTXO', 'UtxoId', 'Transaction', 'TransactionInput', 'TransactionOutput']
