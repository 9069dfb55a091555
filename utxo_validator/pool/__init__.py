# utxo_validator/pool/__init__.py
from utxo_validator.pool.memory_pool import InMemoryUTXOPool

__all__ = ['InMemoryUTXOPool']
