# utxo_validator/utils/__init__.py
from utxo_validator.utils.logging_config import setup_logging, StructuredFormatter, LogFormat
from utxo_validator.utils.helpers import current_timestamp_ms, is_integral_amount

__all__ = [
    'setup_logging',
    'StructuredFormatter',
    'LogFormat',
    'current_timestamp_ms',
    'is_integral_amount'
]
