# utxo_validator/utils/helpers.py
import time

def current_timestamp_ms() -> int:
    """Get current timestamp in milliseconds"""
    return int(time.time() * 1000)

def is_integral_amount(value) -> bool:
    """Amounts are integers in base units; bool is rejected even though it subclasses int"""
    return isinstance(value, int) and not isinstance(value, bool)
