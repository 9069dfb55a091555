# utxo_validator/exceptions/custom_errors.py
class UTXOValidatorError(Exception):
    """Base class for faults raised by utxo_validator"""
    pass

class SerializationError(UTXOValidatorError):
    """Raised when serialization fails"""
    pass

class DeserializationError(UTXOValidatorError):
    """Raised when deserialization fails"""
    pass

class SigningError(UTXOValidatorError):
    """Raised when a transaction input cannot be signed"""
    pass

class DuplicateUTXOError(UTXOValidatorError):
    """Raised when a UTXO is added to a pool that already holds it"""
    pass

class ConfigurationError(UTXOValidatorError):
    """Raised for invalid configuration"""
    pass
