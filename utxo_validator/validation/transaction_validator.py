# utxo_validator/validation/transaction_validator.py
import logging
from dataclasses import replace
from typing import List, Optional, Set
from utxo_validator.config import ValidatorConfig, get_config
from utxo_validator.crypto.signatures import ECDSAVerifier, get_curve
from utxo_validator.interfaces.signature_verifier import SignatureVerifier
from utxo_validator.interfaces.utxo_lookup import UTXOLookup
from utxo_validator.models.transaction import Transaction
from utxo_validator.models.utxo import UtxoId
from utxo_validator.serialization.canonical import create_signing_payload
from utxo_validator.validation.errors import (
    ValidationError,
    ValidationErrorKind,
    ValidationResult,
    create_validation_error
)

logger = logging.getLogger(__name__)


class TransactionValidator:
    """
    Checks one transaction against the current UTXO view.

    Every check runs regardless of earlier failures so that the result lists
    all violations at once. The validator keeps no state between calls and
    never mutates the pool; exceptions raised by the lookup or the verifier
    are faults and propagate to the caller.
    """

    def __init__(self, utxo_lookup: UTXOLookup,
                 signature_verifier: Optional[SignatureVerifier] = None,
                 config: Optional[ValidatorConfig] = None):
        self.config = config or get_config()
        self.utxo_lookup = utxo_lookup
        self.signature_verifier = signature_verifier or ECDSAVerifier(
            get_curve(self.config.validation.curve)
        )

    def validate_transaction(self, transaction: Transaction) -> ValidationResult:
        errors: List[ValidationError] = []
        seen_utxos: Set[UtxoId] = set()
        total_input_amount = 0
        total_output_amount = 0

        # Signatures are excluded from the payload, so it is the same for every input
        signing_payload = create_signing_payload(transaction)

        try:
            for tx_input in transaction.inputs:
                utxo_id = tx_input.utxo_id
                utxo = self.utxo_lookup.get_utxo(utxo_id.tx_id, utxo_id.output_index)

                if utxo is None:
                    errors.append(create_validation_error(
                        ValidationErrorKind.UTXO_NOT_FOUND,
                        f"UTXO not found: {utxo_id}",
                        {'utxo_id': utxo_id}
                    ))
                else:
                    total_input_amount += utxo.amount

                if not self.signature_verifier.verify(signing_payload, tx_input.signature, tx_input.owner):
                    errors.append(create_validation_error(
                        ValidationErrorKind.INVALID_SIGNATURE,
                        f"Invalid signature for input: {utxo_id}",
                        {'utxo_id': utxo_id}
                    ))

                if utxo_id in seen_utxos:
                    errors.append(create_validation_error(
                        ValidationErrorKind.DOUBLE_SPENDING,
                        f"UTXO referenced multiple times in transaction: {utxo_id}",
                        {'utxo_id': utxo_id}
                    ))
                    continue
                seen_utxos.add(utxo_id)
        except Exception:
            logger.error("Collaborator failure while validating transaction %s", transaction.id, exc_info=True)
            raise

        for output in transaction.outputs:
            total_output_amount += output.amount

            # Zero is rejected as well
            if output.amount <= 0:
                errors.append(create_validation_error(
                    ValidationErrorKind.NEGATIVE_AMOUNT,
                    f"Output amount is not positive: {output.amount}",
                    {'output': replace(output)}
                ))

        if total_input_amount != total_output_amount:
            errors.append(create_validation_error(
                ValidationErrorKind.AMOUNT_MISMATCH,
                f"Input amount ({total_input_amount}) does not match output amount ({total_output_amount})",
                {'total_input': total_input_amount, 'total_output': total_output_amount}
            ))

        result = ValidationResult(valid=len(errors) == 0, errors=errors)
        self._log_result(transaction, result)
        return result

    def _log_result(self, transaction: Transaction, result: ValidationResult) -> None:
        if result.valid:
            logger.debug("Transaction %s is valid", transaction.id)
            return

        if self.config.validation.log_rejections:
            logger.info(
                "Transaction %s rejected with %d error(s)",
                transaction.id, len(result.errors),
                extra={'structured_data': {'errors': [kind.value for kind in result.error_kinds()]}}
            )
        for error in result.errors:
            logger.debug("Transaction %s: %s", transaction.id, error.message)
