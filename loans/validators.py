import logging
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from .exceptions import LoanValidationError, Messages
from .utils import CENTS

logger = logging.getLogger(__name__)


def _to_decimal(value):
    if value is None or isinstance(value, (Decimal, bool)):
        return value
    try:
        return Decimal(str(value).strip())
    except InvalidOperation:
        return value


def _to_text(value):
    if value is None:
        return None
    return str(value).strip()


def _to_int(value):
    if value is None or isinstance(value, (int, bool)):
        return value
    try:
        number = Decimal(str(value).strip())
    except InvalidOperation:
        return value
    if not number.is_finite() or number != number.to_integral_value():
        return value
    return int(number)


@dataclass
class LoanRequest:
    """A loan application as submitted by a customer. Never stored as-is."""
    amount: Any = None
    term_in_days: Any = None
    personal_id: Optional[str] = None
    name: Optional[str] = None
    surname: Optional[str] = None

    @classmethod
    def from_payload(cls, data):
        """Build a request from decoded JSON, coercing numeric fields where possible."""
        return cls(
            amount=_to_decimal(data.get('amount')),
            term_in_days=_to_int(data.get('term_in_days')),
            personal_id=_to_text(data.get('personal_id')),
            name=_to_text(data.get('name')),
            surname=_to_text(data.get('surname')),
        )


def is_blank(value):
    return value is None or not str(value).strip()


class LoanRequestValidator:
    """Collects every violation of a loan request instead of stopping at the first."""

    def __init__(self, max_loan_amount, max_term_in_days):
        self.max_loan_amount = max_loan_amount
        self.max_term_in_days = max_term_in_days

    def _check_amount(self, amount):
        if amount is None:
            return Messages.AMOUNT_NOT_NULL.value
        if not isinstance(amount, Decimal) or not amount.is_finite():
            return Messages.AMOUNT_NOT_NUMBER.value
        return None

    def _check_term(self, term):
        if term is None:
            return Messages.TERM_NOT_NULL.value
        if isinstance(term, bool) or not isinstance(term, int):
            return Messages.TERM_NOT_NUMBER.value
        return None

    def violations(self, request):
        messages = []
        amount_error = self._check_amount(request.amount)
        term_error = self._check_term(request.term_in_days)
        checks = [
            amount_error,
            term_error,
            Messages.NAME_NOT_BLANK.value if is_blank(request.name) else None,
            Messages.SURNAME_NOT_BLANK.value if is_blank(request.surname) else None,
            Messages.PERSONAL_ID_NOT_BLANK.value if is_blank(request.personal_id) else None,
        ]
        messages.extend(message for message in checks if message)

        if amount_error is None:
            if request.amount > self.max_loan_amount:
                messages.append(Messages.AMOUNT_EXCEEDS_MAX.format(max_amount=self.max_loan_amount))
            elif request.amount <= 0:
                messages.append(Messages.AMOUNT_NOT_POSITIVE.value)
            elif request.amount != request.amount.quantize(CENTS):
                messages.append(Messages.AMOUNT_TOO_PRECISE.value)
        if term_error is None:
            if request.term_in_days <= 0:
                messages.append(Messages.TERM_NOT_POSITIVE.value)
            elif request.term_in_days > self.max_term_in_days:
                messages.append(Messages.TERM_TOO_LONG.format(max_term=self.max_term_in_days))
        return messages

    def validate(self, request):
        messages = self.violations(request)
        if messages:
            logger.warning(f"Loan request for {request.personal_id!r} rejected: {messages}")
            raise LoanValidationError(messages)
        return request
