import logging
from functools import partial

from .clock import SystemClock
from .conf import loan_settings
from .exceptions import LoanValidationError, Messages
from .ledger import LoanLedger
from .risk import RequestHistory, RiskDecisionEngine
from .utils import calculate_interest
from .validators import LoanRequestValidator

logger = logging.getLogger(__name__)


class LoanService:
    """Runs a loan request through validation, risk analysis and the ledger."""

    def __init__(self, validator, risk_engine, ledger, pricing, max_extension_term):
        self.validator = validator
        self.risk_engine = risk_engine
        self.ledger = ledger
        self.pricing = pricing
        self.max_extension_term = max_extension_term

    @classmethod
    def from_settings(cls, clock=None, history=None):
        conf = loan_settings()
        pricing = partial(calculate_interest, weekly_factor=conf.LOAN_WEEKLY_INTEREST_FACTOR)
        risk_engine = RiskDecisionEngine(
            clock=clock or SystemClock(),
            history=history or RequestHistory(),
            working_hours_start=conf.RISK_WORKING_HOURS_START,
            working_hours_end=conf.RISK_WORKING_HOURS_END,
            max_requests=conf.RISK_MAX_REQUESTS_PER_WINDOW,
            window=conf.request_window,
        )
        return cls(
            validator=LoanRequestValidator(conf.MAX_LOAN_AMOUNT, conf.MAX_LOAN_TERM_IN_DAYS),
            risk_engine=risk_engine,
            ledger=LoanLedger(pricing),
            pricing=pricing,
            max_extension_term=conf.MAX_LOAN_TERM_IN_DAYS,
        )

    def apply(self, request):
        self.validator.validate(request)
        self.risk_engine.evaluate(request)
        return self.ledger.create(request)

    def extend(self, loan_id, extension_term_in_days):
        if extension_term_in_days <= 0:
            raise LoanValidationError(Messages.EXTENSION_TERM_NOT_POSITIVE.value)
        if extension_term_in_days > self.max_extension_term:
            raise LoanValidationError(Messages.EXTENSION_TERM_TOO_LONG.format(max_term=self.max_extension_term))
        loan = self.ledger.get(loan_id)
        additional_interest = self.pricing(loan.amount, extension_term_in_days)
        return self.ledger.extend(loan_id, extension_term_in_days, additional_interest)

    def list_loans(self):
        return self.ledger.list_all()

    def list_loans_by_personal_id(self, personal_id):
        return self.ledger.list_by_personal_id(personal_id)
