from enum import Enum


class Messages(Enum):
    AMOUNT_NOT_NULL = 'Loan amount must not be null'
    AMOUNT_NOT_NUMBER = 'Loan amount must be a number'
    AMOUNT_NOT_POSITIVE = 'Loan amount must be greater than zero'
    AMOUNT_TOO_PRECISE = 'Loan amount must not have more than two decimal places'
    TERM_NOT_NULL = 'Loan term must not be null'
    TERM_NOT_NUMBER = 'Loan term must be a whole number'
    TERM_NOT_POSITIVE = 'Loan term must be greater than zero'
    TERM_TOO_LONG = 'Loan term must not exceed {max_term} days'
    NAME_NOT_BLANK = 'Name must not be blank'
    SURNAME_NOT_BLANK = 'Surname must not be blank'
    PERSONAL_ID_NOT_BLANK = 'Personal id must not be blank'
    AMOUNT_EXCEEDS_MAX = (
        'The attempt to take loan is made with amount, which is greater than max allowed amount. '
        'Maximum loan amount is {max_amount}'
    )
    DECLINED_DUE_RISK_ANALYSIS = 'Loan request declined due to risk analysis'
    LOAN_NOT_FOUND = 'Loan with id {loan_id} not found'
    INTEREST_TOO_LARGE = 'Loan interest must not exceed {max_interest}'
    EXTENSION_TERM_NOT_POSITIVE = 'Extension term must be greater than zero'
    EXTENSION_TERM_TOO_LONG = 'Extension term must not exceed {max_term} days'
    LOAN_ID_PARAM_INVALID = 'loanId query parameter must be an integer'
    EXTENSION_TERM_PARAM_INVALID = 'extensionTermInDays query parameter must be an integer'

    def format(self, **kwargs):
        return self.value.format(**kwargs)


class LoanError(Exception):
    """Base class for failures reported to the client as a list of messages."""

    def __init__(self, messages):
        if isinstance(messages, str):
            messages = [messages]
        self.messages = list(messages)
        super().__init__('; '.join(self.messages))


class LoanValidationError(LoanError):
    pass


class RiskDeclinedError(LoanError):
    def __init__(self, reason=None):
        super().__init__(reason or Messages.DECLINED_DUE_RISK_ANALYSIS.value)


class LoanNotFoundError(LoanError):
    def __init__(self, loan_id):
        self.loan_id = loan_id
        super().__init__(Messages.LOAN_NOT_FOUND.format(loan_id=loan_id))
