import logging

from django.db import transaction
from django.db.models import F

from .exceptions import LoanNotFoundError, LoanValidationError, Messages
from .models import Customer, Loan, LoanExtension
from .utils import MAX_MONEY

logger = logging.getLogger(__name__)


class LoanLedger:
    """Creates, extends and lists stored loans."""

    def __init__(self, pricing):
        self.pricing = pricing

    def _loans(self):
        return Loan.objects.select_related('customer').prefetch_related('loan_extensions')

    def _check_interest(self, interest):
        if interest > MAX_MONEY:
            raise LoanValidationError(Messages.INTEREST_TOO_LARGE.format(max_interest=MAX_MONEY))
        return interest

    def get(self, loan_id):
        try:
            return self._loans().get(id=loan_id)
        except Loan.DoesNotExist:
            logger.error(f"Loan {loan_id} not found.")
            raise LoanNotFoundError(loan_id)

    @transaction.atomic
    def create(self, request):
        interest = self._check_interest(self.pricing(request.amount, request.term_in_days))
        customer, created = Customer.objects.get_or_create(
            personal_id=request.personal_id,
            defaults={'name': request.name, 'surname': request.surname},
        )
        if created:
            logger.info(f"Registered new customer {customer.personal_id}.")
        loan = Loan.objects.create(
            customer=customer,
            amount=request.amount,
            interest=interest,
            term_in_days=request.term_in_days,
        )
        logger.info(f"Loan {loan.id} created for customer {customer.personal_id}: amount={loan.amount} interest={loan.interest}")
        return self.get(loan.id)

    @transaction.atomic
    def extend(self, loan_id, extension_term_in_days, additional_interest):
        loan = Loan.objects.select_for_update().filter(id=loan_id).first()
        if loan is None:
            logger.error(f"Extension failed: Loan {loan_id} not found.")
            raise LoanNotFoundError(loan_id)
        self._check_interest(loan.interest + additional_interest)
        LoanExtension.objects.create(
            loan_id=loan_id,
            extension_term_in_days=extension_term_in_days,
            additional_interest=additional_interest,
        )
        Loan.objects.filter(id=loan_id).update(interest=F('interest') + additional_interest)
        logger.info(f"Loan {loan_id} extended by {extension_term_in_days} days, additional interest {additional_interest}.")
        return self.get(loan_id)

    def list_all(self):
        return list(self._loans())

    def list_by_personal_id(self, personal_id):
        return list(self._loans().filter(customer__personal_id=personal_id))
