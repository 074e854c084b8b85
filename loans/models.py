from decimal import Decimal

from django.db import models


class Customer(models.Model):
    personal_id = models.CharField(max_length=64, unique=True)
    name = models.CharField(max_length=255)
    surname = models.CharField(max_length=255)

    def __str__(self):
        return f"{self.name} {self.surname} ({self.personal_id})"


class Loan(models.Model):
    customer = models.ForeignKey(Customer, related_name='loans', on_delete=models.CASCADE)
    amount = models.DecimalField(max_digits=12, decimal_places=2)
    interest = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0.00'))
    term_in_days = models.PositiveIntegerField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['id']

    @property
    def personal_id(self):
        return self.customer.personal_id

    def __str__(self):
        return f"Loan {self.pk}"


class LoanExtension(models.Model):
    loan = models.ForeignKey(Loan, related_name='loan_extensions', on_delete=models.CASCADE)
    extension_term_in_days = models.PositiveIntegerField()
    additional_interest = models.DecimalField(max_digits=12, decimal_places=2)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['id']

    def __str__(self):
        return f"Extension {self.pk} of Loan {self.loan_id}"


class LoanRequestRecord(models.Model):
    """One row per loan request that went through risk analysis."""
    personal_id = models.CharField(max_length=64, db_index=True)
    requested_at = models.DateTimeField(db_index=True)

    class Meta:
        ordering = ['requested_at', 'id']
