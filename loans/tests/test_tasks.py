import os
import tempfile
from datetime import timedelta
from decimal import Decimal
from io import StringIO
from django.core.management import call_command
from django.test import TestCase, override_settings
from django.utils import timezone
from loans.models import Customer, Loan, LoanRequestRecord
from loans.tasks import ingest_loan_book, purge_request_history

LOAN_BOOK = """Personal ID,Name,Surname,Amount,Interest,Term In Days
abc-xyz0,John,Smith,100.50,50.00,30
abc-xyz0,John,Smith,20.30,20.50,10
xyz-abc9,Anna,Berzina,,12.00,7
xyz-abc8,Liga,Ozola,75,112.5,5
"""


class IngestLoanBookTest(TestCase):
    def write_loan_book(self, content):
        handle, path = tempfile.mkstemp(suffix='.csv')
        with os.fdopen(handle, 'w') as f:
            f.write(content)
        self.addCleanup(os.remove, path)
        return path

    def test_ingest_loan_book(self):
        created = ingest_loan_book(self.write_loan_book(LOAN_BOOK))
        self.assertEqual(created, 3)
        self.assertEqual(Customer.objects.count(), 2)
        loans = Loan.objects.filter(customer__personal_id='abc-xyz0')
        self.assertEqual(
            [(loan.amount, loan.interest, loan.term_in_days) for loan in loans],
            [(Decimal('100.50'), Decimal('50.00'), 30), (Decimal('20.30'), Decimal('20.50'), 10)]
        )
        self.assertEqual(Loan.objects.get(customer__personal_id='xyz-abc8').interest, Decimal('112.50'))

    def test_missing_columns_are_rejected(self):
        path = self.write_loan_book("Personal ID,Amount\nabc,10\n")
        with self.assertRaises(ValueError):
            ingest_loan_book(path)
        self.assertFalse(Loan.objects.exists())

    def test_ingest_loans_command(self):
        out = StringIO()
        call_command('ingest_loans', self.write_loan_book(LOAN_BOOK), stdout=out)
        self.assertIn('Ingested 3 loans.', out.getvalue())


@override_settings(RISK_REQUEST_WINDOW_HOURS=24)
class PurgeRequestHistoryTest(TestCase):
    def test_purge_request_history(self):
        now = timezone.now()
        LoanRequestRecord.objects.create(personal_id='abc', requested_at=now - timedelta(hours=30))
        LoanRequestRecord.objects.create(personal_id='abc', requested_at=now - timedelta(hours=1))
        self.assertEqual(purge_request_history(), 1)
        self.assertEqual(list(LoanRequestRecord.objects.values_list('personal_id', flat=True)), ['abc'])
