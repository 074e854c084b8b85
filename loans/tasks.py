import logging
from pathlib import Path
from celery import shared_task
import pandas as pd
from django.db import transaction
from django.utils import timezone
from .conf import loan_settings
from .models import Customer, Loan
from .risk import RequestHistory
from .utils import to_money

logger = logging.getLogger(__name__)

LOAN_BOOK_COLUMNS = ['Personal ID', 'Name', 'Surname', 'Amount', 'Interest', 'Term In Days']


def read_loan_book(file_path):
    if Path(file_path).suffix.lower() == '.csv':
        return pd.read_csv(file_path, dtype={'Personal ID': str})
    return pd.read_excel(file_path, dtype={'Personal ID': str})


@shared_task
def ingest_loan_book(file_path):
    """Ingest existing loans from an Excel or CSV loan book, registering customers as needed."""
    df = read_loan_book(file_path)
    missing = [column for column in LOAN_BOOK_COLUMNS if column not in df.columns]
    if missing:
        raise ValueError(f"Loan book {file_path} is missing columns: {', '.join(missing)}")

    created = 0
    skipped = 0
    with transaction.atomic():
        for _, row in df.iterrows():
            if row[LOAN_BOOK_COLUMNS].isna().any():
                logger.warning(f"Skipping incomplete loan book row {row.to_dict()}.")
                skipped += 1
                continue
            customer, _ = Customer.objects.get_or_create(
                personal_id=str(row['Personal ID']).strip(),
                defaults={'name': row['Name'], 'surname': row['Surname']},
            )
            Loan.objects.create(
                customer=customer,
                amount=to_money(row['Amount']),
                interest=to_money(row['Interest']),
                term_in_days=int(row['Term In Days']),
            )
            created += 1
    logger.info(f"Ingested {created} loans from {file_path}. {skipped} rows skipped due to missing values.")
    return created


@shared_task
def purge_request_history():
    """Drop request records that no longer count towards the frequency rule."""
    cutoff = timezone.now() - loan_settings().request_window
    deleted = RequestHistory().purge_before(cutoff)
    logger.info(f"Purged {deleted} loan request records older than {cutoff.isoformat()}.")
    return deleted
