from django.core.management.base import BaseCommand
from loans.tasks import ingest_loan_book

class Command(BaseCommand):
    help = 'Ingest existing loans from an Excel or CSV loan book'

    def add_arguments(self, parser):
        parser.add_argument('file_path')

    def handle(self, *args, **options):
        # Run the ingestion in-process rather than through the broker
        created = ingest_loan_book(options['file_path'])
        self.stdout.write(self.style.SUCCESS(f'Ingested {created} loans.'))
