from rest_framework import serializers
from .models import Loan, LoanExtension

class LoanExtensionSerializer(serializers.ModelSerializer):
    class Meta:
        model = LoanExtension
        fields = ['id', 'extension_term_in_days', 'additional_interest']

class LoanSerializer(serializers.ModelSerializer):
    personal_id = serializers.CharField(source='customer.personal_id', read_only=True)
    loan_extensions = LoanExtensionSerializer(many=True, read_only=True)

    class Meta:
        model = Loan
        fields = ['id', 'amount', 'interest', 'term_in_days', 'personal_id', 'loan_extensions']
