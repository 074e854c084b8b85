import logging
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from .clock import SystemClock
from .exceptions import LoanError, LoanValidationError, Messages
from .serializers import LoanSerializer
from .services import LoanService
from .validators import LoanRequest

logger = logging.getLogger(__name__)

def get_loan_service(clock):
    return LoanService.from_settings(clock=clock)


def error_response(exc):
    """Every loan failure is reported as a 500 with the list of messages."""
    return Response({'messages': exc.messages}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


def parse_int_param(value):
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


class LoanAPIView(APIView):
    """Base view; pass `clock` to as_view() to evaluate requests at a fixed time."""
    clock = SystemClock()


class LoanCreateView(LoanAPIView):
    """API endpoint to apply for a new loan."""
    def post(self, request):
        data = request.data if isinstance(request.data, dict) else {}
        loan_request = LoanRequest.from_payload(data)
        try:
            loan = get_loan_service(self.clock).apply(loan_request)
        except LoanError as exc:
            logger.warning(f"Loan creation failed for {loan_request.personal_id!r}: {exc.messages}")
            return error_response(exc)
        return Response(LoanSerializer(loan).data, status=status.HTTP_200_OK)


class LoanExtendView(LoanAPIView):
    """API endpoint to extend the term of an existing loan."""
    def post(self, request):
        params = request.query_params
        loan_id = parse_int_param(params.get('loanId'))
        extension_term = parse_int_param(params.get('extensionTermInDays'))
        try:
            messages = []
            if loan_id is None:
                messages.append(Messages.LOAN_ID_PARAM_INVALID.value)
            if extension_term is None:
                messages.append(Messages.EXTENSION_TERM_PARAM_INVALID.value)
            if messages:
                raise LoanValidationError(messages)
            loan = get_loan_service(self.clock).extend(loan_id, extension_term)
        except LoanError as exc:
            logger.warning(f"Loan extension failed for loan {params.get('loanId')!r}: {exc.messages}")
            return error_response(exc)
        return Response(LoanSerializer(loan).data, status=status.HTTP_200_OK)


class LoanListView(LoanAPIView):
    """API endpoint to list every loan."""
    def get(self, request):
        loans = get_loan_service(self.clock).list_loans()
        logger.info(f"Listed {len(loans)} loans.")
        return Response(LoanSerializer(loans, many=True).data, status=status.HTTP_200_OK)


class CustomerLoansView(LoanAPIView):
    """API endpoint to list the loans of one customer."""
    def get(self, request, personal_id):
        loans = get_loan_service(self.clock).list_loans_by_personal_id(personal_id)
        logger.info(f"Listed {len(loans)} loans for customer {personal_id}.")
        return Response(LoanSerializer(loans, many=True).data, status=status.HTTP_200_OK)
