import logging
import threading

from django.db import transaction
from django.utils import timezone

from .exceptions import RiskDeclinedError
from .models import LoanRequestRecord

logger = logging.getLogger(__name__)


class RequestHistory:
    """Per-customer log of risk-evaluated requests, stored as LoanRequestRecord rows."""

    # Fixed pool shared across customers
    _locks = [threading.Lock() for _ in range(64)]

    def _lock_for(self, personal_id):
        return self._locks[hash(personal_id) % len(self._locks)]

    def record_and_count(self, personal_id, at, window):
        """
        Record a request made at `at` and return how many requests the
        customer had already made in the window ending at `at`.
        """
        with self._lock_for(personal_id), transaction.atomic():
            previous = LoanRequestRecord.objects.filter(
                personal_id=personal_id,
                requested_at__gt=at - window,
                requested_at__lte=at,
            ).count()
            LoanRequestRecord.objects.create(personal_id=personal_id, requested_at=at)
        return previous

    def purge_before(self, cutoff):
        deleted, _ = LoanRequestRecord.objects.filter(requested_at__lt=cutoff).delete()
        return deleted


class RiskDecisionEngine:
    """
    Accepts or declines a validated loan request.

    Rules run in a fixed order and the first failing one declines the request:
    - working hours: the local time of evaluation must fall inside
      [working_hours_start, working_hours_end)
    - frequency: fewer than max_requests requests by the same personal id
      within the trailing window
    Every evaluated request is recorded, whether accepted or not.
    """

    def __init__(self, clock, history, working_hours_start, working_hours_end, max_requests, window):
        self.clock = clock
        self.history = history
        self.working_hours_start = working_hours_start
        self.working_hours_end = working_hours_end
        self.max_requests = max_requests
        self.window = window

    def within_working_hours(self, moment):
        hour = timezone.localtime(moment).hour
        return self.working_hours_start <= hour < self.working_hours_end

    def evaluate(self, request):
        now = self.clock.now()
        previous = self.history.record_and_count(request.personal_id, now, self.window)

        if not self.within_working_hours(now):
            logger.warning(f"Loan request for {request.personal_id} declined: outside working hours at {now.isoformat()}")
            raise RiskDeclinedError()
        if previous >= self.max_requests:
            logger.warning(f"Loan request for {request.personal_id} declined: {previous} requests within {self.window}")
            raise RiskDeclinedError()
        return request
