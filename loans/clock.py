from django.utils import timezone


class SystemClock:
    def now(self):
        return timezone.now()


class FixedClock:
    """Clock frozen at a given moment; naive datetimes are read in the current time zone."""

    def __init__(self, moment):
        self.set(moment)

    def set(self, moment):
        if timezone.is_naive(moment):
            moment = timezone.make_aware(moment)
        self._moment = moment

    def now(self):
        return self._moment
