import math
from decimal import Decimal, ROUND_HALF_UP

CENTS = Decimal('0.01')
# Largest value a DecimalField(max_digits=12, decimal_places=2) column holds
MAX_MONEY = Decimal('9999999999.99')


def to_money(value):
    return Decimal(str(value)).quantize(CENTS, rounding=ROUND_HALF_UP)


def calculate_interest(amount, term_in_days, weekly_factor):
    """
    Price a loan or an extension of one:
    INTEREST = AMOUNT * FACTOR * WEEKS
    Where WEEKS is the term in days rounded up to whole weeks.
    """
    weeks = math.ceil(term_in_days / 7)
    return to_money(Decimal(amount) * Decimal(weekly_factor) * weeks)
