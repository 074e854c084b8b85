from decimal import Decimal
from django.test import SimpleTestCase
from loans.exceptions import LoanValidationError, Messages
from loans.validators import LoanRequest, LoanRequestValidator


class LoanRequestValidatorTest(SimpleTestCase):
    def setUp(self):
        self.validator = LoanRequestValidator(Decimal('300'), 365)

    def test_valid_request_is_passed_through(self):
        request = LoanRequest(Decimal('300'), 14, 'abc-xyz0', 'John', 'Smith')
        self.assertIs(self.validator.validate(request), request)

    def test_all_missing_fields_are_collected_in_order(self):
        with self.assertRaises(LoanValidationError) as ctx:
            self.validator.validate(LoanRequest(None, None, '', '', ''))
        self.assertEqual(ctx.exception.messages, [
            Messages.AMOUNT_NOT_NULL.value,
            Messages.TERM_NOT_NULL.value,
            Messages.NAME_NOT_BLANK.value,
            Messages.SURNAME_NOT_BLANK.value,
            Messages.PERSONAL_ID_NOT_BLANK.value,
        ])

    def test_whitespace_counts_as_blank(self):
        messages = self.validator.violations(LoanRequest(Decimal('10'), 7, '  ', 'John', '\t'))
        self.assertEqual(messages, [Messages.SURNAME_NOT_BLANK.value, Messages.PERSONAL_ID_NOT_BLANK.value])

    def test_amount_above_maximum_is_rejected(self):
        messages = self.validator.violations(LoanRequest(Decimal('301'), 1, 'abc-xyz', 'Vanja', 'Ivanov'))
        self.assertEqual(messages, [Messages.AMOUNT_EXCEEDS_MAX.format(max_amount=Decimal('300'))])
        self.assertTrue(messages[0].endswith('Maximum loan amount is 300'))

    def test_maximum_violation_follows_missing_fields(self):
        messages = self.validator.violations(LoanRequest(Decimal('500'), None, 'abc-xyz', '', 'Ivanov'))
        self.assertEqual(messages, [
            Messages.TERM_NOT_NULL.value,
            Messages.NAME_NOT_BLANK.value,
            Messages.AMOUNT_EXCEEDS_MAX.format(max_amount=Decimal('300')),
        ])

    def test_non_positive_amount_and_term(self):
        messages = self.validator.violations(LoanRequest(Decimal('0'), -1, 'abc-xyz', 'Vanja', 'Ivanov'))
        self.assertEqual(messages, [Messages.AMOUNT_NOT_POSITIVE.value, Messages.TERM_NOT_POSITIVE.value])

    def test_term_above_maximum_is_rejected(self):
        messages = self.validator.violations(LoanRequest(Decimal('10'), 1000000000, 'abc-xyz', 'Vanja', 'Ivanov'))
        self.assertEqual(messages, [Messages.TERM_TOO_LONG.format(max_term=365)])
        self.assertEqual(self.validator.violations(LoanRequest(Decimal('10'), 365, 'abc-xyz', 'Vanja', 'Ivanov')), [])

    def test_amount_with_more_than_two_decimal_places_is_rejected(self):
        for amount in ('0.001', '10.105'):
            messages = self.validator.violations(LoanRequest(Decimal(amount), 7, 'abc-xyz', 'Vanja', 'Ivanov'))
            self.assertEqual(messages, [Messages.AMOUNT_TOO_PRECISE.value])
        self.assertEqual(self.validator.violations(LoanRequest(Decimal('10.100'), 7, 'abc-xyz', 'Vanja', 'Ivanov')), [])

    def test_unparseable_numbers_take_the_null_check_slot(self):
        request = LoanRequest.from_payload({
            'amount': 'lots', 'term_in_days': '14.5', 'personal_id': 'abc', 'name': '', 'surname': 'Ivanov'
        })
        self.assertEqual(self.validator.violations(request), [
            Messages.AMOUNT_NOT_NUMBER.value,
            Messages.TERM_NOT_NUMBER.value,
            Messages.NAME_NOT_BLANK.value,
        ])


class LoanRequestFromPayloadTest(SimpleTestCase):
    def test_numeric_strings_are_coerced(self):
        request = LoanRequest.from_payload({'amount': '50.5', 'term_in_days': '14'})
        self.assertEqual(request.amount, Decimal('50.5'))
        self.assertEqual(request.term_in_days, 14)

    def test_json_numbers_are_coerced(self):
        request = LoanRequest.from_payload({'amount': 10.1, 'term_in_days': 7.0})
        self.assertEqual(request.amount, Decimal('10.1'))
        self.assertEqual(request.term_in_days, 7)

    def test_missing_keys_are_none(self):
        request = LoanRequest.from_payload({})
        self.assertIsNone(request.amount)
        self.assertIsNone(request.term_in_days)
        self.assertIsNone(request.personal_id)
