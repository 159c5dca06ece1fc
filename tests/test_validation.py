import unittest

from ib_contract import Contract, InvalidArgument, Right, SecurityType

class TestSecType(unittest.TestCase):
    def setUp(self) -> None:
        self.contract = Contract()

    def test_valid_codes(self) -> None:
        """Every wire code is accepted and stored verbatim."""
        for code in ('STK', 'OPT', 'FUT', 'IND', 'FOP', 'CASH', 'BAG'):
            self.contract.sec_type = code
            self.assertEqual(self.contract.sec_type, code)

    def test_enum_member(self) -> None:
        self.contract.sec_type = SecurityType.FOREX
        self.assertEqual(self.contract.sec_type, 'CASH')

    def test_empty_is_unset(self) -> None:
        self.contract.sec_type = 'STK'
        self.contract.sec_type = ''
        self.assertIsNone(self.contract.sec_type)
        self.contract.sec_type = None
        self.assertIsNone(self.contract.sec_type)

    def test_invalid_codes(self) -> None:
        for code in ('WAR', 'stk', 'STOCK', 'BOND', ' '):
            with self.assertRaises(InvalidArgument):
                self.contract.sec_type = code

    def test_failed_assignment_keeps_value(self) -> None:
        self.contract.sec_type = 'OPT'
        with self.assertRaises(ValueError):
            self.contract.sec_type = 'XYZ'
        self.assertEqual(self.contract.sec_type, 'OPT')


class TestRight(unittest.TestCase):
    def setUp(self) -> None:
        self.contract = Contract()

    def test_valid_rights_are_upper_cased(self) -> None:
        for value, expected in (('put', 'PUT'), ('Call', 'CALL'), ('p', 'P'), ('C', 'C'), ('0', '0')):
            self.contract.right = value
            self.assertEqual(self.contract.right, expected)

    def test_enum_member(self) -> None:
        self.contract.right = Right.CALL
        self.assertEqual(self.contract.right, 'CALL')

    def test_empty_is_unset(self) -> None:
        self.contract.right = 'P'
        self.contract.right = ''
        self.assertIsNone(self.contract.right)

    def test_invalid_rights(self) -> None:
        for value in ('X', 'PUTS', 'straddle', 0):
            with self.assertRaises(InvalidArgument):
                self.contract.right = value

    def test_failed_assignment_keeps_value(self) -> None:
        self.contract.right = 'C'
        with self.assertRaises(InvalidArgument):
            self.contract.right = 'Q'
        self.assertEqual(self.contract.right, 'C')


class TestExpiry(unittest.TestCase):
    def setUp(self) -> None:
        self.contract = Contract()

    def test_valid_expiries(self) -> None:
        for value in ('200809', '20080919', '2008091'):
            self.contract.expiry = value
            self.assertEqual(self.contract.expiry, value)

    def test_digit_run_anywhere(self) -> None:
        """The pattern is a search, not a full match."""
        self.contract.expiry = 'abc200809xyz'
        self.assertEqual(self.contract.expiry, 'abc200809xyz')
        self.contract.expiry = '20240315 16:00 US/Eastern'
        self.assertEqual(self.contract.expiry, '20240315 16:00 US/Eastern')

    def test_coerced_to_text(self) -> None:
        self.contract.expiry = 200809
        self.assertEqual(self.contract.expiry, '200809')
        self.contract.expiry = None
        self.assertEqual(self.contract.expiry, '')

    def test_invalid_expiries(self) -> None:
        for value in ('2008', 'Sep08', '2008-09', 12345):
            with self.assertRaises(InvalidArgument):
                self.contract.expiry = value

    def test_failed_assignment_keeps_value(self) -> None:
        self.contract.expiry = '200812'
        with self.assertRaises(InvalidArgument):
            self.contract.expiry = 'Dec08'
        self.assertEqual(self.contract.expiry, '200812')


class TestPrimaryExchange(unittest.TestCase):
    def setUp(self) -> None:
        self.contract = Contract()

    def test_upper_cased(self) -> None:
        self.contract.primary_exchange = 'nasdaq'
        self.assertEqual(self.contract.primary_exchange, 'NASDAQ')

    def test_smart_rejected(self) -> None:
        for value in ('SMART', 'smart', 'Smart'):
            with self.assertRaises(InvalidArgument):
                self.contract.primary_exchange = value
        self.assertIsNone(self.contract.primary_exchange)

    def test_unset(self) -> None:
        self.contract.primary_exchange = 'ISLAND'
        self.contract.primary_exchange = None
        self.assertIsNone(self.contract.primary_exchange)


class TestUnvalidatedFields(unittest.TestCase):
    def test_pass_through(self) -> None:
        contract = Contract()
        contract.exchange = 'smart'
        contract.strike = 42.5
        contract.con_id = 12087792
        self.assertEqual(contract.exchange, 'smart')
        self.assertEqual(contract.strike, 42.5)
        self.assertEqual(contract.con_id, 12087792)


if __name__ == '__main__':
    unittest.main(failfast=True)
