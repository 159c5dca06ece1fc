"""
Wire String Tests:
    - Test the colon delimited contract format used on the command line.
"""

import pytest

from ib_contract import ComboLeg, Contract, InvalidArgument, WIRE_FIELDS
from ib_contract._contract import parse_strike


@pytest.fixture
def gbp_future() -> Contract:
    return Contract(
        symbol='GBP',
        sec_type='FUT',
        expiry='200809',
        strike=0,
        multiplier='62500',
        exchange='GLOBEX',
        currency='USD')


def test_to_wire_string(gbp_future: Contract):
    assert gbp_future.to_wire_string() == 'GBP:FUT:200809:0::62500:GLOBEX::USD:'


def test_to_wire_string_positions(gbp_future: Contract):
    segments = gbp_future.to_wire_string().split(':')
    assert len(segments) == len(WIRE_FIELDS) == 10
    assert segments[WIRE_FIELDS.index('primary_exchange')] == ''
    assert segments[WIRE_FIELDS.index('currency')] == 'USD'


def test_from_wire_string(gbp_future: Contract):
    contract = Contract.from_wire_string('GBP:FUT:200809:0::62500:GLOBEX::USD:')
    assert contract.symbol == 'GBP'
    assert contract.sec_type == 'FUT'
    assert contract.expiry == '200809'
    assert contract.strike == 0
    assert contract.right is None
    assert contract.multiplier == '62500'
    assert contract.exchange == 'GLOBEX'
    assert contract.primary_exchange is None
    assert contract.currency == 'USD'
    assert contract.local_symbol is None
    assert contract == gbp_future


def test_from_wire_string_blank_strike():
    contract = Contract.from_wire_string('GBP:FUT:200809:::62500:GLOBEX::USD:')
    assert contract.strike == 0
    assert contract.multiplier == '62500'


def test_from_wire_string_short_input():
    contract = Contract.from_wire_string('IBM:STK')
    assert contract.symbol == 'IBM'
    assert contract.sec_type == 'STK'
    assert contract.currency is None


def test_from_wire_string_too_many_fields():
    with pytest.raises(InvalidArgument):
        Contract.from_wire_string('A:STK::0:::SMART::USD:A:EXTRA')


@pytest.mark.parametrize('text', [
    'GBP:FUTURE:200809:0::62500:GLOBEX::USD:',
    'GBP:FUT:Sep08:0::62500:GLOBEX::USD:',
    'IBM:OPT:200809:120:X::SMART::USD:',
    'IBM:STK::0:::SMART:SMART:USD:',
    'IBM:OPT:200809:abc:C::SMART::USD:',
])
def test_from_wire_string_invalid(text: str):
    with pytest.raises(InvalidArgument):
        Contract.from_wire_string(text)


@pytest.mark.parametrize('fields', [
    {'symbol' : 'IBM', 'sec_type' : 'OPT', 'expiry' : '20080919', 'strike' : 120, 'right' : 'CALL',
     'multiplier' : '100', 'exchange' : 'SMART', 'primary_exchange' : 'CBOE', 'currency' : 'USD', 'local_symbol' : 'IBM  080919C00120000'},
    {'symbol' : 'EUR', 'sec_type' : 'CASH', 'exchange' : 'IDEALPRO', 'currency' : 'USD'},
    {'symbol' : 'ES', 'sec_type' : 'FOP', 'expiry' : '200812', 'strike' : 62.5, 'right' : 'P', 'exchange' : 'GLOBEX'},
])
def test_round_trip(fields: dict):
    contract = Contract(fields)
    parsed = Contract.from_wire_string(contract.to_wire_string())
    assert parsed.serialize() == contract.serialize()
    assert parsed.to_wire_string() == contract.to_wire_string()


def test_round_trip_drops_extra_fields():
    contract = Contract(
        con_id=28812380,
        symbol='IBM',
        sec_type='BAG',
        exchange='SMART',
        description='local note',
        combo_legs=[ComboLeg(con_id=1, ratio=1, action='BUY', exchange='SMART')])
    parsed = Contract.from_wire_string(contract.to_wire_string())
    assert parsed.con_id == 0
    assert parsed.combo_legs == []
    assert parsed.description is None
    assert parsed.serialize() == contract.serialize()


@pytest.mark.parametrize('strike', [0.1, 152.3, 62.5])
def test_round_trip_fractional_strike(strike: float):
    contract = Contract(symbol='IBM', sec_type='OPT', expiry='20080919', strike=strike, right='C', exchange='SMART')
    parsed = Contract.from_wire_string(contract.to_wire_string())
    assert parsed.strike == strike
    assert parsed == contract


def test_parse_strike():
    assert parse_strike('0') == 0
    assert isinstance(parse_strike('120'), int)
    assert parse_strike('62.5') == 62.5
    assert parse_strike(' ') == 0
    with pytest.raises(InvalidArgument):
        parse_strike('abc')
