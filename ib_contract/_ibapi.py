"""
Conversions between the ib_contract records and the objects of the official ibapi client.

The ibapi objects use camelCase attributes and empty strings for unset text; the records
here use snake_case and None. Values coming from ibapi are assigned through the validated
setters, so a malformed callback raises InvalidArgument instead of building a bad Contract.
"""
import typing

from ibapi import contract as ib

from ib_contract._combo_leg import ComboLeg
from ib_contract._contract import BAG_SEC_TYPE, Contract
from ib_contract._contract_details import ContractDetails

# ib_contract attribute -> ibapi attribute
CONTRACT_ATTRIBUTES : dict[str, str] = {
    'con_id' : 'conId',
    'symbol' : 'symbol',
    'sec_type' : 'secType',
    'expiry' : 'lastTradeDateOrContractMonth',
    'strike' : 'strike',
    'right' : 'right',
    'multiplier' : 'multiplier',
    'exchange' : 'exchange',
    'primary_exchange' : 'primaryExchange',
    'currency' : 'currency',
    'local_symbol' : 'localSymbol',
    'include_expired' : 'includeExpired',
    'sec_id_type' : 'secIdType',
    'sec_id' : 'secId',
    'combo_legs_description' : 'comboLegsDescrip',
}

COMBO_LEG_ATTRIBUTES : dict[str, str] = {
    'con_id' : 'conId',
    'ratio' : 'ratio',
    'action' : 'action',
    'exchange' : 'exchange',
    'open_close' : 'openClose',
    'short_sale_slot' : 'shortSaleSlot',
    'designated_location' : 'designatedLocation',
    'exempt_code' : 'exemptCode',
}

DETAILS_ATTRIBUTES : dict[str, str] = {
    'market_name' : 'marketName',
    'min_tick' : 'minTick',
    'price_magnifier' : 'priceMagnifier',
    'order_types' : 'orderTypes',
    'valid_exchanges' : 'validExchanges',
    'under_con_id' : 'underConId',
    'long_name' : 'longName',
    'contract_month' : 'contractMonth',
    'industry' : 'industry',
    'category' : 'category',
    'subcategory' : 'subcategory',
    'time_zone' : 'timeZoneId',
    'trading_hours' : 'tradingHours',
    'liquid_hours' : 'liquidHours',
    'cusip' : 'cusip',
    'ratings' : 'ratings',
    'desc_append' : 'descAppend',
    'bond_type' : 'bondType',
    'coupon_type' : 'couponType',
    'callable' : 'callable',
    'puttable' : 'putable',
    'coupon' : 'coupon',
    'convertible' : 'convertible',
    'maturity' : 'maturity',
    'issue_date' : 'issueDate',
    'next_option_date' : 'nextOptionDate',
    'next_option_type' : 'nextOptionType',
    'next_option_partial' : 'nextOptionPartial',
    'notes' : 'notes',
}

def _to_ib_value(value : typing.Any) -> typing.Any:
    return '' if value is None else value

def _from_ib_value(value : typing.Any) -> typing.Any:
    return None if value == '' else value

def combo_leg_to_ibapi(leg : ComboLeg) -> ib.ComboLeg:
    ib_leg = ib.ComboLeg()
    for name, ib_name in COMBO_LEG_ATTRIBUTES.items():
        setattr(ib_leg, ib_name, _to_ib_value(getattr(leg, name)))
    return ib_leg

def combo_leg_from_ibapi(ib_leg : ib.ComboLeg) -> ComboLeg:
    leg = ComboLeg({name : getattr(ib_leg, ib_name) for name, ib_name in COMBO_LEG_ATTRIBUTES.items()})
    # designated_location stays '', it is blank rather than unset on the wire
    leg.action = _from_ib_value(leg.action)
    leg.exchange = _from_ib_value(leg.exchange)
    return leg

def to_ibapi(contract : Contract) -> ib.Contract:
    """
    Converts a Contract to an ibapi Contract, ready for EClient requests
    """
    ib_contract = ib.Contract()
    for name, ib_name in CONTRACT_ATTRIBUTES.items():
        setattr(ib_contract, ib_name, _to_ib_value(getattr(contract, name)))
    ib_contract.strike = float(contract.strike)

    if (contract.sec_type or '').upper() == BAG_SEC_TYPE:
        ib_contract.comboLegs = [combo_leg_to_ibapi(leg) for leg in contract.combo_legs]
    return ib_contract

def from_ibapi(ib_contract : ib.Contract) -> Contract:
    """
    Converts an ibapi Contract, e.g. from a position or contractDetails callback, to a Contract
    """
    contract = Contract({name : _from_ib_value(getattr(ib_contract, ib_name)) for name, ib_name in CONTRACT_ATTRIBUTES.items()})
    if contract.strike is None:
        contract.strike = 0
    if contract.con_id is None:
        contract.con_id = 0
    contract.combo_legs = [combo_leg_from_ibapi(ib_leg) for ib_leg in ib_contract.comboLegs or []]
    return contract

def details_from_ibapi(ib_details : ib.ContractDetails) -> ContractDetails:
    details = ContractDetails({name : getattr(ib_details, ib_name) for name, ib_name in DETAILS_ATTRIBUTES.items()})
    details.summary = from_ibapi(ib_details.contract)
    details.trading_class = _from_ib_value(ib_details.contract.tradingClass)
    return details
