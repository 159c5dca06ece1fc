import typing

from ib_contract._contract import Contract
from ib_contract._model import Model

class ContractDetails(Model):
    """
    Descriptive and market metadata about a contract, as returned by a contract details query

    All fields are strings unless noted otherwise. The bond fields are only populated for bonds.
    """
    FIELDS = (
        'summary',
        'market_name',
        'trading_class',
        'min_tick',
        'price_magnifier',
        'order_types',
        'valid_exchanges',
        'under_con_id',
        'long_name',
        'contract_month',
        'industry',
        'category',
        'subcategory',
        'time_zone',
        'trading_hours',
        'liquid_hours',
        'cusip',
        'ratings',
        'desc_append',
        'bond_type',
        'coupon_type',
        'callable',
        'puttable',
        'coupon',
        'convertible',
        'maturity',
        'issue_date',
        'next_option_date',
        'next_option_type',
        'next_option_partial',
        'notes')

    def __init__(self, opts : typing.Optional[typing.Mapping[str, typing.Any]] = None, **fields : typing.Any) -> None:
        self._summary : Contract = Contract()
        self.market_name : typing.Optional[str] = None
        self.trading_class : typing.Optional[str] = None
        self.min_tick : float = 0
        # Lets execution and strike prices be reported consistently with market data,
        # e.g. Z on LIFFE is reported in index points, not GBP
        self.price_magnifier : typing.Optional[int] = None
        self.order_types : typing.Optional[str] = None
        self.valid_exchanges : typing.Optional[str] = None
        self.under_con_id : int = 0
        self.long_name : typing.Optional[str] = None
        self.contract_month : typing.Optional[str] = None

        # Industry classification of the underlying, e.g. Financial / InvestmentSvc / Brokerage
        self.industry : typing.Optional[str] = None
        self.category : typing.Optional[str] = None
        self.subcategory : typing.Optional[str] = None

        self.time_zone : typing.Optional[str] = None
        self.trading_hours : typing.Optional[str] = None # 20090507:0700-1830,1830-2330;20090508:CLOSED
        self.liquid_hours : typing.Optional[str] = None # 20090507:0930-1600;20090508:CLOSED

        self.cusip : typing.Optional[str] = None
        self.ratings : typing.Optional[str] = None # Moody's and S&P
        self.desc_append : typing.Optional[str] = None
        self.bond_type : typing.Optional[str] = None
        self.coupon_type : typing.Optional[str] = None
        self.callable : bool = False
        self.puttable : bool = False
        self.coupon : float = 0
        self.convertible : bool = False
        self.maturity : typing.Optional[str] = None
        self.issue_date : typing.Optional[str] = None
        self.next_option_date : typing.Optional[str] = None
        self.next_option_type : typing.Optional[str] = None
        self.next_option_partial : bool = False
        self.notes : typing.Optional[str] = None

        super().__init__(opts, **fields)

    @property
    def summary(self) -> Contract:
        return self._summary

    @summary.setter
    def summary(self, value : Contract | typing.Mapping[str, typing.Any]) -> None:
        self._summary = value if isinstance(value, Contract) else Contract(value)
