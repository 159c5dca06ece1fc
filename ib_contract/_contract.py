import logging
import re
import typing

from ib_contract._combo_leg import ComboLeg
from ib_contract._enums import Right, SecurityType, SerializeType
from ib_contract._model import Model, serialize_type
from ib_contract.error_codes import InvalidArgument, Unimplemented

logger = logging.getLogger(__name__)

BAG_SEC_TYPE = SecurityType.BAG.value

WIRE_SEPARATOR = ':'

# Order of the colon delimited contract string, also the order of serialize(LONG)
WIRE_FIELDS = (
    'symbol',
    'sec_type',
    'expiry',
    'strike',
    'right',
    'multiplier',
    'exchange',
    'primary_exchange',
    'currency',
    'local_symbol')

_EXPIRY_PATTERN = re.compile(r'\d{6,8}')

class Contract(Model):
    """
    Contract class describing a tradable instrument to the broker

    Attributes:
    -   con_id: int - The unique contract identifier
    -   symbol: str - The symbol of the underlying asset
    -   sec_type: str - Security type, one of the SecurityType wire codes
    -   expiry: str - The expiration date, YYYYMM or YYYYMMDD
    -   strike: int | float - The strike price
    -   right: str - Put or call, one of PUT, CALL, P, C or "0"
    -   multiplier: str - Future or option multiplier, only needed when several exist
    -   exchange: str - The order destination, such as SMART
    -   currency: str - Only needed to resolve ambiguities (IBM on SMART trades in GBP and USD)
    -   local_symbol: str - Local exchange symbol of the underlying asset
    -   primary_exchange: str - A non-aggregate exchange the contract trades on, never SMART
    -   include_expired: bool - Allow contract details and historical data queries on expired
            contracts. Can NOT be set to True for orders.
    -   sec_id_type: str - ISIN, CUSIP, SEDOL or RIC
    -   sec_id: str - Identifier of the given sec_id_type
    -   combo_legs_description: str - Received in open order messages for combos
    -   combo_legs: list[ComboLeg] - The legs of a BAG contract
    -   under_comp: Any - Delta neutral component
    -   description: str - Free text, local to this client and never sent to the broker

    Methods:

    SERIALIZERS:
    -   serialize(variant) -> list - The wire tokens of the contract, without combo legs
    -   serialize_combo_legs(variant) -> list - The wire tokens of the combo legs
    -   to_wire_string() -> str - The colon delimited contract string

    CONSTRUCTORS:
    -   from_wire_string(text) -> Contract - Parses the colon delimited contract string
    """
    FIELDS = (
        'con_id',
        'symbol',
        'sec_type',
        'expiry',
        'strike',
        'right',
        'multiplier',
        'exchange',
        'currency',
        'local_symbol',
        'primary_exchange',
        'include_expired',
        'sec_id_type',
        'sec_id',
        'combo_legs_description',
        'combo_legs',
        'under_comp',
        'description')

    def __init__(self, opts : typing.Optional[typing.Mapping[str, typing.Any]] = None, **fields : typing.Any) -> None:
        # Defaults first, the bulk assignment below runs through the setters
        self.con_id : int = 0
        self.symbol : typing.Optional[str] = None
        self._sec_type : typing.Optional[str] = None
        self._expiry : str = ''
        self.strike : int | float = 0
        self._right : typing.Optional[str] = None
        self.multiplier : typing.Optional[str] = None
        self.exchange : typing.Optional[str] = None
        self.currency : typing.Optional[str] = None
        self.local_symbol : typing.Optional[str] = None
        self._primary_exchange : typing.Optional[str] = None
        self.include_expired : bool = False
        self.sec_id_type : typing.Optional[str] = None
        self.sec_id : typing.Optional[str] = None
        self.combo_legs_description : typing.Optional[str] = None
        self._combo_legs : list[ComboLeg] = []
        self.under_comp : typing.Any = None
        self.description : typing.Optional[str] = None

        super().__init__(opts, **fields)

    @property
    def primary_exchange(self) -> typing.Optional[str]:
        return self._primary_exchange

    @primary_exchange.setter
    def primary_exchange(self, value : typing.Optional[str]) -> None:
        if isinstance(value, str):
            value = value.upper()
        if value == 'SMART':
            raise InvalidArgument("Don't set primary_exchange to SMART")
        self._primary_exchange = value

    @property
    def right(self) -> typing.Optional[str]:
        return self._right

    @right.setter
    def right(self, value : typing.Optional[str]) -> None:
        if isinstance(value, str):
            value = value.upper()
        if value == '':
            value = None
        if value is not None and value not in {right.value for right in Right}:
            raise InvalidArgument(f"Invalid right \"{value}\" (must be one of PUT, CALL, P, C)")
        self._right = value

    @property
    def expiry(self) -> str:
        return self._expiry

    @expiry.setter
    def expiry(self, value : typing.Any) -> None:
        value = '' if value is None else str(value)
        if value and not _EXPIRY_PATTERN.search(value):
            raise InvalidArgument(f"Invalid expiry \"{value}\" (must be in format YYYYMM or YYYYMMDD)")
        self._expiry = value

    @property
    def sec_type(self) -> typing.Optional[str]:
        return self._sec_type

    @sec_type.setter
    def sec_type(self, value : typing.Optional[str]) -> None:
        if value == '':
            value = None
        if isinstance(value, SecurityType):
            value = value.value
        if value is not None and value not in SecurityType.codes():
            raise InvalidArgument(f"Invalid security type \"{value}\" (must be one of {', '.join(SecurityType)})")
        self._sec_type = value

    @property
    def combo_legs(self) -> list[ComboLeg]:
        return self._combo_legs

    @combo_legs.setter
    def combo_legs(self, legs : typing.Optional[typing.Iterable[ComboLeg | typing.Mapping[str, typing.Any]]]) -> None:
        self._combo_legs = [leg if isinstance(leg, ComboLeg) else ComboLeg(leg) for leg in legs or []]

    def reset(self) -> None:
        """Clears the combo legs and the strike so the object can be reused for a new query"""
        self._combo_legs = []
        self.strike = 0

    def serialize(self, variant : SerializeType | str = SerializeType.LONG) -> list[typing.Any]:
        """
        Returns the contract fields in the order the broker expects them.
        Different messages serialize contracts differently, the short variant drops the primary exchange.
        Combo legs are not included, see serialize_combo_legs.
        """
        tokens : list[typing.Any] = [
            self.symbol,
            self.sec_type,
            self.expiry,
            self.strike,
            self.right,
            self.multiplier,
            self.exchange]
        if serialize_type(variant) == SerializeType.LONG:
            tokens.append(self.primary_exchange)
        tokens += [self.currency, self.local_symbol]
        return tokens

    def serialize_long(self, version : typing.Optional[int] = None) -> list[typing.Any]:
        return self.serialize(SerializeType.LONG)

    def serialize_short(self, version : typing.Optional[int] = None) -> list[typing.Any]:
        return self.serialize(SerializeType.SHORT)

    def serialize_combo_legs(self, variant : SerializeType | str = SerializeType.SHORT) -> list[typing.Any]:
        """
        Returns [] for anything but a BAG, [0] for a BAG without legs and
        [count, [leg tokens, ...]] otherwise
        """
        if (self.sec_type or '').upper() != BAG_SEC_TYPE:
            return []
        if not self.combo_legs:
            return [0]
        logger.debug(f"Serializing {len(self.combo_legs)} combo legs of {self.symbol}")
        return [len(self.combo_legs), [leg.serialize(variant) for leg in self.combo_legs]]

    def serialize_under_comp(self, *args : typing.Any) -> list[typing.Any]:
        raise Unimplemented("Delta neutral component serialization is not implemented")

    def serialize_algo(self, *args : typing.Any) -> list[typing.Any]:
        raise Unimplemented("Algo order parameter serialization is not implemented")

    def to_wire_string(self) -> str:
        """
        Returns the contract in the colon delimited format used on the command line:

            symbol:sec_type:expiry:strike:right:multiplier:exchange:primary_exchange:currency:local_symbol

        Fields not needed for a particular security are left blank, e.g. the September 2008
        British pound future on Globex is GBP:FUT:200809:0::62500:GLOBEX::USD:
        """
        return WIRE_SEPARATOR.join(_text(token) for token in self.serialize(SerializeType.LONG))

    @classmethod
    def from_wire_string(cls, text : str) -> 'Contract':
        """
        Builds a Contract from the to_wire_string format.
        Only the ten positional fields are restored, every segment goes through the field setter.
        """
        segments = text.split(WIRE_SEPARATOR)
        if len(segments) > len(WIRE_FIELDS):
            raise InvalidArgument(f"Invalid contract string \"{text}\" (expected at most {len(WIRE_FIELDS)} fields, got {len(segments)})")
        segments += [''] * (len(WIRE_FIELDS) - len(segments))

        contract = cls()
        for name, segment in zip(WIRE_FIELDS, segments):
            if name == 'strike':
                contract.strike = parse_strike(segment)
            else:
                setattr(contract, name, segment if segment else None)
        logger.debug(f"Parsed contract string {text} into {contract!r}")
        return contract

    def to_human(self) -> str:
        return "<IB-Contract: " + '-'.join(_text(token) for token in [
            self.symbol,
            self.expiry,
            self.sec_type,
            self.strike,
            self.right,
            self.exchange,
            self.currency]) + "}>"

    def to_short(self) -> str:
        return ''.join(_text(token) for token in [
            self.symbol,
            self.expiry,
            self.strike,
            self.right,
            self.exchange,
            self.currency])

    def __str__(self) -> str:
        return self.to_human()

    def _identity(self) -> tuple[typing.Any, ...]:
        return (
            self.con_id,
            *self.serialize(SerializeType.LONG),
            self.include_expired,
            self.sec_id_type,
            self.sec_id,
            tuple(self.combo_legs))

    def __eq__(self, other : object) -> bool:
        if not isinstance(other, Contract):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash(self._identity())

def _text(token : typing.Any) -> str:
    return '' if token is None else str(token)

def parse_strike(segment : str) -> int | float:
    """Parses a strike the way ibapi holds it, int for whole numbers so "0" stays 0, float otherwise"""
    segment = str(segment).strip()
    if not segment:
        return 0
    try:
        return int(segment)
    except ValueError:
        pass
    try:
        return float(segment)
    except ValueError as exc:
        raise InvalidArgument(f"Invalid strike \"{segment}\" (must be numeric)") from exc
