import typing

from ib_contract._enums import OpenClose, SerializeType
from ib_contract._model import Model, serialize_type

class ComboLeg(Model):
    """
    One leg of a combo (BAG) contract

    Attributes:
    -   con_id: int - The unique contract identifier of the leg
    -   ratio: int - The relative number of contracts for the leg
    -   action: str - The side of the leg, see LegAction (BUY/SELL/SSHORT/SSHORTX)
    -   exchange: str - The exchange to which the complete combo order is routed
    -   open_close: OpenClose - Whether the leg opens or closes a position
    -   short_sale_slot: int - 0 retail, 1 clearing broker, 2 third party
    -   designated_location: str - Only for short_sale_slot == 2, otherwise leave blank
    -   exempt_code: int
    """
    FIELDS = (
        'con_id',
        'ratio',
        'action',
        'exchange',
        'open_close',
        'short_sale_slot',
        'designated_location',
        'exempt_code')

    def __init__(self, opts : typing.Optional[typing.Mapping[str, typing.Any]] = None, **fields : typing.Any) -> None:
        self.con_id : int = 0
        self.ratio : int = 0
        self.action : typing.Optional[str] = None
        self.exchange : typing.Optional[str] = None
        self.open_close : OpenClose | int = OpenClose.SAME
        self.short_sale_slot : int = 0
        self.designated_location : str = ''
        self.exempt_code : int = -1

        super().__init__(opts, **fields)

    def serialize(self, variant : SerializeType | str = SerializeType.SHORT) -> list[typing.Any]:
        # Some messages carry open_close and the short sale fields, some don't
        tokens : list[typing.Any] = [self.con_id, self.ratio, self.action, self.exchange]
        if serialize_type(variant) == SerializeType.LONG:
            tokens += [self.open_close, self.short_sale_slot, self.designated_location, self.exempt_code]
        return tokens

    def __eq__(self, other : object) -> bool:
        if not isinstance(other, ComboLeg):
            return NotImplemented
        return self.serialize(SerializeType.LONG) == other.serialize(SerializeType.LONG)

    def __hash__(self) -> int:
        return hash(tuple(self.serialize(SerializeType.LONG)))
