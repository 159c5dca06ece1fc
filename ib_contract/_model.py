import copy
import typing

from ib_contract._enums import SerializeType
from ib_contract.error_codes import InvalidArgument

class Model:
    """
    Base class for the contract records

    Subclasses list their attribute names in FIELDS. Bulk assignment goes through
    setattr so that property setters validate values exactly as they would for a
    single assignment.
    """
    FIELDS : tuple[str, ...] = ()

    def __init__(self, opts : typing.Optional[typing.Mapping[str, typing.Any]] = None, **fields : typing.Any) -> None:
        self.update(opts, **fields)

    def update(self, opts : typing.Optional[typing.Mapping[str, typing.Any]] = None, **fields : typing.Any) -> None:
        """
        Assigns every field through its setter. The values are tried on a copy first,
        so a rejected value leaves the whole record unchanged.
        """
        values = dict(opts or {})
        values.update(fields)
        for name in values:
            if name not in self.FIELDS:
                raise InvalidArgument(f"Unknown attribute \"{name}\" for {type(self).__name__}")

        trial = copy.copy(self)
        for name, value in values.items():
            setattr(trial, name, value)
        self.__dict__.update(trial.__dict__)

    def to_dict(self) -> dict[str, typing.Any]:
        return {name : getattr(self, name) for name in self.FIELDS}

    def __repr__(self) -> str:
        set_fields = ', '.join(f"{name}={value!r}" for name, value in self.to_dict().items() if value not in (None, ''))
        return f"{type(self).__name__}({set_fields})"

def serialize_type(variant : SerializeType | str) -> SerializeType:
    try:
        return SerializeType(variant)
    except ValueError as exc:
        raise InvalidArgument(f"Invalid serialization type \"{variant}\" (must be one of {', '.join(SerializeType)})") from exc
