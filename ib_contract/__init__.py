from ib_contract._enums import SecurityType, Right, OpenClose, LegAction, SerializeType
from ib_contract.error_codes import InvalidArgument, Unimplemented
from ib_contract._combo_leg import ComboLeg
from ib_contract._contract import Contract, BAG_SEC_TYPE, WIRE_FIELDS
from ib_contract._contract_details import ContractDetails
from ib_contract._ibapi import to_ibapi, from_ibapi, combo_leg_to_ibapi, combo_leg_from_ibapi, details_from_ibapi
from ib_contract.contract_table import initialize_contracts, load_contracts

__all__ = [
    "SecurityType",
    "Right",
    "OpenClose",
    "LegAction",
    "SerializeType",
    "InvalidArgument",
    "Unimplemented",
    "ComboLeg",
    "Contract",
    "BAG_SEC_TYPE",
    "WIRE_FIELDS",
    "ContractDetails",
    "to_ibapi",
    "from_ibapi",
    "combo_leg_to_ibapi",
    "combo_leg_from_ibapi",
    "details_from_ibapi",
    "initialize_contracts",
    "load_contracts",
]
