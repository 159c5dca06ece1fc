"""
Prints the wire tokens of contracts given on the command line or in a CSV table.

    python -m ib_contract GBP:FUT:200809:0::62500:GLOBEX::USD:
    python -m ib_contract --csv data/contracts.csv --variant short
    python -m ib_contract  # the csv_path of config.toml
"""
import argparse
import logging
import sys
import typing

from ib_contract._config import CONTRACTS_CSV, DEFAULT_VARIANT, LOG_LEVEL
from ib_contract._contract import WIRE_SEPARATOR, Contract
from ib_contract._enums import SerializeType
from ib_contract.contract_table import load_contracts
from ib_contract.error_codes import InvalidArgument

logger = logging.getLogger(__name__)

def _format(tokens : list[typing.Any]) -> str:
    formatted = []
    for token in tokens:
        if isinstance(token, list):
            formatted.append(_format(token))
        else:
            formatted.append('' if token is None else str(token))
    return WIRE_SEPARATOR.join(formatted)

def parse_args(argv : typing.Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog='ib_contract', description='Serialize contracts to broker wire tokens')
    parser.add_argument('specs', nargs='*', help='symbol:sec_type:expiry:strike:right:multiplier:exchange:primary_exchange:currency:local_symbol')
    parser.add_argument('--csv', help='CSV table of contracts, one column per field. Defaults to the configured csv_path when no specs are given')
    parser.add_argument('--variant', choices=[variant.value for variant in SerializeType], default=DEFAULT_VARIANT)
    parser.add_argument('--combo', action='store_true', help='print the combo leg serialization instead')
    return parser.parse_args(argv)

def main(argv : typing.Optional[list[str]] = None) -> int:
    logging.basicConfig(level=LOG_LEVEL)
    args = parse_args(argv)
    if not args.specs and not args.csv:
        args.csv = CONTRACTS_CSV

    contracts : list[Contract] = []
    exit_code = 0
    for spec in args.specs:
        try:
            contracts.append(Contract.from_wire_string(spec))
        except InvalidArgument as e:
            logger.error(f"Invalid contract {spec}: {e}")
            exit_code = 1

    if args.csv:
        try:
            contracts += load_contracts(args.csv)
        except (InvalidArgument, FileNotFoundError) as e:
            logger.error(f"Could not load contracts from {args.csv}: {e}")
            exit_code = 1

    for contract in contracts:
        if args.combo:
            print(_format(contract.serialize_combo_legs(args.variant)))
        else:
            print(_format(contract.serialize(args.variant)))

    return exit_code

if __name__ == "__main__":
    sys.exit(main())
