"""
Builds contracts from a table, one row per contract and one column per Contract field.

Example contracts.csv:

    symbol,sec_type,expiry,multiplier,exchange,currency
    GBP,FUT,200809,62500,GLOBEX,USD
    IBM,STK,,,SMART,USD
"""
import logging
import typing
from pathlib import Path

import pandas as pd # type: ignore

from ib_contract._contract import Contract, parse_strike
from ib_contract.error_codes import InvalidArgument

logger = logging.getLogger(__name__)

# Columns that are not plain text on the wire
CONVERTERS : dict[str, typing.Callable[[str], typing.Any]] = {
    'con_id' : int,
    'strike' : parse_strike,
    'include_expired' : lambda value: str(value).strip().lower() in ('1', 'true', 'yes'),
}

def _row_fields(row : pd.Series) -> dict[str, typing.Any]:
    fields : dict[str, typing.Any] = {}
    for column, value in row.items():
        if pd.isna(value) or value == '':
            continue
        converter = CONVERTERS.get(str(column))
        if converter is None:
            fields[str(column)] = value
            continue
        try:
            fields[str(column)] = converter(value)
        except ValueError as exc:
            raise InvalidArgument(f"Invalid {column} \"{value}\"") from exc
    return fields

def initialize_contracts(contract_df : pd.DataFrame) -> list[Contract]:
    """
    Initializes a list of Contract objects from a pandas DataFrame

    Empty cells are left at the Contract defaults, every other cell goes through the
    Contract setters so an invalid row raises InvalidArgument.
    """
    return [Contract(_row_fields(row)) for _, row in contract_df.iterrows()]

def load_contracts(path : str | Path) -> list[Contract]:
    contract_path = Path(path)
    if not contract_path.exists():
        raise FileNotFoundError(f"Contract file not found at {contract_path}")

    # Everything as text, an expiry like 200809 must not turn into an integer
    contract_df : pd.DataFrame = pd.read_csv(contract_path, dtype=str, keep_default_na=False)
    contracts = initialize_contracts(contract_df)
    logger.debug(f"Loaded {len(contracts)} contracts from {contract_path}")
    return contracts
