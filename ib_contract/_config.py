import os
from typing import Any, Dict

import toml
from dotenv import load_dotenv

load_dotenv()

config_dir = os.path.dirname(__file__)
default_config_path = os.path.join(config_dir, 'config.toml')

def load_config(path : str | os.PathLike[str] | None = None) -> Dict[str, Any]:
    """
    Loads the toml configuration, IB_CONTRACT_CONFIG overrides the packaged config.toml
    """
    if path is None:
        path = os.getenv('IB_CONTRACT_CONFIG', default_config_path)
    if not os.path.exists(path):
        raise FileNotFoundError(f"Config file not found at {path}")
    return toml.load(path)

config : Dict[str, Any] = load_config()

LOG_LEVEL : str = config['logging']['level']
DEFAULT_VARIANT : str = config['serialization']['default_variant']
CONTRACTS_CSV : str = config['contracts']['csv_path']
