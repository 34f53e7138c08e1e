# ═══════════════════════════════════════════════════════════════════════════════
# MEGAETH CLAIM BOT v1.0.0 - CONFIGURATION
# ═══════════════════════════════════════════════════════════════════════════════

import os
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation

from web3 import Web3

from utils.errors import ConfigurationError

# Console colors
class COLORS:
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    RED = "\033[31m"
    CYAN = "\033[36m"
    MAGENTA = "\033[35m"
    WHITE = "\033[37m"
    BLUE = "\033[34m"
    BOLD_GREEN = "\033[1;32m"
    BOLD_YELLOW = "\033[1;33m"
    BOLD_RED = "\033[1;31m"
    BOLD_CYAN = "\033[1;36m"
    BOLD_MAGENTA = "\033[1;35m"
    BOLD_WHITE = "\033[1;37m"

# Version info
VERSION_INFO = {
    'VERSION': '1.0.0',
    'BUILD_DATE': '18.10.2026',
    'AUTHOR': 'Shadow'
}

# Core configuration (defaults, overridable from .env)
CONFIG = {
    'CHAIN_ID': 6342,
    'GAS_PRICE_GWEI': '0.1',
    'GAS_LIMIT': 350000,
    'MIN_BALANCE_ETH': '0.000001',
    'RETRY_DELAY_MS': 2000,
    'RECEIPT_TIMEOUT': 120,
    'EXPLORER_TX_URL': 'https://www.oklink.com/megaeth-testnet/tx/{hash}'
}


@dataclass(frozen=True)
class BotConfig:
    """Immutable run configuration, built once at startup"""
    rpc_url: str
    private_key: str = field(repr=False)
    contract_address: str
    gas_price_gwei: str = CONFIG['GAS_PRICE_GWEI']
    gas_limit: int = CONFIG['GAS_LIMIT']
    chain_id: int = CONFIG['CHAIN_ID']
    min_balance_eth: Decimal = Decimal(CONFIG['MIN_BALANCE_ETH'])
    retry_delay_ms: int = CONFIG['RETRY_DELAY_MS']
    receipt_timeout: int = CONFIG['RECEIPT_TIMEOUT']
    explorer_tx_url: str = CONFIG['EXPLORER_TX_URL']

    @property
    def gas_price_wei(self) -> int:
        return Web3.to_wei(Decimal(self.gas_price_gwei), 'gwei')

    def tx_link(self, tx_hash: str) -> str:
        return self.explorer_tx_url.format(hash=tx_hash)


def validate_contract_address(address: str) -> str:
    """Return the checksummed form of a 0x-prefixed 20-byte address"""
    address = (address or '').strip()
    if not address:
        raise ConfigurationError('Contract address is required')
    if not address.startswith('0x') or not Web3.is_address(address):
        raise ConfigurationError(f'Invalid contract address: {address}')
    return Web3.to_checksum_address(address)


def _env_int(env, name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f'{name} must be an integer, got {raw!r}')


def _env_decimal(env, name: str, default: str) -> Decimal:
    raw = env.get(name)
    if raw is None or raw.strip() == '':
        raw = default
    try:
        value = Decimal(raw.strip())
    except InvalidOperation:
        raise ConfigurationError(f'{name} must be a decimal number, got {raw!r}')
    if not value.is_finite():
        raise ConfigurationError(f'{name} must be a finite number, got {raw!r}')
    if value < 0:
        raise ConfigurationError(f'{name} must not be negative')
    return value


def load_config(prompt=None, env=None) -> BotConfig:
    """Build BotConfig from environment variables.

    PRIVATE_KEY and RPC_URL are required. CONTRACT_ADDRESS is read from the
    environment, or asked for through ``prompt`` when missing.
    """
    env = os.environ if env is None else env

    private_key = (env.get('PRIVATE_KEY') or '').strip()
    if not private_key:
        raise ConfigurationError('PRIVATE_KEY not set in .env')

    rpc_url = (env.get('RPC_URL') or '').strip()
    if not rpc_url:
        raise ConfigurationError('RPC_URL not set in .env')

    contract_address = (env.get('CONTRACT_ADDRESS') or '').strip()
    if not contract_address and prompt is not None:
        contract_address = prompt('Enter contract address: ')
    contract_address = validate_contract_address(contract_address)

    gas_price = _env_decimal(env, 'GAS_PRICE_GWEI', CONFIG['GAS_PRICE_GWEI'])

    gas_limit = _env_int(env, 'GAS_LIMIT', CONFIG['GAS_LIMIT'])
    if gas_limit <= 0:
        raise ConfigurationError('GAS_LIMIT must be positive')

    retry_delay_ms = _env_int(env, 'RETRY_DELAY_MS', CONFIG['RETRY_DELAY_MS'])
    if retry_delay_ms < 0:
        raise ConfigurationError('RETRY_DELAY_MS must not be negative')

    chain_id = _env_int(env, 'CHAIN_ID', CONFIG['CHAIN_ID'])
    if chain_id <= 0:
        raise ConfigurationError('CHAIN_ID must be positive')

    receipt_timeout = _env_int(env, 'RECEIPT_TIMEOUT', CONFIG['RECEIPT_TIMEOUT'])
    if receipt_timeout <= 0:
        raise ConfigurationError('RECEIPT_TIMEOUT must be positive')

    return BotConfig(
        rpc_url=rpc_url,
        private_key=private_key,
        contract_address=contract_address,
        gas_price_gwei=str(gas_price),
        gas_limit=gas_limit,
        chain_id=chain_id,
        min_balance_eth=_env_decimal(env, 'MIN_BALANCE_ETH', CONFIG['MIN_BALANCE_ETH']),
        retry_delay_ms=retry_delay_ms,
        receipt_timeout=receipt_timeout,
    )
