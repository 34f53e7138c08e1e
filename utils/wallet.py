# ═══════════════════════════════════════════════════════════════════════════════
# MEGAETH CLAIM BOT v1.0.0 - WALLET UTILITIES
# ═══════════════════════════════════════════════════════════════════════════════

from decimal import Decimal

from eth_account import Account
from web3 import Web3

from utils.errors import ConfigurationError


def load_account(private_key: str):
    """Create the signing account from a hex private key"""
    key = private_key.strip()
    if not key.startswith('0x'):
        key = '0x' + key
    try:
        return Account.from_key(key)
    except (ValueError, TypeError) as error:
        raise ConfigurationError(f'Invalid PRIVATE_KEY: {error}') from error


def connect(rpc_url: str) -> Web3:
    return Web3(Web3.HTTPProvider(rpc_url))


def get_native_balance(web3, wallet_address: str) -> Decimal:
    """Native balance of a wallet in ether"""
    balance = web3.eth.get_balance(Web3.to_checksum_address(wallet_address))
    return Web3.from_wei(balance, 'ether')
