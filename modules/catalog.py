# ═══════════════════════════════════════════════════════════════════════════════
# CLAIM METHOD CATALOG
# ═══════════════════════════════════════════════════════════════════════════════

from dataclasses import dataclass

from eth_abi import encode
from web3 import Web3

NATIVE_TOKEN = '0xEeeeeEeeeEeEeeEeEeEeeEEEeeeeEeeeeeeeEEeE'
ZERO_ADDRESS = '0x0000000000000000000000000000000000000000'
MAX_UINT256 = 2**256 - 1

SELECTORS = {
    'mint()': '1249c58b',
    'freeMint()': '3f8b5c32',
    'claim(uint256)': '379607f5',
    'publicClaim': '1e83409a',
    # claim(address,uint256,address,uint256,(bytes32[],uint256,uint256,address),bytes)
    'complexClaim': '84bb1e42'
}

CLAIM_ARG_TYPES = [
    'address',
    'uint256',
    'address',
    'uint256',
    '(bytes32[],uint256,uint256,address)',
    'bytes'
]


@dataclass(frozen=True)
class CandidateCall:
    name: str
    payload: bytes

    @property
    def data(self) -> str:
        return '0x' + self.payload.hex()


def _selector(name: str) -> bytes:
    return bytes.fromhex(SELECTORS[name])


def build_complex_call(wallet_address: str) -> bytes:
    """claim() with an empty allowlist proof, quantity 1, paid in native token"""
    receiver = Web3.to_checksum_address(wallet_address)
    allowlist_proof = ([], 0, MAX_UINT256, ZERO_ADDRESS)
    args = encode(CLAIM_ARG_TYPES, [receiver, 1, NATIVE_TOKEN, 0, allowlist_proof, b''])
    return _selector('complexClaim') + args


def build_public_claim_call(wallet_address: str) -> bytes:
    receiver = Web3.to_checksum_address(wallet_address)
    return _selector('publicClaim') + encode(['address', 'uint256'], [receiver, 1])


def get_methods(wallet_address: str) -> dict:
    """Candidate calls grouped by tier"""
    return {
        'standard': [
            CandidateCall('mint()', _selector('mint()')),
            CandidateCall('freeMint()', _selector('freeMint()'))
        ],
        'claims': [
            CandidateCall('claim(1)', _selector('claim(uint256)') + encode(['uint256'], [1])),
            CandidateCall('publicClaim', build_public_claim_call(wallet_address))
        ],
        'complex': [
            CandidateCall('complexClaim', build_complex_call(wallet_address))
        ]
    }


def get_all_methods(wallet_address: str) -> tuple:
    """Every candidate call in attempt order, cheapest first"""
    methods = get_methods(wallet_address)
    return tuple(methods['standard'] + methods['claims'] + methods['complex'])
