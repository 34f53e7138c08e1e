"""Call catalog: payload layout and attempt order."""

from __future__ import annotations

import pytest

from modules.catalog import (
    CandidateCall,
    build_complex_call,
    build_public_claim_call,
    get_all_methods,
    get_methods,
)
from tests.conftest import TEST_ADDRESS

ONE = "0" * 63 + "1"
ZERO = "0" * 64

ADDRESSES = [
    TEST_ADDRESS,
    "0x000000000000000000000000000000000000dEaD",
    "0xAbCdEf0123456789aBcDeF0123456789AbCdEf01".lower(),
]


def address_word(address: str) -> str:
    return address[2:].lower().rjust(64, "0")


@pytest.mark.parametrize("address", ADDRESSES)
def test_public_claim_embeds_address_after_selector(address):
    data = "0x" + build_public_claim_call(address).hex()

    assert data == "0x1e83409a" + address_word(address) + ONE


@pytest.mark.parametrize("address", ADDRESSES)
def test_complex_claim_matches_literal_layout(address):
    expected = (
        "0x84bb1e42"
        + address_word(address)
        + ONE
        + "000000000000000000000000eeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeee"
        + ZERO
        + "0" * 62 + "c0"
        + "0" * 61 + "160"
        + "0" * 62 + "80"
        + ZERO
        + "f" * 64
        + ZERO
        + ZERO
        + ZERO
    )

    data = "0x" + build_complex_call(address).hex()

    assert data == expected
    assert len(build_complex_call(address)) == 4 + 12 * 32


def test_fixed_payloads():
    methods = {m.name: m.data for m in get_all_methods(TEST_ADDRESS)}

    assert methods["mint()"] == "0x1249c58b"
    assert methods["freeMint()"] == "0x3f8b5c32"
    assert methods["claim(1)"] == "0x379607f5" + ONE


@pytest.mark.parametrize("address", ADDRESSES)
def test_attempt_order_is_fixed(address):
    names = [m.name for m in get_all_methods(address)]

    assert names == ["mint()", "freeMint()", "claim(1)", "publicClaim", "complexClaim"]


def test_tiers_flatten_in_order():
    tiers = get_methods(TEST_ADDRESS)

    assert list(tiers) == ["standard", "claims", "complex"]
    flattened = tiers["standard"] + tiers["claims"] + tiers["complex"]
    assert tuple(flattened) == get_all_methods(TEST_ADDRESS)


def test_catalog_is_deterministic():
    assert get_all_methods(TEST_ADDRESS) == get_all_methods(TEST_ADDRESS.lower())


def test_candidate_call_is_immutable():
    call = CandidateCall("mint()", bytes.fromhex("1249c58b"))

    with pytest.raises(AttributeError):
        call.name = "other"


def test_invalid_address_rejected():
    with pytest.raises(ValueError):
        build_public_claim_call("0x1234")
