"""Shared fixtures for claim bot tests."""

from __future__ import annotations

from decimal import Decimal

import pytest

from config import BotConfig
from utils.wallet import load_account

from tests.mocks import FakeWeb3, LogSink, RecordingSleep

TEST_PRIVATE_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"
TEST_ADDRESS = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"
CONTRACT = "0x5FbDB2315678afecb367f032d93F642f64180aa3"


@pytest.fixture
def config() -> BotConfig:
    return BotConfig(
        rpc_url="http://127.0.0.1:8545",
        private_key=TEST_PRIVATE_KEY,
        contract_address=CONTRACT,
        min_balance_eth=Decimal("0.000001"),
        retry_delay_ms=2000,
        receipt_timeout=5,
    )


@pytest.fixture
def account():
    return load_account(TEST_PRIVATE_KEY)


@pytest.fixture
def web3() -> FakeWeb3:
    return FakeWeb3()


@pytest.fixture
def sink() -> LogSink:
    return LogSink()


@pytest.fixture
def sleep() -> RecordingSleep:
    return RecordingSleep()
