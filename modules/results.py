# ═══════════════════════════════════════════════════════════════════════════════
# ATTEMPT AND RUN RESULTS
# ═══════════════════════════════════════════════════════════════════════════════

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Tuple


# Outcome of a single candidate call

@dataclass(frozen=True)
class Confirmed:
    method: str
    tx_hash: str
    gas_used: int
    effective_gas_price: int
    cost_eth: float
    event_count: int


@dataclass(frozen=True)
class Reverted:
    method: str
    tx_hash: str


@dataclass(frozen=True)
class SubmissionError:
    method: str
    reason: str


# Final state of one run

@dataclass(frozen=True)
class Success:
    outcome: Confirmed
    exit_code = 0


@dataclass(frozen=True)
class ExhaustedAllMethods:
    attempts: Tuple = ()
    exit_code = 1


@dataclass(frozen=True)
class AbortedInsufficientFunds:
    balance_eth: Optional[Decimal] = None
    exit_code = 1


@dataclass(frozen=True)
class FatalError:
    reason: str
    exit_code = 1
