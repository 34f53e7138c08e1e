# ═══════════════════════════════════════════════════════════════════════════════
# NFT CLAIM MODULE
# ═══════════════════════════════════════════════════════════════════════════════

from modules.catalog import get_all_methods
from modules.results import (
    AbortedInsufficientFunds,
    Confirmed,
    ExhaustedAllMethods,
    FatalError,
    Success
)
from modules.submitter import TransactionSubmitter
from utils.errors import ClaimBotError, UnknownFatalError
from utils.helpers import async_sleep, log
from utils.wallet import get_native_balance


class ClaimBot:
    """Tries every candidate claim call in order until one is confirmed.

    Attempts are strictly sequential: they share one account nonce, and the
    run stops at the first confirmed call.
    """

    def __init__(self, config, web3, account, submitter=None, sleep=async_sleep, logger=log):
        self.config = config
        self.web3 = web3
        self.account = account
        self.sleep = sleep
        self.log = logger
        self.submitter = submitter or TransactionSubmitter(config, web3, account, logger=logger, sleep=sleep)
        self.last_balance = None

    async def check_balance(self) -> bool:
        balance = get_native_balance(self.web3, self.account.address)
        self.last_balance = balance
        self.log(f"Balance: {balance:.6f} ETH", 'info')

        if balance < self.config.min_balance_eth:
            self.log('Insufficient ETH for gas fees', 'error')
            return False
        return True

    async def run(self):
        try:
            self.log('🚀 Starting NFT Claim Bot...', 'info')
            self.log(f"👤 Wallet: {self.account.address}", 'info')
            self.log(f"🎯 Contract: {self.config.contract_address}", 'info')

            if not await self.check_balance():
                return AbortedInsufficientFunds(self.last_balance)

            methods = get_all_methods(self.account.address)
            self.log(f"📋 Loaded {len(methods)} claim methods", 'info')

            attempts = []
            for i, method in enumerate(methods):
                outcome = await self.submitter.try_method(method)
                attempts.append(outcome)

                if isinstance(outcome, Confirmed):
                    self.log('🎉 Claim completed successfully!', 'success')
                    return Success(outcome)

                # No pause after the last candidate
                if i < len(methods) - 1:
                    delay = self.config.retry_delay_ms / 1000
                    self.log(f"⏳ Waiting {delay:g}s before next method...", 'warn')
                    await self.sleep(delay)

            self.log('❌ All methods failed', 'error')
            return ExhaustedAllMethods(tuple(attempts))

        except Exception as error:
            if not isinstance(error, ClaimBotError):
                error = UnknownFatalError(f"{type(error).__name__}: {error}")
            self.log(f"💥 Fatal error: {error}", 'error')
            return FatalError(str(error))
