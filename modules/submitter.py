# ═══════════════════════════════════════════════════════════════════════════════
# TRANSACTION SUBMITTER
# ═══════════════════════════════════════════════════════════════════════════════

from web3 import Web3
from web3.exceptions import ContractLogicError

from modules.results import Confirmed, Reverted, SubmissionError
from utils.errors import InsufficientFundsError, NetworkError, RevertError
from utils.helpers import log, wait_for_tx_with_retry, async_sleep


def gas_cost_eth(gas_used: int, gas_price_wei: int) -> float:
    """Fee paid for a transaction in ether, rounded to 6 decimals"""
    return round(float(Web3.from_wei(gas_used * gas_price_wei, 'ether')), 6)


class TransactionSubmitter:
    """Signs and sends one candidate call at a time to the target contract"""

    def __init__(self, config, web3, account, logger=log, sleep=async_sleep):
        self.config = config
        self.web3 = web3
        self.account = account
        self.log = logger
        self.sleep = sleep

    def build_transaction(self, call) -> dict:
        return {
            'to': self.config.contract_address,
            'data': call.data,
            'value': 0,
            'chainId': self.config.chain_id,
            'gasPrice': self.config.gas_price_wei,
            'gas': self.config.gas_limit,
            'nonce': self.web3.eth.get_transaction_count(self.account.address)
        }

    async def submit(self, call):
        """Broadcast the call and wait for its receipt"""
        try:
            tx = self.build_transaction(call)
            signed_tx = self.account.sign_transaction(tx)
            tx_hash = Web3.to_hex(self.web3.eth.send_raw_transaction(signed_tx.raw_transaction))
        except ContractLogicError as error:
            raise RevertError(str(error)) from error
        except Exception as error:
            if 'insufficient funds' in str(error).lower():
                raise InsufficientFundsError(str(error)) from error
            raise NetworkError(str(error)) from error

        self.log(f"TX Hash: {tx_hash}", 'info')
        self.log(self.config.tx_link(tx_hash), 'link')

        receipt = await wait_for_tx_with_retry(
            self.web3, tx_hash, timeout=self.config.receipt_timeout, sleep=self.sleep, logger=self.log
        )
        return tx_hash, receipt

    async def try_method(self, call):
        """Attempt one call, never raising: returns Confirmed, Reverted or SubmissionError"""
        try:
            self.log(f"Trying: {call.name}", 'info')
            tx_hash, receipt = await self.submit(call)
            return self._classify(call, tx_hash, receipt)
        except Exception as error:
            self.log(f"{call.name}: error method", 'error')
            return SubmissionError(call.name, str(error) or type(error).__name__)

    def _classify(self, call, tx_hash, receipt):
        if receipt['status'] != 1:
            self.log(f"Failed: {call.name}", 'error')
            return Reverted(call.name, tx_hash)

        gas_used = receipt['gasUsed']
        gas_price = receipt.get('effectiveGasPrice') or self.config.gas_price_wei
        cost = gas_cost_eth(gas_used, gas_price)
        event_count = len(receipt.get('logs') or [])

        self.log(f"Success: {call.name}", 'success')
        self.log(f"Gas Used: {gas_used} | Cost: {cost:.6f} ETH", 'gas')
        if event_count > 0:
            self.log(f"{event_count} events found - NFT minted! 🎉", 'success')

        return Confirmed(
            method=call.name,
            tx_hash=tx_hash,
            gas_used=gas_used,
            effective_gas_price=gas_price,
            cost_eth=cost,
            event_count=event_count
        )
