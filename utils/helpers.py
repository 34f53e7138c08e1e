# ═══════════════════════════════════════════════════════════════════════════════
# MEGAETH CLAIM BOT v1.0.0 - HELPER FUNCTIONS
# ═══════════════════════════════════════════════════════════════════════════════

import asyncio
from datetime import datetime

from web3.exceptions import TimeExhausted

from config import COLORS
from utils.errors import ConfirmationTimeoutError, is_retryable_rpc_error

ICONS = {
    'info': '🔄',
    'success': '✅',
    'error': '❌',
    'warn': '⚠️',
    'gas': '⛽',
    'link': '🔍'
}

TAG_COLORS = {
    'info': COLORS.BOLD_CYAN,
    'success': COLORS.BOLD_GREEN,
    'error': COLORS.BOLD_RED,
    'warn': COLORS.BOLD_YELLOW,
    'gas': COLORS.BOLD_MAGENTA,
    'link': COLORS.BOLD_WHITE
}


def format_log_line(msg: str, type: str = 'info') -> str:
    timestamp = datetime.now().strftime('%H:%M:%S')
    return f"[{timestamp}] {ICONS.get(type, ICONS['info'])} {msg}"


def log(msg: str, type: str = 'info'):
    """Print a timestamped, tagged status line"""
    color = TAG_COLORS.get(type, COLORS.BOLD_CYAN)
    print(f"{color}{format_log_line(msg, type)}{COLORS.RESET}", flush=True)


def ask_question(question: str) -> str:
    """Prompt the user for input"""
    try:
        return input(f"{COLORS.BOLD_CYAN}{question}{COLORS.RESET}").strip()
    except (EOFError, KeyboardInterrupt):
        return ""


async def async_sleep(seconds: float):
    """Async sleep helper"""
    await asyncio.sleep(seconds)


def short_hash(hash_str: str) -> str:
    """Shorten a tx hash for display"""
    if len(hash_str) < 16:
        return hash_str
    return hash_str[:10] + '...' + hash_str[-6:]


async def wait_for_tx_with_retry(web3, tx_hash: str, timeout: int = 120, max_retries: int = 3, sleep=async_sleep, logger=log):
    """Wait for a tx receipt, retrying the wait on transient RPC errors.

    Raises ConfirmationTimeoutError when the node does not report the
    receipt within ``timeout`` seconds. The transaction itself is never
    resubmitted.
    """
    for attempt in range(max_retries + 1):
        try:
            return web3.eth.wait_for_transaction_receipt(tx_hash, timeout=timeout)
        except TimeExhausted as error:
            raise ConfirmationTimeoutError(f"No receipt for {short_hash(tx_hash)} after {timeout}s") from error
        except Exception as error:
            if is_retryable_rpc_error(error) and attempt < max_retries:
                wait_time = (attempt + 1) * 5
                logger(f"RPC error while waiting for TX, retry in {wait_time}s... ({attempt + 1}/{max_retries})", 'warn')
                await sleep(wait_time)
            else:
                raise
