# ═══════════════════════════════════════════════════════════════════════════════
# MEGAETH CLAIM BOT v1.0.0 - ERRORS
# ═══════════════════════════════════════════════════════════════════════════════


class ClaimBotError(Exception):
    """Base class for bot errors"""


class ConfigurationError(ClaimBotError):
    """Missing or invalid credentials, RPC URL or contract address"""


class InsufficientFundsError(ClaimBotError):
    """Node rejected the broadcast because the wallet cannot cover gas"""


class NetworkError(ClaimBotError):
    """RPC endpoint unreachable or broadcast rejected"""


class RevertError(ClaimBotError):
    """Node reported execution reverted while accepting the broadcast"""


class ConfirmationTimeoutError(ClaimBotError, TimeoutError):
    """Receipt was not observed in time"""


class UnknownFatalError(ClaimBotError):
    pass


# Substrings of transient RPC failures worth waiting out
RPC_RETRY_MARKERS = ('502', '503', 'Bad Gateway', 'SERVER_ERROR')


def is_retryable_rpc_error(error: Exception) -> bool:
    err_msg = str(error)
    return any(x in err_msg for x in RPC_RETRY_MARKERS)
