#!/usr/bin/env python3
# ═══════════════════════════════════════════════════════════════════════════════
# MEGAETH CLAIM BOT v1.0.0 - ENTRYPOINT
# ═══════════════════════════════════════════════════════════════════════════════

import asyncio
import signal
import sys

from dotenv import load_dotenv

from config import COLORS, VERSION_INFO, load_config
from modules.claim import ClaimBot
from utils.errors import ConfigurationError
from utils.helpers import ask_question, log
from utils.wallet import connect, load_account


def banner():
    """Show the startup banner"""
    BOLD_CYAN = COLORS.BOLD_CYAN
    BOLD_MAGENTA = COLORS.BOLD_MAGENTA
    BOLD_WHITE = COLORS.BOLD_WHITE
    RESET = COLORS.RESET

    print(f"""
{BOLD_CYAN}╔═══════════════════════════════════════════════════════════════╗
║                                                               ║
║              {BOLD_MAGENTA}🎨  NFT CLAIM BOT  v{VERSION_INFO['VERSION']}  🎨{BOLD_CYAN}                     ║
║                                                               ║
║  {BOLD_WHITE}Tries mint/claim methods until one succeeds{BOLD_CYAN}                  ║
║                                                               ║
║  {BOLD_WHITE}Build: {VERSION_INFO['BUILD_DATE']}                    Author: {VERSION_INFO['AUTHOR']}{BOLD_CYAN}          ║
║                                                               ║
╚═══════════════════════════════════════════════════════════════╝{RESET}
""")


async def main() -> int:
    """Main entrypoint, returns the process exit code"""
    load_dotenv()
    banner()

    try:
        config = load_config(prompt=ask_question)
        account = load_account(config.private_key)
    except ConfigurationError as error:
        log(f"💥 Fatal error: {error}", 'error')
        return 1

    web3 = connect(config.rpc_url)
    bot = ClaimBot(config, web3, account)
    result = await bot.run()
    return result.exit_code


# Handle exit
def signal_handler(sig, frame):
    """Signal handler for graceful exit"""
    print(f"\n  {COLORS.BOLD_MAGENTA}👋  Goodbye!{COLORS.RESET}\n")
    sys.exit(0)


if __name__ == '__main__':
    signal.signal(signal.SIGINT, signal_handler)
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        print(f"\n  {COLORS.BOLD_MAGENTA}👋  Goodbye!{COLORS.RESET}\n")
        sys.exit(0)
