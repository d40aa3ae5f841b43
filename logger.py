# logger.py
import os
import sys

from colorama import Fore, Style

_verbose = bool(os.environ.get("HYPERFETCH_DEBUG"))


def set_verbose(flag: bool):
    global _verbose
    _verbose = bool(flag)


def _emit(msg):
    print(msg, file=sys.stderr)


def warn(msg): _emit(f"{Fore.YELLOW}[!]{Style.RESET_ALL} {msg}")
def error(msg): _emit(f"{Fore.RED}[-]{Style.RESET_ALL} {msg}")
def dim(msg): _emit(f"{Style.DIM}{msg}{Style.RESET_ALL}")


def debug(msg):
    if _verbose:
        dim(f"[debug] {msg}")
