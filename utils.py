# utils.py
import sys
import os
import subprocess
import platform
from typing import List, Optional, Tuple, Union

BASE_DIR = os.path.dirname(os.path.abspath(__file__))


def resource_path(relative_path: str) -> str:
    """
    Returns path to resource, works when running from a checkout, when installed,
    and when packaged by PyInstaller (resources are extracted to sys._MEIPASS).
    """
    base_path = getattr(sys, "_MEIPASS", BASE_DIR)
    return os.path.join(base_path, relative_path)


def detect_os() -> str:
    return platform.system().lower()


def run_subprocess(cmd: Union[str, List[str]], cwd: str = None, timeout: float = 5.0) -> Tuple[int, str, str]:
    """
    Run a command and return (returncode, stdout, stderr).
    A list runs directly, a string runs through the shell. Never raises:
    a missing binary or a timeout comes back as returncode 127 / 124.
    """
    try:
        proc = subprocess.run(
            cmd,
            shell=isinstance(cmd, str),
            capture_output=True,
            cwd=cwd,
            timeout=timeout,
        )
    except FileNotFoundError as e:
        return 127, "", str(e)
    except subprocess.TimeoutExpired as e:
        return 124, "", str(e)
    except (OSError, ValueError) as e:
        return 1, "", str(e)
    out = (proc.stdout or b"").decode("utf-8", errors="replace")
    err = (proc.stderr or b"").decode("utf-8", errors="replace")
    return proc.returncode, out, err


def command_output(cmd: Union[str, List[str]], timeout: float = 5.0) -> Optional[str]:
    """Stripped stdout of a successful command, or None if it failed or printed nothing."""
    code, out, _ = run_subprocess(cmd, timeout=timeout)
    out = out.strip()
    if code != 0 or not out:
        return None
    return out


def read_text(path: str) -> Optional[str]:
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            return f.read().strip()
    except OSError:
        return None


def read_int(path: str) -> Optional[int]:
    text = read_text(path)
    if text is None:
        return None
    try:
        return int(text)
    except ValueError:
        return None


def format_bytes(n: int) -> str:
    units = (("TiB", 1024 ** 4), ("GiB", 1024 ** 3), ("MiB", 1024 ** 2), ("KiB", 1024))
    for name, size in units:
        if n >= size:
            return f"{n / size:.2f} {name}"
    return f"{n} B"


def config_home() -> str:
    return os.environ.get("XDG_CONFIG_HOME") or os.path.join(os.path.expanduser("~"), ".config")
