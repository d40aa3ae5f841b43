# probes/packages.py
import glob
import os
import shutil

from probes import PackageCount
from utils import command_output


def _count_lines(cmd):
    if not shutil.which(cmd[0]):
        return None
    output = command_output(cmd, timeout=10)
    if not output:
        return None
    return len([line for line in output.splitlines() if line.strip()])


def count_pacman():
    entries = glob.glob("/var/lib/pacman/local/*/desc")
    return len(entries) or None


def count_dpkg():
    try:
        with open("/var/lib/dpkg/status", "r", encoding="utf-8", errors="replace") as f:
            count = sum(1 for line in f if line.startswith("Status: install ok installed"))
    except OSError:
        return None
    return count or None


def count_rpm():
    return _count_lines(["rpm", "-qa"])


def count_xbps():
    return _count_lines(["xbps-query", "-l"])


def count_apk():
    try:
        with open("/lib/apk/db/installed", "r", encoding="utf-8", errors="replace") as f:
            count = sum(1 for line in f if line.startswith("P:"))
    except OSError:
        return None
    return count or None


def count_nix():
    profile = os.path.expanduser("~/.nix-profile")
    if not os.path.exists(profile) and not os.path.exists("/run/current-system/sw"):
        return None
    return _count_lines(["nix-store", "-q", "--requisites", "/run/current-system/sw"])


def count_flatpak():
    return _count_lines(["flatpak", "list", "--app", "--columns=application"])


def count_snap():
    count = _count_lines(["snap", "list"])
    # header row
    return count - 1 if count and count > 1 else None


def count_brew():
    return _count_lines(["brew", "list", "--formula", "-1"])


def count_pip():
    return _count_lines(["pip", "list", "--format=freeze", "--disable-pip-version-check"])


# order matters: native managers first, then universal and language ones
COUNTERS = [
    ("pacman", count_pacman),
    ("dpkg", count_dpkg),
    ("rpm", count_rpm),
    ("xbps", count_xbps),
    ("apk", count_apk),
    ("nix", count_nix),
    ("flatpak", count_flatpak),
    ("snap", count_snap),
    ("brew", count_brew),
    ("pip", count_pip),
]


def format_packages(counts) -> str:
    total = sum(c.count for c in counts)
    details = ", ".join(f"{c.count} ({c.manager})" for c in counts)
    return f"{total} ({details})"


def gather(info):
    counts = []
    for manager, counter in COUNTERS:
        count = counter()
        if count:
            counts.append(PackageCount(manager=manager, count=count))
    if counts:
        info.package_counts = counts
        info.packages = format_packages(counts)
