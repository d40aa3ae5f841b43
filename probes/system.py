# probes/system.py
import os
import platform
import socket
import time
from datetime import datetime
from typing import Optional, Tuple

import psutil

from utils import command_output, detect_os, read_int, read_text

OS_RELEASE = "/etc/os-release"

# SMBIOS chassis type codes
CHASSIS_TYPES = {
    3: "Desktop", 4: "Desktop", 5: "Desktop", 6: "Desktop", 7: "Desktop",
    8: "Laptop", 9: "Laptop", 10: "Laptop", 14: "Laptop", 31: "Laptop", 32: "Laptop",
    11: "Handheld", 13: "All-in-One",
    17: "Server", 23: "Server", 28: "Server",
    30: "Tablet", 35: "Mini PC", 36: "Mini PC",
}


def gather(info):
    gather_os(info)
    info.kernel = platform.release() or None
    info.hostname = socket.gethostname() or read_text("/etc/hostname") or None
    gather_uptime(info)
    gather_load_average(info)
    gather_processes(info)
    gather_users(info)
    gather_machine_type(info)
    gather_init_system(info)


def _trim_quotes(value: str) -> str:
    return value.strip().strip('"').strip("'")


def parse_os_release(content: str) -> Tuple[Optional[str], Optional[str], Optional[str]]:
    """(PRETTY_NAME, VERSION_ID, ID) from the text of an os-release file."""
    name = version = distro_id = None
    for line in content.splitlines():
        if line.startswith("PRETTY_NAME="):
            name = _trim_quotes(line[len("PRETTY_NAME="):])
        elif line.startswith("VERSION_ID="):
            version = _trim_quotes(line[len("VERSION_ID="):])
        elif line.startswith("ID="):
            distro_id = _trim_quotes(line[len("ID="):])
    return name, version, distro_id


def detect_distro_id(path: str = OS_RELEASE) -> Optional[str]:
    content = read_text(path)
    distro_id = parse_os_release(content)[2] if content else None
    if not distro_id and detect_os() == "darwin":
        return "macos"
    return distro_id


def gather_os(info):
    content = read_text(OS_RELEASE)
    if content:
        name, version, distro_id = parse_os_release(content)
        if name:
            info.os = name
        elif version:
            info.os = f"Linux {version}"
        info.os_id = distro_id

    if info.os is None:
        desc = command_output(["lsb_release", "-ds"])
        if desc:
            info.os = desc.strip('"')

    if info.os is None and detect_os() == "darwin":
        name = command_output(["sw_vers", "-productName"]) or "macOS"
        version = command_output(["sw_vers", "-productVersion"])
        info.os = f"{name} {version}" if version else name
        info.os_id = "macos"

    if info.os is None:
        info.os = platform.system() or "Linux"


def format_uptime(secs: int) -> str:
    days, rem = divmod(int(secs), 86400)
    hours, rem = divmod(rem, 3600)
    mins = rem // 60

    def plural(n, unit):
        return f"{n} {unit}{'' if n == 1 else 's'}"

    parts = []
    if days:
        parts.append(plural(days, "day"))
    if hours:
        parts.append(plural(hours, "hour"))
    if mins or not parts:
        parts.append(plural(mins, "min"))
    return ", ".join(parts)


def gather_uptime(info):
    try:
        boot = psutil.boot_time()
    except (psutil.Error, OSError):
        return
    secs = max(int(time.time() - boot), 0)
    info.uptime_seconds = secs
    info.uptime = format_uptime(secs)
    info.boot_time = datetime.fromtimestamp(boot).strftime("%Y-%m-%d %H:%M")


def gather_load_average(info):
    try:
        one, five, fifteen = os.getloadavg()
    except (AttributeError, OSError):
        return
    info.load_average = f"{one:.2f}, {five:.2f}, {fifteen:.2f}"


def gather_processes(info):
    try:
        info.processes = len(psutil.pids())
    except (psutil.Error, OSError):
        pass


def gather_users(info):
    try:
        users = psutil.users()
    except (psutil.Error, OSError):
        return
    names = sorted({u.name for u in users if u.name})
    if names:
        info.logged_users = f"{len(names)} ({', '.join(names)})"


def gather_machine_type(info):
    code = read_int("/sys/class/dmi/id/chassis_type")
    if code is not None:
        info.machine_type = CHASSIS_TYPES.get(code, "Other")
    else:
        # ARM boards expose a model string instead of DMI
        model = read_text("/proc/device-tree/model")
        if model:
            info.machine_type = model.rstrip("\x00") or None


def gather_init_system(info):
    comm = read_text("/proc/1/comm")
    if not comm:
        return
    if comm == "systemd":
        version = command_output(["systemctl", "--version"])
        if version:
            # "systemd 255 (255.4-1ubuntu8)"
            parts = version.splitlines()[0].split()
            if len(parts) >= 2:
                info.init_system = f"systemd {parts[1]}"
                return
    info.init_system = comm
