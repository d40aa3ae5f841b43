# probes/power.py
import os

import psutil

from probes import BatteryInfo
from utils import read_int, read_text

POWER_SUPPLY_DIR = "/sys/class/power_supply"
BACKLIGHT_DIR = "/sys/class/backlight"


def gather(info):
    info.battery = read_batteries(POWER_SUPPLY_DIR) or psutil_battery()
    info.brightness = read_brightness(BACKLIGHT_DIR)


def percent_of(part: int, whole: int) -> int:
    # halves round up: 62.5 -> 63
    return int(part * 100 / whole + 0.5)


def resolve_status(statuses) -> str:
    lowered = {s.lower() for s in statuses}
    for status in ("Charging", "Discharging", "Full"):
        if status.lower() in lowered:
            return status
    return "Unknown"


def time_remaining(energy_now: int, energy_full: int, power_now: int, status: str):
    if power_now <= 0:
        return None
    if status == "Charging":
        hours = max(energy_full - energy_now, 0) / power_now
    elif status == "Discharging":
        hours = energy_now / power_now
    else:
        return None
    if not 0 < hours < 100:
        return None
    minutes = int(hours * 60)
    return f"{minutes // 60}:{minutes % 60:02d}"


def read_batteries(root: str):
    """Combine every battery under a power_supply directory into one reading."""
    try:
        entries = sorted(os.listdir(root))
    except OSError:
        return None

    energy_now = energy_full = power_now = 0
    has_energy = has_power = False
    percents = []
    statuses = []

    for name in entries:
        if not name.startswith("BAT") and "battery" not in name:
            continue
        path = os.path.join(root, name)
        kind = read_text(os.path.join(path, "type"))
        if kind is not None and kind != "Battery":
            continue

        statuses.append(read_text(os.path.join(path, "status")) or "Unknown")

        capacity = read_int(os.path.join(path, "capacity"))
        if capacity is not None:
            percents.append(capacity)

        now = read_int(os.path.join(path, "energy_now"))
        if now is None:
            now = read_int(os.path.join(path, "charge_now"))
        full = read_int(os.path.join(path, "energy_full"))
        if full is None:
            full = read_int(os.path.join(path, "charge_full"))
        if now is not None and full is not None:
            energy_now += now
            energy_full += full
            has_energy = True

        power = read_int(os.path.join(path, "power_now"))
        if power is None:
            power = read_int(os.path.join(path, "current_now"))
        if power is not None:
            power_now += power
            has_power = True

    if not has_energy and not percents:
        return None

    if has_energy and energy_full > 0:
        percent = percent_of(energy_now, energy_full)
    else:
        percent = sum(percents) // len(percents)
    percent = min(percent, 100)

    status = resolve_status(statuses)
    remaining = None
    if has_energy and has_power:
        remaining = time_remaining(energy_now, energy_full, power_now, status)
    return BatteryInfo(percent=percent, status=status, time_remaining=remaining)


def psutil_battery():
    sensors = getattr(psutil, "sensors_battery", None)
    if sensors is None:
        return None
    try:
        bat = sensors()
    except (psutil.Error, OSError):
        return None
    if bat is None:
        return None
    if bat.power_plugged:
        status = "Full" if bat.percent >= 100 else "Charging"
    else:
        status = "Discharging"
    remaining = None
    if isinstance(bat.secsleft, int) and bat.secsleft > 0 and not bat.power_plugged:
        remaining = f"{bat.secsleft // 3600}:{(bat.secsleft % 3600) // 60:02d}"
    return BatteryInfo(percent=int(bat.percent + 0.5), status=status, time_remaining=remaining)


def read_brightness(root: str):
    try:
        devices = sorted(os.listdir(root))
    except OSError:
        return None
    for device in devices:
        current = read_int(os.path.join(root, device, "brightness"))
        maximum = read_int(os.path.join(root, device, "max_brightness"))
        if current is not None and maximum:
            return f"{percent_of(current, maximum)}%"
    return None
