# display.py
"""
Report output: turns a SystemInfo into "Label: value" lines and prints them
beside the logo, as JSON, or the logo alone.
"""
import json
from typing import List, Optional

from colorama import Back, Style

from asciiart.palette import colorize
from layout import compose, logo_lines

BAR_COLORS = [Back.BLACK, Back.RED, Back.GREEN, Back.YELLOW, Back.BLUE, Back.MAGENTA, Back.CYAN, Back.WHITE]


def format_line(label: str, value: str, use_colors: bool, primary: str) -> str:
    if use_colors:
        return f"{Style.BRIGHT}{colorize(label, primary)}{colorize(':', primary)} {value}"
    return f"{label}: {value}"


def color_bar() -> List[str]:
    row = "".join(f"{color}   " for color in BAR_COLORS) + Style.RESET_ALL
    return [row, row]


class _Lines:
    def __init__(self, use_colors, primary):
        self.use_colors = use_colors
        self.primary = primary
        self.lines = []

    def add(self, label, value):
        if value is not None and value != "":
            self.lines.append(format_line(label, str(value), self.use_colors, self.primary))

    def sep(self):
        self.lines.append("")


def build_info_lines(info, use_colors: bool, primary: str, color_bar_rows: bool = True) -> List[str]:
    out = _Lines(use_colors, primary)

    out.add("OS", info.os)
    out.add("Kernel", info.kernel)
    out.add("Host", info.hostname)
    out.add("Uptime", info.uptime)
    out.add("Machine", info.machine_type)
    out.add("Init", info.init_system)
    out.add("Packages", info.packages)
    if info.shell:
        out.add("Shell", f"{info.shell} {info.shell_version}" if info.shell_version else info.shell)
    out.add("Display", info.display_server)
    out.add("Resolution", info.resolution)
    out.add("DE", info.de)
    out.add("WM", info.wm)
    out.add("WM Theme", info.wm_theme)
    out.add("Theme", info.theme)
    out.add("Icons", info.icons)
    out.add("Cursor", info.cursor)
    if info.terminal:
        out.add("Terminal", f"{info.terminal} ({info.terminal_font})" if info.terminal_font else info.terminal)

    out.sep()
    if info.cpu:
        threads = info.cpu_threads if info.cpu_threads is not None else "?"
        out.add("CPU", f"{info.cpu} ({threads}) @ {info.cpu_freq or '?'}")
    out.add("Arch", info.cpu_arch)
    out.add("Cache", info.cpu_cache)
    out.add("CPU Temp", info.cpu_temp)
    out.add("Governor", info.cpu_governor)
    for gpu in info.gpu:
        gpu_str = gpu.name
        if gpu.driver:
            gpu_str += f" [{gpu.driver}]"
        if gpu.vram:
            gpu_str += f" ({gpu.vram})"
        if gpu.temp:
            gpu_str += f" @ {gpu.temp}"
        out.add("GPU", gpu_str)
    out.add("Memory", info.memory)
    out.add("Swap", info.swap)
    out.add("Load", info.load_average)
    out.add("Processes", info.processes)

    for disk in info.disks:
        kind = f", {disk.disk_type}" if disk.disk_type else ""
        out.add(f"Disk ({disk.mount})", f"{disk.used} / {disk.size} ({disk.percent}%) [{disk.filesystem}{kind}]")

    out.add("Board", info.motherboard)
    out.add("BIOS", info.bios)

    out.sep()
    for iface in info.interfaces:
        parts = [p for p in (iface.ipv4, iface.ipv6, iface.speed) if p]
        if iface.state and iface.state != "up":
            parts.append(f"[{iface.state}]")
        if parts:
            out.add(f"Net ({iface.name})", ", ".join(parts))

    if info.public_ip:
        ip = info.public_ip
        ip_str = ip.ip
        location = [p for p in (ip.city, ip.region, ip.country, ip.zip) if p]
        if location:
            ip_str += f" ({', '.join(location)})"
        if ip.isp:
            ip_str += f" [{ip.isp}]"
        out.add("Public IP", ip_str)

    if info.battery:
        bat_str = f"{info.battery.percent}% ({info.battery.status})"
        if info.battery.time_remaining:
            bat_str += f" ~{info.battery.time_remaining}"
        out.add("Battery", bat_str)
    out.add("Brightness", info.brightness)
    out.add("Audio", info.audio_device)
    out.add("Volume", info.volume)

    out.sep()
    out.add("Locale", info.locale)
    out.add("Timezone", info.timezone)
    out.add("Boot Time", info.boot_time)
    out.add("Users", info.logged_users)
    out.add("Virt", info.virtualization)
    out.add("Container", info.container)
    out.add("Security", info.security)
    out.add("SSH", info.ssh_connection)
    out.add("Bluetooth", info.bluetooth)

    if color_bar_rows:
        out.sep()
        if use_colors:
            out.lines.extend(color_bar())
    return out.lines


def print_info(info, art, show_ascii: bool = True, use_colors: bool = True, primary: Optional[str] = None):
    primary = primary or art.primary_color
    lines = build_info_lines(info, use_colors, primary)
    if show_ascii:
        lines = compose(art, lines, use_colors, art.primary_color)
    for line in lines:
        print(line)


def print_logo_only(art, use_colors: bool = True):
    for line in logo_lines(art, use_colors, art.primary_color):
        print(line)


def print_json(info):
    print(json.dumps(info.to_dict(), indent=2, ensure_ascii=False))


def list_logos(names):
    print("Available ASCII logos:")
    for name in names:
        print(f"  - {name}")
