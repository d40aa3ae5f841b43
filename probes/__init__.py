# probes/__init__.py
"""
System probes. Every gatherer fills in what it can find on the running host and
leaves the rest as None; nothing here raises for a missing file or tool.
"""
import importlib
from dataclasses import asdict, dataclass, field
from typing import List, Optional

from logger import debug


@dataclass
class GpuInfo:
    name: str
    driver: Optional[str] = None
    vram: Optional[str] = None
    temp: Optional[str] = None


@dataclass
class DiskInfo:
    mount: str
    filesystem: str
    size: str
    used: str
    available: str
    percent: int
    disk_type: Optional[str] = None


@dataclass
class NetworkInterface:
    name: str
    ipv4: Optional[str] = None
    ipv6: Optional[str] = None
    mac: Optional[str] = None
    speed: Optional[str] = None
    state: Optional[str] = None


@dataclass
class PublicIpInfo:
    ip: str
    country: Optional[str] = None
    region: Optional[str] = None
    city: Optional[str] = None
    zip: Optional[str] = None
    isp: Optional[str] = None


@dataclass
class BatteryInfo:
    percent: int
    status: str
    time_remaining: Optional[str] = None


@dataclass
class PackageCount:
    manager: str
    count: int


@dataclass
class SystemInfo:
    # system
    os: Optional[str] = None
    os_id: Optional[str] = None
    kernel: Optional[str] = None
    hostname: Optional[str] = None
    uptime: Optional[str] = None
    uptime_seconds: Optional[int] = None
    load_average: Optional[str] = None
    processes: Optional[int] = None
    logged_users: Optional[str] = None
    machine_type: Optional[str] = None
    init_system: Optional[str] = None
    boot_time: Optional[str] = None

    # hardware
    cpu: Optional[str] = None
    cpu_arch: Optional[str] = None
    cpu_cache: Optional[str] = None
    cpu_cores: Optional[int] = None
    cpu_threads: Optional[int] = None
    cpu_freq: Optional[str] = None
    cpu_temp: Optional[str] = None
    cpu_governor: Optional[str] = None
    gpu: List[GpuInfo] = field(default_factory=list)
    memory: Optional[str] = None
    memory_used: Optional[int] = None
    memory_total: Optional[int] = None
    swap: Optional[str] = None
    swap_used: Optional[int] = None
    swap_total: Optional[int] = None
    disks: List[DiskInfo] = field(default_factory=list)
    motherboard: Optional[str] = None
    bios: Optional[str] = None

    # desktop
    de: Optional[str] = None
    wm: Optional[str] = None
    wm_theme: Optional[str] = None
    theme: Optional[str] = None
    icons: Optional[str] = None
    cursor: Optional[str] = None
    terminal: Optional[str] = None
    terminal_font: Optional[str] = None
    shell: Optional[str] = None
    shell_version: Optional[str] = None
    display_server: Optional[str] = None
    resolution: Optional[str] = None

    # network
    interfaces: List[NetworkInterface] = field(default_factory=list)
    public_ip: Optional[PublicIpInfo] = None

    # power
    battery: Optional[BatteryInfo] = None
    brightness: Optional[str] = None

    # audio
    audio_device: Optional[str] = None
    volume: Optional[str] = None

    # packages
    packages: Optional[str] = None
    package_counts: List[PackageCount] = field(default_factory=list)

    # misc
    locale: Optional[str] = None
    timezone: Optional[str] = None
    virtualization: Optional[str] = None
    container: Optional[str] = None
    security: Optional[str] = None
    ssh_connection: Optional[str] = None
    bluetooth: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)


# gatherer modules in gathering order; each can be switched off in the "info" config section
GATHERERS = ["system", "hardware", "desktop", "network", "power", "audio", "packages", "misc"]


def gather(fetch_public_ip: bool = False, enabled: Optional[dict] = None) -> SystemInfo:
    """Run every enabled gatherer against a fresh SystemInfo."""
    enabled = enabled or {}
    info = SystemInfo()
    for module_name in GATHERERS:
        if not enabled.get(module_name, True):
            debug(f"skipping {module_name} probes (disabled in config)")
            continue
        module = importlib.import_module(f"probes.{module_name}")
        if module_name == "network":
            module.gather(info, fetch_public_ip=fetch_public_ip)
        else:
            module.gather(info)
    return info
