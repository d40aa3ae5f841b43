# probes/hardware.py
import os
import platform
import re

import psutil

from probes import DiskInfo, GpuInfo
from utils import command_output, format_bytes, read_int, read_text

# virtual and image filesystems that never describe a real disk
PSEUDO_FS = {"squashfs", "tmpfs", "devtmpfs", "overlay", "iso9660"}

CPU_CACHE_DIR = "/sys/devices/system/cpu/cpu0/cache"
DRM_DIR = "/sys/class/drm"
HWMON_DIR = "/sys/class/hwmon"


def gather(info):
    gather_cpu(info)
    info.cpu_cache = read_cpu_cache()
    gather_cpu_temp(info)
    info.cpu_governor = read_text("/sys/devices/system/cpu/cpu0/cpufreq/scaling_governor")
    gather_memory(info)
    gather_swap(info)
    gather_disks(info)
    gather_gpu(info)
    gather_board(info)


def _cpu_model() -> str:
    content = read_text("/proc/cpuinfo") or ""
    for line in content.splitlines():
        key, _, value = line.partition(":")
        if key.strip() in ("model name", "Hardware", "cpu model") and value.strip():
            return re.sub(r"\s+", " ", value.strip())
    if platform.system() == "Darwin":
        brand = command_output(["sysctl", "-n", "machdep.cpu.brand_string"])
        if brand:
            return brand
    return platform.processor() or ""


def gather_cpu(info):
    model = _cpu_model()
    if model:
        info.cpu = model
    info.cpu_arch = platform.machine() or None
    try:
        info.cpu_cores = psutil.cpu_count(logical=False)
        info.cpu_threads = psutil.cpu_count(logical=True)
    except (psutil.Error, OSError):
        pass
    try:
        freq = psutil.cpu_freq()
    except (psutil.Error, OSError, NotImplementedError):
        freq = None
    if freq:
        mhz = freq.max or freq.current
        if mhz:
            info.cpu_freq = f"{mhz / 1000:.2f} GHz"


def read_cpu_cache(root: str = CPU_CACHE_DIR):
    """Cache sizes of cpu0 as "L1: 32K+32K, L2: 512K, L3: 16384K"."""
    sizes = {}
    for i in range(10):
        index = os.path.join(root, f"index{i}")
        if not os.path.isdir(index):
            break
        level = read_int(os.path.join(index, "level"))
        kind = read_text(os.path.join(index, "type"))
        size = read_text(os.path.join(index, "size"))
        if level is None or not size:
            continue
        if level == 1 and kind in ("Data", "Instruction"):
            sizes[kind] = size
        elif level in (2, 3):
            sizes[f"L{level}"] = size

    parts = []
    if "Data" in sizes and "Instruction" in sizes:
        parts.append(f"L1: {sizes['Data']}+{sizes['Instruction']}")
    for key in ("L2", "L3"):
        if key in sizes:
            parts.append(f"{key}: {sizes[key]}")
    return ", ".join(parts) or None


def gather_cpu_temp(info):
    sensors = getattr(psutil, "sensors_temperatures", None)
    if sensors is None:
        return
    try:
        temps = sensors()
    except (psutil.Error, OSError):
        return
    for chip in ("coretemp", "k10temp", "zenpower", "cpu_thermal", "acpitz"):
        entries = temps.get(chip)
        if entries:
            info.cpu_temp = f"{entries[0].current:.1f}°C"
            return


def _usage(used: int, total: int) -> str:
    gib = 1024 ** 3
    percent = (used / total) * 100 if total else 0
    return f"{used / gib:.2f} GiB / {total / gib:.2f} GiB ({percent:.0f}%)"


def gather_memory(info):
    try:
        mem = psutil.virtual_memory()
    except (psutil.Error, OSError):
        return
    used = mem.total - mem.available
    info.memory_total = mem.total
    info.memory_used = used
    info.memory = _usage(used, mem.total)


def gather_swap(info):
    try:
        swap = psutil.swap_memory()
    except (psutil.Error, OSError):
        return
    if swap.total > 0:
        info.swap_total = swap.total
        info.swap_used = swap.used
        info.swap = _usage(swap.used, swap.total)


def disk_type(device: str):
    """SSD/HDD/NVMe for a block device path such as /dev/sda1 or /dev/nvme0n1p2."""
    name = os.path.basename(device)
    if name.startswith("nvme"):
        return "NVMe"
    if name.startswith("mmcblk"):
        base = re.sub(r"p\d+$", "", name)
    else:
        base = re.sub(r"\d+$", "", name)
    rotational = read_int(f"/sys/block/{base}/queue/rotational")
    if rotational is None:
        return None
    return "HDD" if rotational else "SSD"


def gather_disks(info):
    try:
        partitions = psutil.disk_partitions(all=False)
    except (psutil.Error, OSError):
        return
    seen = set()
    for part in partitions:
        if part.fstype in PSEUDO_FS or part.device in seen:
            continue
        if part.mountpoint.startswith(("/snap", "/boot/efi")):
            continue
        try:
            usage = psutil.disk_usage(part.mountpoint)
        except (psutil.Error, OSError):
            continue
        seen.add(part.device)
        info.disks.append(DiskInfo(
            mount=part.mountpoint,
            filesystem=part.fstype,
            size=format_bytes(usage.total),
            used=format_bytes(usage.used),
            available=format_bytes(usage.free),
            percent=int(usage.percent + 0.5),
            disk_type=disk_type(part.device),
        ))


def parse_lspci(output: str) -> list:
    """GPU names from `lspci -mm` output."""
    names = []
    for line in output.splitlines():
        # 00:02.0 "VGA compatible controller" "Intel Corporation" "UHD Graphics 620" ...
        fields = re.findall(r'"([^"]*)"', line)
        if len(fields) < 3:
            continue
        cls = fields[0]
        if not any(k in cls for k in ("VGA", "3D controller", "Display controller")):
            continue
        vendor = fields[1].replace(" Corporation", "").replace(", Inc.", "")
        device = fields[2]
        names.append(f"{vendor} {device}".strip())
    return names


def gather_gpu(info):
    output = command_output(["lspci", "-mm"])
    if not output:
        return
    driver = None
    for candidate in ("nvidia", "amdgpu", "radeon", "i915", "xe", "nouveau"):
        if os.path.isdir(f"/sys/module/{candidate}"):
            driver = candidate
            break
    names = parse_lspci(output)
    vram = gpu_vram() if names else None
    for name in names:
        info.gpu.append(GpuInfo(name=name, driver=driver, vram=vram))
    gather_gpu_temps(info)


def _first_line(output):
    return output.splitlines()[0].strip() if output else None


def gpu_vram(drm_root: str = DRM_DIR):
    """Total video memory from nvidia-smi, else from the amdgpu sysfs counter."""
    total = _first_line(command_output(
        ["nvidia-smi", "--query-gpu=memory.total", "--format=csv,noheader,nounits"]))
    if total and total.isdigit():
        return f"{int(total)} MiB"

    try:
        cards = sorted(os.listdir(drm_root))
    except OSError:
        return None
    for card in cards:
        vram_bytes = read_int(os.path.join(drm_root, card, "device", "mem_info_vram_total"))
        if vram_bytes is not None:
            return f"{vram_bytes // (1024 * 1024)} MiB"
    return None


def amdgpu_temp(hwmon_root: str = HWMON_DIR):
    try:
        sensors = sorted(os.listdir(hwmon_root))
    except OSError:
        return None
    for sensor in sensors:
        if read_text(os.path.join(hwmon_root, sensor, "name")) != "amdgpu":
            continue
        millidegrees = read_int(os.path.join(hwmon_root, sensor, "temp1_input"))
        if millidegrees is not None:
            return f"{millidegrees // 1000}°C"
    return None


def gather_gpu_temps(info, hwmon_root: str = HWMON_DIR):
    if not info.gpu:
        return
    # one line per NVIDIA card; only the first is matched to a GPU entry
    temp = _first_line(command_output(["nvidia-smi", "--query-gpu=temperature.gpu", "--format=csv,noheader"]))
    if temp:
        info.gpu[0].temp = f"{temp}°C"

    amd = amdgpu_temp(hwmon_root)
    if amd is None:
        return
    for gpu in info.gpu:
        if "AMD" in gpu.name and gpu.temp is None:
            gpu.temp = amd


def gather_board(info):
    vendor = read_text("/sys/class/dmi/id/board_vendor")
    name = read_text("/sys/class/dmi/id/board_name")
    board = " ".join(p for p in (vendor, name) if p)
    if board:
        info.motherboard = board

    bios_vendor = read_text("/sys/class/dmi/id/bios_vendor")
    bios_version = read_text("/sys/class/dmi/id/bios_version")
    bios_date = read_text("/sys/class/dmi/id/bios_date")
    bios = " ".join(p for p in (bios_vendor, bios_version) if p)
    if bios:
        info.bios = f"{bios} ({bios_date})" if bios_date else bios
