# probes/misc.py
import os

from utils import command_output, read_text

ZONEINFO_PREFIX = "/usr/share/zoneinfo/"

VIRT_NAMES = {
    "kvm": "KVM", "qemu": "QEMU", "vmware": "VMware", "oracle": "VirtualBox",
    "microsoft": "Hyper-V", "xen": "Xen", "wsl": "WSL", "docker": "Docker",
    "podman": "Podman", "lxc": "LXC", "systemd-nspawn": "systemd-nspawn",
}


def gather(info):
    info.locale = os.environ.get("LANG") or os.environ.get("LC_ALL") or None
    info.timezone = timezone()
    info.virtualization = virtualization()
    info.container = container()
    info.security = security()
    gather_ssh(info)
    gather_bluetooth(info)


def timezone():
    tz = read_text("/etc/timezone")
    if tz:
        return tz
    if os.environ.get("TZ"):
        return os.environ["TZ"]
    try:
        target = os.path.realpath("/etc/localtime")
    except OSError:
        return None
    if ZONEINFO_PREFIX in target:
        return target.split(ZONEINFO_PREFIX, 1)[1]
    return None


def virtualization():
    virt = command_output(["systemd-detect-virt", "--vm"])
    if virt and virt != "none":
        return VIRT_NAMES.get(virt, virt)

    product = (read_text("/sys/class/dmi/id/product_name") or "").lower()
    for marker, name in (("virtualbox", "VirtualBox"), ("vmware", "VMware"), ("kvm", "KVM/QEMU"),
                         ("qemu", "KVM/QEMU"), ("hyper-v", "Hyper-V"), ("xen", "Xen")):
        if marker in product:
            return name

    version = (read_text("/proc/version") or "").lower()
    if "microsoft" in version:
        return "WSL"
    return None


def container():
    if os.path.exists("/.dockerenv"):
        return "Docker"
    if os.path.exists("/run/.containerenv"):
        return "Podman"
    kind = os.environ.get("container")
    if kind:
        return VIRT_NAMES.get(kind, kind)
    return None


def security():
    enforce = read_text("/sys/fs/selinux/enforce")
    if enforce is not None:
        return "SELinux (enforcing)" if enforce == "1" else "SELinux (permissive)"
    if read_text("/sys/module/apparmor/parameters/enabled") == "Y":
        return "AppArmor"
    return None


def gather_ssh(info):
    conn = os.environ.get("SSH_CONNECTION")
    if conn:
        # "client_ip client_port server_ip server_port"
        parts = conn.split()
        info.ssh_connection = f"from {parts[0]}" if parts else conn


def gather_bluetooth(info):
    try:
        adapters = [a for a in os.listdir("/sys/class/bluetooth") if ":" not in a]
    except OSError:
        return
    if adapters:
        info.bluetooth = f"{len(adapters)} adapter{'s' if len(adapters) != 1 else ''}"
