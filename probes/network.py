# probes/network.py
import socket

import psutil
import requests

from logger import debug, warn
from probes import NetworkInterface, PublicIpInfo

GEOIP_API = "http://ip-api.com/json/"
GEOIP_FIELDS = "status,query,country,regionName,city,zip,isp"
FALLBACK_IP_API = "https://api.ipify.org"


def gather(info, fetch_public_ip: bool = False):
    gather_interfaces(info)
    if fetch_public_ip:
        info.public_ip = fetch_public_ip_info()


def gather_interfaces(info):
    try:
        addrs = psutil.net_if_addrs()
        stats = psutil.net_if_stats()
    except (psutil.Error, OSError):
        return

    for name in sorted(addrs):
        if name == "lo" or name.startswith("lo:"):
            continue
        iface = NetworkInterface(name=name)
        for addr in addrs[name]:
            if addr.family == socket.AF_INET and iface.ipv4 is None:
                iface.ipv4 = addr.address
            elif addr.family == socket.AF_INET6 and iface.ipv6 is None:
                ip = addr.address.split("%")[0]
                if not ip.lower().startswith("fe80"):
                    iface.ipv6 = ip
            elif addr.family == psutil.AF_LINK and addr.address != "00:00:00:00:00:00":
                iface.mac = addr.address

        stat = stats.get(name)
        if stat is not None:
            iface.state = "up" if stat.isup else "down"
            if stat.isup and stat.speed > 0:
                iface.speed = f"{stat.speed} Mbps"

        if iface.ipv4 or iface.ipv6 or iface.state == "up":
            info.interfaces.append(iface)


def fetch_public_ip_info(timeout: float = 3.0):
    try:
        response = requests.get(GEOIP_API, params={"fields": GEOIP_FIELDS}, timeout=timeout)
        if response.status_code == 200:
            data = response.json()
            if data.get("status") == "success" and data.get("query"):
                return PublicIpInfo(
                    ip=data["query"],
                    country=data.get("country") or None,
                    region=data.get("regionName") or None,
                    city=data.get("city") or None,
                    zip=data.get("zip") or None,
                    isp=data.get("isp") or None,
                )
    except (requests.RequestException, ValueError) as e:
        debug(f"geoip lookup failed: {e}")

    # plain address without location
    try:
        response = requests.get(FALLBACK_IP_API, timeout=timeout)
        if response.status_code == 200 and response.text.strip():
            return PublicIpInfo(ip=response.text.strip())
    except requests.RequestException as e:
        debug(f"public ip lookup failed: {e}")
    warn("Could not determine public IP address")
    return None
