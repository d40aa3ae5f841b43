import json

from asciiart import AsciiArt
from display import build_info_lines, format_line, list_logos, print_info, print_json, print_logo_only
from probes import BatteryInfo, DiskInfo, GpuInfo, NetworkInterface, PublicIpInfo, SystemInfo


def sample_info():
    return SystemInfo(
        os="Arch Linux",
        kernel="6.9.1-arch1-1",
        hostname="box",
        shell="zsh",
        shell_version="5.9",
        cpu="AMD Ryzen 7 5800X",
        cpu_threads=16,
        cpu_freq="4.85 GHz",
        gpu=[GpuInfo(name="NVIDIA GeForce RTX 3070", driver="nvidia")],
        memory="3.20 GiB / 31.27 GiB (10%)",
        disks=[DiskInfo(mount="/", filesystem="ext4", size="931.51 GiB", used="120.00 GiB",
                        available="811.51 GiB", percent=13, disk_type="NVMe")],
        interfaces=[
            NetworkInterface(name="enp5s0", ipv4="192.168.1.10", speed="1000 Mbps", state="up"),
            NetworkInterface(name="wlan0", state="down"),
        ],
        public_ip=PublicIpInfo(ip="203.0.113.7", city="Berlin", country="Germany", isp="ExampleNet"),
        battery=BatteryInfo(percent=80, status="Discharging", time_remaining="3:10"),
        locale="en_US.UTF-8",
    )


def test_format_line_plain():
    assert format_line("OS", "Arch Linux", False, "cyan") == "OS: Arch Linux"


def test_format_line_colored_keeps_text():
    line = format_line("OS", "Arch Linux", True, "cyan")
    assert "OS" in line and line.endswith(" Arch Linux")
    assert "\x1b[" in line


def test_info_lines_plain():
    lines = build_info_lines(sample_info(), False, "cyan")
    assert lines[:4] == ["OS: Arch Linux", "Kernel: 6.9.1-arch1-1", "Host: box", "Shell: zsh 5.9"]
    assert "CPU: AMD Ryzen 7 5800X (16) @ 4.85 GHz" in lines
    assert "GPU: NVIDIA GeForce RTX 3070 [nvidia]" in lines
    assert "Disk (/): 120.00 GiB / 931.51 GiB (13%) [ext4, NVMe]" in lines
    assert "Net (enp5s0): 192.168.1.10, 1000 Mbps" in lines
    assert "Net (wlan0): [down]" in lines
    assert "Public IP: 203.0.113.7 (Berlin, Germany) [ExampleNet]" in lines
    assert "Battery: 80% (Discharging) ~3:10" in lines
    assert "Locale: en_US.UTF-8" in lines
    assert not any(line.startswith("Memory: None") for line in lines)
    assert lines[-1] == ""


def test_gpu_cache_and_terminal_details():
    info = SystemInfo(
        wm="Openbox",
        wm_theme="Clearlooks",
        terminal="kitty",
        terminal_font="Iosevka",
        cpu_arch="x86_64",
        cpu_cache="L1: 32K+32K, L2: 512K",
        gpu=[GpuInfo(name="AMD Radeon RX 6600", driver="amdgpu", vram="8192 MiB", temp="48°C")],
    )
    lines = build_info_lines(info, False, "cyan")
    assert "WM Theme: Clearlooks" in lines
    assert "Terminal: kitty (Iosevka)" in lines
    assert lines.index("Arch: x86_64") + 1 == lines.index("Cache: L1: 32K+32K, L2: 512K")
    assert "GPU: AMD Radeon RX 6600 [amdgpu] (8192 MiB) @ 48°C" in lines


def test_terminal_without_font():
    assert "Terminal: foot" in build_info_lines(SystemInfo(terminal="foot"), False, "cyan")


def test_absent_values_are_skipped():
    lines = build_info_lines(SystemInfo(os="Linux"), False, "cyan")
    assert [line for line in lines if line] == ["OS: Linux"]


def test_colored_info_lines_end_with_color_bar():
    lines = build_info_lines(SystemInfo(os="Linux"), True, "cyan")
    assert lines[-3] == ""
    assert lines[-1] == lines[-2]
    assert lines[-1].count("   ") >= 8


def test_print_info_beside_logo(capsys):
    art = AsciiArt.from_lines(["##", "####"], ["white"])
    print_info(SystemInfo(os="Linux", kernel="6.1"), art, show_ascii=True, use_colors=False)
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "##    OS: Linux"
    assert out[1] == "####  Kernel: 6.1"


def test_print_info_without_logo(capsys):
    art = AsciiArt.from_lines(["##"], ["white"])
    print_info(SystemInfo(os="Linux"), art, show_ascii=False, use_colors=False)
    assert capsys.readouterr().out.splitlines()[0] == "OS: Linux"


def test_print_logo_only(capsys):
    art = AsciiArt.from_lines(["$1/\\", "$R\\/"], ["red"])
    print_logo_only(art, use_colors=False)
    assert capsys.readouterr().out == "/\\\n\\/\n"


def test_print_json(capsys):
    print_json(sample_info())
    data = json.loads(capsys.readouterr().out)
    assert data["os"] == "Arch Linux"
    assert data["battery"] == {"percent": 80, "status": "Discharging", "time_remaining": "3:10"}


def test_list_logos(capsys):
    list_logos(["arch", "linux"])
    assert capsys.readouterr().out == "Available ASCII logos:\n  - arch\n  - linux\n"
