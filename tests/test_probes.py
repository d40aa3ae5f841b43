import pytest

import probes
import probes.hardware
import probes.misc
import probes.network
from probes import GpuInfo, PackageCount, SystemInfo
from probes.audio import parse_wpctl_status, parse_wpctl_volume
from probes.desktop import (
    extract_version,
    parse_conf_value,
    parse_key_value,
    parse_lua_font,
    parse_xrandr,
    terminal_font,
    wm_theme,
)
from probes.hardware import amdgpu_temp, gather_gpu_temps, gpu_vram, parse_lspci, read_cpu_cache
from probes.packages import format_packages
from probes.power import percent_of, read_batteries, read_brightness, resolve_status, time_remaining
from probes.system import detect_distro_id, format_uptime, parse_os_release

OS_RELEASE = '''NAME="Arch Linux"
PRETTY_NAME="Arch Linux"
ID=arch
BUILD_ID=rolling
VERSION_ID='2024.01'
'''


def test_parse_os_release():
    assert parse_os_release(OS_RELEASE) == ("Arch Linux", "2024.01", "arch")
    assert parse_os_release("") == (None, None, None)


def test_detect_distro_id(tmp_path):
    path = tmp_path / "os-release"
    path.write_text('ID="ubuntu"\nID_LIKE=debian\n', encoding="utf-8")
    assert detect_distro_id(str(path)) == "ubuntu"


@pytest.mark.parametrize("secs,expected", [
    (0, "0 mins"),
    (59, "0 mins"),
    (60, "1 min"),
    (3600, "1 hour"),
    (3660 + 60, "1 hour, 2 mins"),
    (86400 + 7200 + 300, "1 day, 2 hours, 5 mins"),
    (2 * 86400, "2 days"),
])
def test_format_uptime(secs, expected):
    assert format_uptime(secs) == expected


def write_battery(root, name, **values):
    bat = root / name
    bat.mkdir()
    for key, value in values.items():
        (bat / key).write_text(f"{value}\n", encoding="utf-8")


def test_batteries_are_aggregated(tmp_path):
    write_battery(tmp_path, "BAT0", type="Battery", status="Discharging", capacity=50,
                  energy_now=20000000, energy_full=40000000, power_now=10000000)
    write_battery(tmp_path, "BAT1", type="Battery", status="Unknown", capacity=100,
                  energy_now=20000000, energy_full=20000000)
    write_battery(tmp_path, "AC", type="Mains", online=1)

    bat = read_batteries(str(tmp_path))
    # 40 of 60 Wh, draining at 10 W
    assert bat.percent == 67
    assert bat.status == "Discharging"
    assert bat.time_remaining == "4:00"


def test_battery_charge_files_and_charging_time(tmp_path):
    write_battery(tmp_path, "BAT0", status="Charging", charge_now=1000, charge_full=3000, current_now=1000)
    bat = read_batteries(str(tmp_path))
    assert bat.percent == 33
    assert bat.status == "Charging"
    assert bat.time_remaining == "2:00"


def test_battery_capacity_only(tmp_path):
    write_battery(tmp_path, "BAT0", type="Battery", status="Full", capacity=90)
    write_battery(tmp_path, "BAT1", type="Battery", status="Full", capacity=81)
    bat = read_batteries(str(tmp_path))
    assert bat.percent == 85
    assert bat.status == "Full"
    assert bat.time_remaining is None


def test_battery_percent_capped(tmp_path):
    write_battery(tmp_path, "BAT0", status="Full", energy_now=110, energy_full=100)
    assert read_batteries(str(tmp_path)).percent == 100


def test_battery_half_percent_rounds_up(tmp_path):
    write_battery(tmp_path, "BAT0", status="Full", energy_now=125, energy_full=200)
    assert read_batteries(str(tmp_path)).percent == 63


def test_percent_of():
    assert percent_of(125, 200) == 63
    assert percent_of(1, 3) == 33
    assert percent_of(2, 3) == 67
    assert percent_of(0, 5) == 0


def test_no_battery(tmp_path):
    assert read_batteries(str(tmp_path)) is None
    assert read_batteries(str(tmp_path / "missing")) is None


def test_resolve_status_priority():
    assert resolve_status(["Full", "charging", "Discharging"]) == "Charging"
    assert resolve_status(["Full", "Discharging"]) == "Discharging"
    assert resolve_status(["Not charging", "Full"]) == "Full"
    assert resolve_status(["Not charging"]) == "Unknown"


def test_time_remaining_bounds():
    assert time_remaining(100, 200, 0, "Discharging") is None
    assert time_remaining(100, 200, 50, "Full") is None
    assert time_remaining(1000000, 2000000, 1, "Discharging") is None
    assert time_remaining(90, 100, 60, "Discharging") == "1:30"


def test_brightness(tmp_path):
    dev = tmp_path / "intel_backlight"
    dev.mkdir()
    (dev / "brightness").write_text("300\n", encoding="utf-8")
    (dev / "max_brightness").write_text("1200\n", encoding="utf-8")
    assert read_brightness(str(tmp_path)) == "25%"
    (dev / "brightness").write_text("125\n", encoding="utf-8")
    (dev / "max_brightness").write_text("200\n", encoding="utf-8")
    assert read_brightness(str(tmp_path)) == "63%"


def test_parse_lspci():
    output = (
        '00:02.0 "VGA compatible controller" "Intel Corporation" "UHD Graphics 620" -r07 "Lenovo" "Device 2258"\n'
        '00:14.0 "USB controller" "Intel Corporation" "Sunrise Point-LP USB 3.0" -r21 "Lenovo" "Device 2258"\n'
        '01:00.0 "3D controller" "NVIDIA Corporation" "GP108M [GeForce MX150]" -ra1 "Lenovo" "Device 2258"\n'
    )
    assert parse_lspci(output) == ["Intel UHD Graphics 620", "NVIDIA GP108M [GeForce MX150]"]


def write_file(path, text):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def test_cpu_cache(tmp_path):
    for i, (level, kind, size) in enumerate([(1, "Data", "32K"), (1, "Instruction", "32K"),
                                              (2, "Unified", "512K"), (3, "Unified", "16384K")]):
        index = tmp_path / f"index{i}"
        write_file(index / "level", f"{level}\n")
        write_file(index / "type", f"{kind}\n")
        write_file(index / "size", f"{size}\n")
    assert read_cpu_cache(str(tmp_path)) == "L1: 32K+32K, L2: 512K, L3: 16384K"


def test_cpu_cache_partial_and_missing(tmp_path):
    write_file(tmp_path / "index0" / "level", "2\n")
    write_file(tmp_path / "index0" / "size", "1024K\n")
    assert read_cpu_cache(str(tmp_path)) == "L2: 1024K"
    assert read_cpu_cache(str(tmp_path / "missing")) is None


@pytest.fixture
def no_nvidia(monkeypatch):
    monkeypatch.setattr(probes.hardware, "command_output", lambda cmd, timeout=5.0: None)


def test_gpu_vram_from_nvidia_smi(monkeypatch, tmp_path):
    monkeypatch.setattr(probes.hardware, "command_output", lambda cmd, timeout=5.0: "8192\n4096")
    assert gpu_vram(str(tmp_path)) == "8192 MiB"


def test_gpu_vram_from_amdgpu_sysfs(no_nvidia, tmp_path):
    write_file(tmp_path / "card0" / "device" / "mem_info_vram_total", f"{8 * 1024 ** 3}\n")
    assert gpu_vram(str(tmp_path)) == "8192 MiB"
    assert gpu_vram(str(tmp_path / "missing")) is None


def test_amdgpu_temps(no_nvidia, tmp_path):
    write_file(tmp_path / "hwmon0" / "name", "k10temp\n")
    write_file(tmp_path / "hwmon0" / "temp1_input", "70000\n")
    write_file(tmp_path / "hwmon1" / "name", "amdgpu\n")
    write_file(tmp_path / "hwmon1" / "temp1_input", "48500\n")
    assert amdgpu_temp(str(tmp_path)) == "48°C"

    info = SystemInfo(gpu=[GpuInfo(name="Intel UHD Graphics 620"),
                           GpuInfo(name="Advanced Micro Devices [AMD/ATI] Navi 23")])
    gather_gpu_temps(info, str(tmp_path))
    assert info.gpu[0].temp is None
    assert info.gpu[1].temp == "48°C"


def test_nvidia_temp_goes_to_first_gpu(monkeypatch, tmp_path):
    monkeypatch.setattr(probes.hardware, "command_output", lambda cmd, timeout=5.0: "61")
    info = SystemInfo(gpu=[GpuInfo(name="NVIDIA GeForce RTX 3070"), GpuInfo(name="Intel UHD Graphics")])
    gather_gpu_temps(info, str(tmp_path))
    assert info.gpu[0].temp == "61°C"
    assert info.gpu[1].temp is None


def test_config_value_parsers():
    assert parse_key_value('[font.normal]\nfamily = "JetBrains Mono"\n', "family") == "JetBrains Mono"
    assert parse_key_value("font:\n  normal:\n    family: 'Fira Code'\n", "family", ":") == "Fira Code"
    assert parse_key_value("size = 11\n", "family") is None
    assert parse_conf_value("font_size 11.0\nfont_family      Iosevka Term\n", "font_family") == "Iosevka Term"
    assert parse_lua_font('config.font_size = 12\nconfig.font = wezterm.font("Hack")\n') == "Hack"


@pytest.mark.parametrize("terminal,path,content,expected", [
    ("Alacritty", "alacritty/alacritty.toml", '[font.normal]\nfamily = "JetBrains Mono"\n', "JetBrains Mono"),
    ("Alacritty", "alacritty/alacritty.yml", "font:\n  normal:\n    family: Fira Code\n", "Fira Code"),
    ("kitty", "kitty/kitty.conf", "font_family Iosevka\n", "Iosevka"),
    ("WezTerm", "wezterm/wezterm.lua", 'return { font = wezterm.font("Hack") }\n', "Hack"),
    ("foot", "foot/foot.ini", "[main]\nfont=Source Code Pro:size=11\n", "Source Code Pro"),
])
def test_terminal_font(tmp_path, terminal, path, content, expected):
    write_file(tmp_path / path, content)
    assert terminal_font(terminal, str(tmp_path)) == expected


def test_terminal_font_unknown_or_unconfigured(tmp_path):
    assert terminal_font("kitty", str(tmp_path)) is None
    assert terminal_font("xterm", str(tmp_path)) is None


def test_openbox_theme(tmp_path):
    write_file(tmp_path / "openbox" / "rc.xml",
               "<openbox_config>\n<desktops><names><name>one</name></names></desktops>\n"
               "<theme>\n  <name>Clearlooks</name>\n</theme>\n</openbox_config>\n")
    assert wm_theme("Openbox", str(tmp_path)) == "Clearlooks"
    assert wm_theme("Sway", str(tmp_path)) is None


def test_parse_xrandr():
    output = (
        "Screen 0: minimum 320 x 200, current 1920 x 1080, maximum 16384 x 16384\n"
        "eDP-1 connected primary 1920x1080+0+0 (normal left inverted right x axis y axis) 309mm x 174mm\n"
        "   1920x1080     60.02*+  59.93  \n"
        "   1680x1050     59.95  \n"
        "HDMI-1 disconnected (normal left inverted right x axis y axis)\n"
    )
    assert parse_xrandr(output) == ["1920x1080 @ 60Hz"]


def test_extract_version():
    assert extract_version("GNU bash, version 5.2.26(1)-release (x86_64-pc-linux-gnu)") == "5.2.26"
    assert extract_version("zsh 5.9 (x86_64-pc-linux-gnu)") == "5.9"
    assert extract_version("no digits") is None


WPCTL_STATUS = """PipeWire 'pipewire-0' [1.0.5, user@host, cookie:1]
 └─ Clients:
        33. WirePlumber                         [1.0.5, user@host, pid:1234]

Audio
 ├─ Devices:
 │      42. Built-in Audio                      [alsa]
 │
 ├─ Sinks:
 │      47. HDMI Output                         [vol: 1.00]
 │  *   48. Built-in Audio Analog Stereo        [vol: 0.40]
 │
 ├─ Sink endpoints:
"""


def test_parse_wpctl_status():
    assert parse_wpctl_status(WPCTL_STATUS) == "Built-in Audio Analog Stereo"
    assert parse_wpctl_status("Audio\n") is None


def test_parse_wpctl_volume():
    assert parse_wpctl_volume("Volume: 0.74") == "74%"
    assert parse_wpctl_volume("Volume: 0.50 [MUTED]") == "50% (Muted)"
    assert parse_wpctl_volume("garbage") is None


def test_format_packages():
    counts = [PackageCount("pacman", 900), PackageCount("flatpak", 12)]
    assert format_packages(counts) == "912 (900 (pacman), 12 (flatpak))"


def test_gather_honours_disabled_sections():
    enabled = {name: False for name in probes.GATHERERS}
    info = probes.gather(enabled=enabled)
    assert info == SystemInfo()


def test_gather_runs_enabled_sections(monkeypatch):
    calls = []
    monkeypatch.setattr(probes.misc, "gather", lambda info: calls.append("misc"))
    monkeypatch.setattr(probes.network, "gather",
                        lambda info, fetch_public_ip=False: calls.append(("network", fetch_public_ip)))
    enabled = {name: name in ("misc", "network") for name in probes.GATHERERS}
    probes.gather(fetch_public_ip=True, enabled=enabled)
    assert calls == [("network", True), "misc"]


def test_to_dict_is_json_ready():
    info = SystemInfo(os="Arch Linux", package_counts=[PackageCount("pacman", 3)])
    data = info.to_dict()
    assert data["os"] == "Arch Linux"
    assert data["package_counts"] == [{"manager": "pacman", "count": 3}]
    assert data["gpu"] == []
