# probes/desktop.py
import os
import re

import psutil

from utils import command_output, config_home, read_text

KNOWN_WMS = {
    "kwin_x11": "KWin", "kwin_wayland": "KWin", "mutter": "Mutter", "gnome-shell": "Mutter",
    "xfwm4": "Xfwm4", "openbox": "Openbox", "i3": "i3", "sway": "Sway", "hyprland": "Hyprland",
    "bspwm": "bspwm", "awesome": "Awesome", "dwm": "dwm", "herbstluftwm": "herbstluftwm",
    "qtile": "Qtile", "xmonad": "XMonad", "fluxbox": "Fluxbox", "marco": "Marco",
    "muffin": "Muffin", "river": "River", "labwc": "labwc", "wayfire": "Wayfire",
    "niri": "niri", "weston": "Weston", "icewm": "IceWM", "enlightenment": "Enlightenment",
}

KNOWN_TERMINALS = {
    "alacritty": "Alacritty", "kitty": "kitty", "foot": "foot", "wezterm-gui": "WezTerm",
    "gnome-terminal-server": "GNOME Terminal", "konsole": "Konsole", "xfce4-terminal": "Xfce Terminal",
    "tilix": "Tilix", "terminator": "Terminator", "xterm": "xterm", "urxvt": "urxvt",
    "st": "st", "ghostty": "Ghostty", "lxterminal": "LXTerminal", "mate-terminal": "MATE Terminal",
    "qterminal": "QTerminal", "terminology": "Terminology", "kgx": "Console", "ptyxis": "Ptyxis",
}


def gather(info):
    gather_shell(info)
    gather_terminal(info)
    gather_de(info)
    gather_wm(info)
    gather_display_server(info)
    gather_resolution(info)
    gather_themes(info)


def extract_version(output: str):
    match = re.search(r"(\d+\.\d+(?:\.\d+)?)", output)
    return match.group(1) if match else None


def gather_shell(info):
    shell_path = os.environ.get("SHELL")
    if not shell_path:
        return
    shell = os.path.basename(shell_path)
    info.shell = shell
    if shell in ("bash", "zsh", "fish", "ksh", "tcsh", "nu", "elvish", "xonsh"):
        out = command_output([shell_path, "--version"], timeout=2)
        if out:
            info.shell_version = extract_version(out.splitlines()[0])


def _parent_names():
    try:
        proc = psutil.Process().parent()
        while proc is not None and proc.pid > 1:
            yield proc.name()
            proc = proc.parent()
    except (psutil.Error, OSError):
        return


def _detect_terminal():
    term_program = os.environ.get("TERM_PROGRAM")
    if term_program:
        return term_program
    for name in _parent_names():
        if name in KNOWN_TERMINALS:
            return KNOWN_TERMINALS[name]
        if name in ("sshd", "login", "tmux: server", "screen"):
            return name
    term = os.environ.get("TERM")
    if term and term != "dumb":
        return term
    return None


def gather_terminal(info):
    info.terminal = _detect_terminal()
    if info.terminal:
        info.terminal_font = terminal_font(info.terminal)


def parse_key_value(content: str, key: str, sep: str = "="):
    """Value of the first `key <sep> value` line, surrounding quotes removed."""
    for line in content.splitlines():
        name, found, value = line.strip().partition(sep)
        if found and name.strip() == key:
            return value.strip().strip("\"'") or None
    return None


def parse_conf_value(content: str, key: str):
    """Value of the first `key value` line of a whitespace separated config (kitty.conf)."""
    for line in content.splitlines():
        parts = line.strip().split(None, 1)
        if len(parts) == 2 and parts[0] == key:
            return parts[1].strip()
    return None


def parse_lua_font(content: str):
    for line in content.splitlines():
        if "font" in line and "=" in line:
            match = re.search(r'"([^"]*)"', line)
            if match:
                return match.group(1)
    return None


def terminal_font(terminal: str, config_dir: str = None):
    """Font family from the terminal's own config file, for the terminals that have one we can read."""
    config_dir = config_dir or config_home()
    term = terminal.lower()

    if term == "alacritty":
        content = read_text(os.path.join(config_dir, "alacritty", "alacritty.toml"))
        if content is not None:
            return parse_key_value(content, "family")
        content = read_text(os.path.join(config_dir, "alacritty", "alacritty.yml"))
        return parse_key_value(content, "family", ":") if content else None
    if term == "kitty":
        content = read_text(os.path.join(config_dir, "kitty", "kitty.conf"))
        return parse_conf_value(content, "font_family") if content else None
    if term in ("wezterm", "wezterm-gui"):
        content = read_text(os.path.join(config_dir, "wezterm", "wezterm.lua"))
        return parse_lua_font(content) if content else None
    if term == "foot":
        content = read_text(os.path.join(config_dir, "foot", "foot.ini"))
        value = parse_key_value(content, "font") if content else None
        # "JetBrains Mono:size=11"
        return value.split(":")[0] if value else None
    return None


def gather_de(info):
    desktop = os.environ.get("XDG_CURRENT_DESKTOP") or os.environ.get("DESKTOP_SESSION")
    if not desktop:
        return
    # "ubuntu:GNOME" -> "GNOME"
    desktop = desktop.split(":")[-1]
    info.de = {"kde": "KDE Plasma", "x-cinnamon": "Cinnamon"}.get(desktop.lower(), desktop)


def gather_wm(info):
    try:
        names = {p.info["name"] for p in psutil.process_iter(["name"]) if p.info.get("name")}
    except (psutil.Error, OSError):
        return
    for proc_name, wm in KNOWN_WMS.items():
        if proc_name in names:
            info.wm = wm
            info.wm_theme = wm_theme(wm)
            return


def wm_theme(wm: str, config_dir: str = None):
    if wm != "Openbox":
        return None
    config_dir = config_dir or config_home()
    for path in (os.path.join(config_dir, "openbox", "rc.xml"), "/etc/xdg/openbox/rc.xml"):
        content = read_text(path)
        if not content:
            continue
        match = re.search(r"<theme>.*?<name>(.*?)</name>", content, re.DOTALL)
        if match:
            return match.group(1).strip() or None
    return None


def gather_display_server(info):
    session = os.environ.get("XDG_SESSION_TYPE", "").lower()
    if session == "wayland" or os.environ.get("WAYLAND_DISPLAY"):
        info.display_server = "Wayland"
    elif session == "x11" or os.environ.get("DISPLAY"):
        info.display_server = "X11"
    elif session == "tty":
        info.display_server = "TTY"


def parse_xrandr(output: str) -> list:
    """Active mode of each connected output, e.g. ["1920x1080 @ 60Hz"]."""
    modes = []
    for line in output.splitlines():
        if "*" not in line or not line.startswith(" "):
            continue
        parts = line.split()
        rate = next((p.rstrip("*+") for p in parts[1:] if "*" in p), None)
        if rate:
            modes.append(f"{parts[0]} @ {float(rate):.0f}Hz")
        else:
            modes.append(parts[0])
    return modes


def gather_resolution(info):
    if not os.environ.get("DISPLAY"):
        return
    output = command_output(["xrandr", "--current"])
    if not output:
        return
    try:
        modes = parse_xrandr(output)
    except ValueError:
        return
    if modes:
        info.resolution = ", ".join(modes)


def _gsettings(key: str):
    value = command_output(["gsettings", "get", "org.gnome.desktop.interface", key], timeout=2)
    if value:
        return value.strip("'\"") or None
    return None


def gather_themes(info):
    if not (os.environ.get("DISPLAY") or os.environ.get("WAYLAND_DISPLAY")):
        return
    info.theme = _gsettings("gtk-theme")
    info.icons = _gsettings("icon-theme")
    info.cursor = _gsettings("cursor-theme")
