# probes/audio.py
import re

from utils import command_output


def gather(info):
    info.audio_device = audio_device()
    info.volume = volume()


def parse_wpctl_status(output: str):
    """Name of the default sink ("*" marked) in the Sinks section of `wpctl status`."""
    in_sinks = False
    for line in output.splitlines():
        stripped = line.strip(" │├└─")
        if stripped.startswith("Sinks:"):
            in_sinks = True
            continue
        if not in_sinks:
            continue
        if not stripped or stripped.endswith(":"):
            break
        if stripped.startswith("*"):
            # " *   48. Built-in Audio Analog Stereo  [vol: 0.40]"
            match = re.match(r"\*\s*\d+\.\s*(.+?)(?:\s*\[.*\])?$", stripped)
            if match:
                return match.group(1).strip()
    return None


def audio_device():
    output = command_output(["wpctl", "status"])
    if output:
        name = parse_wpctl_status(output)
        if name:
            return f"{name} (PipeWire)"

    sink = command_output(["pactl", "get-default-sink"])
    if sink:
        details = command_output(["pactl", "list", "sinks"]) or ""
        in_default = False
        for line in details.splitlines():
            if sink in line:
                in_default = True
            if in_default and line.strip().startswith("Description:"):
                return f"{line.split(':', 1)[1].strip()} (PulseAudio)"
        return f"{sink} (PulseAudio)"

    output = command_output(["aplay", "-l"])
    if output:
        for line in output.splitlines():
            match = re.match(r"card \d+: .*?\[(.+?)\]", line)
            if match:
                return f"{match.group(1)} (ALSA)"
    return None


def parse_wpctl_volume(output: str):
    # "Volume: 0.74" or "Volume: 0.74 [MUTED]"
    match = re.search(r"Volume:\s*([\d.]+)", output)
    if not match:
        return None
    percent = int(float(match.group(1)) * 100)
    return f"{percent}% (Muted)" if "[MUTED]" in output else f"{percent}%"


def volume():
    output = command_output(["wpctl", "get-volume", "@DEFAULT_AUDIO_SINK@"])
    if output:
        parsed = parse_wpctl_volume(output)
        if parsed:
            return parsed

    output = command_output(["pactl", "get-sink-volume", "@DEFAULT_SINK@"])
    if output:
        match = re.search(r"(\d+)%", output)
        if match:
            muted = command_output(["pactl", "get-sink-mute", "@DEFAULT_SINK@"]) or ""
            suffix = " (Muted)" if "yes" in muted else ""
            return f"{match.group(1)}%{suffix}"
    return None
