import logging
import platform
from typing import NamedTuple

logger = logging.getLogger(__name__)

FRIENDLY_NAMES = {
    "Darwin": "macOS",
    "Windows": "Windows",
}


class SystemInfo(NamedTuple):
    os_label: str
    arch: str


def _linux_pretty_name() -> str:
    """Reads PRETTY_NAME from os-release, falling back to plain 'Linux'."""
    if not hasattr(platform, 'freedesktop_os_release'):
        return "Linux"
    try:
        distro_info = platform.freedesktop_os_release()
    except OSError as e:
        logger.info(f"os-release not readable: {e}")
        return "Linux"
    return distro_info.get('PRETTY_NAME') or "Linux"


def get_friendly_os() -> str:
    """Returns a human-readable name for the running operating system."""
    system = platform.system()
    if system == "Linux":
        return _linux_pretty_name()
    if system in FRIENDLY_NAMES:
        return FRIENDLY_NAMES[system]
    return system.lower() or "unknown"


def get_arch() -> str:
    return platform.machine() or "unknown"


def probe() -> SystemInfo:
    """Collects the OS label and architecture sent along with AI prompts."""
    return SystemInfo(os_label=get_friendly_os(), arch=get_arch())
