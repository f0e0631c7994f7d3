import sys
from typing import Optional

from ..domain.interfaces import IOSOpener
from ..data.platform_openers import MacOpener, WindowsOpener, XdgOpener


def get_opener(platform: Optional[str] = None) -> IOSOpener:
    """
    Public Service API: pick the opener for the given platform
    (defaults to sys.platform). Called once at startup.
    """
    platform = platform or sys.platform

    if platform == "darwin":
        return MacOpener()
    if platform.startswith("win"):
        return WindowsOpener()
    return XdgOpener()
