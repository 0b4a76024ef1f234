"""
Platform probes

The hardware factory asks these before importing any driver, so a desktop
run never touches rpi_ws281x or Blinka.
"""

import importlib.util
import sys
from functools import lru_cache

CPUINFO_PATH = "/proc/cpuinfo"
PI_MARKER = "Raspberry Pi"


class RuntimeInfo:

    @classmethod
    def is_linux(cls) -> bool:
        return sys.platform.startswith("linux")

    @classmethod
    def is_raspberry_pi(cls) -> bool:
        return cls.is_linux() and _cpuinfo_mentions(PI_MARKER)

    @classmethod
    def has_ws281x(cls) -> bool:
        return cls.has_module("rpi_ws281x")

    @classmethod
    def has_pn532(cls) -> bool:
        """PN532 driver plus the Blinka board layer it runs on"""
        return all(cls.has_module(name) for name in ("adafruit_pn532", "board", "busio"))

    @classmethod
    def has_module(cls, module_name: str) -> bool:
        """True if importable, without importing it"""
        try:
            return importlib.util.find_spec(module_name) is not None
        except (ImportError, ValueError):
            return False


@lru_cache(maxsize=None)
def _cpuinfo_mentions(marker: str) -> bool:
    try:
        with open(CPUINFO_PATH, "r", encoding="utf-8", errors="replace") as f:
            return marker in f.read()
    except OSError:
        return False
