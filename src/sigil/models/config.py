"""
Configuration models

Frozen dataclasses built by ConfigManager from config.yaml. Defaults here
are the built-in fallback when no file can be loaded.

Animation speed and ring period are not configurable: they are part of
the deterministic pattern and live as constants in sigil.engine.animator.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from sigil.models.color import Color
from sigil.models.enums import DisplayType, ReaderType, LogLevel


@dataclass(frozen=True)
class DisplayConfig:
    type: DisplayType = DisplayType.VIRTUAL
    gpio_pin: int = 18
    color_order: str = "GRB"
    brightness: int = 64
    serpentine: bool = True
    flip_x: bool = False


@dataclass(frozen=True)
class ReaderConfig:
    type: ReaderType = ReaderType.SCRIPTED
    poll_interval_ms: int = 250
    # Scripted reader only: hex uid, None (no tag) or "!fail" per poll
    script: Tuple[Optional[str], ...] = ()
    repeat: bool = True
    i2c_address: int = 0x24


@dataclass(frozen=True)
class LoggingConfig:
    level: LogLevel = LogLevel.INFO
    colors: bool = True


@dataclass(frozen=True)
class AppConfig:
    fps: int = 60
    error_color: Color = field(default_factory=Color.red)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    reader: ReaderConfig = field(default_factory=ReaderConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
