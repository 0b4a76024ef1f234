# hardware/factory.py
"""
Hardware factories that NEVER crash the app on a PC.

Real drivers are imported lazily and only on a Raspberry Pi with the driver
module installed; anything else falls back to the virtual implementations.
"""

from sigil.hardware.display.display_interface import IGridDisplay
from sigil.hardware.display.terminal_display import TerminalGridDisplay
from sigil.hardware.display.virtual_display import VirtualGridDisplay
from sigil.hardware.reader.reader_interface import IIdentifierSource
from sigil.hardware.reader.scripted_reader import ScriptedIdentifierSource
from sigil.models.config import DisplayConfig, ReaderConfig
from sigil.models.enums import DisplayType, ReaderType, LogCategory
from sigil.runtime.runtime_info import RuntimeInfo
from sigil.utils.logger import get_logger

log = get_logger().for_category(LogCategory.HARDWARE)


def create_grid_display(config: DisplayConfig) -> IGridDisplay:
    if config.type is DisplayType.TERMINAL:
        return TerminalGridDisplay()

    if config.type is DisplayType.WS281X:
        if RuntimeInfo.is_raspberry_pi() and RuntimeInfo.has_ws281x():
            try:
                from sigil.hardware.display.ws281x_display import WS281xGridDisplay, WS281xGridConfig

                return WS281xGridDisplay(WS281xGridConfig(
                    gpio_pin=config.gpio_pin,
                    color_order=config.color_order,
                    brightness=config.brightness,
                    serpentine=config.serpentine,
                    flip_x=config.flip_x,
                ))
            except Exception as ex:
                log.error("WS281x display init failed", error=str(ex), error_type=type(ex).__name__)
        log.warn("WS281x display unavailable, using virtual display")

    return VirtualGridDisplay()


def create_identifier_source(config: ReaderConfig) -> IIdentifierSource:
    if config.type is ReaderType.PN532:
        if RuntimeInfo.is_raspberry_pi() and RuntimeInfo.has_pn532():
            try:
                from sigil.hardware.reader.pn532_reader import PN532IdentifierSource

                return PN532IdentifierSource(i2c_address=config.i2c_address)
            except Exception as ex:
                log.error("PN532 reader init failed", error=str(ex), error_type=type(ex).__name__)
        log.warn("PN532 reader unavailable, using scripted reader")

    return ScriptedIdentifierSource(config.script, repeat=config.repeat)
