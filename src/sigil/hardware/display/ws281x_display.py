# hardware/display/ws281x_display.py
"""
WS281xGridDisplay - rpi_ws281x matrix driver
=============================================
Concrete IGridDisplay for a 13×9 WS2812 panel wired as one strip.

Features:
- Grid → strip mapping via GridPixelMapper (row-major or serpentine)
- Color order handled by the rpi_ws281x strip type constant
- present() is a single show() (one DMA transfer per frame)
"""

from __future__ import annotations
from dataclasses import dataclass

from rpi_ws281x import PixelStrip, ws

from sigil.hardware.display.display_interface import IGridDisplay
from sigil.hardware.display.grid_pixel_mapper import GridPixelMapper
from sigil.models.enums import LogCategory
from sigil.models.frame import GridFrame
from sigil.utils.logger import get_logger

log = get_logger().for_category(LogCategory.HARDWARE)


COLOR_ORDER_TYPES = {
    "RGB": ws.WS2811_STRIP_RGB,
    "RBG": ws.WS2811_STRIP_RBG,
    "GRB": ws.WS2811_STRIP_GRB,
    "GBR": ws.WS2811_STRIP_GBR,
    "BRG": ws.WS2811_STRIP_BRG,
    "BGR": ws.WS2811_STRIP_BGR,
}


@dataclass(frozen=True)
class WS281xGridConfig:
    """Configuration for the WS281x matrix."""
    gpio_pin: int = 18
    color_order: str = "GRB"  # WS2812 typical
    brightness: int = 64
    serpentine: bool = True
    flip_x: bool = False
    frequency_hz: int = 800_000
    dma_channel: int = 10
    invert: bool = False
    channel: int = 0  # PWM channel (0 or 1)


class WS281xGridDisplay(IGridDisplay):
    """
    WS281x hardware driver using rpi_ws281x library.
    """

    def __init__(self, config: WS281xGridConfig) -> None:
        order = config.color_order.upper()
        if order not in COLOR_ORDER_TYPES:
            raise ValueError(f"Unsupported color order: {config.color_order}")

        self.config = config
        self.mapper = GridPixelMapper(serpentine=config.serpentine, flip_x=config.flip_x)

        self._pixel_strip = PixelStrip(
            self.mapper.led_count,
            config.gpio_pin,
            config.frequency_hz,
            config.dma_channel,
            config.invert,
            config.brightness,
            config.channel,
            COLOR_ORDER_TYPES[order],
        )
        self._pixel_strip.begin()

        log.info(
            "WS281xGridDisplay initialized",
            gpio=config.gpio_pin,
            count=self.mapper.led_count,
            order=order,
            serpentine=config.serpentine,
            brightness=config.brightness,
        )

    def present(self, frame: GridFrame) -> None:
        """Write every pixel, then one show()"""
        for index, color in enumerate(self.mapper.flatten(frame)):
            self._pixel_strip.setPixelColorRGB(index, color.r, color.g, color.b)
        self._pixel_strip.show()

    def clear(self) -> None:
        """Turn off all LEDs (black + show)."""
        for index in range(self.mapper.led_count):
            self._pixel_strip.setPixelColorRGB(index, 0, 0, 0)
        self._pixel_strip.show()
