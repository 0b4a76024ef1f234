# hardware/reader/pn532_reader.py
"""
PN532IdentifierSource - NFC tag reader over I2C
================================================
Concrete IIdentifierSource using Adafruit Blinka + adafruit_pn532.

- read_passive_target() with a short timeout so the render loop keeps its FPS
- Returns the raw UID (4, 7 or 10 bytes) as a TAG result
- Any driver exception is logged and reported as READ_FAILURE
"""

from __future__ import annotations

import board
import busio
from adafruit_pn532.i2c import PN532_I2C

from sigil.hardware.reader.reader_interface import IIdentifierSource
from sigil.models.enums import LogCategory
from sigil.models.identifier import MAX_IDENTIFIER_LENGTH
from sigil.models.read_result import ReadResult
from sigil.utils.logger import get_logger

log = get_logger().for_category(LogCategory.READER)


class PN532IdentifierSource(IIdentifierSource):

    def __init__(self, i2c_address: int = 0x24, timeout_s: float = 0.02):
        self.timeout_s = timeout_s
        self._i2c = busio.I2C(board.SCL, board.SDA)
        self._pn532 = PN532_I2C(self._i2c, address=i2c_address, debug=False)

        ic, ver, rev, support = self._pn532.firmware_version
        self._pn532.SAM_configuration()

        log.info(
            "PN532 reader initialized",
            address=f"0x{i2c_address:02X}",
            firmware=f"{ver}.{rev}",
        )

    def read(self) -> ReadResult:
        try:
            uid = self._pn532.read_passive_target(timeout=self.timeout_s)
        except (RuntimeError, OSError) as ex:
            log.warn("PN532 read failed", error=str(ex), error_type=type(ex).__name__)
            return ReadResult.failure()

        if uid is None:
            return ReadResult.no_tag()
        if len(uid) > MAX_IDENTIFIER_LENGTH:
            log.warn("PN532 returned oversized UID", length=len(uid))
            return ReadResult.failure()
        return ReadResult.tag(bytes(uid))

    def close(self) -> None:
        try:
            self._i2c.deinit()
        except (RuntimeError, OSError) as ex:
            log.warn("I2C deinit failed", error=str(ex))
