import pytest
from unittest.mock import MagicMock

from sigil.engine.frame_assembler import FrameAssembler
from sigil.engine.geometry import precompute_geometry
from sigil.engine.pattern_engine import PatternEngine
from sigil.models.identifier import Identifier
from sigil.models.enums import LogLevel
from sigil.utils.logger import configure_logger


REFERENCE_UID = "04:1A:2B:3C:05:10:07"

SAMPLE_UIDS = [
    REFERENCE_UID,
    "04:7F:10:22:35:00:9C:80:11:02",
    "04:C3:5E:91:2A:40:13",
    "FF:FF:FF:FF:FF:FF:FF",
    "00:00:00:00:00:00:00",
    "12:34:56:31:3F:80:AA",
]


@pytest.fixture(autouse=True)
def quiet_logger():
    """Keep test output readable; restore defaults afterwards."""
    configure_logger(LogLevel.WARN, use_colors=False)
    yield
    configure_logger(LogLevel.INFO, use_colors=True)


@pytest.fixture
def reference_identifier():
    return Identifier.from_hex(REFERENCE_UID)


@pytest.fixture
def reference_geometry(reference_identifier):
    return precompute_geometry(reference_identifier)


@pytest.fixture
def assembler():
    return FrameAssembler()


@pytest.fixture
def counting_precompute():
    """precompute_geometry wrapped in a call-counting mock"""
    return MagicMock(side_effect=precompute_geometry)


@pytest.fixture
def engine(counting_precompute):
    return PatternEngine(precompute=counting_precompute)


@pytest.fixture
def sample_identifiers():
    return [Identifier.from_hex(uid) for uid in SAMPLE_UIDS]
