"""
ScriptedIdentifierSource - replays a fixed sequence of poll results

Used on machines without a tag reader and in tests. Script entries:
    "04:1A:2B:3C:05:10:07"   tag present
    "-" or None              no tag
    "!fail"                  reader error
Any entry may end in "*N" to repeat it for N polls.
"""

from __future__ import annotations
from typing import Iterable, List, Optional, Union

from sigil.hardware.reader.reader_interface import IIdentifierSource
from sigil.models.enums import LogCategory
from sigil.models.identifier import Identifier
from sigil.models.read_result import ReadResult
from sigil.utils.logger import get_logger

log = get_logger().for_category(LogCategory.READER)

NO_TAG_TOKEN = "-"
FAIL_TOKEN = "!fail"

ScriptEntry = Union[None, str, ReadResult]


def parse_script_entry(entry: ScriptEntry) -> List[ReadResult]:
    """
    Expand one script entry into poll results.

    Raises:
        IdentifierError: hex uid is malformed or longer than 10 bytes
        ValueError: repeat count is not a positive integer
    """
    if isinstance(entry, ReadResult):
        return [entry]
    if entry is None:
        return [ReadResult.no_tag()]

    token, _, count_text = entry.partition("*")
    token = token.strip()
    count = int(count_text) if count_text.strip() else 1
    if count < 1:
        raise ValueError(f"Repeat count must be >= 1 in script entry '{entry}'")

    if token in ("", NO_TAG_TOKEN):
        result = ReadResult.no_tag()
    elif token.lower() == FAIL_TOKEN:
        result = ReadResult.failure()
    else:
        result = ReadResult.tag(Identifier.from_hex(token).data)
    return [result] * count


class ScriptedIdentifierSource(IIdentifierSource):

    def __init__(self, script: Iterable[ScriptEntry] = (), repeat: bool = True):
        self._results: List[ReadResult] = []
        for entry in script:
            self._results.extend(parse_script_entry(entry))
        self.repeat = repeat
        self._position = 0
        self.polls = 0

        log.info("Scripted reader ready", polls=len(self._results), repeat=repeat)

    @property
    def exhausted(self) -> bool:
        return not self.repeat and self._position >= len(self._results)

    def read(self) -> ReadResult:
        self.polls += 1
        if not self._results:
            return ReadResult.no_tag()

        if self._position >= len(self._results):
            if not self.repeat:
                return ReadResult.no_tag()
            self._position = 0

        result = self._results[self._position]
        self._position += 1
        return result

    def close(self) -> None:
        self._position = 0


def pinned_source(identifier: Optional[Identifier]) -> ScriptedIdentifierSource:
    """Source that reports the same tag on every poll (CLI --identifier)"""
    if identifier is None:
        return ScriptedIdentifierSource()
    return ScriptedIdentifierSource([ReadResult.tag(identifier.data)], repeat=True)
