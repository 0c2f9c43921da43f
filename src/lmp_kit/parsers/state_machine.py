# src/lmp_kit/parsers/state_machine.py

from collections.abc import Iterable, Iterator
from enum import Enum

from lmp_kit.errors import MalformedDocumentError
from lmp_kit.format import FileRecord, match_end, match_start, strip_line_ending


class ParserState(str, Enum):
    """Whether the parser is between records or inside one."""

    IDLE = "idle"
    IN_RECORD = "in_record"


class RecordStateMachine:
    """Two-state line parser for LMP documents.

    Transitions:
    - IDLE + start marker        -> IN_RECORD (path captured, content reset)
    - IDLE + anything else       -> IDLE (line ignored)
    - IN_RECORD + matching end   -> IDLE (record emitted)
    - IN_RECORD + anything else  -> IN_RECORD (line appended to content)

    An end marker naming a different path than the open record is content,
    as is a start marker seen inside a record.
    """

    def __init__(self) -> None:
        self.state = ParserState.IDLE
        self.current_path = ""
        self._lines: list[str] = []

    def feed(self, line: str) -> FileRecord | None:
        """Consume one line (without its line ending).

        Returns the completed record when `line` closes one, else None.
        """
        if self.state is ParserState.IDLE:
            path = match_start(line)
            if path is not None:
                self.current_path = path
                self._lines = []
                self.state = ParserState.IN_RECORD
            return None

        if match_end(line) == self.current_path:
            record = FileRecord(path=self.current_path, content="".join(self._lines))
            self.state = ParserState.IDLE
            self.current_path = ""
            self._lines = []
            return record

        self._lines.append(line + "\n")
        return None

    def finish(self) -> None:
        """Signal end of stream.

        Raises:
            MalformedDocumentError: If a record is still open.
        """
        if self.state is ParserState.IN_RECORD:
            raise MalformedDocumentError(self.current_path)


def iter_records(lines: Iterable[str]) -> Iterator[FileRecord]:
    """Yield each closed record as soon as its end marker is read.

    Lines may carry their trailing line ending; it is stripped. Raises
    MalformedDocumentError after the last closed record if the stream ends
    inside a record.
    """
    machine = RecordStateMachine()
    for line in lines:
        record = machine.feed(strip_line_ending(line))
        if record is not None:
            yield record
    machine.finish()
