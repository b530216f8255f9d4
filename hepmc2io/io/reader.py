"""Streaming HepMC2 reader.

The record protocol lives in :class:`EventAssembler`, which is fed one
decoded line at a time and never touches a stream. :class:`Reader` and
:class:`AsyncReader` only differ in how they obtain those lines.

Example:
    >>> with open("events.hepmc2", "rb") as f:
    ...     for event in Reader(f):
    ...         print(event.number, event.xs)
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Union

from ..errors import BadPrefixError, LineParseError, NoVertexError, ParseError, ReadIOError
from ..models import Event
from .builder import EventBuilder
from .records import RECORD_PARSERS, parse_event_line

logger = logging.getLogger(__name__)


def _is_framing(line: str) -> bool:
    return not line.strip() or line.startswith("HepMC")


class EventAssembler:
    """Turns a sequence of lines into events.

    Call :meth:`resume` before every pull, :meth:`feed` for each line read
    and :meth:`close` at end of input. ``feed`` returns an event when the
    line completes one, i.e. when a new ``E`` record shows up. That ``E``
    line is held back and only parsed by the next ``resume``, so an error
    in it is reported on the pull that would have returned its event.

    After an error the partially built event is dropped and every line up to
    the next ``E`` record is skipped.

    Lines may be given as bytes, which must be valid UTF-8. ``line`` keeps
    the last line exactly as read, terminator included.
    """

    def __init__(self) -> None:
        self.line_nr = 0
        self.line = ""
        self._builder: Optional[EventBuilder] = None
        self._pending: Optional[tuple[str, int]] = None
        self._resyncing = False
        self._skipped = 0

    def resume(self) -> None:
        if self._pending is None:
            return
        line, line_nr = self._pending
        self._pending = None
        self._start_event(line, line_nr)

    def feed(self, raw: Union[bytes, str]) -> Optional[Event]:
        self.line_nr += 1
        if isinstance(raw, bytes):
            try:
                raw = raw.decode("utf-8")
            except UnicodeDecodeError as err:
                self.line = raw.decode("utf-8", errors="backslashreplace")
                error = ReadIOError(f"stream did not contain valid UTF-8: {err}")
                error.__cause__ = err
                raise self._fail(error)
        self.line = raw
        line = raw.rstrip("\r\n")

        if self._resyncing:
            if not line.startswith("E"):
                self._skipped += 1
                return None
            self._end_resync()

        if self._builder is None:
            if _is_framing(line):
                return None
            if line.startswith("P"):
                raise self._fail(NoVertexError("particle record before any event or vertex"))
            if not line.startswith("E"):
                raise self._fail(BadPrefixError(f"expected an event record, found {line[:1]!r}"))
            self._start_event(self.line, self.line_nr)
            return None

        if not line.strip():
            return None
        if line.startswith("E"):
            self._pending = (self.line, self.line_nr)
            return self._finish_event()

        parser = RECORD_PARSERS.get(line[0])
        if parser is None:
            raise self._fail(BadPrefixError(repr(line[0])))
        try:
            parser(line, self._builder)
        except ParseError as err:
            raise self._fail(err) from err
        return None

    def close(self) -> Optional[Event]:
        if self._resyncing and self._skipped:
            logger.warning("Reached end of input after skipping %d line(s) following an error", self._skipped)
            self._skipped = 0
        if self._builder is None:
            return None
        return self._finish_event()

    def fail_io(self, err: OSError) -> LineParseError:
        error = ReadIOError(str(err))
        error.__cause__ = err
        return self._fail(error)

    def _start_event(self, line: str, line_nr: int) -> None:
        try:
            self._builder = EventBuilder(parse_event_line(line.rstrip("\r\n")))
        except ParseError as err:
            raise self._fail(err, line, line_nr) from err

    def _finish_event(self) -> Event:
        event = self._builder.build()
        self._builder = None
        logger.debug("Read event %d with %d vertices", event.number, len(event.vertices))
        return event

    def _end_resync(self) -> None:
        logger.warning(
            "Resuming at line %d after skipping %d line(s) following an error",
            self.line_nr,
            self._skipped,
        )
        self._resyncing = False
        self._skipped = 0

    def _fail(self, err: ParseError, line: Optional[str] = None, line_nr: Optional[int] = None) -> LineParseError:
        self._builder = None
        self._resyncing = True
        self._skipped = 0
        return LineParseError.wrap(
            err,
            self.line if line is None else line,
            self.line_nr if line_nr is None else line_nr,
        )


class _BaseReader:
    def __init__(self, stream: Any):
        self.stream = stream
        self._assembler = EventAssembler()

    @property
    def line_number(self) -> int:
        """Number of lines consumed so far."""
        return self._assembler.line_nr

    def into_inner(self) -> Any:
        return self.stream


class Reader(_BaseReader):
    """Iterate over the events of a HepMC2 stream.

    ``stream`` is anything with a ``readline()`` returning bytes or str,
    e.g. a file opened in binary mode or ``io.BytesIO``. Iteration raises
    :class:`~hepmc2io.errors.LineParseError` for a malformed event; the
    iteration can be continued afterwards and picks up at the next event.
    """

    def __iter__(self) -> "Reader":
        return self

    def __next__(self) -> Event:
        assembler = self._assembler
        assembler.resume()
        while True:
            try:
                raw = self.stream.readline()
            except OSError as err:
                raise assembler.fail_io(err)
            if not raw:
                event = assembler.close()
                if event is None:
                    raise StopIteration
                return event
            event = assembler.feed(raw)
            if event is not None:
                return event


class AsyncReader(_BaseReader):
    """Asynchronous counterpart of :class:`Reader`.

    ``stream.readline()`` must be a coroutine, as on ``asyncio.StreamReader``.
    """

    def __aiter__(self) -> "AsyncReader":
        return self

    async def __anext__(self) -> Event:
        assembler = self._assembler
        assembler.resume()
        while True:
            try:
                raw = await self.stream.readline()
            except OSError as err:
                raise assembler.fail_io(err)
            if not raw:
                event = assembler.close()
                if event is None:
                    raise StopAsyncIteration
                return event
            event = assembler.feed(raw)
            if event is not None:
                return event
