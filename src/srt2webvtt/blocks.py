"""
Line reading and blank-line block splitting shared by the SRT and WebVTT parsers.
"""
import io
import re
from collections import deque
from typing import Callable, Iterable, Iterator, List, Optional, Tuple, Union

from .errors import MalformedCue, SubtitleIOError
from .timecode import TimeCode


ARROW = "-->";

# Leading "HH:MM" of a time line, even when its arrow is broken
TIMING_PREFIX = re.compile( r'\s*[0-9]+:[0-9]{2}' );

TextSource = Union[str, Iterable[str]];


def open_source( source: TextSource ) -> Iterable[str]:
    """Return an iterable of lines; strings are wrapped so every call re-reads from the start."""
    if isinstance( source, str ):
        return io.StringIO( source );
    return source;


def is_blank( line: Optional[str] ) -> bool:
    return line is not None and not line.strip();


def is_time_line( line: Optional[str] ) -> bool:
    return line is not None and ARROW in line;


def looks_like_timing( line: Optional[str] ) -> bool:
    return is_time_line( line ) or ( line is not None and TIMING_PREFIX.match( line ) is not None );


def is_index_line( line: Optional[str] ) -> bool:
    return line is not None and line.strip().isdigit();


class LineReader:
    """
    Forward-only line reader with lookahead.

    Strips line terminators and a leading byte order mark, counts lines,
    and turns read failures into SubtitleIOError.
    """

    def __init__( self, lines: Iterable[str] ):
        self._lines = iter( lines );
        self._buffer = deque();
        self._first = True;
        self.line_number = 0;   # Number of lines consumed so far

    def _fill( self, count: int ) -> bool:
        while len( self._buffer ) < count:
            try:
                line = next( self._lines );
            except StopIteration:
                return False;
            except ( OSError, UnicodeDecodeError ) as e:
                raise SubtitleIOError( f"Failed to read subtitle input: {e}" ) from e;

            if self._first:
                line = line.lstrip( "\ufeff" );
                self._first = False;
            self._buffer.append( line.rstrip( "\r\n" ) );
        return True;

    def peek( self, offset: int = 0 ) -> Optional[str]:
        """Look at a line ahead without consuming it, None past the end of input."""
        if not self._fill( offset + 1 ):
            return None;
        return self._buffer[offset];

    def next_line( self ) -> Optional[str]:
        if not self._fill( 1 ):
            return None;
        self.line_number += 1;
        return self._buffer.popleft();


def starts_cue_block( reader: LineReader, offset: int ) -> bool:
    """
    A block starts with a time line, a bare index line, or a single line
    (identifier) followed by a time line.

    Time lines with a broken arrow count, so malformed blocks are split off
    and reported instead of being merged into the previous cue.
    """
    line = reader.peek( offset );
    if looks_like_timing( line ) or is_index_line( line ):
        return True;
    return not is_blank( line ) and looks_like_timing( reader.peek( offset + 1 ) );


def iter_blocks( reader: LineReader, starts_block: Callable[[LineReader, int], bool] = starts_cue_block ) -> Iterator[Tuple[int, List[str]]]:
    """
    Split input into blocks separated by blank lines.

    A run of blank lines only ends the current block when the next non-blank
    line starts a new block (as decided by starts_block) or input ends;
    otherwise the blank lines are kept inside the block as empty lines.

    Yields:
        Tuples of (first line number, block lines)
    """
    while True:
        while is_blank( reader.peek() ):
            reader.next_line();
        if reader.peek() is None:
            return;

        first_line = reader.line_number + 1;
        block = [ reader.next_line() ];

        while True:
            line = reader.peek();
            if line is None:
                break;
            if not is_blank( line ):
                block.append( reader.next_line() );
                continue;

            offset = 0;
            while is_blank( reader.peek( offset ) ):
                offset += 1;
            if reader.peek( offset ) is None or starts_block( reader, offset ):
                break;

            # Blank lines inside cue text
            for _ in range( offset ):
                reader.next_line();
                block.append( "" );

        yield first_line, block;


def parse_timing( line: str, separator: str, allow_settings: bool = False ) -> Tuple[TimeCode, TimeCode]:
    """
    Parse a "<start> --> <end>" time line.

    Args:
        line: The time line
        separator: Millisecond separator expected in both time codes
        allow_settings: Ignore trailing text after the end time (WebVTT cue settings)

    Returns:
        Tuple of (start, end)

    Raises:
        MalformedCue: If the line has no arrow
        MalformedTimeCode: If either time code is invalid
    """
    start_text, arrow, rest = line.partition( ARROW );
    if not arrow:
        raise MalformedCue( f"Missing '{ARROW}' in time line {line!r}" );

    end_text = rest;
    if allow_settings:
        parts = rest.split( None, 1 );
        end_text = parts[0] if parts else "";

    start = TimeCode.parse( start_text, separator );
    end = TimeCode.parse( end_text, separator );
    return start, end;
