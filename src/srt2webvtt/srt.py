"""
SRT (SubRip) parsing and writing.

Block grammar:

    <index>
    <start> --> <end>
    <text line>
    [<text line>]*
    <blank line>

Time codes use a comma before the milliseconds (00:01:02,500).
"""
from typing import Iterable, List, TextIO

from .blocks import TextSource, is_time_line, parse_timing
from .cue import Cue
from .errors import MalformedCue, SubtitleIOError
from .parser import CueParser


SRT_SEPARATOR = ",";


class SrtParser( CueParser ):
    """Lazy SRT parser. The input index line is read and discarded."""

    format_name = "SRT";

    def parse_block( self, lines: List[str], index: int ) -> Cue:
        # Index line may be missing when the block opens with the time line
        if is_time_line( lines[0] ):
            time_position = 0;
        elif len( lines ) > 1 and is_time_line( lines[1] ):
            time_position = 1;
        else:
            raise MalformedCue( f"SRT block {lines[0]!r} has no time line" );

        start, end = parse_timing( lines[time_position], SRT_SEPARATOR );
        return Cue( index=index, start=start, end=end, lines=lines[time_position + 1:] );


def parse_srt( source: TextSource, strict: bool = False ) -> SrtParser:
    """
    Parse SRT text or a text stream into a lazy cue sequence.

    Args:
        source: SRT document as a str, or a text stream / iterable of lines
        strict: Raise on the first malformed block instead of skipping it

    Returns:
        Iterable SrtParser yielding Cue objects
    """
    return SrtParser( source, strict=strict );


def format_srt_block( number: int, cue: Cue ) -> str:
    """Format one cue as an SRT block, including the trailing blank line."""
    timing = f"{cue.start.format( SRT_SEPARATOR )} --> {cue.end.format( SRT_SEPARATOR )}";
    text = "".join( f"{line}\n" for line in cue.lines );
    return f"{number}\n{timing}\n{text}\n";


def write_text( sink: TextIO, text: str ):
    """Write to the sink, raising SubtitleIOError on failure."""
    try:
        sink.write( text );
    except OSError as e:
        raise SubtitleIOError( f"Failed to write subtitle output: {e}" ) from e;


def write_srt( cues: Iterable[Cue], sink: TextIO ) -> int:
    """
    Write cues as SRT, numbering them 1, 2, 3... by output position.

    Cues are consumed one at a time, so a lazy parser is never materialized.

    Args:
        cues: Cues to write
        sink: Writable text stream

    Returns:
        Number of cues written

    Raises:
        SubtitleIOError: If writing fails; output written so far remains
    """
    count = 0;
    for cue in cues:
        count += 1;
        write_text( sink, format_srt_block( count, cue ) );
    return count;
