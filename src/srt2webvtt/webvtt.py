"""
WebVTT parsing and writing.

Only timing and plain text are kept: cue identifiers, cue settings,
NOTE, STYLE and REGION blocks are read and dropped.
"""
from typing import Iterable, List, Optional, TextIO

from .blocks import LineReader, TextSource, is_blank, is_time_line, parse_timing
from .cue import Cue, ParseResult
from .errors import MalformedCue
from .parser import CueParser
from .srt import write_text


WEBVTT_SIGNATURE = "WEBVTT";
WEBVTT_SEPARATOR = ".";
NON_CUE_BLOCKS = ( "NOTE", "STYLE", "REGION" );


def _starts_with_keyword( line: Optional[str], keyword: str ) -> bool:
    if line is None or not line.startswith( keyword ):
        return False;
    rest = line[len( keyword ):];
    return not rest or rest[0] in " \t";


def is_non_cue_block( line: Optional[str] ) -> bool:
    return not is_time_line( line ) and any( _starts_with_keyword( line, keyword ) for keyword in NON_CUE_BLOCKS );


class WebVttParser( CueParser ):
    """
    Lazy WebVTT parser.

    Skips the WEBVTT signature and header lines up to the first blank line,
    then parses cue blocks with an optional identifier line and optional
    cue settings after the end time.
    """

    format_name = "WebVTT";

    def starts_block( self, reader: LineReader, offset: int ) -> bool:
        return is_non_cue_block( reader.peek( offset ) ) or super().starts_block( reader, offset );

    def read_header( self, reader: LineReader ) -> Optional[ParseResult]:
        first = reader.peek();
        if first is None:
            return None;

        if not _starts_with_keyword( first, WEBVTT_SIGNATURE ):
            return ParseResult( line_number=1, error=MalformedCue( f"Missing {WEBVTT_SIGNATURE} signature", 1 ) );

        # Signature plus metadata lines, up to the first blank line
        while reader.peek() is not None and not is_blank( reader.peek() ):
            reader.next_line();
        return None;

    def parse_block( self, lines: List[str], index: int ) -> Optional[Cue]:
        if is_non_cue_block( lines[0] ):
            self.logger.debug( f"Ignoring WebVTT {lines[0].split()[0]} block" );
            return None;

        # Optional cue identifier before the time line
        if is_time_line( lines[0] ):
            time_position = 0;
        elif len( lines ) > 1 and is_time_line( lines[1] ):
            time_position = 1;
        else:
            raise MalformedCue( f"WebVTT block {lines[0]!r} has no time line" );

        start, end = parse_timing( lines[time_position], WEBVTT_SEPARATOR, allow_settings=True );
        return Cue( index=index, start=start, end=end, lines=lines[time_position + 1:] );


def parse_webvtt( source: TextSource, strict: bool = False ) -> WebVttParser:
    """Parse WebVTT text or a text stream into a lazy cue sequence."""
    return WebVttParser( source, strict=strict );


def format_webvtt_block( number: int, cue: Cue ) -> str:
    timing = f"{cue.start.format( WEBVTT_SEPARATOR )} --> {cue.end.format( WEBVTT_SEPARATOR )}";
    text = "".join( f"{line}\n" for line in cue.lines );
    return f"{number}\n{timing}\n{text}\n";


def write_webvtt( cues: Iterable[Cue], sink: TextIO ) -> int:
    """
    Write the WEBVTT signature and cues, numbered by output position.

    Returns:
        Number of cues written

    Raises:
        SubtitleIOError: If writing fails; output written so far remains
    """
    write_text( sink, f"{WEBVTT_SIGNATURE}\n\n" );

    count = 0;
    for cue in cues:
        count += 1;
        write_text( sink, format_webvtt_block( count, cue ) );
    return count;
