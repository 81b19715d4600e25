"""
Conversion pipeline: parse, shift by a delta, write.

The pipeline is pull based. The writer consumes the parser's lazy cue
sequence one cue at a time, so no cue list is ever built.
"""
import io
from pathlib import Path
from typing import BinaryIO, Callable, Iterable, Iterator, Optional, TextIO, Union

from .blocks import TextSource
from .cue import Cue
from .errors import SubtitleIOError
from .formats import Format, infer_formats
from .logging import get_logger
from .parser import CueParser
from .srt import SrtParser, write_srt
from .timecode import Delta
from .webvtt import WebVttParser, write_webvtt


ENCODING = "utf-8";

FormatLike = Union[Format, str];

PARSERS = {
    Format.SRT: SrtParser,
    Format.WEBVTT: WebVttParser,
};

WRITERS = {
    Format.SRT: write_srt,
    Format.WEBVTT: write_webvtt,
};


class Utf8Sink:
    """Text facade over a binary sink, encoding each write as UTF-8."""

    def __init__( self, sink: BinaryIO ):
        self.sink = sink;

    def write( self, text: str ) -> int:
        return self.sink.write( text.encode( ENCODING ) );


def create_parser( input_format: FormatLike, source: TextSource, strict: bool = False ) -> CueParser:
    """Create the parser for a format (name or Format)."""
    return PARSERS[Format.from_name( input_format )]( source, strict=strict );


def get_writer( output_format: FormatLike ) -> Callable[[Iterable[Cue], TextIO], int]:
    """Get the writer function for a format (name or Format)."""
    return WRITERS[Format.from_name( output_format )];


def shift_cues( cues: Iterable[Cue], delta: Delta ) -> Iterator[Cue]:
    """Lazily apply delta to the start and end of every cue."""
    if delta.is_zero:
        yield from cues;
        return;
    for cue in cues:
        yield cue.shifted( delta );


def convert_stream( source: TextSource, input_format: FormatLike, output_format: FormatLike,
                    delta: Delta = Delta.NONE, sink: TextIO = None, strict: bool = False ) -> int:
    """
    Convert text input to a text sink.

    Args:
        source: Input document as str, text stream or iterable of lines
        input_format: Format of the input
        output_format: Format to write
        delta: Signed offset applied to every cue
        sink: Writable text stream
        strict: Abort on the first malformed block instead of skipping it

    Returns:
        Number of cues written

    Raises:
        UnknownFormat: If a format name is not recognized (nothing is written)
        ParseError: In strict mode, for the first malformed block
        SubtitleIOError: If reading or writing fails
    """
    parser = create_parser( input_format, source, strict=strict );
    writer = get_writer( output_format );

    count = writer( shift_cues( parser, delta ), sink );
    if parser.skipped:
        get_logger().warning( f"Skipped {parser.skipped} malformed {parser.format_name} block(s)" );
    return count;


def convert( source: BinaryIO, input_format: FormatLike, output_format: FormatLike,
             delta: Delta = Delta.NONE, sink: BinaryIO = None, strict: bool = False ) -> int:
    """
    Convert a binary subtitle stream into a binary sink.

    Input is decoded as UTF-8 (a byte order mark is tolerated) and output is
    UTF-8 with "\\n" line endings. The sink is flushed but not closed.

    Args:
        source: Readable binary stream
        input_format: Format of the input (Format or name)
        output_format: Format to write (Format or name)
        delta: Signed offset applied to every cue
        sink: Writable binary stream
        strict: Abort on the first malformed block instead of skipping it

    Returns:
        Number of cues written
    """
    if sink is None:
        raise ValueError( "convert() requires an output sink" );

    # Resolve formats before touching either stream
    input_format = Format.from_name( input_format );
    output_format = Format.from_name( output_format );

    reader = io.TextIOWrapper( source, encoding="utf-8-sig" );
    try:
        count = convert_stream( reader, input_format, output_format, delta, Utf8Sink( sink ), strict=strict );
        try:
            sink.flush();
        except OSError as e:
            raise SubtitleIOError( f"Failed to flush subtitle output: {e}" ) from e;
        return count;
    finally:
        reader.detach();


def convert_text( text: str, input_format: FormatLike, output_format: FormatLike,
                  delta: Delta = Delta.NONE, strict: bool = False ) -> str:
    """Convert a subtitle document held in a string."""
    output = io.StringIO();
    convert_stream( text, input_format, output_format, delta, output, strict=strict );
    return output.getvalue();


def convert_bytes( data: bytes, input_format: FormatLike, output_format: FormatLike,
                   delta: Delta = Delta.NONE, strict: bool = False ) -> bytes:
    """Convert UTF-8 subtitle bytes to UTF-8 subtitle bytes."""
    output = io.BytesIO();
    convert( io.BytesIO( data ), input_format, output_format, delta, output, strict=strict );
    return output.getvalue();


def convert_file( input_path: Union[str, Path], output_path: Optional[Union[str, Path]] = None,
                  input_format: Optional[FormatLike] = None, output_format: Optional[FormatLike] = None,
                  delta: Delta = Delta.NONE, strict: bool = False ) -> Path:
    """
    Convert a subtitle file on disk.

    Formats are inferred from the file extensions when not given. Without an
    output path the result is written next to the input with the output
    format's extension (movie.srt -> movie.vtt).

    Returns:
        Path of the written file

    Raises:
        UnknownFormat: If formats cannot be resolved
        SubtitleIOError: If the input cannot be read or the output written
    """
    input_path = Path( input_path );
    source_format, target_format = infer_formats( input_format, output_format, input_path, output_path );
    output_path = Path( output_path ) if output_path else input_path.with_suffix( target_format.extension );

    if output_path.resolve() == input_path.resolve():
        raise SubtitleIOError( f"Refusing to overwrite the input file: {input_path}" );

    logger = get_logger();
    logger.debug( f"Converting {input_path} ({source_format}) -> {output_path} ({target_format})" );

    try:
        with open( input_path, "rb" ) as source, open( output_path, "wb" ) as sink:
            count = convert( source, source_format, target_format, delta, sink, strict=strict );
    except OSError as e:
        raise SubtitleIOError( f"Cannot convert {input_path}: {e}" ) from e;

    logger.info( f"Wrote {count} cues to {output_path}" );
    return output_path;
