"""
Error types raised by the subtitle parsers, writers and converter.
"""
from typing import Optional


class SubtitleError( Exception ):
    """Base class for every error raised by srt2webvtt."""


class ParseError( SubtitleError, ValueError ):
    """
    A single cue block could not be parsed.
    
    Parse errors are scoped to the block they occur in: parsers skip the
    block and continue unless running in strict mode.
    """
    
    def __init__( self, message: str, line_number: Optional[int] = None ):
        super().__init__( message );
        self.message = message;
        self.line_number = line_number;
    
    def __str__( self ):
        if self.line_number is None:
            return self.message;
        return f"{self.message} (line {self.line_number})";


class MalformedTimeCode( ParseError ):
    """A time code token is not HH:MM:SS<sep>mmm or is out of range."""


class MalformedCue( ParseError ):
    """A block has no usable time line, or the WebVTT signature is missing."""


class UnknownFormat( SubtitleError, ValueError ):
    """An unrecognized subtitle format name or file extension."""


class SubtitleIOError( SubtitleError ):
    """Reading the input or writing the output sink failed."""
