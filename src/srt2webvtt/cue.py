"""
Cue value type and the tagged per-block parse result.
"""
from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

from .errors import ParseError
from .timecode import Delta, TimeCode


@dataclass( frozen=True )
class Cue:
    """
    One subtitle entry: a time interval plus display text.
    
    The index is informational only; writers number cues by output position.
    An end before the start is kept as-is and never re-validated.
    """
    
    index: int;                                     # 1-based position in the input
    start: TimeCode;                                # Start time
    end: TimeCode;                                  # End time
    lines: Tuple[str, ...] = field( default=() );   # Text lines, "" for blank lines
    
    def __post_init__( self ):
        object.__setattr__( self, "lines", tuple( self.lines ) );
    
    def shifted( self, delta: Delta ) -> "Cue":
        """Return a copy with delta applied to both start and end."""
        if delta.is_zero:
            return self;
        return replace( self, start=self.start.apply_delta( delta ), end=self.end.apply_delta( delta ) );
    
    def __repr__( self ):
        return f"Cue(index={self.index}, start={self.start}, end={self.end}, lines={self.lines!r})";


@dataclass( frozen=True )
class ParseResult:
    """Outcome of parsing one block: either a cue or a skipped block."""
    
    line_number: int;                       # First input line of the block (1-based)
    cue: Optional[Cue] = None;
    error: Optional[ParseError] = None;
    
    @property
    def skipped( self ) -> bool:
        return self.cue is None;
