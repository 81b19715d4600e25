"""
Millisecond time codes and the signed delta applied to them.
"""
import re
from dataclasses import dataclass

from .errors import MalformedTimeCode


# Hours are variable width (at least 2 digits), the rest is fixed width.
TIMECODE_PATTERN = re.compile( r'([0-9]{2,}):([0-9]{2}):([0-9]{2})([,.])([0-9]{3})' );
DELTA_PATTERN = re.compile( r'[+-]?[0-9]+' );

MS_PER_SECOND = 1000;
MS_PER_MINUTE = 60 * MS_PER_SECOND;
MS_PER_HOUR = 60 * MS_PER_MINUTE;


@dataclass( frozen=True )
class Delta:
    """
    Signed offset in milliseconds applied to every cue of a conversion.

    The zero delta is the no-op variant.
    """
    milliseconds: int = 0;

    @classmethod
    def parse( cls, text: str ) -> "Delta":
        """
        Parse a signed integer millisecond count such as "500", "+500" or "-250".

        Raises:
            ValueError: If text is not an optionally signed decimal integer
        """
        value = text.strip();
        if not DELTA_PATTERN.fullmatch( value ):
            raise ValueError( f"Invalid delta {text!r}: expected signed integer milliseconds" );
        return cls( int( value ) );

    @property
    def is_zero( self ) -> bool:
        return self.milliseconds == 0;

    def __neg__( self ) -> "Delta":
        return Delta( -self.milliseconds );

    def __str__( self ):
        return f"{self.milliseconds:+d}ms";


Delta.NONE = Delta();


@dataclass( frozen=True, order=True )
class TimeCode:
    """A non-negative point in time with millisecond precision."""
    milliseconds: int = 0;

    def __post_init__( self ):
        if self.milliseconds < 0:
            raise ValueError( f"TimeCode cannot be negative: {self.milliseconds}" );

    @classmethod
    def from_components( cls, hours: int, minutes: int, seconds: int, milliseconds: int ) -> "TimeCode":
        return cls( hours * MS_PER_HOUR + minutes * MS_PER_MINUTE + seconds * MS_PER_SECOND + milliseconds );

    @classmethod
    def parse( cls, text: str, separator: str = "," ) -> "TimeCode":
        """
        Parse an SRT (HH:MM:SS,mmm) or WebVTT (HH:MM:SS.mmm) time code.

        Args:
            text: Time code token, surrounding whitespace is ignored
            separator: Expected fractional second separator ("," or ".")

        Returns:
            Parsed TimeCode

        Raises:
            MalformedTimeCode: On bad syntax, wrong separator or out of range components
        """
        token = text.strip();
        match = TIMECODE_PATTERN.fullmatch( token );
        if not match:
            raise MalformedTimeCode( f"Invalid time code syntax in {token!r}" );

        hours, minutes, seconds, found_separator, milliseconds = match.groups();
        if found_separator != separator:
            raise MalformedTimeCode(
                f"Invalid time code {token!r}: expected {separator!r} before milliseconds, got {found_separator!r}"
            );

        minutes = int( minutes );
        seconds = int( seconds );
        milliseconds = int( milliseconds );
        if minutes >= 60:
            raise MalformedTimeCode( f"Invalid time code {token!r}: minutes must be below 60" );
        if seconds >= 60:
            raise MalformedTimeCode( f"Invalid time code {token!r}: seconds must be below 60" );
        if milliseconds >= MS_PER_SECOND:
            raise MalformedTimeCode( f"Invalid time code {token!r}: milliseconds must be below 1000" );

        return cls.from_components( int( hours ), minutes, seconds, milliseconds );

    @property
    def hours( self ) -> int:
        return self.milliseconds // MS_PER_HOUR;

    @property
    def minutes( self ) -> int:
        return self.milliseconds // MS_PER_MINUTE % 60;

    @property
    def seconds( self ) -> int:
        return self.milliseconds // MS_PER_SECOND % 60;

    @property
    def millis( self ) -> int:
        """Millisecond component (0-999)."""
        return self.milliseconds % MS_PER_SECOND;

    def format( self, separator: str = "," ) -> str:
        """Format as HH:MM:SS<separator>mmm, hours padded to at least 2 digits."""
        return f"{self.hours:02d}:{self.minutes:02d}:{self.seconds:02d}{separator}{self.millis:03d}";

    def apply_delta( self, delta: Delta ) -> "TimeCode":
        """Shift by a signed delta, clamping at zero."""
        if delta.is_zero:
            return self;
        return TimeCode( max( 0, self.milliseconds + delta.milliseconds ) );

    def __str__( self ):
        return self.format( "," );


def apply_delta( timecode: TimeCode, delta: Delta ) -> TimeCode:
    return timecode.apply_delta( delta );
