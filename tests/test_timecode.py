"""
Test cases for time code parsing, formatting and delta arithmetic.
"""
import pytest
from pathlib import Path
import sys

# Add src directory to path for testing
sys.path.insert( 0, str( Path( __file__ ).parent.parent / "src" ) );

from srt2webvtt.errors import MalformedTimeCode
from srt2webvtt.timecode import Delta, TimeCode, apply_delta


class TestTimeCodeParsing:
    """Test SRT and WebVTT time code parsing."""

    def test_parse_srt_timecode( self ):
        """Test comma separated time code."""
        timecode = TimeCode.parse( "01:23:17,486" );
        assert timecode == TimeCode.from_components( 1, 23, 17, 486 );
        assert timecode.milliseconds == 4997486;

    def test_parse_webvtt_timecode( self ):
        """Test period separated time code."""
        assert TimeCode.parse( "00:00:01.500", "." ) == TimeCode( 1500 );

    def test_parse_long_hours( self ):
        """Hours may be wider than two digits."""
        assert TimeCode.parse( "100:00:00,000" ).hours == 100;

    def test_parse_ignores_surrounding_whitespace( self ):
        assert TimeCode.parse( "  00:00:02,000 " ) == TimeCode( 2000 );

    @pytest.mark.parametrize( "text, separator", [
        ( "00:60:00,000", "," ),      # minutes out of range
        ( "00:00:60,000", "," ),      # seconds out of range
        ( "00:00:01.000", "," ),      # wrong separator for SRT
        ( "00:00:01,000", "." ),      # wrong separator for WebVTT
        ( "0:00:01,000", "," ),       # single digit hours
        ( "00:00:01,00", "," ),       # two digit milliseconds
        ( "00:00:01,1000", "," ),     # four digit milliseconds
        ( "aa:00:01,000", "," ),      # non-numeric
        ( "00:01,000", "," ),         # missing hours
        ( "garbage", "," ),
        ( "", "," ),
    ] )
    def test_malformed_timecodes( self, text, separator ):
        """Test rejection of malformed time codes."""
        with pytest.raises( MalformedTimeCode ):
            TimeCode.parse( text, separator );

    def test_negative_timecode_rejected( self ):
        with pytest.raises( ValueError ):
            TimeCode( -1 );


class TestTimeCodeFormatting:
    """Test time code formatting."""

    def test_format_pads_components( self ):
        timecode = TimeCode.from_components( 1, 2, 3, 4 );
        assert timecode.format( "," ) == "01:02:03,004";
        assert timecode.format( "." ) == "01:02:03.004";

    def test_format_zero( self ):
        assert TimeCode( 0 ).format( "," ) == "00:00:00,000";

    def test_format_wide_hours( self ):
        assert TimeCode.from_components( 123, 4, 5, 6 ).format( "," ) == "123:04:05,006";

    def test_parse_format_round_trip( self ):
        for text in [ "00:00:00,000", "00:59:59,999", "12:34:56,789", "100:00:00,001" ]:
            assert TimeCode.parse( text ).format( "," ) == text;


class TestDelta:
    """Test delta parsing and application."""

    def test_parse_delta( self ):
        assert Delta.parse( "500" ) == Delta( 500 );
        assert Delta.parse( "+500" ) == Delta( 500 );
        assert Delta.parse( "-250" ) == Delta( -250 );
        assert Delta.parse( " 42 " ) == Delta( 42 );

    @pytest.mark.parametrize( "text", [ "", "1.5", "abc", "+-1", "5ms" ] )
    def test_parse_invalid_delta( self, text ):
        with pytest.raises( ValueError ):
            Delta.parse( text );

    def test_zero_delta( self ):
        assert Delta.NONE.is_zero;
        assert Delta().is_zero;
        assert not Delta( 1 ).is_zero;
        assert -Delta( 5 ) == Delta( -5 );

    def test_apply_positive_delta( self ):
        assert TimeCode( 1000 ).apply_delta( Delta( 500 ) ) == TimeCode( 1500 );

    def test_apply_negative_delta( self ):
        assert apply_delta( TimeCode( 1000 ), Delta( -400 ) ) == TimeCode( 600 );

    def test_negative_delta_clamps_at_zero( self ):
        """Negative results clamp to 00:00:00,000."""
        clamped = TimeCode( 300 ).apply_delta( Delta( -500 ) );
        assert clamped == TimeCode( 0 );
        assert clamped.format( "," ) == "00:00:00,000";
        assert clamped.format( "." ) == "00:00:00.000";

    def test_delta_inverse_without_clamping( self ):
        """apply_delta(apply_delta(t, d), -d) == t whenever t + d >= 0."""
        for milliseconds in [ 0, 1, 999, 1000, 61000, 3600000 ]:
            for offset in [ -1000, -1, 0, 1, 500, 3600000 ]:
                if milliseconds + offset < 0:
                    continue;
                timecode = TimeCode( milliseconds );
                delta = Delta( offset );
                assert apply_delta( apply_delta( timecode, delta ), -delta ) == timecode;


if __name__ == '__main__':
    pytest.main( [ __file__ ] );
