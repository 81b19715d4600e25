"""
Test environment and .env configuration loading.
"""
import logging
import os
import pytest
from pathlib import Path
from unittest.mock import patch
import sys

# Add src directory to path for testing
sys.path.insert( 0, str( Path( __file__ ).parent.parent / "src" ) );

from srt2webvtt.config import load_config
from srt2webvtt.logging import get_logger, setup_logging
from srt2webvtt.timecode import Delta


class TestEnvironmentLoading:
    """Test loading configuration from environment variables."""

    @patch.dict( os.environ, {}, clear=True )
    def test_defaults_without_environment( self, tmp_path ):
        config = load_config( tmp_path / ".env" );

        assert config.debug is False;
        assert config.strict is False;
        assert config.delta == Delta.NONE;
        assert config.log_file is None;
        assert config.errors == [];

    @patch.dict( os.environ, {
        'SRT2WEBVTT_DEBUG': 'true',
        'SRT2WEBVTT_STRICT': '1',
        'SRT2WEBVTT_DELTA': '-1200',
        'SRT2WEBVTT_LOG_FILE': 'logs/run.log'
    }, clear=True )
    def test_environment_variable_loading( self ):
        config = load_config( None );

        assert config.debug is True;
        assert config.strict is True;
        assert config.delta == Delta( -1200 );
        assert config.log_file == Path( "logs/run.log" );

    @patch.dict( os.environ, {}, clear=True )
    def test_env_file_loading( self, tmp_path ):
        env_file = tmp_path / ".env";
        env_file.write_text( "SRT2WEBVTT_DELTA=250\nSRT2WEBVTT_DEBUG=yes\n", encoding="utf-8" );

        config = load_config( env_file );

        assert config.delta == Delta( 250 );
        assert config.debug is True;

    @patch.dict( os.environ, { 'SRT2WEBVTT_DELTA': '100' }, clear=True )
    def test_environment_wins_over_env_file( self, tmp_path ):
        env_file = tmp_path / ".env";
        env_file.write_text( "SRT2WEBVTT_DELTA=250\n", encoding="utf-8" );

        assert load_config( env_file ).delta == Delta( 100 );

    @patch.dict( os.environ, { 'SRT2WEBVTT_DELTA': 'later', 'SRT2WEBVTT_STRICT': 'maybe' }, clear=True )
    def test_invalid_values_are_collected( self ):
        config = load_config( None );

        assert len( config.errors ) == 2;
        assert config.delta == Delta.NONE;
        assert config.strict is False;


class TestLogging:
    """Test logger setup."""

    def test_get_logger_returns_shared_instance( self ):
        assert get_logger() is get_logger();

    def test_setup_logging_levels( self, tmp_path ):
        logger = setup_logging( debug=True, log_file=tmp_path / "debug.log" );
        logger.debug( "debug message" );

        assert get_logger() is logger;
        assert "debug message" in ( tmp_path / "debug.log" ).read_text( encoding="utf-8" );

        quiet = setup_logging( debug=False );
        assert not quiet.logger.isEnabledFor( logging.DEBUG );


if __name__ == '__main__':
    pytest.main( [ __file__ ] );
