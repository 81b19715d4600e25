"""
CLI entry point for srt2webvtt with argument parsing and environment configuration.
"""
import argparse
import sys
from pathlib import Path

from . import __version__
from .config import load_config
from .convert import convert
from .errors import SubtitleError, SubtitleIOError, UnknownFormat
from .formats import infer_formats
from .logging import setup_logging
from .timecode import Delta


STDIO = "-";


def _delta_argument( value: str ) -> Delta:
    try:
        return Delta.parse( value );
    except ValueError as e:
        raise argparse.ArgumentTypeError( str( e ) );


class ConverterCLI:
    """
    Command line interface for srt2webvtt.

    Command line options override configuration from SRT2WEBVTT_* environment
    variables and the .env file.
    """

    def __init__( self ):
        self.parser = self._create_parser();
        self.args = None;
        self.logger = None;
        self.config = None;
        self.input_format = None;
        self.output_format = None;

    def _create_parser( self ):
        """Create argument parser with all srt2webvtt options."""
        parser = argparse.ArgumentParser(
            prog="srt2webvtt",
            description="Convert subtitles between SRT and WebVTT, optionally shifting every cue",
            epilog="Environment variables: SRT2WEBVTT_DELTA, SRT2WEBVTT_STRICT, SRT2WEBVTT_DEBUG, SRT2WEBVTT_LOG_FILE"
        );

        parser.add_argument(
            "input",
            nargs="?",
            default=STDIO,
            help="Input subtitle file (default: - for standard input)"
        );

        parser.add_argument(
            "output",
            nargs="?",
            default=STDIO,
            help="Output subtitle file (default: - for standard output)"
        );

        parser.add_argument(
            "-d", "--delta",
            type=_delta_argument,
            default=None,
            help="Signed delta in milliseconds added to every cue (default: 0)"
        );

        parser.add_argument(
            "--input-format",
            default=None,
            help="Input format: srt or webvtt (default: inferred from the input extension)"
        );

        parser.add_argument(
            "--output-format",
            default=None,
            help="Output format: srt or webvtt (default: inferred from the output extension, "
                 "else the opposite of the input format)"
        );

        # Mode flags
        parser.add_argument(
            "--strict",
            action="store_true",
            default=None,
            help="Abort on the first malformed cue block instead of skipping it"
        );

        parser.add_argument(
            "--debug",
            action="store_true",
            default=None,
            help="Enable debug mode with verbose output"
        );

        parser.add_argument(
            "--log-file",
            type=Path,
            default=None,
            help="Also write logs to this file (rotated at 5MB)"
        );

        parser.add_argument(
            "--version",
            action="version",
            version=f"%(prog)s {__version__}"
        );

        return parser;

    def _apply_config( self ):
        """Fill options not given on the command line from the configuration."""
        if self.args.delta is None:
            self.args.delta = self.config.delta;
        if self.args.strict is None:
            self.args.strict = self.config.strict;
        if self.args.debug is None:
            self.args.debug = self.config.debug;
        if self.args.log_file is None:
            self.args.log_file = self.config.log_file;

    def _validate_arguments( self ):
        """Validate parsed arguments and resolve the input and output formats."""
        errors = list( self.config.errors );

        if self.args.input != STDIO and not Path( self.args.input ).is_file():
            errors.append( f"Input file not found: {self.args.input}" );

        if self.args.input != STDIO and self.args.input == self.args.output:
            errors.append( "Input and output must be different files" );

        try:
            self.input_format, self.output_format = infer_formats(
                self.args.input_format,
                self.args.output_format,
                self.args.input,
                self.args.output
            );
        except UnknownFormat as e:
            errors.append( str( e ) );

        return errors;

    def parse_args( self, argv=None ):
        """Parse command line arguments and validate configuration."""
        self.args = self.parser.parse_args( argv );
        self.config = load_config();
        self._apply_config();

        # Setup logging based on debug flag
        self.logger = setup_logging( debug=self.args.debug, log_file=self.args.log_file );

        errors = self._validate_arguments();
        if errors:
            self.logger.error( "Configuration errors:" );
            for error in errors:
                self.logger.error( f"  - {error}" );
            sys.exit( 1 );

        self.logger.debug( f"srt2webvtt v{__version__} starting..." );
        self.logger.debug( f"Input: {self.args.input} ({self.input_format})" );
        self.logger.debug( f"Output: {self.args.output} ({self.output_format})" );
        self.logger.debug( f"Delta: {self.args.delta}" );

        return self.args;

    def open_input( self ):
        if self.args.input == STDIO:
            return sys.stdin.buffer;
        return open( self.args.input, "rb" );

    def open_output( self ):
        if self.args.output == STDIO:
            sys.stdout.flush();
            return sys.stdout.buffer;
        return open( self.args.output, "wb" );

    def run( self ) -> int:
        """
        Run the conversion described by the parsed arguments.

        Returns:
            Number of cues written
        """
        try:
            source = self.open_input();
        except OSError as e:
            raise SubtitleIOError( f"Cannot open input {self.args.input}: {e}" ) from e;

        try:
            try:
                sink = self.open_output();
            except OSError as e:
                raise SubtitleIOError( f"Cannot open output {self.args.output}: {e}" ) from e;

            try:
                return convert(
                    source,
                    self.input_format,
                    self.output_format,
                    self.args.delta,
                    sink,
                    strict=self.args.strict
                );
            finally:
                if sink is not sys.stdout.buffer:
                    sink.close();
        finally:
            if source is not sys.stdin.buffer:
                source.close();


def main( argv=None ):
    """Main entry point for the srt2webvtt CLI."""
    cli = ConverterCLI();
    args = cli.parse_args( argv );

    try:
        count = cli.run();
        cli.logger.info( f"Converted {count} cues ({cli.input_format} -> {cli.output_format})" );
    except KeyboardInterrupt:
        cli.logger.warning( "Interrupted by user" );
        sys.exit( 130 );
    except SubtitleError as e:
        cli.logger.error( f"Conversion failed: {e}" );
        sys.exit( 1 );
    except Exception as e:
        cli.logger.error( f"Unexpected error: {e}" );
        if args.debug:
            raise;
        sys.exit( 1 );


if __name__ == "__main__":
    main();
