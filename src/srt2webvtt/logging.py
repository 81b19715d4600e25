"""
Logging for srt2webvtt with Rich console output on stderr and optional file rotation.
"""
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional
from rich.console import Console
from rich.logging import RichHandler


class ConverterLogger:
    """
    Logger for srt2webvtt.

    Features:
    - Rich console output on stderr (stdout carries converted subtitles)
    - Optional file logging with 5MB rotation
    - INFO default, DEBUG with --debug flag
    """

    def __init__( self, name: str = "srt2webvtt", debug: bool = False, log_file: Optional[Path] = None ):
        self.name = name;
        self.debug_mode = debug;
        self.log_file = Path( log_file ) if log_file else None;
        self.console = Console( stderr=True );

        self.logger = self._setup_logger();

    def _setup_logger( self ):
        """Setup logger with Rich console and optional file handlers."""
        logger = logging.getLogger( self.name );
        logger.setLevel( logging.DEBUG if self.debug_mode else logging.INFO );
        logger.propagate = False;

        # Clear existing handlers
        for handler in list( logger.handlers ):
            logger.removeHandler( handler );
            handler.close();

        # Rich console handler
        console_handler = RichHandler(
            console=self.console,
            rich_tracebacks=True,
            show_time=self.debug_mode,
            show_path=self.debug_mode
        );
        console_handler.setLevel( logging.DEBUG if self.debug_mode else logging.INFO );
        console_handler.setFormatter( logging.Formatter( "%(message)s" ) );
        logger.addHandler( console_handler );

        # File handler with rotation
        if self.log_file:
            self.log_file.parent.mkdir( parents=True, exist_ok=True );
            file_handler = RotatingFileHandler(
                self.log_file,
                maxBytes=5 * 1024 * 1024,  # 5MB
                backupCount=5,
                encoding="utf-8"
            );
            file_handler.setLevel( logging.DEBUG );
            file_handler.setFormatter( logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            ) );
            logger.addHandler( file_handler );

        return logger;

    def debug( self, message, **kwargs ):
        self.logger.debug( message, **kwargs );

    def info( self, message, **kwargs ):
        self.logger.info( message, **kwargs );

    def warning( self, message, **kwargs ):
        self.logger.warning( message, **kwargs );

    def error( self, message, **kwargs ):
        self.logger.error( message, **kwargs );


# Global logger instance
_logger = None;


def get_logger( debug: bool = False ) -> ConverterLogger:
    """Get the global srt2webvtt logger instance."""
    global _logger;
    if _logger is None:
        _logger = ConverterLogger( debug=debug );
    return _logger;


def setup_logging( debug: bool = False, log_file: Optional[Path] = None ) -> ConverterLogger:
    """
    (Re)configure the global logger for the application.

    Existing holders of the logger keep working: the wrapped stdlib logger
    is shared by name and its handlers are replaced in place.
    """
    global _logger;
    _logger = ConverterLogger( debug=debug, log_file=log_file );
    return _logger;
