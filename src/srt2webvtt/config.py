"""
Configuration loaded from the environment and an optional .env file.
"""
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional
from dotenv import load_dotenv

from .timecode import Delta


ENV_PREFIX = "SRT2WEBVTT_";
TRUE_VALUES = ( "1", "true", "yes", "on" );
FALSE_VALUES = ( "0", "false", "no", "off", "" );


@dataclass
class ConverterConfig:
    """Defaults for a conversion run; command line options override them."""

    debug: bool = False;
    strict: bool = False;
    delta: Delta = Delta.NONE;
    log_file: Optional[Path] = None;
    errors: List[str] = field( default_factory=list );   # Invalid environment values, reported by the CLI


def _read_flag( name: str, errors: List[str] ) -> bool:
    raw = os.getenv( ENV_PREFIX + name, "" ).strip().lower();
    if raw in TRUE_VALUES:
        return True;
    if raw not in FALSE_VALUES:
        errors.append( f"{ENV_PREFIX}{name} must be a boolean (1/0, true/false, yes/no, on/off), got {raw!r}" );
    return False;


def load_config( env_file: Optional[Path] = Path( ".env" ) ) -> ConverterConfig:
    """
    Load configuration from environment variables.

    Variables already present in the environment take precedence over
    values from the .env file.

    Args:
        env_file: Path to a .env file, loaded only if it exists

    Returns:
        ConverterConfig with any invalid values listed in errors
    """
    if env_file is not None and Path( env_file ).exists():
        load_dotenv( env_file, override=False );

    errors = [];
    config = ConverterConfig(
        debug=_read_flag( "DEBUG", errors ),
        strict=_read_flag( "STRICT", errors )
    );

    raw_delta = os.getenv( ENV_PREFIX + "DELTA" );
    if raw_delta:
        try:
            config.delta = Delta.parse( raw_delta );
        except ValueError as e:
            errors.append( f"{ENV_PREFIX}DELTA: {e}" );

    log_file = os.getenv( ENV_PREFIX + "LOG_FILE" );
    if log_file:
        config.log_file = Path( log_file );

    config.errors = errors;
    return config;
