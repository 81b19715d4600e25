"""
Subtitle format enumeration and format inference from names and paths.
"""
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple, Union

from .errors import UnknownFormat


class Format( Enum ):
    """Supported subtitle formats."""
    
    SRT = "srt";
    WEBVTT = "webvtt";
    
    @property
    def separator( self ) -> str:
        """Separator between seconds and milliseconds in time codes."""
        return "," if self is Format.SRT else ".";
    
    @property
    def extension( self ) -> str:
        return ".srt" if self is Format.SRT else ".vtt";
    
    @property
    def opposite( self ) -> "Format":
        return Format.WEBVTT if self is Format.SRT else Format.SRT;
    
    @classmethod
    def from_name( cls, name: Union[str, "Format"] ) -> "Format":
        """
        Resolve a format name such as "srt", "webvtt" or "vtt".
        
        Raises:
            UnknownFormat: If the name is not recognized
        """
        if isinstance( name, Format ):
            return name;
        key = str( name ).strip().lower();
        if key in FORMAT_NAMES:
            return FORMAT_NAMES[key];
        raise UnknownFormat( f"Unknown subtitle format: {name!r} (expected one of: srt, webvtt)" );
    
    @classmethod
    def from_path( cls, path: Union[str, Path] ) -> "Format":
        """
        Infer the format from a file extension.
        
        Raises:
            UnknownFormat: If the extension is not .srt, .vtt or .webvtt
        """
        suffix = Path( path ).suffix.lower();
        if suffix in FORMAT_EXTENSIONS:
            return FORMAT_EXTENSIONS[suffix];
        raise UnknownFormat( f"Cannot infer subtitle format from extension of {str( path )!r}" );
    
    def __str__( self ):
        return self.value;


FORMAT_NAMES = {
    "srt": Format.SRT,
    "webvtt": Format.WEBVTT,
    "vtt": Format.WEBVTT,
};

FORMAT_EXTENSIONS = {
    ".srt": Format.SRT,
    ".vtt": Format.WEBVTT,
    ".webvtt": Format.WEBVTT,
};


def _format_from_path( path ) -> Optional[Format]:
    """Format for a path, or None for stdin/stdout ("-"), no path or unknown extensions."""
    if path is None or str( path ) == "-":
        return None;
    try:
        return Format.from_path( path );
    except UnknownFormat:
        return None;


def infer_formats( input_format=None, output_format=None, input_path=None, output_path=None ) -> Tuple[Format, Format]:
    """
    Resolve the input and output formats of a conversion.
    
    Explicit formats win over file extensions. A missing output format
    defaults to the opposite of the input format and vice versa.
    
    Args:
        input_format: Explicit input format (name or Format) or None
        output_format: Explicit output format (name or Format) or None
        input_path: Input path used for extension inference, "-" for stdin
        output_path: Output path used for extension inference, "-" for stdout
        
    Returns:
        Tuple of (input_format, output_format)
        
    Raises:
        UnknownFormat: If an explicit name is unknown or nothing can be inferred
    """
    source = Format.from_name( input_format ) if input_format is not None else _format_from_path( input_path );
    target = Format.from_name( output_format ) if output_format is not None else _format_from_path( output_path );
    
    if source is None and target is None:
        raise UnknownFormat( "Cannot infer the input format; pass --input-format srt or --input-format webvtt" );
    if source is None:
        source = target.opposite;
    if target is None:
        target = source.opposite;
    
    return source, target;
