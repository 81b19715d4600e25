"""
srt2webvtt - Subtitle format conversion utility.

Converts subtitle files between SRT and WebVTT and shifts every cue
by a fixed signed delta in milliseconds.
"""

__version__ = "0.1.0";
__author__ = "srt2webvtt Project";
__license__ = "MIT";

from .errors import (
    SubtitleError,
    ParseError,
    MalformedTimeCode,
    MalformedCue,
    UnknownFormat,
    SubtitleIOError,
)
from .timecode import TimeCode, Delta, apply_delta
from .cue import Cue, ParseResult
from .formats import Format, infer_formats
from .srt import SrtParser, parse_srt, write_srt
from .webvtt import WebVttParser, parse_webvtt, write_webvtt
from .convert import convert, convert_bytes, convert_text, convert_file, shift_cues

__all__ = [
    "SubtitleError",
    "ParseError",
    "MalformedTimeCode",
    "MalformedCue",
    "UnknownFormat",
    "SubtitleIOError",
    "TimeCode",
    "Delta",
    "apply_delta",
    "Cue",
    "ParseResult",
    "Format",
    "infer_formats",
    "SrtParser",
    "parse_srt",
    "write_srt",
    "WebVttParser",
    "parse_webvtt",
    "write_webvtt",
    "convert",
    "convert_bytes",
    "convert_text",
    "convert_file",
    "shift_cues",
];
