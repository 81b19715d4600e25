"""
Base class for the lazy, block-resilient cue parsers.
"""
from abc import ABC, abstractmethod
from typing import Iterator, List, Optional

from .blocks import LineReader, TextSource, iter_blocks, open_source, starts_cue_block
from .cue import Cue, ParseResult
from .errors import ParseError
from .logging import get_logger


class CueParser( ABC ):
    """
    Lazy cue parser over a text source.

    Iterating yields cues in document order, one block at a time. Malformed
    blocks are logged and skipped unless strict is set, in which case the
    block error is raised and iteration stops.

    A str source can be iterated any number of times, each pass re-parsing
    from the start. A stream source supports a single forward-only pass.
    """

    format_name = "";

    def __init__( self, source: TextSource, strict: bool = False ):
        self.logger = get_logger();
        self.source = source;
        self.strict = strict;
        self.skipped = 0;   # Malformed blocks skipped during the last pass

    def starts_block( self, reader: LineReader, offset: int ) -> bool:
        return starts_cue_block( reader, offset );

    def read_header( self, reader: LineReader ) -> Optional[ParseResult]:
        """Consume any header before the first cue block. Returns a skipped result on header errors."""
        return None;

    @abstractmethod
    def parse_block( self, lines: List[str], index: int ) -> Optional[Cue]:
        """
        Parse one block of non-empty-bounded lines into a cue.

        Returns None for blocks that are legitimately not cues (comments, styles).

        Raises:
            ParseError: If the block is malformed
        """
        pass

    def results( self ) -> Iterator[ParseResult]:
        """Yield a ParseResult for every block: a cue, or the error that caused it to be skipped."""
        reader = LineReader( open_source( self.source ) );

        header = self.read_header( reader );
        if header is not None:
            yield header;

        index = 0;
        for line_number, lines in iter_blocks( reader, self.starts_block ):
            try:
                cue = self.parse_block( lines, index + 1 );
            except ParseError as e:
                if e.line_number is None:
                    e.line_number = line_number;
                yield ParseResult( line_number=line_number, error=e );
                continue;

            if cue is not None:
                index += 1;
                yield ParseResult( line_number=line_number, cue=cue );

    def __iter__( self ) -> Iterator[Cue]:
        self.skipped = 0;
        for result in self.results():
            if not result.skipped:
                yield result.cue;
                continue;

            if self.strict:
                raise result.error;

            self.skipped += 1;
            self.logger.warning( f"Skipping malformed {self.format_name} block: {result.error}" );
