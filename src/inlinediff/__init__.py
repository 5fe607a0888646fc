"""inlinediff: render already-computed diff hunks as one interleaved stream."""

__version__ = "0.1.0"
