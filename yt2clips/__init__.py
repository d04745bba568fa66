"""Extract content clips and topic sections from timestamped transcripts."""

__version__ = "0.1.0"
