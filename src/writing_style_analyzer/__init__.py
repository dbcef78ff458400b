"""Writing Style Analyzer - linguistic metrics and authenticity scoring for writing samples."""

__version__ = "0.1.0"
