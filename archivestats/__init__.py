"""Tag, category and publish-date statistics for YYYY/MM/DD content archives."""

__version__ = "1.0.0"
