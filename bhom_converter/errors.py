# bhom_converter/errors.py
"""
Per-file conversion errors.

BatchProcessor catches every `ConversionError` for the file being processed,
logs it and moves on to the next file.
"""


class ConversionError(Exception):
    """Base class for file-scoped conversion failures."""


class DocumentParseError(ConversionError):
    """The file is not valid JSON."""


class SeriesShapeError(ConversionError):
    """Valid JSON that does not yield at least one point."""


class SerializationError(ConversionError):
    """The output serializer is unavailable or failed."""
