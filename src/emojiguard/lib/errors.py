"""Exceptions raised by the emojiguard loaders.

The sanitization pipeline itself never raises for string input; only the
file-backed loaders do.  The CLI turns these into ``SystemExit`` messages.
"""


class EmojiguardError(RuntimeError):
    """Base class for emojiguard errors."""


class GlyphConfigError(EmojiguardError):
    """The glyph set source file is missing or not a JSON array."""


class MessageStoreError(EmojiguardError):
    """The message store file is missing or not a JSON array."""
