"""Exception classes for palabras.

Provides standardized exceptions for error handling throughout palabras.
Tokenization itself never raises on odd input; these cover misconfiguration
and misbehaving collaborators.
"""

from __future__ import annotations


class PalabrasError(Exception):
    """Base exception for all palabras errors.

    Subclass this for specific error categories.
    """

    pass


class ConfigurationError(PalabrasError):
    """Error in how a tokenizer was set up.

    Raised at construction time for an input the tokenizer can't
    understand, a document without a usable ``tokens()`` capability,
    or an unknown splitter name.
    """

    def __init__(self, message: str, kind: str | None = None) -> None:
        """Initialize configuration error.

        Args:
            message: Error description
            kind: Name of the offending input type (optional)
        """
        self.message = message
        self.kind = kind

        detail = f" (got {kind})" if kind else ""
        super().__init__(f"{message}{detail}")


class ReaderStallError(PalabrasError):
    """A reader kept returning empty batches without ending the stream.

    Readers must either make progress or return None. This is raised
    instead of spinning forever.
    """

    def __init__(self, attempts: int) -> None:
        """Initialize reader stall error.

        Args:
            attempts: Number of consecutive empty batches received
        """
        self.attempts = attempts
        super().__init__(
            f"Reader returned {attempts} consecutive empty batches without "
            "signalling end of stream (return None to end it)"
        )


class RecognizerError(PalabrasError):
    """Error in a recognizer plugin.

    Raised when a recognizer produces a token that does not read back as
    the fragment it was given.
    """

    def __init__(self, recognizer_name: str, message: str) -> None:
        """Initialize recognizer error.

        Args:
            recognizer_name: Name of the failing recognizer
            message: Description of the error
        """
        self.recognizer_name = recognizer_name
        super().__init__(f"Recognizer '{recognizer_name}': {message}")
