class InsufficientTextError(ValueError):
    """Extracted text is too short to be a resume; raised before parsing starts."""

    def __init__(self, length: int, minimum: int):
        self.length = length
        self.minimum = minimum
        super().__init__(
            f"Could not extract sufficient text ({length} characters, need at least {minimum}). "
            "Please ensure the file contains readable text."
        )


class UnreadableDocumentError(ValueError):
    """The uploaded bytes could not be opened as the declared document type."""
