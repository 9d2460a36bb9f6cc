class ManifestError(Exception):
    """Base class for errors raised while building a manifest."""


class TokenCountError(ManifestError, ValueError):
    """A filename splits into too few tokens for the requested sample ID length."""

    def __init__(self, filename, token_count, available):
        self.filename = filename
        self.token_count = token_count
        self.available = available
        super().__init__(
            f"Number of tokens does not exceed the requested slice count: "
            f"'{filename}' has {available} tokens, need more than {token_count}"
        )
