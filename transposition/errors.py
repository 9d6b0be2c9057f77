class InvalidInput(ValueError):
    """Text or key was not given."""


class EmptyKey(ValueError):
    """Key has no characters, so there is no column count."""

    def __init__(self, msg: str = "Key must contain at least one character"):
        super().__init__(msg)


class LengthMismatchWarning(UserWarning):
    """Ciphertext length is not a multiple of the key length.

    Decoding still runs: the row count is rounded up and the missing cells
    are treated as filler.
    """

    def __init__(self, cipher_len: int, cols: int, rows: int):
        self.cipher_len = cipher_len
        self.cols = cols
        self.rows = rows
        super().__init__(
            f"cipher length ({cipher_len}) not multiple of cols ({cols}). Using rows={rows}"
        )
