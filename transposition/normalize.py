from .errors import InvalidInput

FILLER = "_"  # stands in for space, and pads unused grid cells

# Only ASCII A-Z is folded; str.lower() would also touch non-ASCII letters.
_TABLE = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ ",
    "abcdefghijklmnopqrstuvwxyz" + FILLER,
)


def normalize(s: str) -> str:
    """Lowercase A-Z and swap spaces for the filler. Idempotent."""
    if s is None:
        raise InvalidInput("Missing text or key")
    if not isinstance(s, str):
        raise InvalidInput(f"Expected str, got {type(s).__name__}")
    return s.translate(_TABLE)
