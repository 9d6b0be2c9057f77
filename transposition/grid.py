"""Grid codec: write text into a rows x cols grid and read it back in key order."""
from dataclasses import dataclass
from typing import Optional

from .errors import InvalidInput, LengthMismatchWarning
from .keyrank import RankedKey, rank, column_order
from .normalize import FILLER, normalize


@dataclass
class Grid:
    rows: int
    cols: int
    cells: list[str]  # row-major, index r*cols + c

    @classmethod
    def blank(cls, rows: int, cols: int) -> "Grid":
        return cls(rows=rows, cols=cols, cells=[FILLER] * (rows * cols))

    def get(self, r: int, c: int) -> str:
        return self.cells[r * self.cols + c]

    def set(self, r: int, c: int, ch: str) -> None:
        self.cells[r * self.cols + c] = ch

    def row(self, r: int) -> str:
        start = r * self.cols
        return "".join(self.cells[start:start + self.cols])

    def column(self, c: int) -> str:
        return "".join(self.cells[c::self.cols])

    def row_strings(self) -> list[str]:
        return [self.row(r) for r in range(self.rows)]


@dataclass(frozen=True)
class EncodeResult:
    ciphertext: str
    grid: Grid
    ranked_key: RankedKey
    text: str  # normalized plaintext
    key: str   # normalized key


@dataclass(frozen=True)
class DecodeResult:
    plaintext: str
    grid: Grid
    ranked_key: RankedKey
    key: str
    warning: Optional[LengthMismatchWarning] = None


def _rows_for(n: int, cols: int) -> int:
    return (n + cols - 1) // cols


def _check(payload, key, what: str) -> None:
    if payload is None or key is None:
        raise InvalidInput(f"Missing {what} or key")
    if not isinstance(payload, str):
        raise InvalidInput(f"{what} must be str, got {type(payload).__name__}")


def encode(plaintext: str, key: str) -> EncodeResult:
    """Fill the grid row by row, then read whole columns in ranked key order.

    The ciphertext is always rows*cols long; the last row is padded with
    the filler.
    """
    _check(plaintext, key, "text")
    text = normalize(plaintext)
    k = normalize(key)
    ranked = rank(k)  # EmptyKey before any grid is built
    cols = len(k)

    grid = Grid.blank(_rows_for(len(text), cols), cols)
    for i, ch in enumerate(text):
        grid.set(i // cols, i % cols, ch)

    ciphertext = "".join(grid.column(c) for c in column_order(ranked))
    return EncodeResult(ciphertext=ciphertext, grid=grid, ranked_key=ranked,
                        text=text, key=k)


def decode(ciphertext: str, key: str) -> DecodeResult:
    """Refill the columns in ranked key order, then read the grid row by row.

    Only the key is normalized. Every filler cell comes back as a space, so
    padding shows up as trailing spaces and a literal "_" in the original
    text cannot be told apart from a space.
    """
    _check(ciphertext, key, "cipher")
    k = normalize(key)
    ranked = rank(k)
    cols = len(k)
    m = len(ciphertext)
    rows = _rows_for(m, cols)

    warning = None
    if m % cols:
        warning = LengthMismatchWarning(m, cols, rows)

    grid = Grid.blank(rows, cols)
    pos = 0
    for c in column_order(ranked):
        # a short ciphertext leaves the tail of the later columns as filler
        for r, ch in enumerate(ciphertext[pos:pos + rows]):
            grid.set(r, c, ch)
        pos += rows

    plaintext = "".join(" " if ch == FILLER else ch for ch in grid.cells)
    return DecodeResult(plaintext=plaintext, grid=grid, ranked_key=ranked,
                        key=k, warning=warning)
