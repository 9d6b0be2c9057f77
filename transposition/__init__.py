"""Columnar transposition cipher: key ranking, grid encode/decode."""
from .errors import InvalidInput, EmptyKey, LengthMismatchWarning
from .normalize import normalize, FILLER
from .keyrank import rank, column_order, RankedKey
from .grid import Grid, EncodeResult, DecodeResult, encode, decode
