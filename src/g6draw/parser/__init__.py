"""graph6 parsing and encoding."""

from g6draw.parser.graph6 import decode, encode

__all__ = [
    "decode",
    "encode",
]
