"""graph6 codec.

Implements the graph6 format as described in nauty's ``formats.txt``:

* ``N(n)``: one byte ``n + 63`` for ``n <= 62``, ``~`` plus three bytes for
  ``n <= 258047``, ``~~`` plus six bytes for ``n <= 68719476735``.
* ``R(x)``: the upper triangle of the adjacency matrix, column by column
  (``x(0,1), x(0,2), x(1,2), x(0,3), ...``), packed six bits per byte with
  the most significant bit first, each byte offset by 63 and the final byte
  padded with zero bits.

Only canonical encodings are accepted, so ``encode(decode(s)) == s`` holds for
every string ``decode`` accepts.
"""

import logging

from ..errors import DecodeError
from ..models import Graph

logger = logging.getLogger(__name__)

HEADER = ">>graph6<<"
BIAS = 63
MAX_BYTE = 126
EXTENDED_MARKER = MAX_BYTE  # "~"

SMALL_LIMIT = 62
MEDIUM_LIMIT = 258047
LARGE_LIMIT = 68719476735


def decode(text: str | bytes) -> Graph:
    """Decode a graph6 string into a Graph.

    Args:
        text: graph6 data, optionally prefixed with ``>>graph6<<`` and
              followed by a single line terminator

    Returns:
        The decoded graph

    Raises:
        DecodeError: If the input is not a canonical graph6 encoding
    """
    data = _to_byte_values(text)
    data = _strip_line_terminator(data)

    offset = 0
    if _starts_with_header(data):
        offset = len(HEADER)

    if offset >= len(data):
        raise DecodeError("Empty graph6 string", offset)

    order, offset = decode_vertex_count(data, offset)

    bit_count = order * (order - 1) // 2
    expected = (bit_count + 5) // 6
    body = data[offset:]

    for position, value in enumerate(body):
        _check_byte(value, offset + position)

    if len(body) < expected:
        raise DecodeError(
            f"Truncated graph6 body: {order} vertices need {expected} bytes, got {len(body)}",
            offset + len(body),
        )
    if len(body) > expected:
        raise DecodeError(
            f"Over-length graph6 body: {order} vertices need {expected} bytes, got {len(body)}",
            offset + expected,
        )

    edges = []
    bit = 0
    for v in range(1, order):
        for u in range(v):
            value = body[bit // 6] - BIAS
            if value & (1 << (5 - bit % 6)):
                edges.append((u, v))
            bit += 1

    if bit_count % 6:
        padding_mask = (1 << (6 - bit_count % 6)) - 1
        if (body[-1] - BIAS) & padding_mask:
            raise DecodeError("Non-zero padding bits in final graph6 byte", offset + len(body) - 1)

    logger.debug(f"Decoded graph6 graph with {order} vertices and {len(edges)} edges")
    return Graph(order, edges)


def encode(graph: Graph, header: bool = False) -> str:
    """Encode a graph as its canonical graph6 string.

    Args:
        graph: Graph to encode
        header: Prefix the result with ``>>graph6<<``

    Returns:
        graph6 text without a trailing newline
    """
    order = graph.vertex_count()
    bit_count = order * (order - 1) // 2
    values = [0] * ((bit_count + 5) // 6)

    for u, v in graph.edges():
        bit = v * (v - 1) // 2 + u
        values[bit // 6] |= 1 << (5 - bit % 6)

    body = "".join(chr(value + BIAS) for value in values)
    prefix = HEADER if header else ""
    return prefix + encode_vertex_count(order) + body


def encode_vertex_count(order: int) -> str:
    """Encode ``N(n)``, the vertex count prefix."""
    if order < 0 or order > LARGE_LIMIT:
        raise ValueError(f"graph6 cannot encode {order} vertices")

    if order <= SMALL_LIMIT:
        return chr(order + BIAS)
    if order <= MEDIUM_LIMIT:
        return chr(EXTENDED_MARKER) + _pack_bits(order, 3)
    return chr(EXTENDED_MARKER) * 2 + _pack_bits(order, 6)


def decode_vertex_count(data: bytes | list[int], offset: int = 0) -> tuple[int, int]:
    """Decode ``N(n)`` starting at ``offset``.

    Returns:
        Tuple of (vertex count, offset of the first body byte)

    Raises:
        DecodeError: If the header is truncated, out of range or not canonical
    """
    if offset >= len(data):
        raise DecodeError("Missing graph6 vertex count", offset)

    first = data[offset]
    _check_byte(first, offset)

    if first != EXTENDED_MARKER:
        return first - BIAS, offset + 1

    if offset + 1 < len(data) and data[offset + 1] == EXTENDED_MARKER:
        start, width, minimum = offset + 2, 6, MEDIUM_LIMIT + 1
    else:
        start, width, minimum = offset + 1, 3, SMALL_LIMIT + 1

    if start + width > len(data):
        raise DecodeError("Truncated extended graph6 vertex count", len(data))

    order = 0
    for position in range(start, start + width):
        value = data[position]
        _check_byte(value, position)
        order = (order << 6) | (value - BIAS)

    if order < minimum:
        raise DecodeError(
            f"Non-canonical extended vertex count {order}, shorter form required",
            offset,
        )
    return order, start + width


def _pack_bits(value: int, width: int) -> str:
    chars = []
    for shift in range(6 * (width - 1), -1, -6):
        chars.append(chr(((value >> shift) & 0x3F) + BIAS))
    return "".join(chars)


def _check_byte(value: int, offset: int) -> None:
    if not BIAS <= value <= MAX_BYTE:
        raise DecodeError(f"Byte {value!r} outside graph6 range 63..126", offset)


def _to_byte_values(text: str | bytes) -> bytes | list[int]:
    if isinstance(text, (bytes, bytearray)):
        return bytes(text)
    return [ord(char) for char in text]


def _strip_line_terminator(data):
    if data[-2:] == _values("\r\n", data):
        return data[:-2]
    if data[-1:] == _values("\n", data):
        return data[:-1]
    return data


def _starts_with_header(data) -> bool:
    return data[: len(HEADER)] == _values(HEADER, data)


def _values(text: str, like):
    """Render ``text`` in the same container type as ``like``."""
    if isinstance(like, bytes):
        return text.encode("ascii")
    return [ord(char) for char in text]
