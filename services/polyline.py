"""
Encoded polyline codec. Converts between coordinate sequences and the compact signed-delta,
base64-alphabet path format used by the Directions API.
"""

import math
from typing import Iterable, List

from services.models import Coordinate


class DecodeError(ValueError):
    pass


def _read_value(encoded: str, index: int) -> tuple:
    result = 0
    shift = 0
    while True:
        if index >= len(encoded):
            raise DecodeError(f"Truncated polyline at offset {index}")
        b = ord(encoded[index]) - 63
        if b < 0:
            raise DecodeError(f"Invalid polyline character {encoded[index]!r} at offset {index}")
        index += 1
        result |= (b & 0x1F) << shift
        shift += 5
        if b < 0x20:
            break
    delta = ~(result >> 1) if result & 1 else result >> 1
    return delta, index


def decode(encoded: str, precision: int = 5) -> List[Coordinate]:
    """Decode an encoded polyline into coordinates.

    Empty input decodes to an empty list. Raises DecodeError on a truncated
    byte group or a character outside the encoding alphabet.
    """
    factor = 10 ** precision
    coordinates: List[Coordinate] = []
    index, lat, lng = 0, 0, 0

    while index < len(encoded):
        d_lat, index = _read_value(encoded, index)
        d_lng, index = _read_value(encoded, index)
        lat += d_lat
        lng += d_lng
        coordinates.append(Coordinate(lat / factor, lng / factor))

    return coordinates


def _round_half_away(value: float) -> int:
    return int(math.floor(abs(value) + 0.5)) * (1 if value >= 0 else -1)


def _write_value(delta: int) -> str:
    value = ~(delta << 1) if delta < 0 else delta << 1
    chunks = []
    while value >= 0x20:
        chunks.append(chr((0x20 | (value & 0x1F)) + 63))
        value >>= 5
    chunks.append(chr(value + 63))
    return "".join(chunks)


def encode(coordinates: Iterable[Coordinate], precision: int = 5) -> str:
    factor = 10 ** precision
    parts = []
    prev_lat, prev_lng = 0, 0

    for c in coordinates:
        lat = _round_half_away(c.latitude * factor)
        lng = _round_half_away(c.longitude * factor)
        parts.append(_write_value(lat - prev_lat))
        parts.append(_write_value(lng - prev_lng))
        prev_lat, prev_lng = lat, lng

    return "".join(parts)
