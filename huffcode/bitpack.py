import numpy as np

from huffcode.charstream import write_bytes
from huffcode.errors import MalformedBitstringError, IOReadError

ZERO = ord("0")

def _bits_u8(bit_string: str) -> np.ndarray:
    b = np.frombuffer(bit_string.encode("latin-1", errors="replace"), dtype=np.uint8)
    bits = b - np.uint8(ZERO)  # wraps for anything below '0'
    if np.any(bits > 1):
        raise MalformedBitstringError("Invalid characters in bitstring")
    return bits

def pad_bit_string(bit_string: str) -> str:
    """
    Prefix (padding-1) zeros and a single 1 so the length is a multiple of 8.
    padding is in 1..8; the 1 marks the end of padding.
    """
    padding = 8 - (len(bit_string) % 8)
    return "0" * (padding - 1) + "1" + bit_string

def pack_bit_string(bit_string: str) -> bytes:
    """Pad and pack a string of '0'/'1' into bytes (MSB-first)."""
    bits = _bits_u8(pad_bit_string(bit_string))
    return np.packbits(bits).tobytes()

def unpack_bit_string(data: bytes) -> str:
    """
    Unpack bytes (MSB-first) and strip the padding marker.
    If none of the first 8 bits is set, exactly 8 bits are dropped.
    """
    if len(data) == 0:
        return ""
    bits = np.unpackbits(np.frombuffer(data, dtype=np.uint8))
    ones = np.flatnonzero(bits[:8])
    start = int(ones[0]) + 1 if ones.size else 8
    return (bits[start:] + np.uint8(ZERO)).tobytes().decode("ascii")

def write_bit_string(filename, bit_string: str):
    write_bytes(filename, pack_bit_string(bit_string))

def read_bit_string(filename) -> str:
    try:
        with open(filename, "rb") as f:
            data = f.read()
    except OSError as e:
        raise IOReadError(f"cannot read {filename}: {e}") from e
    return unpack_bit_string(data)
