from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

import numpy as np

from huffcode.errors import EmptyInputError, CharacterRangeError

log = logging.getLogger(__name__)

TABLE_SIZE = 128  # ASCII

@dataclass(frozen=True)
class CharFreq:
    character: Optional[str]
    probability: float

    def _key(self):
        # internal entries (no character) sort after leaves of equal probability
        if self.character is None:
            return (self.probability, 1, 0)
        return (self.probability, 0, ord(self.character))

    def __lt__(self, other: "CharFreq") -> bool:
        return self._key() < other._key()

def _codes(chars: Iterable[str]) -> np.ndarray:
    codes = np.fromiter((ord(c) for c in chars), dtype=np.int64)
    if codes.size == 0:
        raise EmptyInputError("Cannot build a frequency table from empty input")
    bad = (codes < 1) | (codes >= TABLE_SIZE)
    if np.any(bad):
        code = int(codes[np.argmax(bad)])
        raise CharacterRangeError(f"Character code {code} outside 1..{TABLE_SIZE - 1}")
    return codes

def make_sorted_list(chars: Iterable[str]) -> List[CharFreq]:
    """
    Input: stream of single characters (codes 1..127)
    Output: CharFreq entries with probability > 0, sorted ascending.
    A lone distinct character gets a zero-probability sibling so the
    tree always has two leaves.
    """
    codes = _codes(chars)
    # slot i holds character i + 1
    num_occ = np.bincount(codes - 1, minlength=TABLE_SIZE)
    count = int(codes.size)

    out = []
    for i in np.flatnonzero(num_occ):
        out.append(CharFreq(chr(int(i) + 1), float(num_occ[i]) / count))

    if len(out) == 1:
        i = ord(out[0].character)
        extra = chr(0) if i == TABLE_SIZE - 1 else chr(i + 1)
        out.append(CharFreq(extra, 0.0))
        log.debug("single distinct character %r, added placeholder %r", out[0].character, extra)

    out.sort()
    log.debug("frequency table: %d entries over %d characters", len(out), count)
    return out
