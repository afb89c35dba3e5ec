from typing import Dict, List

import numpy as np

from huffcode.charfreq import CharFreq

def entropy(sorted_list: List[CharFreq]) -> float:
    p = np.array([e.probability for e in sorted_list], dtype=np.float64)
    p = p[p > 0]
    return float(-np.sum(p * np.log2(p)))

def average_code_length(sorted_list: List[CharFreq], encodings: Dict[str, str]) -> float:
    p = np.array([e.probability for e in sorted_list], dtype=np.float64)
    L = np.array([len(encodings[e.character]) for e in sorted_list], dtype=np.float64)
    return float(np.sum(p * L))

def compression_ratio(original_size: int, encoded_size: int) -> float:
    if encoded_size == 0:
        return float("inf")
    return float(original_size) / float(encoded_size)
