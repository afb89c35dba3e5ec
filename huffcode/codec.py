from __future__ import annotations
import logging
from typing import Dict, Iterable, List, Optional

from huffcode.bitpack import write_bit_string, read_bit_string
from huffcode.charfreq import CharFreq, make_sorted_list
from huffcode.charstream import CharReader, write_text
from huffcode.errors import MissingCodeError, MalformedBitstringError, IOReadError, IOWriteError
from huffcode.huffman import Node, make_tree, make_encodings

log = logging.getLogger(__name__)

def encode_text(chars: Iterable[str], encodings: Dict[str, str]) -> str:
    """Concatenate the code of every character, in order."""
    parts = []
    for c in chars:
        code = encodings.get(c)
        if code is None:
            raise MissingCodeError(f"No code for character {c!r} (not seen during frequency analysis)")
        parts.append(code)
    return "".join(parts)

def decode_bits(bit_string: str, root: Node) -> str:
    """
    Walk the tree: '0' -> left, '1' -> right; emit and restart at each leaf.
    A walk still inside the tree when the bits run out is dropped.
    """
    out = []
    ptr = root
    for b in bit_string:
        if b == "0":
            ptr = ptr.left
        elif b == "1":
            ptr = ptr.right
        else:
            raise MalformedBitstringError(f"Invalid bit {b!r} in bitstring")
        if ptr.is_leaf:
            out.append(ptr.data.character)
            ptr = root
    if ptr is not root:
        log.warning("bitstring ended inside a code; trailing bits dropped")
    return "".join(out)


class HuffmanCoding:
    """
    One encode/decode session bound to a source text file.

    Usage:
        hc = HuffmanCoding("input.txt")
        hc.make_sorted_list(); hc.make_tree(); hc.make_encodings()
        hc.encode("input.huff")
        hc.decode("input.huff", "output.txt")
    """

    def __init__(self, file_name):
        self.file_name = file_name
        self.sorted_char_freq_list: Optional[List[CharFreq]] = None
        self.huffman_root: Optional[Node] = None
        self.encodings: Optional[Dict[str, str]] = None

    def make_sorted_list(self):
        with CharReader(self.file_name) as reader:
            self.sorted_char_freq_list = make_sorted_list(reader)

    def make_tree(self):
        if self.sorted_char_freq_list is None:
            raise RuntimeError("make_sorted_list() must run before make_tree()")
        self.huffman_root = make_tree(self.sorted_char_freq_list)

    def make_encodings(self):
        if self.huffman_root is None:
            raise RuntimeError("make_tree() must run before make_encodings()")
        self.encodings = make_encodings(self.huffman_root)

    def build(self):
        self.make_sorted_list()
        self.make_tree()
        self.make_encodings()
        return self

    def encode(self, encoded_file) -> bool:
        """Encode file_name into encoded_file. Returns False if it cannot be written."""
        if self.encodings is None:
            raise RuntimeError("make_encodings() must run before encode()")
        with CharReader(self.file_name) as reader:
            bits = encode_text(reader, self.encodings)
        try:
            write_bit_string(encoded_file, bits)
        except IOWriteError as e:
            log.error("Error when writing to file: %s", e)
            return False
        log.debug("encoded %s -> %s (%d payload bits)", self.file_name, encoded_file, len(bits))
        return True

    def decode(self, encoded_file, decoded_file) -> str:
        """Decode encoded_file into decoded_file; an unreadable source gives ''."""
        if self.huffman_root is None:
            raise RuntimeError("make_tree() must run before decode()")
        try:
            bits = read_bit_string(encoded_file)
        except IOReadError as e:
            log.error("Error while reading file: %s", e)
            bits = ""
        text = decode_bits(bits, self.huffman_root)
        try:
            write_text(decoded_file, text)
        except IOWriteError as e:
            log.error("Error when writing to file: %s", e)
        return text
