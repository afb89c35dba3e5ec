from huffcode.charfreq import CharFreq, make_sorted_list
from huffcode.huffman import Node, make_tree, make_encodings
from huffcode.codec import HuffmanCoding, encode_text, decode_bits

__all__ = [
    "CharFreq", "make_sorted_list",
    "Node", "make_tree", "make_encodings",
    "HuffmanCoding", "encode_text", "decode_bits",
]
