from __future__ import annotations
import logging
from collections import deque
from dataclasses import dataclass
from typing import Dict, List, Optional

from huffcode.charfreq import CharFreq

log = logging.getLogger(__name__)

@dataclass
class Node:
    data: CharFreq
    left: Optional["Node"] = None
    right: Optional["Node"] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    @property
    def probability(self) -> float:
        return self.data.probability

def _merge(left: Node, right: Node) -> Node:
    return Node(CharFreq(None, left.probability + right.probability), left, right)

def make_tree(sorted_list: List[CharFreq]) -> Node:
    """
    Two-queue Huffman merge.
    source: leaf entries in sorted order; target: merged nodes in creation order.
    On equal probability the source entry wins.
    """
    if len(sorted_list) < 2:
        raise ValueError(f"Need at least 2 entries to build a tree, got {len(sorted_list)}")

    source = deque(sorted_list)
    target = deque()

    root = _merge(Node(source.popleft()), Node(source.popleft()))
    target.append(root)
    merges = 1

    def source_first() -> bool:
        return bool(source) and source[0].probability <= target[0].probability

    while source or len(target) > 1:
        if source_first():
            left = Node(source.popleft())
        else:
            left = target.popleft()

        if not target:
            right = Node(source.popleft())
        elif source_first():
            right = Node(source.popleft())
        else:
            right = target.popleft()

        root = _merge(left, right)
        target.append(root)
        merges += 1

    log.debug("tree built with %d merges", merges)
    return root

def make_encodings(root: Node) -> Dict[str, str]:
    """Map each leaf character to its path from root (left=0, right=1)."""
    codes: Dict[str, str] = {}
    stack = [(root, "")]
    while stack:
        node, prefix = stack.pop()
        if node.is_leaf:
            codes[node.data.character] = prefix
            continue
        # pushed left first so the right subtree is visited first
        stack.append((node.left, prefix + "0"))
        stack.append((node.right, prefix + "1"))
    return codes

def leaves(root: Node) -> List[Node]:
    out = []
    stack = [root]
    while stack:
        node = stack.pop()
        if node.is_leaf:
            out.append(node)
        else:
            stack.append(node.left)
            stack.append(node.right)
    return out
