# word_index/tree.py
"""
Binary search tree of words keyed by lowercased text.
File: word_index/tree.py

Each node remembers the line numbers its word was seen on. The tree is
never rebalanced, so its shape follows insertion order and sorted input
degrades it to a linked list. Every traversal below is iterative so that
such degenerate trees stay usable.
"""
from dataclasses import dataclass, field
from typing import List, Optional, Iterator
from collections import deque

from .core.interfaces import WordEntry

@dataclass
class WordNode:
    """Node in the word tree."""
    key: str
    positions: List[int] = field(default_factory=list)
    left: Optional['WordNode'] = None
    right: Optional['WordNode'] = None

    def add_position(self, line_number: int) -> None:
        """Record a line number unless it is already present."""
        if line_number not in self.positions:
            self.positions.append(line_number)

    def __str__(self) -> str:
        return f"{self.key} {self.positions}"

class WordIndex:
    """
    Unbalanced binary search tree mapping words to line positions.
    """
    def __init__(self):
        self.root: Optional[WordNode] = None

    @property
    def is_empty(self) -> bool:
        return self.root is None

    def insert(self, word: str, line_number: int) -> None:
        """
        Insert a word seen on the given line.

        Args:
            word: Cleaned word; lowercased again here
            line_number: 1-based line number
        """
        key = word.lower()
        if not key:
            raise ValueError("Cannot index an empty word")

        if self.root is None:
            self.root = WordNode(key, [line_number])
            return

        node = self.root
        while True:
            if key < node.key:
                if node.left is None:
                    node.left = WordNode(key, [line_number])
                    return
                node = node.left
            elif key > node.key:
                if node.right is None:
                    node.right = WordNode(key, [line_number])
                    return
                node = node.right
            else:
                node.add_position(line_number)
                return

    def search(self, word: str) -> Optional[WordNode]:
        """Find the node for a word, or None when it was never inserted."""
        key = word.lower()
        node = self.root

        while node is not None:
            if key < node.key:
                node = node.left
            elif key > node.key:
                node = node.right
            else:
                return node

        return None

    def contains(self, word: str) -> bool:
        return self.search(word) is not None

    def unique_word_count(self) -> int:
        """Count nodes with a full traversal."""
        count = 0
        stack = [self.root] if self.root else []

        while stack:
            node = stack.pop()
            count += 1
            if node.left:
                stack.append(node.left)
            if node.right:
                stack.append(node.right)

        return count

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path; 0 when empty."""
        if self.root is None:
            return 0

        height = 0
        level = deque([self.root])

        # Breadth-first, one level per iteration
        while level:
            height += 1
            for _ in range(len(level)):
                node = level.popleft()
                if node.left:
                    level.append(node.left)
                if node.right:
                    level.append(node.right)

        return height

    def in_order(self) -> Iterator[WordEntry]:
        """
        Yield entries in ascending word order.

        Each call starts a fresh traversal. Positions are copied so the
        caller cannot alter the tree through them.
        """
        stack: List[WordNode] = []
        node = self.root

        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield WordEntry(node.key, list(node.positions))
            node = node.right

    def words(self) -> List[str]:
        """All indexed words in ascending order."""
        return [entry.word for entry in self.in_order()]

    def __len__(self) -> int:
        return self.unique_word_count()

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __iter__(self) -> Iterator[WordEntry]:
        return self.in_order()
