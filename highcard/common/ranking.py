# highcard/common/ranking.py

from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass(frozen=True)
class PlayerScore:
    name: str
    score: int


@dataclass
class _Node:
    entry: PlayerScore
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


class RankingTree:
    """
    Unbalanced binary search tree keyed by score.
    Lower scores go left; equal or higher go right. No rebalancing, no merging
    of equal scores, so the shape depends on insertion order.
    """

    def __init__(self) -> None:
        self._root: Optional[_Node] = None
        self._size = 0

    def insert(self, name: str, score: int) -> None:
        node = _Node(PlayerScore(name, score))
        self._size += 1
        if self._root is None:
            self._root = node
            return

        cur = self._root
        while True:
            if score < cur.entry.score:
                if cur.left is None:
                    cur.left = node
                    return
                cur = cur.left
            else:
                if cur.right is None:
                    cur.right = node
                    return
                cur = cur.right

    def in_order(self) -> Iterator[PlayerScore]:
        """Lazy ascending-score walk. Each call starts a fresh traversal."""
        stack = []
        cur = self._root
        while stack or cur is not None:
            while cur is not None:
                stack.append(cur)
                cur = cur.left
            cur = stack.pop()
            yield cur.entry
            cur = cur.right

    def __iter__(self) -> Iterator[PlayerScore]:
        return self.in_order()

    def __len__(self) -> int:
        return self._size
