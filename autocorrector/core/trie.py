# trie.py
# Character trie over the corpus vocabulary.
# Supports prefix completion and a Levenshtein walk that carries one
# DP row per node and prunes whole subtrees once the row minimum exceeds k.

from __future__ import annotations
from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Tuple

Word = str
Distance = int
Match = Tuple[Word, Distance]


class TrieNode:
    """
    A single node in the Trie.
    children: char -> TrieNode
    is_word: marker to know if this path forms a vocabulary word
    word: the stored token on terminal nodes (None elsewhere)
    """

    __slots__ = ("children", "is_word", "word")

    def __init__(self) -> None:
        self.children: Dict[str, TrieNode] = defaultdict(TrieNode)
        self.is_word = False
        self.word: Optional[str] = None


class Trie:
    """
    Trie over vocabulary tokens, used by the generators for:
     - prefix completion (words_with_prefix)
     - fuzzy lookup (words_within_edit / search_within_edit)

    Traversals visit children in ascending character order so every result
    list is deterministic. After freeze() the trie rejects new words.
    """

    def __init__(self) -> None:
        self._root = TrieNode()
        self._size = 0
        self._frozen = False

    @classmethod
    def from_words(cls, words: Iterable[str]) -> "Trie":
        t = cls()
        for w in words:
            t.insert(w)
        t.freeze()
        return t

    # insertion -----------------------------------------------------
    def insert(self, word: str) -> None:
        """Insert a token. Inserting an existing token is a no-op."""
        if not word:
            return
        if self._frozen:
            raise RuntimeError("trie is frozen; build a new one to add words")

        node = self._root
        for ch in word:
            node = node.children[ch]
        if not node.is_word:
            node.is_word = True
            node.word = word
            self._size += 1

    def freeze(self) -> None:
        """Swap every defaultdict for a plain dict so reads can never grow the tree."""
        stack = [self._root]
        while stack:
            node = stack.pop()
            node.children = dict(node.children)
            stack.extend(node.children.values())
        self._frozen = True

    # search/traversal ---------------------------------------------------------
    def _find(self, prefix: str) -> Optional[TrieNode]:
        node = self._root
        for ch in prefix:
            nxt = node.children.get(ch)
            if nxt is None:
                return None
            node = nxt
        return node

    def has_prefix(self, prefix: str) -> bool:
        return self._find(prefix) is not None

    def words_with_prefix(self, prefix: str) -> List[Word]:
        """
        All stored words starting with `prefix` (including `prefix` itself if stored),
        in depth-first order with children visited by ascending character.
        """
        if not prefix:
            return []
        node = self._find(prefix)
        if node is None:
            return []
        out: List[Word] = []
        self._collect(node, out)
        return out

    def _collect(self, node: TrieNode, results: List[Word]) -> None:
        """DFS collecting words under a node (explicit stack, no recursion limit)."""
        stack = [node]
        while stack:
            n = stack.pop()
            if n.is_word:
                results.append(n.word)
            # push in reverse so the smallest character is visited first
            for ch in sorted(n.children, reverse=True):
                stack.append(n.children[ch])

    def search_within_edit(self, word: str, max_dist: int) -> List[Match]:
        """
        Return (token, distance) for every stored token whose Levenshtein distance
        to `word` is <= max_dist. Insert/delete/substitute cost 1 each.
        """
        if max_dist < 0:
            return []
        first_row = list(range(len(word) + 1))
        results: List[Match] = []
        self._walk_edit(self._root, word, first_row, max_dist, results)
        return results

    def words_within_edit(self, word: str, max_dist: int) -> List[Word]:
        return [w for w, _d in self.search_within_edit(word, max_dist)]

    def _walk_edit(
        self,
        root: TrieNode,
        word: str,
        first_row: List[int],
        max_dist: int,
        results: List[Match],
    ) -> None:
        """DFS carrying one DP row per node (explicit stack, no recursion limit)."""
        stack = [(root.children[ch], ch, first_row) for ch in sorted(root.children, reverse=True)]
        while stack:
            node, ch, prev_row = stack.pop()
            # row[j] = distance between the path to this node and word[:j]
            row = [prev_row[0] + 1]
            for j in range(1, len(word) + 1):
                ins = row[j - 1] + 1
                delete = prev_row[j] + 1
                replace = prev_row[j - 1] + (0 if word[j - 1] == ch else 1)
                val = ins if ins < delete else delete
                if replace < val:
                    val = replace
                row.append(val)

            if node.is_word and row[-1] <= max_dist:
                results.append((node.word, row[-1]))

            if min(row) <= max_dist:
                # push in reverse so the smallest character is visited first
                for nxt in sorted(node.children, reverse=True):
                    stack.append((node.children[nxt], nxt, row))

    # convenience -----------------------------------------------------
    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def __contains__(self, word: str) -> bool:
        """Exact membership: the walk ends on a terminal node storing `word`."""
        if not word:
            return False
        node = self._find(word)
        return node is not None and node.is_word and node.word == word
