# generators.py
# Candidate generators. Each takes (prev, partial) and returns Candidates
# tagged with its provenance; merge_candidates() folds their outputs together.

from __future__ import annotations

import logging
from typing import Dict, Iterable, List

from autocorrector.core.protocols import Candidate, CountsProtocol, Provenance
from autocorrector.core.trie import Trie

logger = logging.getLogger(__name__)


class ExactGen:
    """The partial word itself, when it is a vocabulary word. Always enabled."""

    provenance = Provenance.EXACT

    def __init__(self, counts: CountsProtocol) -> None:
        self.counts = counts

    def generate(self, prev: str, partial: str) -> List[Candidate]:
        if partial and self.counts.contains(partial):
            return [Candidate(partial, self.provenance)]
        return []


class PrefixGen:
    """Vocabulary words that start with the partial word (the word itself included)."""

    provenance = Provenance.PREFIX

    def __init__(self, trie: Trie) -> None:
        self.trie = trie

    def generate(self, prev: str, partial: str) -> List[Candidate]:
        return [Candidate(w, self.provenance) for w in self.trie.words_with_prefix(partial)]


class WhitespaceGen:
    """
    Two-word splits: for each cut of `partial` into non-empty (left, right)
    where both halves are vocabulary words, emit "left right".
    """

    provenance = Provenance.WHITESPACE

    def __init__(self, counts: CountsProtocol) -> None:
        self.counts = counts

    def generate(self, prev: str, partial: str) -> List[Candidate]:
        out: List[Candidate] = []
        for i in range(1, len(partial)):
            left, right = partial[:i], partial[i:]
            if self.counts.contains(left) and self.counts.contains(right):
                out.append(Candidate(f"{left} {right}", self.provenance))
        return out


class EditDistanceGen:
    """Vocabulary words within `max_dist` Levenshtein edits of the partial word."""

    provenance = Provenance.EDIT

    def __init__(self, trie: Trie, max_dist: int) -> None:
        self.trie = trie
        self.max_dist = max_dist

    def generate(self, prev: str, partial: str) -> List[Candidate]:
        if not partial or self.max_dist <= 0:
            return []
        # the partial word only comes back when it is itself in the vocabulary,
        # where it is kept (distance 0)
        return [
            Candidate(w, self.provenance, distance=d)
            for w, d in self.trie.search_within_edit(partial, self.max_dist)
        ]


def merge_candidates(*batches: Iterable[Candidate]) -> List[Candidate]:
    """
    Union of generator outputs, one Candidate per word.
    When a word appears more than once the lowest provenance wins
    (exact < prefix < whitespace < edit); for equal provenance the smaller
    distance wins. Output is sorted by word so downstream order never depends
    on which generator ran first.
    """
    best: Dict[str, Candidate] = {}
    for batch in batches:
        for cand in batch:
            cur = best.get(cand.word)
            if cur is None or (cand.provenance, cand.distance) < (cur.provenance, cur.distance):
                best[cand.word] = cand
    merged = [best[w] for w in sorted(best)]
    logger.debug("merged %d candidates", len(merged))
    return merged
