# autocorrector/core/protocols.py
"""
Shared candidate types and the Protocol interfaces for the pluggable pieces of
the Autocorrector (candidate generators and ranking features).

Generators and features depend on these Protocols rather than on concrete
classes, so new ones (keyboard adjacency, trigram context...) can be added
without touching the facade.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import List, Protocol, runtime_checkable

from typing_extensions import TypedDict


class Provenance(IntEnum):
    """
    Which generator produced a candidate.
    The integer value is the dedupe precedence: lower wins when the same word
    is produced twice.
    """

    EXACT = 0
    PREFIX = 1
    WHITESPACE = 2
    EDIT = 3

    @property
    def tag(self) -> str:
        return self.name.lower()


@dataclass(frozen=True)
class Candidate:
    """
    One suggestion under consideration.
    distance is the Levenshtein distance to the partial word for edit
    candidates (0 for everything else); score is filled in by the Ranker.
    """

    word: str
    provenance: Provenance
    distance: int = 0
    score: int = 0

    @property
    def first_word(self) -> str:
        """The word scored against the bigram/unigram model ('a' for a split 'a b')."""
        return self.word.split(" ", 1)[0]

    def with_score(self, score: int) -> "Candidate":
        return Candidate(self.word, self.provenance, self.distance, score)


class ScoreBreakdown(TypedDict, total=False):
    """
    Per-feature score contributions for one candidate, e.g.
      {"exact": 100, "bigram": 10, "unigram": 3, "provenance": 0, "final": 113}
    """

    exact: int
    bigram: int
    unigram: int
    provenance: int
    final: int


class CountsProtocol(Protocol):
    """The corpus queries the ranker and generators rely on."""

    def unigram(self, word: str) -> int:
        ...

    def bigram(self, prev: str, word: str) -> int:
        ...

    def contains(self, word: str) -> bool:
        ...


@runtime_checkable
class CandidateGenerator(Protocol):
    """Produces candidates for the word being typed."""

    provenance: Provenance

    def generate(self, prev: str, partial: str) -> List[Candidate]:
        ...


@runtime_checkable
class Feature(Protocol):
    """
    One additive score component.
    The ranker's score for a candidate is the sum of every feature's contribution.
    """

    name: str

    def contribution(self, cand: Candidate, prev: str, partial: str) -> int:
        ...
