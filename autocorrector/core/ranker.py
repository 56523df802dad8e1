# autocorrector/core/ranker.py
"""
Ranker - merges generator output into one ordered, capped suggestion list.

The score of a candidate is a plain sum of independent feature contributions:
 - exact:      +100 when the candidate is the partial word itself
 - bigram:     +10 x bigram(prev, first word)
 - unigram:    +unigram(first word)
 - provenance: prefix 0, whitespace -1, edit -2 x distance

Ordering is deterministic: exact matches first, then score descending, then
the candidate string ascending. New signals are added by passing extra
Feature objects; generators are not involved.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Sequence

from autocorrector.core.protocols import (
    Candidate,
    CountsProtocol,
    Feature,
    Provenance,
    ScoreBreakdown,
)

logger = logging.getLogger(__name__)

DEFAULT_TOPN = 5
EXACT_BONUS = 100
BIGRAM_WEIGHT = 10


class ExactMatchFeature:
    name = "exact"

    def __init__(self, bonus: int = EXACT_BONUS) -> None:
        self.bonus = bonus

    def contribution(self, cand: Candidate, prev: str, partial: str) -> int:
        return self.bonus if cand.word == partial else 0


class BigramFeature:
    name = "bigram"

    def __init__(self, counts: CountsProtocol, weight: int = BIGRAM_WEIGHT) -> None:
        self.counts = counts
        self.weight = weight

    def contribution(self, cand: Candidate, prev: str, partial: str) -> int:
        if not prev:
            return 0
        return self.weight * self.counts.bigram(prev, cand.first_word)


class UnigramFeature:
    name = "unigram"

    def __init__(self, counts: CountsProtocol) -> None:
        self.counts = counts

    def contribution(self, cand: Candidate, prev: str, partial: str) -> int:
        return self.counts.unigram(cand.first_word)


class ProvenancePenalty:
    name = "provenance"

    def contribution(self, cand: Candidate, prev: str, partial: str) -> int:
        if cand.provenance is Provenance.WHITESPACE:
            return -1
        if cand.provenance is Provenance.EDIT:
            return -2 * cand.distance
        return 0


def default_features(counts: CountsProtocol) -> List[Feature]:
    return [
        ExactMatchFeature(),
        BigramFeature(counts),
        UnigramFeature(counts),
        ProvenancePenalty(),
    ]


class Ranker:
    """
    Score, sort and cap candidates.

    rank(candidates, prev, partial, topn) -> scored candidates, best first
    contributions(candidate, prev, partial) -> per-feature breakdown (explainability)
    """

    def __init__(self, counts: CountsProtocol, features: Optional[Sequence[Feature]] = None):
        self.counts = counts
        self.features: List[Feature] = list(features) if features is not None else default_features(counts)

    def score(self, cand: Candidate, prev: str, partial: str) -> int:
        return sum(f.contribution(cand, prev, partial) for f in self.features)

    def rank(
        self,
        candidates: Iterable[Candidate],
        prev: str,
        partial: str,
        topn: int = DEFAULT_TOPN,
    ) -> List[Candidate]:
        if topn <= 0:
            return []
        scored = [c.with_score(self.score(c, prev, partial)) for c in candidates]
        if not scored:
            return []
        # exact match is pinned to the top whatever the counts say
        scored.sort(key=lambda c: (c.word != partial, -c.score, c.word))
        logger.debug("ranked %d candidates for %r (prev=%r)", len(scored), partial, prev)
        return scored[:topn]

    def contributions(self, cand: Candidate, prev: str, partial: str) -> ScoreBreakdown:
        out: Dict[str, int] = {}
        for f in self.features:
            out[f.name] = out.get(f.name, 0) + f.contribution(cand, prev, partial)
        out["final"] = sum(out.values())
        return ScoreBreakdown(**out)  # type: ignore[typeddict-item]
