# autocorrector.py
"""
Autocorrector - application facade.

Purpose:
 - CorpusIndex: the expensive part (corpus counts + frozen trie), built once
   from training files and shared freely between threads.
 - AutocorrectorConfig: the cheap part (which generators run).
 - Autocorrector: index + config, with one entry point suggest(text).

Public API:
  Autocorrector.from_paths(paths, prefix=, whitespace=, led=)
  suggest(text) -> List[str]            at most max_suggestions words
  ranked(text) -> List[Candidate]       same, with provenance and score
  explain(text) -> List[(word, breakdown)]
  with_config(config) -> Autocorrector  reuse the index with other flags
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from autocorrector.context import split_input
from autocorrector.core.corpus import CorpusModel, PathLike
from autocorrector.core.errors import ConfigError
from autocorrector.core.generators import (
    EditDistanceGen,
    ExactGen,
    PrefixGen,
    WhitespaceGen,
    merge_candidates,
)
from autocorrector.core.protocols import CandidateGenerator, Candidate, ScoreBreakdown
from autocorrector.core.ranker import DEFAULT_TOPN, Ranker
from autocorrector.core.trie import Trie
from autocorrector.utils.logger_utils import Log

logger = logging.getLogger(__name__)

KNOWN_FLAGS = ("prefix", "whitespace")


@dataclass(frozen=True)
class AutocorrectorConfig:
    """
    Which candidate generators run for each query.
    edit_distance == 0 disables the edit-distance generator.
    """

    prefix_enabled: bool = False
    whitespace_enabled: bool = False
    edit_distance: int = 0
    max_suggestions: int = DEFAULT_TOPN

    def __post_init__(self) -> None:
        if isinstance(self.edit_distance, bool) or not isinstance(self.edit_distance, int):
            raise ConfigError(f"edit distance must be an integer, got {self.edit_distance!r}")
        if self.edit_distance < 0:
            raise ConfigError(f"edit distance must be >= 0, got {self.edit_distance}")
        if isinstance(self.max_suggestions, bool) or not isinstance(self.max_suggestions, int):
            raise ConfigError(f"max_suggestions must be an integer, got {self.max_suggestions!r}")
        if self.max_suggestions < 0:
            raise ConfigError(f"max_suggestions must be >= 0, got {self.max_suggestions}")

    @classmethod
    def from_flags(cls, flags: Iterable[str], led: int = 0) -> "AutocorrectorConfig":
        """Build from a flag list such as ["prefix", "whitespace"]. Unknown flags are ignored."""
        fl = {f.strip().lower() for f in flags if f and f.strip()}
        unknown = fl.difference(KNOWN_FLAGS)
        if unknown:
            logger.debug("ignoring unknown flags: %s", sorted(unknown))
        return cls(
            prefix_enabled="prefix" in fl,
            whitespace_enabled="whitespace" in fl,
            edit_distance=led,
        )

    def describe(self) -> str:
        """Readable summary, e.g. 'prefix and whitespace algorithm'."""
        names = []
        if self.prefix_enabled:
            names.append("prefix")
        if self.whitespace_enabled:
            names.append("whitespace")
        if self.edit_distance > 0:
            names.append(f"edit distance {self.edit_distance}")
        if not names:
            return "no algorithms"
        if len(names) == 1:
            return f"{names[0]} algorithm"
        return f"{', '.join(names[:-1])} and {names[-1]} algorithm"


@dataclass(frozen=True)
class CorpusIndex:
    """Corpus counts plus the trie over their vocabulary. Immutable once built."""

    corpus: CorpusModel
    trie: Trie

    @classmethod
    def build(cls, paths: Sequence[PathLike]) -> "CorpusIndex":
        corpus = CorpusModel.from_paths(paths)
        with Log.time_block("trie build", logger):
            trie = Trie.from_words(corpus.vocabulary())
        logger.info(
            "index ready: %d tokens, %d words from %d files",
            corpus.token_count(), len(trie), len(paths),
        )
        return cls(corpus, trie)


class Autocorrector:
    """
    Suggestion engine over a CorpusIndex.
    Holds no mutable state after construction, so one instance can serve
    concurrent suggest() calls.
    """

    def __init__(self, index: CorpusIndex, config: Optional[AutocorrectorConfig] = None):
        self.index = index
        self.config = config or AutocorrectorConfig()
        self.ranker = Ranker(index.corpus)
        self._exact = ExactGen(index.corpus)
        self._generators: Tuple[CandidateGenerator, ...] = self._build_generators()

    @classmethod
    def from_paths(
        cls,
        paths: Sequence[PathLike],
        prefix: bool = False,
        whitespace: bool = False,
        led: int = 0,
    ) -> "Autocorrector":
        """Validate flags, then ingest `paths`. Raises ConfigError / CorpusError."""
        config = AutocorrectorConfig(
            prefix_enabled=prefix, whitespace_enabled=whitespace, edit_distance=led
        )
        return cls(CorpusIndex.build(paths), config)

    def with_config(self, config: AutocorrectorConfig) -> "Autocorrector":
        return Autocorrector(self.index, config)

    def _build_generators(self) -> Tuple[CandidateGenerator, ...]:
        cfg = self.config
        gens: List[CandidateGenerator] = []
        if cfg.prefix_enabled:
            gens.append(PrefixGen(self.index.trie))
        if cfg.whitespace_enabled:
            gens.append(WhitespaceGen(self.index.corpus))
        if cfg.edit_distance > 0:
            gens.append(EditDistanceGen(self.index.trie, cfg.edit_distance))
        return tuple(gens)

    # Public API ---------------------------------------------------------
    def suggest(self, text: str) -> List[str]:
        """Ranked suggestions for `text`; never raises."""
        try:
            prev, partial = split_input(text or "")
            if not partial:
                return self.index.corpus.top_next(prev, self.config.max_suggestions)
            return [c.word for c in self._rank(prev, partial)]
        except Exception:
            logger.exception("suggest failed for %r", text)
            return []

    def ranked(self, text: str) -> List[Candidate]:
        """Scored candidates behind suggest(). Empty when the partial word is empty."""
        prev, partial = split_input(text or "")
        if not partial:
            return []
        return self._rank(prev, partial)

    def explain(self, text: str) -> List[Tuple[str, ScoreBreakdown]]:
        prev, partial = split_input(text or "")
        return [
            (c.word, self.ranker.contributions(c, prev, partial))
            for c in self.ranked(text)
        ]

    def _rank(self, prev: str, partial: str) -> List[Candidate]:
        # fixed order: exact, prefix, whitespace, edit
        batches = [self._exact.generate(prev, partial)]
        batches.extend(g.generate(prev, partial) for g in self._generators)
        merged = merge_candidates(*batches)
        return self.ranker.rank(merged, prev, partial, topn=self.config.max_suggestions)

    def stats(self) -> dict:
        return {
            "vocab_size": self.index.corpus.vocabulary_size(),
            "tokens": self.index.corpus.token_count(),
            "config": self.config.describe(),
        }

    def __repr__(self) -> str:
        return f"Autocorrector({self.config!r}, vocab={len(self.index.trie)})"
