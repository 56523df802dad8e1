# corpus.py
# Unigram/bigram counts over the training files.
# Built once, atomically, then treated as read-only.

from __future__ import annotations

import logging
from collections import Counter, defaultdict
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from autocorrector.context import decode_bytes, tokenize
from autocorrector.core.errors import CorpusError
from autocorrector.utils.logger_utils import Log

logger = logging.getLogger(__name__)

Word = str
PathLike = Union[str, Path]


class CorpusModel:
    """
    Counts for a first-order model of the corpus:
      - unigram: token -> occurrences
      - bigram: prev -> Counter(next), adjacency across the whole stream
    The vocabulary is exactly the key set of the unigram counts.

    Files are tokenized in the order given and treated as one continuous
    token stream; sentence punctuation does not reset adjacency.
    """

    def __init__(self) -> None:
        self._uni: Counter = Counter()
        self._chain: Dict[Word, Counter] = {}
        self._total: int = 0

    @classmethod
    def from_paths(cls, paths: Sequence[PathLike]) -> "CorpusModel":
        model = cls()
        model.ingest(paths)
        return model

    # ------------------------------------------------------------------
    # Training
    # ------------------------------------------------------------------
    def ingest(self, paths: Sequence[PathLike]) -> None:
        """
        Read, tokenize and count every file in `paths`.
        Raises CorpusError on the first unreadable file, in which case the
        model is left exactly as it was before the call.
        """
        uni = Counter(self._uni)
        chain: Dict[Word, Counter] = defaultdict(Counter)
        for prev, nxt in self._chain.items():
            chain[prev] = Counter(nxt)
        total = self._total

        prev: Optional[Word] = None
        with Log.time_block(f"corpus ingest ({len(paths)} files)", logger):
            for path in paths:
                for tok in self._tokens_from(path):
                    uni[tok] += 1
                    total += 1
                    if prev is not None:
                        chain[prev][tok] += 1
                    prev = tok

        # commit only once every file has been read
        self._uni = uni
        self._chain = dict(chain)
        self._total = total
        logger.debug(
            "corpus: %d tokens, %d distinct, %d bigram heads",
            total, len(uni), len(self._chain),
        )

    @staticmethod
    def _tokens_from(path: PathLike) -> Iterator[Word]:
        try:
            raw = Path(path).read_bytes()
        except (OSError, ValueError) as e:
            # ValueError: path rejected before open (embedded NUL)
            raise CorpusError(str(path), getattr(e, "strerror", None) or str(e)) from e
        logger.debug("read %d bytes from %s", len(raw), path)
        return tokenize(decode_bytes(raw))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def unigram(self, word: Word) -> int:
        return self._uni.get(word, 0)

    def bigram(self, prev: Word, word: Word) -> int:
        nxt = self._chain.get(prev)
        if not nxt:
            return 0
        return nxt.get(word, 0)

    def contains(self, word: Word) -> bool:
        return word in self._uni

    def __contains__(self, word: object) -> bool:
        return word in self._uni

    def vocabulary(self) -> Iterable[Word]:
        """All distinct tokens, in ascending order."""
        return sorted(self._uni)

    def successors(self, prev: Word) -> List[Tuple[Word, int]]:
        """(token, count) pairs observed right after `prev`, most frequent first, ties lexicographic."""
        nxt = self._chain.get(prev)
        if not nxt:
            return []
        return sorted(nxt.items(), key=lambda kv: (-kv[1], kv[0]))

    def top_next(self, prev: Word, topn: int = 5) -> List[Word]:
        """
        Most likely continuations after `prev`.
        Observed successors come first (by bigram count); remaining slots are
        filled with the most frequent other tokens. With no `prev` this is
        just the unigram top-n.
        """
        if topn <= 0:
            return []
        out = [w for w, _c in self.successors(prev)[:topn]] if prev else []
        if len(out) >= topn:
            return out
        seen = set(out)
        for w, _c in self._top_unigrams():
            if w in seen:
                continue
            out.append(w)
            if len(out) >= topn:
                break
        return out

    def _top_unigrams(self) -> List[Tuple[Word, int]]:
        return sorted(self._uni.items(), key=lambda kv: (-kv[1], kv[0]))

    # ------------------------------------------------------------------
    # Introspection helpers
    # ------------------------------------------------------------------
    def vocabulary_size(self) -> int:
        return len(self._uni)

    def token_count(self) -> int:
        return self._total

    def __len__(self) -> int:
        return len(self._uni)
