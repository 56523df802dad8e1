"""
autocorrector.core

The suggestion engine:
 - corpus counts (CorpusModel) and the vocabulary trie (Trie)
 - candidate generators (prefix, whitespace split, edit distance)
 - the additive Ranker
 - the Autocorrector facade and its configuration
"""

from .errors import AutocorrectError, CorpusError, ConfigError
from .corpus import CorpusModel
from .trie import Trie
from .protocols import Candidate, Provenance
from .ranker import Ranker
from .autocorrector import Autocorrector, AutocorrectorConfig, CorpusIndex

__all__ = [
    "AutocorrectError",
    "CorpusError",
    "ConfigError",
    "CorpusModel",
    "Trie",
    "Candidate",
    "Provenance",
    "Ranker",
    "Autocorrector",
    "AutocorrectorConfig",
    "CorpusIndex",
]
