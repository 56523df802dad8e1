"""
autocorrector - word suggestion engine trained on plain-text corpora.

    from autocorrector import Autocorrector
    ac = Autocorrector.from_paths(["data/sample_corpus.txt"], prefix=True, led=2)
    ac.suggest("the quik")
"""

from autocorrector.core import (
    AutocorrectError,
    Autocorrector,
    AutocorrectorConfig,
    ConfigError,
    CorpusError,
    CorpusIndex,
)

__all__ = [
    "AutocorrectError",
    "Autocorrector",
    "AutocorrectorConfig",
    "ConfigError",
    "CorpusError",
    "CorpusIndex",
]

__version__ = "0.1.0"
