# autocorrector/context/tokenizer.py
# word tokenizer shared by corpus ingestion and query parsing

import re
from typing import Iterator, List, Tuple

from .normalizer import normalize_text

# a run of letters that may carry apostrophes/hyphens; the edges are stripped below
_run_re = re.compile(r"[a-z'\-]+")
_edge_chars = "'-"


def tokenize(text: str) -> Iterator[str]:
    """
    Lazily yield lowercase word tokens.
    Anything that is not an ASCII letter, apostrophe or hyphen separates tokens,
    so digits, punctuation and U+FFFD never reach the model.
    """
    if not text:
        return
    for m in _run_re.finditer(normalize_text(text)):
        tok = m.group().strip(_edge_chars)
        if tok:
            yield tok


def ends_in_token(text: str) -> bool:
    """True if the last character would belong to a token (the user is mid-word)."""
    if not text:
        return False
    last = normalize_text(text[-1])
    return "a" <= last[-1] <= "z"


def split_input(text: str) -> Tuple[str, str]:
    """
    Split a query into (prev, partial).
    partial is the word being typed ('' after a separator), prev the complete
    word before it ('' at the start of input).
    """
    toks: List[str] = list(tokenize(text))
    if not toks:
        return "", ""
    if ends_in_token(text):
        partial = toks[-1]
        prev = toks[-2] if len(toks) > 1 else ""
    else:
        partial = ""
        prev = toks[-1]
    return prev, partial
