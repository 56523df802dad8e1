# autocorrector/context/__init__.py
# text handling shared by ingestion and queries

from .normalizer import decode_bytes, normalize_text  # UTF-8 decoding and case folding
from .tokenizer import tokenize, split_input, ends_in_token  # word tokens and query parsing

__all__ = [
    "decode_bytes",
    "normalize_text",
    "tokenize",
    "split_input",
    "ends_in_token",
]
