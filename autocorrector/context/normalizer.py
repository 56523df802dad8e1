# autocorrector/context/normalizer.py
# decoding + case folding applied before tokenisation

REPLACEMENT_CHAR = "�"

# simple case folds that str.lower() leaves alone but that land in [a-z]
# (U+212A KELVIN SIGN already lowers to "k")
_SIMPLE_FOLDS = str.maketrans({"ſ": "s"})  # LATIN SMALL LETTER LONG S


def decode_bytes(raw: bytes) -> str:
    """Decode UTF-8, replacing invalid bytes with U+FFFD (treated as a separator)."""
    if not raw:
        return ""
    return raw.decode("utf-8", errors="replace")


def normalize_text(s: str) -> str:
    """
    Unicode simple case folding. Full folds that change length (e.g. "ß" -> "ss")
    are not applied. Everything else is left for the tokenizer.
    """
    if not s:
        return ""
    return s.lower().translate(_SIMPLE_FOLDS)
