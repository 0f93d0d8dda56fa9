"""
Chirp validation and profanity filtering.

Pure functions, no I/O. The length limit is checked on the raw text,
before any masking happens, and counts UTF-8 bytes.
"""

from chirpy_app.exceptions import ChirpTooLongError

MAX_CHIRP_LENGTH = 140
PROFANE_WORDS = frozenset({"kerfuffle", "sharbert", "fornax"})
MASK = "****"


def mask_profanity(text: str) -> str:
    """
    Replace denylisted words with MASK.

    Words are the pieces between single spaces, compared case-insensitively.
    Only whole words match: "kerfuffles" or "fornax!" are left alone.
    Everything else keeps its original casing and spacing.
    """
    words = text.split(" ")
    return " ".join(MASK if word.lower() in PROFANE_WORDS else word for word in words)


def clean_chirp_body(body: str) -> str:
    """
    Validate and clean a chirp body.

    Raises:
        ChirpTooLongError: if body is longer than MAX_CHIRP_LENGTH bytes (UTF-8)
    """
    if len(body.encode("utf-8")) > MAX_CHIRP_LENGTH:
        raise ChirpTooLongError()
    return mask_profanity(body)
