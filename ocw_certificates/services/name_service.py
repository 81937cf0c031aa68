"""
services/name_service.py
Splits a student's name into the two display lines of the certificate.
"""
from typing import NamedTuple


class NameLines(NamedTuple):
    first_line: str
    second_line: str


def segment_name(raw_name: str) -> NameLines:
    """
    Split a free-form name into two upper-cased lines by word count.

      1 word   -> "JUAN" / ""
      2 words  -> "JUAN" / "PABLO"
      3 words  -> "JUAN" / "PABLO PEREZ"
      4+ words -> "BARBARA ANDREA" / "ARIAS BUROZ ..."

    No attempt is made to detect given names versus surnames.
    Callers must pass a name with at least one non-blank word.
    """
    words = raw_name.upper().split()

    if len(words) >= 4:
        return NameLines(" ".join(words[:2]), " ".join(words[2:]))
    return NameLines(words[0], " ".join(words[1:]))
