"""Small text-splitting helpers shared by the puzzle solvers."""

import re


def split(text, delim=" "):
    """Split ``text`` on ``delim``, dropping empty pieces.

    Before each piece, every leading character that occurs anywhere in
    ``delim`` is skipped. The piece then runs up to the next full occurrence
    of ``delim``.
    """
    if not delim:
        raise ValueError("delimiter must not be empty")

    piece_start = re.compile(f"[^{re.escape(delim)}]")
    parts = []
    pos = 0
    while (match := piece_start.search(text, pos)) is not None:
        start = match.start()
        end = text.find(delim, start)
        if end < 0:
            parts.append(text[start:])
            break
        parts.append(text[start:end])
        pos = end
    return parts


def split_pair(text, delim=" "):
    """Split ``text`` into exactly two pieces and return them as a tuple."""
    parts = split(text, delim)
    if len(parts) != 2:
        raise ValueError(f"expected two fields in {text!r}, got {len(parts)}")
    first, second = parts
    return first, second


def digits(line):
    """Return the decimal digits of ``line`` as a list of ints."""
    if not all(ch in "0123456789" for ch in line):
        raise ValueError(f"not a string of digits: {line!r}")
    return [int(ch) for ch in line]