"""String splitting helpers with optional quote handling."""

from __future__ import annotations

from dataclasses import dataclass

_QUOTES = ('"', "'")


@dataclass
class SplitEntry:
    """One token produced by a split.

    ``last_pos`` is the offset in the input line where the token ended;
    it is 0 for the trailing remainder added when ``max_split`` is reached.
    """

    value: str
    last_pos: int = 0

    def __len__(self) -> int:
        return len(self.value)


def _next_token(text: str, start: int, separator: str, parse_quotes: bool) -> tuple[str, int]:
    """Read one token from ``text`` at ``start``; return it and its end offset."""
    pos = start
    while pos < len(text) and text[pos] == separator:
        pos += 1

    if not parse_quotes or pos >= len(text) or text[pos] not in _QUOTES:
        found = text.find(separator, pos)
        end = len(text) if found <= pos else found
        return text[pos:end], end

    quote = text[pos]
    pos += 1
    chars = []
    while True:
        if pos >= len(text):
            raise ValueError("unterminated quoted string")
        char = text[pos]
        if char == "\\" and pos + 1 < len(text) and text[pos + 1] in (quote, "\\"):
            chars.append(text[pos + 1])
            pos += 2
            continue
        if char == quote:
            # The end offset points at the closing quote.
            return "".join(chars), pos
        chars.append(char)
        pos += 1


def _split(line: str, separator: str, max_split: int, quoted: bool) -> list[SplitEntry]:
    if not isinstance(separator, str) or len(separator) != 1:
        raise ValueError("separator must be a single character")

    entries: list[SplitEntry] = []
    length = len(line)
    i = 0
    while i < length:
        value, i = _next_token(line, i, separator, quoted)
        entries.append(SplitEntry(value, i))
        i += 1
        if 0 < max_split <= len(entries) and i < length:
            entries.append(SplitEntry(line[i:]))
            break
    return entries


def split(line: str, separator: str, max_split: int) -> list[SplitEntry]:
    """Split ``line`` on ``separator``, skipping runs of separators.

    When ``max_split`` is positive, at most that many tokens are produced and
    whatever is left of the line becomes one final entry.
    """
    return _split(line, separator, max_split, False)


def split_quoted(line: str, separator: str, max_split: int) -> list[SplitEntry]:
    """Like :func:`split`, but tokens may be wrapped in single or double quotes.

    Inside a quoted token, a backslash escapes the quote character or another
    backslash. Raises ``ValueError`` for an unterminated quoted token.
    """
    return _split(line, separator, max_split, True)