"""String-aware comment and trailing-comma stripping for JSONC input.

Both passes are single left-to-right scans that track whether the cursor
sits inside a string literal, so ``"see // not a comment"`` and
``"a /* b */ c"`` come out byte-for-byte unchanged.
"""

from __future__ import annotations

from enum import Enum


class _State(Enum):
    NORMAL = "normal"
    IN_STRING = "in-string"
    IN_LINE_COMMENT = "in-line-comment"
    IN_BLOCK_COMMENT = "in-block-comment"


_WHITESPACE = frozenset(" \t\r\n")


def strip_json_comments(text: str) -> str:
    """Remove ``//`` and ``/* */`` comments outside string literals.

    The newline ending a line comment is kept so that line numbers in a
    later ``JSONDecodeError`` still point at the original source line.
    An unterminated block comment swallows the rest of the input.
    """
    out: list[str] = []
    state = _State.NORMAL
    escape_pending = False
    i = 0
    n = len(text)

    while i < n:
        ch = text[i]
        nxt = text[i + 1] if i + 1 < n else ""

        if state is _State.NORMAL:
            if ch == '"':
                state = _State.IN_STRING
                out.append(ch)
            elif ch == "/" and nxt == "/":
                state = _State.IN_LINE_COMMENT
                i += 1
            elif ch == "/" and nxt == "*":
                state = _State.IN_BLOCK_COMMENT
                i += 1
            else:
                out.append(ch)

        elif state is _State.IN_STRING:
            out.append(ch)
            if escape_pending:
                escape_pending = False
            elif ch == "\\":
                escape_pending = True
            elif ch == '"':
                state = _State.NORMAL

        elif state is _State.IN_LINE_COMMENT:
            if ch in "\r\n":
                out.append(ch)
                state = _State.NORMAL

        else:  # in-block-comment
            if ch == "*" and nxt == "/":
                state = _State.NORMAL
                i += 1

        i += 1

    return "".join(out)


def strip_trailing_commas(text: str) -> str:
    """Drop a ``,`` whose next non-whitespace character is ``}`` or ``]``.

    Only commas outside string literals are considered; the whitespace
    between the comma and the closing bracket is preserved.
    """
    out: list[str] = []
    in_string = False
    escape_pending = False
    n = len(text)

    for i, ch in enumerate(text):
        if in_string:
            if escape_pending:
                escape_pending = False
            elif ch == "\\":
                escape_pending = True
            elif ch == '"':
                in_string = False
            out.append(ch)
            continue

        if ch == '"':
            in_string = True
        elif ch == ",":
            j = i + 1
            while j < n and text[j] in _WHITESPACE:
                j += 1
            if j < n and text[j] in "}]":
                continue
        out.append(ch)

    return "".join(out)
