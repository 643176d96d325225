"""Expansion of run-length encoded strings of the form k[text]."""

from __future__ import annotations

import string


def decode_string(s: str) -> str:
    """Expand every ``k[text]`` in `s`; text holds lowercase letters and nested groups."""
    parts: list[str] = []
    stack: list[tuple[list[str], int]] = []
    count: int | None = None
    for ch in s:
        if ch in string.digits:
            count = (count or 0) * 10 + int(ch)
        elif ch == "[":
            if count is None:
                raise ValueError("'[' must follow a repeat count")
            stack.append((parts, count))
            parts, count = [], None
        elif ch == "]":
            if count is not None or not stack:
                raise ValueError("unbalanced ']'")
            outer, repeat = stack.pop()
            outer.append("".join(parts) * repeat)
            parts = outer
        elif ch in string.ascii_lowercase:
            if count is not None:
                raise ValueError("a repeat count must be followed by '['")
            parts.append(ch)
        else:
            raise ValueError(f"unexpected character {ch!r}")
    if stack or count is not None:
        raise ValueError("unterminated group")
    return "".join(parts)