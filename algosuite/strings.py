"""Algorithms over strings."""

from __future__ import annotations

from typing import Dict, Iterable, List

_CLOSERS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_CLOSERS.values())


def defang_ip_address(address: str) -> str:
    """Replace every period in an address with ``[.]``."""
    return address.replace(".", "[.]")


def remove_duplicates(s: str, k: int) -> str:
    """Repeatedly remove runs of ``k`` equal adjacent characters."""
    stack: List[List] = []
    for char in s:
        if stack and stack[-1][0] == char:
            stack[-1][1] += 1
        else:
            stack.append([char, 1])
        if stack[-1][1] == k:
            stack.pop()
    return "".join(char * count for char, count in stack)


def is_valid_parentheses(s: str) -> bool:
    """Tell whether the brackets in ``s`` are balanced and properly nested.

    Characters other than brackets are ignored.
    """
    stack: List[str] = []
    for char in s:
        if char in _OPENERS:
            stack.append(char)
        elif char in _CLOSERS:
            if not stack or stack[-1] != _CLOSERS[char]:
                return False
            stack.pop()
    return not stack


def apply_backspaces(s: str) -> str:
    """Return the text typed when every ``#`` erases the previous character."""
    typed: List[str] = []
    for char in s:
        if char == "#":
            if typed:
                typed.pop()
        else:
            typed.append(char)
    return "".join(typed)


def backspace_compare(s: str, t: str) -> bool:
    """Tell whether two strings type the same text, ``#`` being backspace."""
    return apply_backspaces(s) == apply_backspaces(t)


def group_anagrams(words: Iterable[str]) -> List[List[str]]:
    """Group words that are anagrams of one another, in order of first appearance."""
    groups: Dict[str, List[str]] = {}
    for word in words:
        groups.setdefault("".join(sorted(word)), []).append(word)
    return list(groups.values())