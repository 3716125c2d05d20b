"""String algorithms: bracket balancing, reversal, rolling-hash search, permutations, subsets."""

from __future__ import annotations

from collections.abc import Iterator

MOD = 1_000_000_007
BASE = 31

_PAIRS = {"(": ")", "{": "}", "[": "]"}


def is_matching(opening: str, closing: str) -> bool:
    """Whether ``closing`` is the bracket that closes ``opening``."""
    return _PAIRS.get(opening) == closing


def is_balanced(text: str) -> bool:
    """Whether every bracket in ``text`` is closed in last-opened, first-closed order.

    Any character that is not an opening bracket is treated as a closing one.
    """
    stack: list[str] = []
    for char in text:
        if char in _PAIRS:
            stack.append(char)
        elif not stack or not is_matching(stack[-1], char):
            return False
        else:
            stack.pop()
    return not stack


def reverse_string(text: str) -> str:
    """``text`` backwards, by pushing its characters on a stack and popping them."""
    stack = list(text)
    reversed_chars: list[str] = []
    while stack:
        reversed_chars.append(stack.pop())
    return "".join(reversed_chars)


def _char_value(char: str) -> int:
    return ord(char) - ord("a") + 1


def poly_hash(text: str) -> int:
    """Polynomial hash: sum of ``(c - 'a' + 1) * 31**i`` modulo ``MOD``."""
    value = 0
    power = 1
    for char in text:
        value = (value + _char_value(char) * power) % MOD
        power = power * BASE % MOD
    return value


def rabin_karp(text: str, pattern: str) -> list[int]:
    """Start indices in ``text`` whose window hashes equal the hash of ``pattern``."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    width = len(pattern)
    if width > len(text):
        return []
    target = poly_hash(pattern)
    current = poly_hash(text[:width])
    inverse = pow(BASE, MOD - 2, MOD)
    highest = pow(BASE, width - 1, MOD)

    matches = [0] if current == target else []
    for start in range(1, len(text) - width + 1):
        current = (current - _char_value(text[start - 1])) * inverse % MOD
        current = (current + _char_value(text[start + width - 1]) * highest) % MOD
        if current == target:
            matches.append(start)
    return matches


def permutations(text: str) -> Iterator[str]:
    """Every arrangement of ``text``'s characters, generated by swapping in place."""
    chars = list(text)

    def permute(index: int) -> Iterator[str]:
        if index == len(chars):
            yield "".join(chars)
            return
        for other in range(index, len(chars)):
            chars[index], chars[other] = chars[other], chars[index]
            yield from permute(index + 1)
            chars[index], chars[other] = chars[other], chars[index]

    yield from permute(0)


def subsets(text: str) -> Iterator[str]:
    """Every subset of ``text``'s characters, ordered by bit mask from 0 upwards."""
    for mask in range(1 << len(text)):
        yield "".join(char for bit, char in enumerate(text) if mask >> bit & 1)