"""Substring search with the Knuth-Morris-Pratt algorithm."""

from __future__ import annotations

NOT_FOUND = -1


class KMPMatcher:
    """Finds the first occurrence of a fixed pattern in texts."""

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        failure = [NOT_FOUND]
        j = NOT_FOUND
        for ch in pattern:
            while j != NOT_FOUND and pattern[j] != ch:
                j = failure[j]
            j += 1
            failure.append(j)
        self._failure = failure

    def match(self, text: str) -> int:
        """Return the index of the first match in ``text``, or -1 if none."""
        if not self.pattern:
            return 0
        pattern = self.pattern
        failure = self._failure
        pattern_length = len(pattern)
        k = 0
        for j, ch in enumerate(text):
            while k != NOT_FOUND and pattern[k] != ch:
                k = failure[k]
            k += 1
            if k == pattern_length:
                return j - k + 1
        return NOT_FOUND