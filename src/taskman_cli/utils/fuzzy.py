"""Fuzzy subsequence matching in the style of skim/fzf.

Every character of the pattern has to appear in the choice, in order but not
necessarily next to each other. Among all such alignments the best-scoring
one is found with a small dynamic-programming pass: matched characters earn
points, matches at word starts or right after a previous match earn bonuses,
and skipped characters between two matches cost a gap penalty.
"""

from __future__ import annotations

SCORE_MATCH = 16
SCORE_GAP_START = -3
SCORE_GAP_EXTENSION = -1

BONUS_BOUNDARY = SCORE_MATCH // 2
BONUS_NON_WORD = SCORE_MATCH // 2
BONUS_CAMEL = BONUS_BOUNDARY + SCORE_GAP_EXTENSION
BONUS_CONSECUTIVE = -(SCORE_GAP_START + SCORE_GAP_EXTENSION)
BONUS_FIRST_CHAR_MULTIPLIER = 2

_CHAR_WHITE, _CHAR_NON_WORD, _CHAR_LOWER, _CHAR_UPPER, _CHAR_NUMBER = range(5)


def _char_class(ch: str) -> int:
    if ch.isspace():
        return _CHAR_WHITE
    if ch.islower():
        return _CHAR_LOWER
    if ch.isupper():
        return _CHAR_UPPER
    if ch.isdigit():
        return _CHAR_NUMBER
    if ch.isalpha():
        # letters without case (CJK and friends) behave like lowercase
        return _CHAR_LOWER
    return _CHAR_NON_WORD


def _position_bonus(prev: int, cur: int) -> int:
    """Bonus for matching a character of class *cur* that follows *prev*."""
    if cur > _CHAR_NON_WORD:
        if prev == _CHAR_WHITE or prev == _CHAR_NON_WORD:
            return BONUS_BOUNDARY
        if prev == _CHAR_LOWER and cur == _CHAR_UPPER:
            return BONUS_CAMEL
        if prev != _CHAR_NUMBER and cur == _CHAR_NUMBER:
            return BONUS_CAMEL
        return 0
    if cur == _CHAR_NON_WORD:
        return BONUS_NON_WORD
    return 0


def _bonuses(choice: str) -> list[int]:
    bonuses = []
    prev = _CHAR_WHITE
    for ch in choice:
        cur = _char_class(ch)
        bonuses.append(_position_bonus(prev, cur))
        prev = cur
    return bonuses


def _is_subsequence(pattern: str, text: str) -> bool:
    it = iter(text)
    return all(ch in it for ch in pattern)


def fuzzy_match(choice: str, pattern: str) -> int | None:
    """Score *pattern* against *choice*.

    Matching is smart-case: case-insensitive unless the pattern contains an
    uppercase character.

    Args:
        choice: Text being searched
        pattern: User query

    Returns:
        Relevance score (higher is better), or None if the pattern is not a
        subsequence of the choice. An empty pattern matches with score 0.
    """
    if not pattern:
        return 0

    case_sensitive = any(ch.isupper() for ch in pattern)
    text = choice if case_sensitive else choice.lower()
    pat = pattern if case_sensitive else pattern.lower()

    if not _is_subsequence(pat, text):
        return None

    # bonuses come from the original casing; lower() can change the length
    # of a few strings (e.g. "İ"), in which case fall back to the folded text
    bonuses = _bonuses(choice if len(choice) == len(text) else text)
    width = len(text)

    # prev_row[j]: best score with pat[:i] matched and pat[i-1] at text[j]
    prev_row: list[int | None] = [
        SCORE_MATCH + bonuses[j] * BONUS_FIRST_CHAR_MULTIPLIER if ch == pat[0] else None
        for j, ch in enumerate(text)
    ]

    for pch in pat[1:]:
        row: list[int | None] = [None] * width
        # best score of prev_row[k] for k <= j - 2, with the gap penalty
        # for skipping text[k + 1 : j] already applied
        gapped: int | None = None
        for j in range(1, width):
            if j >= 2:
                opened = prev_row[j - 2]
                if opened is not None:
                    opened += SCORE_GAP_START
                if gapped is not None:
                    gapped += SCORE_GAP_EXTENSION
                if opened is not None and (gapped is None or opened > gapped):
                    gapped = opened

            if text[j] != pch:
                continue

            best: int | None = None
            diagonal = prev_row[j - 1]
            if diagonal is not None:
                best = diagonal + SCORE_MATCH + max(bonuses[j], BONUS_CONSECUTIVE)
            if gapped is not None:
                candidate = gapped + SCORE_MATCH + bonuses[j]
                if best is None or candidate > best:
                    best = candidate
            row[j] = best

        prev_row = row

    scores = [score for score in prev_row if score is not None]
    return max(scores) if scores else None
