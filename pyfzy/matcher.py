import logging

import numpy as np

from pyfzy.config import as_config


logger = logging.getLogger(__name__)

SCORE_MIN = float("-inf")
SCORE_MAX = float("inf")

SLASH_CHARS = "/\\"
WORD_CHARS = "-_ "
DOT_CHARS = "."

# ASCII only, so folding never changes the length of a string
_FOLD = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "abcdefghijklmnopqrstuvwxyz",
)


def fold(config, text):
    if config.case_sensitive:
        return text
    return text.translate(_FOLD)


def get_min_score():
    """
    The lowest value returned by score().

    Returned as a sentinel for an empty needle or haystack, a haystack
    longer than the configured max length, or a needle longer than the
    haystack.
    """
    return SCORE_MIN


def get_max_score():
    """The score returned for exact matches. This is the highest possible score."""
    return SCORE_MAX


def has_match(config, needle, haystack):
    """
    Check if `needle` is a subsequence of `haystack`.

    Call this before score() or positions(), their results are undefined
    for needles that don't match.
    """
    config = as_config(config)
    needle = fold(config, needle)
    haystack = fold(config, haystack)

    offset = 0
    for char in needle:
        offset = haystack.find(char, offset) + 1
        if offset <= 0:
            return False
    return True


def is_perfect_match(config, needle, haystack):
    config = as_config(config)
    return fold(config, needle) == fold(config, haystack)


def precompute_bonus(config, haystack):
    """
    Match bonus for every position of `haystack`, based on the character
    before it. The first character is treated as if it followed a slash.

    Must run on the haystack before case folding, camelCase humps get a bonus.
    """
    config = as_config(config)
    bonus = np.zeros(len(haystack))
    prev = "/"
    for j, char in enumerate(haystack):
        if prev in SLASH_CHARS:
            bonus[j] = config.slash_match_score
        elif prev in WORD_CHARS:
            bonus[j] = config.word_match_score
        elif prev in DOT_CHARS:
            bonus[j] = config.dot_match_score
        elif "a" <= prev <= "z" and "A" <= char <= "Z":
            bonus[j] = config.capital_match_score
        prev = char
    return bonus


def compute(config, needle, haystack):
    """
    Fill the score matrices for `needle` against `haystack`.

    D[i, j] is the best score of an alignment of needle[:i + 1] that ends
    with needle[i] matched at haystack[j]. M[i, j] is the best score of any
    alignment of needle[:i + 1] within haystack[:j + 1].
    """
    config = as_config(config)
    bonus = precompute_bonus(config, haystack)
    n = len(needle)
    m = len(haystack)

    needle = fold(config, needle)
    haystack = fold(config, haystack)

    D = np.full((n, m), SCORE_MIN)
    M = np.full((n, m), SCORE_MIN)

    for i in range(n):
        prev_score = SCORE_MIN
        gap_score = config.gap_trailing_score if i == n - 1 else config.gap_inner_score

        for j in range(m):
            if needle[i] == haystack[j]:
                if i == 0:
                    match_score = j * config.gap_leading_score + bonus[j]
                elif j > 0:
                    match_score = max(
                        M[i - 1, j - 1] + bonus[j],
                        D[i - 1, j - 1] + config.consecutive_match_score,
                    )
                else:
                    # a second needle character can't end at the first position
                    match_score = SCORE_MIN

                D[i, j] = match_score
                prev_score = max(match_score, prev_score + gap_score)
                M[i, j] = prev_score
            else:
                D[i, j] = SCORE_MIN
                prev_score = prev_score + gap_score
                M[i, j] = prev_score

    return D, M


def _is_trivial(config, needle, haystack):
    n = len(needle)
    m = len(haystack)
    return n == 0 or m == 0 or m > config.max_match_length or n > m


def score(config, needle, haystack):
    """
    Compute a matching score, higher is better.

    `needle` must be a subsequence of `haystack` (see has_match), otherwise
    the result is undefined.
    """
    config = as_config(config)
    if _is_trivial(config, needle, haystack):
        logger.debug("no usable match for %r in %r", needle, haystack)
        return SCORE_MIN
    if is_perfect_match(config, needle, haystack):
        return SCORE_MAX

    D, M = compute(config, needle, haystack)
    return float(M[-1, -1])


def backtrack(config, D, M):
    """
    Walk the score matrices backwards and return the haystack index of
    every needle character in the optimal alignment.

    Once a match was taken as the continuation of a consecutive run, the
    previous needle character has to be matched right before it.
    """
    config = as_config(config)
    n, m = D.shape
    match_positions = [0] * n
    match_required = False
    j = m - 1

    for i in range(n - 1, -1, -1):
        while j >= 0:
            if D[i, j] != SCORE_MIN and (match_required or D[i, j] == M[i, j]):
                match_required = (
                    i > 0
                    and j > 0
                    and M[i, j] == D[i - 1, j - 1] + config.consecutive_match_score
                )
                match_positions[i] = j
                j -= 1
                break
            j -= 1

    return match_positions


def positions(config, needle, haystack):
    """
    Compute the indices where `needle` matches `haystack` in the optimal
    alignment, where `positions[k]` is the index of the k-th needle
    character in `haystack`.

    Returns a (positions, score) tuple, the score being the one score()
    returns. `needle` must be a subsequence of `haystack`.
    """
    config = as_config(config)
    if _is_trivial(config, needle, haystack):
        logger.debug("no usable match for %r in %r", needle, haystack)
        return [], SCORE_MIN
    if is_perfect_match(config, needle, haystack):
        return list(range(len(needle))), SCORE_MAX

    D, M = compute(config, needle, haystack)
    return backtrack(config, D, M), float(M[-1, -1])
