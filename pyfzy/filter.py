import logging
import concurrent.futures

from typing import List, NamedTuple

from pyfzy.config import as_config
from pyfzy.matcher import has_match, positions


logger = logging.getLogger(__name__)


class FilterResult(NamedTuple):
    index: int
    positions: List[int]
    score: float
    string: str


def _match_line(config, needle, line):
    if has_match(config, needle, line):
        return positions(config, needle, line)
    return None


def _match_lines(config, needle, haystacks, workers):
    if workers and workers > 1:
        with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as executor:
            # map() yields in submission order
            matches = executor.map(
                lambda line: _match_line(config, needle, line), haystacks
            )
            return list(matches)
    return [_match_line(config, needle, line) for line in haystacks]


def better_filter(config, needle, haystacks, workers=None):
    """
    Apply has_match() and positions() to every haystack.

    Returns one FilterResult per matching haystack, in input order. Lines
    that don't match are left out. Results are not sorted, see rank().
    """
    config = as_config(config)
    haystacks = list(haystacks)
    matches = _match_lines(config, needle, haystacks, workers)

    results = []
    for index, (line, match) in enumerate(zip(haystacks, matches)):
        if match is None:
            continue
        match_positions, score = match
        results.append(FilterResult(index, match_positions, score, line))

    logger.debug("%r matched %d/%d lines", needle, len(results), len(haystacks))
    return results


def filter_matches(config, needle, haystacks, workers=None):
    """
    Same as better_filter(), but every entry is an
    (index, positions, score) tuple.
    """
    return [
        (result.index, result.positions, result.score)
        for result in better_filter(config, needle, haystacks, workers=workers)
    ]


def rank(results):
    """Sort results by score, best first. Ties go to the shorter line."""
    return sorted(
        results,
        key=lambda result: (-result.score, len(result.string), result.index),
    )
