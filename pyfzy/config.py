import logging
import numbers

from typing import NamedTuple


logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    pass


class FzyConfig(NamedTuple):
    """
    Scoring weights and limits for the matcher.

    The default numbers are the ones fzy uses. Gap scores are expected to be
    negative and match bonuses positive, slash > word > capital > dot.
    """
    case_sensitive: bool = False
    gap_leading_score: float = -0.005
    gap_trailing_score: float = -0.005
    gap_inner_score: float = -0.01
    consecutive_match_score: float = 1.0
    slash_match_score: float = 0.9
    word_match_score: float = 0.8
    capital_match_score: float = 0.7
    dot_match_score: float = 0.6
    max_match_length: int = 1024


GAP_FIELDS = ("gap_leading_score", "gap_trailing_score", "gap_inner_score")
BONUS_FIELDS = (
    "consecutive_match_score",
    "slash_match_score",
    "word_match_score",
    "capital_match_score",
    "dot_match_score",
)


def _is_number(value):
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _is_length(value):
    return isinstance(value, numbers.Integral) and not isinstance(value, bool) and value >= 0


def _check_field(name, value):
    if name == "case_sensitive":
        if not isinstance(value, bool):
            raise ConfigError(f"Bad config.{name}: expected bool, got {value!r}")
    elif name == "max_match_length":
        if not _is_length(value):
            raise ConfigError(f"Bad config.{name}: expected non-negative int, got {value!r}")
    elif not _is_number(value):
        raise ConfigError(f"Bad config.{name}: expected number, got {value!r}")


def create_config(overrides=None, **kwargs):
    """
    Build a FzyConfig from optional overrides, falling back to the defaults
    for every field that is not given.

    Overrides may come as a mapping, as keyword arguments, or both (keyword
    arguments win). Raises ConfigError on unknown fields or wrong types.
    """
    if overrides is not None and not hasattr(overrides, "keys"):
        raise ConfigError(f"Bad config: expected a mapping, got {type(overrides).__name__}")

    values = dict(overrides or {})
    values.update(kwargs)

    unknown = set(values) - set(FzyConfig._fields)
    if unknown:
        raise ConfigError("Bad config: unknown field(s) " + ", ".join(sorted(unknown)))

    for name, value in values.items():
        _check_field(name, value)

    for name in GAP_FIELDS:
        if values.get(name, 0) > 0:
            logger.warning("config.%s is positive (%s), gaps will be rewarded", name, values[name])
    for name in BONUS_FIELDS:
        if values.get(name, 0) < 0:
            logger.warning("config.%s is negative (%s), matches will be penalized", name, values[name])

    return FzyConfig(**values)


def is_config(value):
    """
    Returns True if every config field is present with the right type.
    Accepts a FzyConfig or any mapping carrying the same fields.
    """
    if isinstance(value, FzyConfig):
        fields = value._asdict()
    elif hasattr(value, "keys"):
        fields = value
    else:
        return False

    for name in FzyConfig._fields:
        if name not in fields:
            return False
        try:
            _check_field(name, fields[name])
        except ConfigError:
            return False
    return True


def as_config(config):
    """
    Return `config` as a FzyConfig. Mappings carrying every field are
    converted, anything else raises ConfigError.
    """
    if not is_config(config):
        raise ConfigError("Bad config")
    if isinstance(config, FzyConfig):
        return config
    return FzyConfig(**{name: config[name] for name in FzyConfig._fields})


def get_max_length(config):
    """The maximum haystack length the matcher will score."""
    config = as_config(config)
    return config.max_match_length


def get_score_floor(config):
    """
    The minimum score returned for normal matches.

    Matches that don't score SCORE_MIN score above this value.
    """
    config = as_config(config)
    return config.max_match_length * config.gap_inner_score


def get_score_ceiling(config):
    """
    The maximum score for non-exact matches.

    Matches that don't score SCORE_MAX score below this value.
    """
    config = as_config(config)
    return config.max_match_length * config.consecutive_match_score
