import io
import time
import logging
import contextlib
import cProfile
import pstats

from functools import wraps


logger = logging.getLogger(__name__)


@contextlib.contextmanager
def profile(limit=20):
    """Profile the enclosed block and log the hottest calls."""
    profiler = cProfile.Profile()
    profiler.enable()
    try:
        yield profiler
    finally:
        profiler.disable()
        stream = io.StringIO()
        stats = pstats.Stats(profiler, stream=stream).sort_stats("cumulative")
        stats.print_stats(limit)
        logger.info("profile:\n%s", stream.getvalue())


def timeit(f):
    @wraps(f)
    def wrap(*args, **kw):
        start = time.perf_counter()
        result = f(*args, **kw)
        elapsed = time.perf_counter() - start
        logger.debug("func: %s, time: %.6fs", f.__name__, elapsed)
        return result
    return wrap
