import pytest

from pyfzy.config import create_config


@pytest.fixture(scope="module")
def config():
    return create_config()


@pytest.fixture(scope="module")
def data():
    return [
        # pattern, low score, high score
        ("amor", "app/models/zrder", "app/models/order"),
        ("amo", "app/m/foo", "app/models/foo"),
        ("gemfil", "Gemfile.lock", "Gemfile"),
        ("abce", "abc de", "abcdef"),
        ("abc", " a  b  c ", "    a b c "),
        ("abc", " a  b  c ", " a b c    "),
        ("test", "testing", "tests"),
        ("test", "/testing", "testing"),
    ]


@pytest.fixture(scope="module")
def pairs():
    return [
        # needle, haystack, both matching
        ("ab", "a_b"),
        ("amo", "app/models/foo"),
        ("amor", "app/models/order"),
        ("as", "examples.txt"),
        ("abc", "a/a/b/c/c"),
        ("fb", "FooBar"),
        ("ff", "fuzzy-blurry-finder"),
        ("oob", "out-of-bound"),
        ("aaa", "a*a*aa*a"),
        ("xyz", "x.y.z_xyz"),
    ]
