import pytest
from bigrational import Rational

# (numerator, denominator) pairs before canonicalization
SAMPLE_PAIRS = [
    (0, 1),
    (0, -9),
    (1, 1),
    (-1, 1),
    (1, 2),
    (-1, 2),
    (6, 4),
    (-6, 4),
    (7, -3),
    (-12, -18),
    (5, 1),
    (2**70, 3**40),
    (-(10**30) - 1, 10**29),
]

OTHER_PAIRS = [
    (0, 1),
    (1, 3),
    (-2, 5),
    (3, 1),
    (10**25, 7),
]


@pytest.fixture(params=SAMPLE_PAIRS, scope="session", ids=str)
def value(request: pytest.FixtureRequest) -> Rational:
    """Provide session-level fixture for representative rational values."""
    return Rational(*request.param)


@pytest.fixture(params=OTHER_PAIRS, scope="session", ids=str)
def other(request: pytest.FixtureRequest) -> Rational:
    """Provide session-level fixture for a second operand."""
    return Rational(*request.param)


@pytest.fixture(params=[p for p in SAMPLE_PAIRS if p[0] != 0], scope="session", ids=str)
def nonzero_value(request: pytest.FixtureRequest) -> Rational:
    """Provide session-level fixture for values that can be reciprocated."""
    return Rational(*request.param)
