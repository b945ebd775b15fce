"""Construction, canonical form, equality, hashing and textual form."""
import math
import pytest
from bigrational import Rational, InvalidArgument, ZERO, ONE, HALF, QUARTER


def test_canonical_form(value):
    """Every constructed value has a positive denominator coprime to the numerator."""
    assert value.denominator > 0
    assert math.gcd(abs(value.numerator), value.denominator) == 1
    if value.numerator == 0:
        assert value.denominator == 1


@pytest.mark.parametrize("denominator", [1, -1, 5, -7, 10**20, -(10**20)])
def test_zero_normalization(denominator):
    zero = Rational(0, denominator)
    assert zero == Rational(0, 1)
    assert zero.numerator == 0
    assert zero.denominator == 1


@pytest.mark.parametrize("numerator, denominator", [(1, 2), (3, 7), (-4, 9), (10**18, 3), (6, 4)])
def test_sign_normalization(numerator, denominator):
    assert Rational(numerator, -denominator) == Rational(-numerator, denominator)
    assert Rational(numerator, -denominator).denominator > 0


def test_reduction():
    assert Rational(2, 4) == HALF
    assert Rational(-12, -18) == Rational(2, 3)
    x = Rational(6, -4)
    assert (x.numerator, x.denominator) == (-3, 2)


@pytest.mark.parametrize("numerator", [0, 1, -5, 10**40])
def test_zero_denominator_fails(numerator):
    with pytest.raises(InvalidArgument):
        Rational(numerator, 0)


def test_invalid_argument_is_value_error():
    with pytest.raises(ValueError, match="can not be zero"):
        Rational(3, 0)


def test_single_integer_constructor():
    assert Rational(7) == Rational(7, 1)
    assert Rational(-3).denominator == 1


def test_named_constants():
    assert ZERO == Rational(0, 1)
    assert ONE == Rational(1, 1)
    assert HALF == Rational(1, 2)
    assert QUARTER == Rational(1, 4)
    assert Rational.ZERO is ZERO
    assert Rational.HALF is HALF


@pytest.mark.parametrize("args", [(1.5,), ("1",), (True,), (1, 2.0), (1, False), (None,)])
def test_non_integer_arguments_rejected(args):
    with pytest.raises(TypeError):
        Rational(*args)


def test_accessors_are_read_only():
    x = Rational(3, 4)
    with pytest.raises(AttributeError):
        x.numerator = 5
    with pytest.raises(AttributeError):
        x.denominator = 5
    assert x.get_numerator() == 3
    assert x.get_denominator() == 4


def test_no_new_attributes():
    with pytest.raises(AttributeError):
        HALF.extra = 1


def test_value_of():
    assert Rational.value_of(HALF) is HALF
    assert Rational.value_of(4) == Rational(4, 1)


def test_equality_requires_rational():
    assert Rational(1) != 1
    assert not (HALF == "1/2")
    assert HALF == Rational(3, 6)


def test_hash_consistent_with_equality():
    assert hash(Rational(2, 4)) == hash(HALF)
    assert len({Rational(1, 2), Rational(2, 4), Rational(-3, -6), QUARTER}) == 2


@pytest.mark.parametrize("numerator, denominator, text", [
    (7, 1, "7"),
    (7, 2, "7/2"),
    (7, -2, "-7/2"),
    (0, -5, "0"),
    (-14, 7, "-2"),
    (10**30, 3, "1000000000000000000000000000000/3"),
])
def test_textual_form(numerator, denominator, text):
    assert str(Rational(numerator, denominator)) == text


def test_textual_form_is_idempotent(value):
    h = hash(value)
    first = str(value)
    second = str(value)
    assert first == second
    assert hash(value) == h
    assert value == Rational(value.numerator, value.denominator)
    assert value.compare_to(Rational(value.numerator, value.denominator)) == 0


def test_repr():
    assert repr(Rational(-6, 4)) == "Rational(-3, 2)"
    assert repr(ZERO) == "Rational(0, 1)"


def test_predicates():
    assert ZERO.is_zero() and not HALF.is_zero()
    assert ONE.is_one() and not Rational(-1).is_one()
    assert Rational(-1, 2).is_negative() and not ZERO.is_negative()
    assert Rational(4, 2).is_integer() and not HALF.is_integer()
    assert [Rational(-3, 7).signum(), ZERO.signum(), QUARTER.signum()] == [-1, 0, 1]
