import pytest
from hypothesis import given, strategies as st

from p256curve.field import MODULUS, FieldElement

# Repeated doubling of the multiplicative identity: 2^0 .. 2^249.
DBL_TEST_VECTORS = [bytes.fromhex("%064x" % (1 << i)) for i in range(250)]

ONE_BYTES = bytes(31) + b"\x01"

elements = st.integers(min_value=0, max_value=MODULUS - 1).map(FieldElement)


def test_dbl_vectors_bounds():
    assert FieldElement.from_bytes(DBL_TEST_VECTORS[0]) == FieldElement.ONE
    assert FieldElement.from_bytes(DBL_TEST_VECTORS[-1]).to_int() == 1 << 249
    assert FieldElement.from_int(1 << 249).to_bytes().hex() == "02" + "00" * 31


def test_zero_is_additive_identity():
    zero = FieldElement.from_int(0)
    one = FieldElement.from_int(1)
    assert zero + zero == FieldElement.ZERO
    assert one + zero == FieldElement.ONE
    assert (zero + zero).is_zero()


def test_one_is_multiplicative_identity():
    one = FieldElement.from_int(1)
    assert one * one == FieldElement.ONE
    assert (one * one).to_int() == 1


def test_from_bytes():
    assert FieldElement.from_bytes(bytes(32)) == FieldElement.ZERO
    assert FieldElement.from_bytes(ONE_BYTES) == FieldElement.ONE
    with pytest.raises(ValueError):
        FieldElement.from_bytes(b"\xff" * 32)


def test_from_bytes_rejects_modulus_and_wrong_length():
    with pytest.raises(ValueError):
        FieldElement.from_bytes(MODULUS.to_bytes(32, "big"))
    with pytest.raises(ValueError):
        FieldElement.from_bytes(bytes(31))
    largest = FieldElement.from_bytes((MODULUS - 1).to_bytes(32, "big"))
    assert largest == -FieldElement.ONE


def test_to_bytes():
    assert FieldElement.ZERO.to_bytes() == bytes(32)
    assert FieldElement.ONE.to_bytes() == ONE_BYTES


def test_from_int_reduces():
    assert FieldElement.from_int(MODULUS + 5).to_int() == 5
    assert FieldElement.from_int(-1).to_int() == MODULUS - 1


def test_repeated_add():
    r = FieldElement.ONE
    for expected in DBL_TEST_VECTORS:
        assert r.to_bytes() == expected
        r = r + r


def test_repeated_double():
    r = FieldElement.ONE
    for expected in DBL_TEST_VECTORS:
        assert r.to_bytes() == expected
        r = r.double()


def test_repeated_mul():
    r = FieldElement.ONE
    two = r + r
    for expected in DBL_TEST_VECTORS:
        assert r.to_bytes() == expected
        r = r * two


def test_negation():
    two = FieldElement.ONE.double()
    neg_two = -two
    assert two + neg_two == FieldElement.ZERO
    assert -neg_two == two


def test_pow_vartime():
    two = FieldElement.from_int(2)
    four = FieldElement.from_int(2).square()
    assert two.pow_vartime(2) == four
    assert FieldElement.from_int(2).pow_vartime(0) == FieldElement.ONE


def test_invert():
    with pytest.raises(ZeroDivisionError):
        FieldElement.ZERO.invert()
    one = FieldElement.ONE
    assert one.invert() == one
    two = one + one
    assert two * two.invert() == one


def test_sqrt():
    two = FieldElement.from_int(2)
    four = FieldElement.from_int(2).square()
    assert four.sqrt() == two
    assert FieldElement.from_int(4).sqrt() == two


def test_sqrt_of_non_residue_raises():
    # p = 3 mod 4, so -1 is not a square.
    with pytest.raises(ValueError):
        FieldElement.from_int(-1).sqrt()


def test_is_zero_and_is_odd():
    assert FieldElement.ZERO.is_zero()
    assert not FieldElement.ONE.is_zero()
    assert FieldElement.ONE.is_odd()
    assert not FieldElement.ONE.double().is_odd()
    assert (-FieldElement.ONE).to_int() == MODULUS - 1
    assert not (-FieldElement.ONE).is_odd()


@given(
    st.integers(min_value=0, max_value=2**192 - 1),
    st.integers(min_value=0, max_value=2**192 - 1),
)
def test_add_then_sub(a_value, b_value):
    a = FieldElement(a_value)
    b = FieldElement(b_value)
    assert (a + b) - a == b


@given(elements, elements)
def test_add_then_sub_full_range(a, b):
    total = FieldElement.from_bytes((a + b).to_bytes())
    assert total - a == b


@given(elements)
def test_bytes_round_trip(a):
    assert FieldElement.from_bytes(a.to_bytes()) == a


@given(elements)
def test_inverse_property(a):
    if a.is_zero():
        with pytest.raises(ZeroDivisionError):
            FieldElement.from_int(a.to_int()).invert()
    else:
        assert a * FieldElement.from_int(a.to_int()).invert() == FieldElement.ONE


@given(st.integers(min_value=0, max_value=MODULUS - 1))
def test_square_has_root(value):
    a = FieldElement.from_int(value)
    root = FieldElement.from_int(value).square().sqrt()
    assert root == a or root == -a