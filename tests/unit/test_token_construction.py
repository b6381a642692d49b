"""Tests for TokenAmount construction and extraction."""

import pytest

from unc_token import (
    ONE_MICROUNC,
    ONE_MILLIUNC,
    ONE_UNC,
    U128_MAX,
    Denomination,
    Overflow,
    TokenAmount,
    TokenArithmeticError,
    Underflow,
)


class TestScaleTable:
    """Tests for the fixed denomination scale factors."""

    def test_scale_factors(self):
        """Scale factors match the denomination table."""
        assert ONE_UNC == 10**24
        assert ONE_MILLIUNC == 10**21
        assert ONE_MICROUNC == 10**18
        assert Denomination.ATTO.scale == 1

    def test_max_fractional_digits(self):
        """Each denomination resolves as many fractional digits as its exponent."""
        assert Denomination.WHOLE.max_fractional_digits == 24
        assert Denomination.MILLI.max_fractional_digits == 21
        assert Denomination.MICRO.max_fractional_digits == 18
        assert Denomination.ATTO.max_fractional_digits == 0


class TestFactories:
    """Tests for denomination-specific factories."""

    def test_from_whole(self, ten_unc: TokenAmount):
        """from_whole scales by 10^24."""
        assert ten_unc.as_atto() == 10_000_000_000_000_000_000_000_000

    def test_factories_agree(self):
        """One whole token equals 1000 milli, 10^6 micro and 10^24 atto."""
        one = TokenAmount.from_whole(1)
        assert one == TokenAmount.from_milli(1000)
        assert one == TokenAmount.from_micro(1_000_000)
        assert one == TokenAmount.from_atto(10**24)

    def test_constructor_is_atto(self):
        """The plain constructor takes atto-units."""
        assert TokenAmount(10**21) == TokenAmount.from_milli(1)

    def test_from_denomination(self):
        """Generic factory matches the named ones."""
        assert TokenAmount.from_denomination(3, Denomination.MICRO) == TokenAmount.from_micro(3)

    @pytest.mark.parametrize(
        "factory,limit",
        [
            (TokenAmount.from_whole, U128_MAX // 10**24),
            (TokenAmount.from_milli, U128_MAX // 10**21),
            (TokenAmount.from_micro, U128_MAX // 10**18),
            (TokenAmount.from_atto, U128_MAX),
        ],
    )
    def test_overflow_boundary(self, factory, limit: int):
        """Every factory accepts its largest count and rejects the next one."""
        assert factory(limit).as_atto() <= U128_MAX
        with pytest.raises(Overflow):
            factory(limit + 1)

    def test_overflow_is_arithmetic_error(self):
        """Construction overflow is catchable as ArithmeticError."""
        with pytest.raises(ArithmeticError):
            TokenAmount.from_whole(10**30)
        with pytest.raises(TokenArithmeticError):
            TokenAmount.from_whole(10**30)

    def test_negative_rejected(self):
        """Negative counts raise Underflow."""
        with pytest.raises(Underflow):
            TokenAmount.from_atto(-1)
        with pytest.raises(Underflow):
            TokenAmount.from_whole(-1)

    def test_invalid_type_rejected(self):
        """Only ints are accepted."""
        with pytest.raises(TypeError):
            TokenAmount.from_whole(1.5)  # type: ignore
        with pytest.raises(TypeError):
            TokenAmount("10")  # type: ignore
        with pytest.raises(TypeError):
            TokenAmount.from_atto(True)

    def test_checked_from_denomination(self):
        """Checked factory returns None instead of raising."""
        assert TokenAmount.checked_from_denomination(1, Denomination.WHOLE) == TokenAmount.ONE_UNC
        assert TokenAmount.checked_from_denomination(10**15, Denomination.WHOLE) is None
        assert TokenAmount.checked_from_denomination(-1, Denomination.ATTO) is None


class TestConstants:
    """Tests for pre-validated constant instances."""

    def test_values(self):
        """Constants hold the expected atto counts."""
        assert TokenAmount.ZERO.as_atto() == 0
        assert TokenAmount.ONE_UNC.as_atto() == 10**24
        assert TokenAmount.ONE_MILLIUNC.as_atto() == 10**21
        assert TokenAmount.ONE_MICROUNC.as_atto() == 10**18
        assert TokenAmount.ONE_ATTOUNC.as_atto() == 1
        assert TokenAmount.MAX.as_atto() == 2**128 - 1

    def test_zero(self):
        """ZERO is zero and falsy."""
        assert TokenAmount.ZERO.is_zero()
        assert not TokenAmount.ZERO
        assert TokenAmount.ONE_ATTOUNC


class TestExtraction:
    """Tests for conversion back to denominations."""

    def test_ten_unc_as_milli(self, ten_unc: TokenAmount):
        """Ten tokens are 10000 milli-tokens."""
        assert ten_unc.as_milli() == 10000

    def test_ten_unc_in_all_units(self, ten_unc: TokenAmount):
        """Ten tokens expressed in every denomination."""
        assert ten_unc.as_whole() == 10
        assert ten_unc.as_micro() == 10_000_000
        assert ten_unc.as_atto() == 10**25

    def test_truncates(self):
        """Extraction drops the remainder."""
        amount = TokenAmount.from_atto(10**24 - 1)
        assert amount.as_whole() == 0
        assert amount.as_milli() == 999
        assert amount.as_micro() == 999_999

    @pytest.mark.parametrize("denomination", list(Denomination))
    @pytest.mark.parametrize("n", [0, 1, 7, 12345])
    def test_scale_consistency(self, denomination: Denomination, n: int):
        """as_X(from_X(n)) == n."""
        amount = TokenAmount.from_denomination(n, denomination)
        assert amount.as_denomination(denomination) == n

    def test_scale_consistency_at_limit(self):
        """Identity holds at the largest whole count."""
        n = U128_MAX // 10**24
        assert TokenAmount.from_whole(n).as_whole() == n


class TestValueSemantics:
    """Tests for equality, ordering and hashing."""

    def test_equality(self):
        """Equality compares atto counts."""
        assert TokenAmount(5) == TokenAmount(5)
        assert TokenAmount(5) != TokenAmount(6)

    def test_not_equal_to_int(self):
        """Amounts never compare equal to plain ints."""
        assert TokenAmount(5) != 5

    def test_ordering(self):
        """Ordering follows atto counts."""
        assert TokenAmount.ONE_MILLIUNC < TokenAmount.ONE_UNC
        assert TokenAmount.ONE_UNC > TokenAmount.ONE_MICROUNC
        assert TokenAmount(3) <= TokenAmount(3)
        assert TokenAmount(4) >= TokenAmount(3)
        assert sorted([TokenAmount(3), TokenAmount(1), TokenAmount(2)]) == [
            TokenAmount(1),
            TokenAmount(2),
            TokenAmount(3),
        ]

    def test_ordering_with_int_raises(self):
        """Ordering against other types is unsupported."""
        with pytest.raises(TypeError):
            TokenAmount(1) < 2  # noqa: B015

    def test_hash(self):
        """Equal amounts hash equally."""
        assert {TokenAmount.from_milli(1000): "one"}[TokenAmount.ONE_UNC] == "one"
        assert len({TokenAmount(1), TokenAmount(1), TokenAmount(2)}) == 2

    def test_repr(self):
        """repr shows the atto count."""
        assert repr(TokenAmount(42)) == "TokenAmount(42)"
