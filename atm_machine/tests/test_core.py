"""
Unit tests for core value objects and exceptions.
"""

import pytest

from atm_machine.core.exceptions import (
    AccountError,
    ATMError,
    ATMOperationError,
    AuthorizationError,
    BankError,
    DepositConfigurationError,
    ErrorCode,
)
from atm_machine.core.value_objects import (
    AuthorizationToken,
    Banknote,
    BanknotesPack,
    Card,
    Money,
    PinCode,
    Withdrawal,
)


# =============================================================================
# Value Objects Tests
# =============================================================================


class TestMoney:
    """Tests for Money value object."""

    def test_money_creation(self):
        """Test creating Money with an explicit currency."""
        m = Money(250, "USD")
        assert m.amount == 250
        assert m.currency == "USD"

    def test_money_default_currency(self):
        """Test Money defaults to PLN."""
        assert Money(10).currency == "PLN"

    def test_money_equality_by_value(self):
        """Test two Money objects with the same fields are equal."""
        assert Money(100, "PLN") == Money(100, "PLN")
        assert Money(100, "PLN") != Money(100, "USD")

    def test_money_str(self):
        """Test Money string representation."""
        assert str(Money(420, "PLN")) == "420 PLN"

    def test_money_negative_raises(self):
        """Test that a negative amount raises error."""
        with pytest.raises(ValueError):
            Money(-100)

    @pytest.mark.parametrize("amount", [250.0, 250.9, "250", True, None])
    def test_money_non_integer_raises(self, amount):
        """Test that only whole int amounts are accepted."""
        with pytest.raises(ValueError):
            Money(amount)

    @pytest.mark.parametrize("currency", ["pln", "PL", "ZLOTY", ""])
    def test_money_invalid_currency_raises(self, currency):
        """Test that malformed currency codes raise error."""
        with pytest.raises(ValueError):
            Money(100, currency)


class TestBanknote:
    """Tests for the Banknote enum."""

    def test_banknote_fields(self):
        """Test face value and currency of a banknote."""
        assert Banknote.PL_200.denomination == 200
        assert Banknote.PL_200.currency == "PLN"

    def test_descending_order(self):
        """Test banknotes are listed highest first."""
        values = [note.denomination for note in Banknote.descending()]
        assert values == [500, 200, 100, 50, 20, 10]

    def test_descending_filters_currency(self):
        """Test filtering by a currency without notes."""
        assert Banknote.descending("USD") == []


class TestBanknotesPack:
    """Tests for BanknotesPack value object."""

    def test_pack_value(self):
        """Test pack value is face value times count."""
        pack = BanknotesPack.create(40, Banknote.PL_50)
        assert pack.count == 40
        assert pack.denomination == 50
        assert pack.value == 2000

    def test_pack_negative_count_raises(self):
        """Test that a negative count is a configuration error."""
        with pytest.raises(DepositConfigurationError):
            BanknotesPack.create(-1, Banknote.PL_10)


class TestCredentials:
    """Tests for Card, PinCode and AuthorizationToken."""

    def test_card_number(self):
        """Test card number access and masking."""
        card = Card.create("987456321025846")
        assert card.number == "987456321025846"
        assert card.masked == "***********5846"

    @pytest.mark.parametrize("number", ["", "1234-5678", "abc"])
    def test_card_invalid_number(self, number):
        """Test that non-digit card numbers raise error."""
        with pytest.raises(ValueError):
            Card.create(number)

    def test_pin_from_digits(self):
        """Test PIN string built from digits."""
        assert PinCode.create_pin(1, 9, 7, 3).pin == "1973"

    def test_pin_parse(self):
        """Test parsing keeps leading zeros."""
        pin = PinCode.parse("0042")
        assert pin.digits == (0, 0, 4, 2)
        assert pin == PinCode.create_pin(0, 0, 4, 2)

    @pytest.mark.parametrize("digits", [(1, 2, 3), (1, 2, 3, 4, 5), (1, 2, 3, 10), (1, 2, 3, -1)])
    def test_pin_invalid_digits(self, digits):
        """Test wrong length or out-of-range digits raise error."""
        with pytest.raises(ValueError):
            PinCode.create_pin(*digits)

    def test_pin_parse_rejects_letters(self):
        """Test parsing rejects non-digit text."""
        with pytest.raises(ValueError):
            PinCode.parse("12a4")

    def test_pin_repr_is_masked(self):
        """Test PIN digits never show up in repr."""
        assert "1973" not in repr(PinCode.create_pin(1, 9, 7, 3))

    def test_token_equality(self):
        """Test tokens compare by value."""
        assert AuthorizationToken.create("AUTH") == AuthorizationToken.create("AUTH")


class TestWithdrawal:
    """Tests for Withdrawal value object."""

    def test_withdrawal_amount(self):
        """Test amount is the sum of face values."""
        withdrawal = Withdrawal.create("PLN", [Banknote.PL_200, Banknote.PL_50])
        assert withdrawal.amount == 250
        assert withdrawal.banknotes == (Banknote.PL_200, Banknote.PL_50)

    def test_withdrawal_to_dict(self):
        """Test converting Withdrawal to dict."""
        withdrawal = Withdrawal.create(
            "PLN", [Banknote.PL_500, Banknote.PL_500, Banknote.PL_20]
        )
        assert withdrawal.to_dict() == {
            "currency": "PLN",
            "amount": 1020,
            "banknotes": {"500": 2, "20": 1},
        }


# =============================================================================
# Exception Tests
# =============================================================================


class TestExceptions:
    """Tests for custom exceptions."""

    def test_atm_error(self):
        """Test ATMError creation and to_dict."""
        error = ATMError("Test error", code="TEST_001")
        assert error.message == "Test error"
        assert error.code == "TEST_001"

        d = error.to_dict()
        assert d["error"] == "TEST_001"
        assert d["message"] == "Test error"
        assert d["details"] == {}

    def test_default_code_is_class_name(self):
        """Test the code falls back to the class name."""
        assert DepositConfigurationError("bad").code == "DepositConfigurationError"

    def test_operation_error_code(self):
        """Test ATMOperationError exposes its ErrorCode."""
        error = ATMOperationError(ErrorCode.WRONG_CURRENCY, details={"requested_currency": "USD"})
        assert error.error_code == ErrorCode.WRONG_CURRENCY
        assert error.code == "WRONG_CURRENCY"
        assert error.message == "Wrong currency"
        assert error.details["requested_currency"] == "USD"

    def test_bank_errors_default_messages(self):
        """Test bank errors can be raised without arguments."""
        assert isinstance(AuthorizationError(), BankError)
        assert isinstance(AccountError(), BankError)
        assert AccountError().message == "Insufficient funds on account"
