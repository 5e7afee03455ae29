import pytest

from errors import ValidationError
from validation import (
    is_valid_account_name,
    is_valid_username,
    parse_amount,
    parse_limit,
    username_errors,
)


class TestParseAmount:
    @pytest.mark.parametrize(
        "text,expected",
        [("75.50", 75.5), ("$1,200", 1200.0), (" 3 ", 3.0), ("0.01", 0.01)],
    )
    def test_valid_amounts(self, text, expected):
        assert parse_amount(text) == expected

    @pytest.mark.parametrize("text", ["", "abc", "0", "-5", "nan", "inf", "$"])
    def test_invalid_amounts(self, text):
        with pytest.raises(ValidationError):
            parse_amount(text)

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_amount("twelve")


class TestParseLimit:
    def test_zero_allowed(self):
        assert parse_limit("0") == 0.0

    def test_negative_rejected(self):
        with pytest.raises(ValidationError):
            parse_limit("-1")


class TestUsername:
    @pytest.mark.parametrize("username", ["alice", "Bob_99", "abcd", "a" * 20])
    def test_valid(self, username):
        assert is_valid_username(username)
        assert username_errors(username) == []

    @pytest.mark.parametrize("username", [None, "", "abc", "a" * 21, "1alice", "al ice", "al-ice"])
    def test_invalid(self, username):
        assert not is_valid_username(username)

    def test_errors_list_each_rule(self):
        errors = username_errors("1a!")

        assert len(errors) == 3

    def test_empty_username_error(self):
        assert username_errors("") == ["Username cannot be empty"]


class TestAccountName:
    @pytest.mark.parametrize("name", ["Bills", "Rainy Day", "Primary Savings 2"])
    def test_valid(self, name):
        assert is_valid_account_name(name)

    @pytest.mark.parametrize(
        "name", [None, "", "   ", "a,b", "a\nb", "a/b", "a\x00b"]
    )
    def test_invalid(self, name):
        assert not is_valid_account_name(name)
