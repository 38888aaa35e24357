import pytest

from pushswap.parsing import (
    ERROR_1ARGC,
    ERROR_DOBLE,
    ERROR_LIMIT,
    ERROR_MESSAGE,
    ERROR_VACIO,
    InputError,
    atol,
    check_duplicates,
    is_valid_number,
    join_arguments,
    parse_arguments,
    tokenize,
    validate_token,
)


@pytest.mark.parametrize("text", ["0", "42", "-7", "+15", "007"])
def test_valid_numbers(text):
    assert is_valid_number(text) is True


@pytest.mark.parametrize("text", ["", "-", "+", "1a", "--1", "1-", " 1", "1.5"])
def test_invalid_numbers(text):
    assert is_valid_number(text) is False


def test_atol_skips_whitespace_and_stops_at_garbage():
    assert atol("  \t-42abc") == -42
    assert atol("+17") == 17
    assert atol("abc") == 0


def test_join_and_tokenize():
    assert join_arguments(["1 2", "3"]) == "1 2 3"
    assert tokenize(["  1  2", "3 "]) == ["1", "2", "3"]
    assert tokenize(["   "]) == []


def test_tokenize_splits_only_on_spaces():
    assert tokenize(["1\t2 3"]) == ["1\t2", "3"]


def test_validate_token_limits():
    validate_token("2147483647")
    validate_token("-2147483648")
    with pytest.raises(InputError) as exc:
        validate_token("2147483648")
    assert exc.value.message == ERROR_LIMIT
    with pytest.raises(InputError) as exc:
        validate_token("-2147483649")
    assert exc.value.message == ERROR_LIMIT


def test_validate_token_rejects_non_numbers():
    with pytest.raises(InputError) as exc:
        validate_token("12x")
    assert exc.value.message == ERROR_MESSAGE
    assert exc.value.exit_code == 1


@pytest.mark.parametrize("tokens", [["1", "2", "1"], ["+3", "3"], ["-0", "0"], ["05", "5"]])
def test_check_duplicates(tokens):
    with pytest.raises(InputError) as exc:
        check_duplicates(tokens)
    assert exc.value.message == ERROR_DOBLE


def test_parse_arguments_returns_numbers_in_order():
    assert parse_arguments(["3 -1", "+2"]) == [3, -1, 2]


def test_parse_arguments_single_number_exits_cleanly():
    with pytest.raises(InputError) as exc:
        parse_arguments(["5"])
    assert exc.value.message == ERROR_1ARGC
    assert exc.value.exit_code == 0


def test_parse_arguments_empty_string():
    with pytest.raises(InputError) as exc:
        parse_arguments(["    "])
    assert exc.value.message == ERROR_VACIO
    assert exc.value.exit_code == 1


def test_parse_arguments_bad_token():
    with pytest.raises(InputError) as exc:
        parse_arguments(["1", "two"])
    assert exc.value.message == ERROR_MESSAGE