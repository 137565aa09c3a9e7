import pytest

from travcore import numfmt

LLONG_MIN = -(2**63)
LLONG_MAX = 2**63 - 1
UINT_MAX = 2**32 - 1
ULLONG_MAX = 2**64 - 1


def test_catfmt_base_case():
    result = "--" + numfmt.catfmt("Hello %s World %I,%I--", "Hi!", LLONG_MIN, LLONG_MAX)
    assert len(result) == 60
    assert result == "--Hello Hi! World -9223372036854775808,9223372036854775807--"


def test_catfmt_unsigned_numbers():
    result = "--" + numfmt.catfmt("%u,%U--", UINT_MAX, ULLONG_MAX)
    assert len(result) == 35
    assert result == "--4294967295,18446744073709551615--"


def test_catfmt_percent_and_unknown_spec():
    assert numfmt.catfmt("100%% and %q") == "100% and q"


def test_catfmt_sds_string_spec():
    assert numfmt.catfmt("[%S]", "inner") == "[inner]"


def test_catfmt_int_spec_round_trip():
    for value in (0, -1, 2**31 - 1, -(2**31)):
        assert int(numfmt.catfmt("%i", value)) == value


def test_catfmt_missing_argument():
    with pytest.raises(TypeError):
        numfmt.catfmt("%s and %s", "one")


def test_catfmt_wrong_argument_type():
    with pytest.raises(TypeError):
        numfmt.catfmt("%s", 5)
    with pytest.raises(TypeError):
        numfmt.catfmt("%i", "5")


def test_catfmt_overflow():
    with pytest.raises(OverflowError):
        numfmt.catfmt("%i", 2**31)
    with pytest.raises(OverflowError):
        numfmt.catfmt("%u", -1)
    with pytest.raises(OverflowError):
        numfmt.catfmt("%U", 2**64)


def test_ll2str_limits():
    assert numfmt.ll2str(LLONG_MIN) == "-9223372036854775808"
    assert numfmt.ll2str(LLONG_MAX) == "9223372036854775807"


@pytest.mark.parametrize("value", [0, 1, -1, 10, -987654321, 2**40])
def test_ll2str_round_trip(value):
    assert int(numfmt.ll2str(value)) == value


def test_ll2str_out_of_range():
    with pytest.raises(OverflowError):
        numfmt.ll2str(LLONG_MAX + 1)


def test_ull2str_limits():
    assert numfmt.ull2str(ULLONG_MAX) == "18446744073709551615"
    assert int(numfmt.ull2str(0)) == 0


def test_ull2str_rejects_negative():
    with pytest.raises(OverflowError):
        numfmt.ull2str(-1)


@pytest.mark.parametrize("value", [0, 7, 42, 2**31 - 1])
def test_itoa_round_trip(value):
    assert int(numfmt.itoa(value)) == value


def test_itoa_rejects_negative_and_overflow():
    with pytest.raises(ValueError):
        numfmt.itoa(-5)
    with pytest.raises(OverflowError):
        numfmt.itoa(2**31)


def test_bool_is_rejected():
    with pytest.raises(TypeError):
        numfmt.ll2str(True)