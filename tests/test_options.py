import pytest

from probity.options import (
    OptionError,
    Options,
    argument_matches,
    is_string_in_bigger_string,
    parse_options,
    test_matches as selects_test,
)


def test_parse_no_arguments_gives_defaults():
    options = parse_options(["prog"])
    assert options == Options()
    assert options.include_named is None
    assert options.exclude_named is None
    assert options.verbosity == 1
    assert options.list_tests is False


@pytest.mark.parametrize("flag", ["-n", "-f"])
def test_parse_include_with_equals(flag):
    options = parse_options(["prog", flag + "=testFoo"])
    assert options.include_named == "testFoo"


@pytest.mark.parametrize("flag", ["-n", "-f"])
def test_parse_include_as_next_argument(flag):
    options = parse_options(["prog", flag, "testFoo"])
    assert options.include_named == "testFoo"


def test_parse_exclude_both_forms():
    assert parse_options(["prog", "-x=testBar"]).exclude_named == "testBar"
    assert parse_options(["prog", "-x", "testBar"]).exclude_named == "testBar"


def test_parse_verbosity_flags():
    assert parse_options(["prog", "-q"]).verbosity == 0
    assert parse_options(["prog", "-v"]).verbosity == 2
    assert parse_options(["prog", "-q", "-v"]).verbosity == 2


def test_parse_list_stops_parsing():
    options = parse_options(["prog", "-n=keep", "-l", "-z"])
    assert options.list_tests is True
    assert options.include_named == "keep"


def test_parse_ignores_plain_arguments_and_program_name():
    options = parse_options(["-z", "plain", "-x", "skip"])
    assert options.exclude_named == "skip"
    assert options.include_named is None


def test_parse_missing_include_value():
    with pytest.raises(OptionError, match="No Test String to Include Matches For"):
        parse_options(["prog", "-n"])


def test_parse_missing_exclude_value():
    with pytest.raises(OptionError, match="No Test String to Exclude Matches For"):
        parse_options(["prog", "-x"])


def test_parse_unknown_option():
    with pytest.raises(OptionError, match="Unknown Option z"):
        parse_options(["prog", "-z"])


def test_wildcard_matches_anything():
    assert is_string_in_bigger_string("anything", "*") == 1


def test_substring_match_and_miss():
    assert is_string_in_bigger_string("testFooBar", "Foo") == 1
    assert is_string_in_bigger_string("testFooBar", "Baz") == 0


def test_colon_reports_file_part_match():
    assert is_string_in_bigger_string("test/test_arrays.c", "test_arrays.c:testFoo") == 2


def test_empty_short_string_never_matches():
    assert is_string_in_bigger_string("abc", "") == 0


def test_none_long_string_does_not_match():
    assert is_string_in_bigger_string(None, "abc") == 0


def test_argument_matches_file_name():
    assert argument_matches("test_arrays", "test/test_arrays.c", "testFoo") is True


def test_argument_matches_test_name():
    assert argument_matches("testFoo", "a.c", "testFoo") is True
    assert argument_matches("Foo", "a.c", "testFoo") is True


def test_argument_matches_file_and_test():
    assert argument_matches("test_arrays.c:testFoo", "test/test_arrays.c", "testFoo") is True
    assert argument_matches("test_arrays.c:testFoo", "test/test_arrays.c", "testBar") is False


def test_argument_matches_comma_list():
    assert argument_matches("nomatch,testFoo", "a.c", "testFoo") is True
    assert argument_matches("nomatch,other", "a.c", "testFoo") is False


def test_argument_matches_quoted():
    assert argument_matches("'testFoo'", "a.c", "testFoo") is True
    assert argument_matches('"testFoo"', "a.c", "testFoo") is True


def test_selection_without_options_selects_all():
    assert selects_test(Options(), "a.c", "testFoo") is True


def test_selection_include():
    options = parse_options(["prog", "-n=testFoo"])
    assert selects_test(options, "a.c", "testFoo") is True
    assert selects_test(options, "a.c", "testBar") is False


def test_selection_exclude_wins():
    options = parse_options(["prog", "-n=test", "-x=Bar"])
    assert selects_test(options, "a.c", "testFoo") is True
    assert selects_test(options, "a.c", "testBar") is False