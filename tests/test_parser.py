import pytest

from cwdata.model import CwArray, CwEntry, CwString, CwTable, as_array, as_string, as_table
from cwdata.parser import ParseFailure, ParseMode, ParserOptions, devolve, parse
from tests._shared_cases import INVALID_CASES, VALID_CASES, CwCase, case_id, case_source


def _assert_keystr(entry: CwEntry, key: str, value: str) -> None:
    assert entry.key == key
    assert as_string(entry.value) == value


@pytest.mark.parametrize("case", VALID_CASES, ids=case_id)
def test_valid_sources_parse(case: CwCase) -> None:
    assert isinstance(parse(case.source), CwTable)


@pytest.mark.parametrize("case", INVALID_CASES, ids=case_id)
def test_invalid_sources_fail_with_single_diagnostic(case: CwCase) -> None:
    with pytest.raises(ParseFailure) as excinfo:
        parse(case.source)

    assert excinfo.value.code == case.failure_code


def test_parse_value() -> None:
    data = parse(case_source("single_pair"))
    assert len(data.entries) == 1
    _assert_keystr(data.entries[0], "foo", "bar")


@pytest.mark.parametrize("name", ["pairs_on_separate_lines", "multiple_pairs_per_line", "trailing_comment"])
def test_parse_two_values(name: str) -> None:
    data = parse(case_source(name))
    assert len(data.entries) == 2
    _assert_keystr(data.entries[0], "foo", "bar")
    _assert_keystr(data.entries[1], "bar", "foo")


def test_parse_whitespace() -> None:
    data = parse(case_source("padded_whitespace"))
    assert len(data.entries) == 1
    _assert_keystr(data.entries[0], "foo", "bar")


def test_parse_quoted() -> None:
    data = parse(case_source("quoted_value"))
    _assert_keystr(data.entries[0], "foo", "I'm a little teapot")

    data = parse(r'foo="I\'m a little teapot \"short and stout\""')
    _assert_keystr(data.entries[0], "foo", 'I\'m a little teapot "short and stout"')


@pytest.mark.parametrize("name", ["nested_table", "nested_table_without_separator"])
def test_parse_nested(name: str) -> None:
    data = parse(case_source(name))
    assert len(data.entries) == 2
    _assert_keystr(data.entries[1], "cheeze", "unfrogged")

    table = as_table(data.entries[0].value)
    assert table is not None
    assert len(table.entries) == 2
    _assert_keystr(table.entries[0], "bar", "chickens")
    _assert_keystr(table.entries[1], "foobar", "frogs")


def test_parse_array() -> None:
    data = parse(case_source("keyless_array"))
    assert len(data.entries) == 1
    assert data.entries[0].key == "foo"

    array = as_array(data.entries[0].value)
    assert array == [CwString("why"), CwString("does this"), CwString("exist")]


def test_illustrative_document_shape() -> None:
    data = parse(case_source("illustrative_document"))

    assert data.keys() == ["name", "color", "nested"]
    assert data.get_string("name") == "Some Value"
    assert data.get("color") == CwArray([CwString("12"), CwString("34"), CwString("56")])

    nested = data.get_table("nested")
    assert nested is not None
    assert nested.entries == [
        CwEntry("inner_key", CwString("plain_word")),
        CwEntry("", CwString("also_keyless_bareword")),
    ]


def test_state_history_document_keeps_repeated_keys_in_order() -> None:
    data = parse(case_source("state_history_document"))
    state = data.get_table("state")
    assert state is not None
    history = state.get_table("history")
    assert history is not None

    assert history.get_string("owner") == "FRA"
    assert [as_string(value) for value in history.get_all("add_core_of")] == ["FRA", "COR"]
    assert history.get_table("1939.1.1") == CwTable([CwEntry("owner", CwString("GER"))])
    assert as_array(state.get("provinces")) == [CwString("3838"), CwString("9851"), CwString("11713")]


def test_separators_are_interchangeable() -> None:
    expected = [CwEntry("a", CwString("b")), CwEntry("c", CwString("d"))]

    assert parse("a=b#c\nc=d").entries == expected
    assert parse("a=b\nc=d").entries == expected
    assert parse("a = b\n\nc = d").entries == expected
    assert parse(case_source("crlf_line_endings")).entries == expected


def test_unicode_whitespace_separates_entries() -> None:
    data = parse(case_source("unicode_whitespace_separators"))

    assert data.keys() == ["a", "c", "e"]


def test_c0_separator_character_ends_the_table() -> None:
    with pytest.raises(ParseFailure) as excinfo:
        parse(case_source("c0_separator_is_not_whitespace"))

    assert excinfo.value.code == "PARSER_UNEXPECTED_CONTENT"
    assert (excinfo.value.line, excinfo.value.column) == (1, 4)


def test_words_with_combining_vowel_signs() -> None:
    data = parse(case_source("words_with_combining_vowel_signs"))

    assert data.get_string("hindi") == "हिंदी"
    assert data.get_string("thai") == "สวัสดี"
    assert data.get_string("bengali") == "বাংলা"


def test_comment_may_sit_between_key_and_equals() -> None:
    assert parse(case_source("comment_between_key_and_equals")).entries == [CwEntry("a", CwString("b"))]


def test_key_value_is_preferred_over_two_keyless_values() -> None:
    assert parse("a = b").entries == [CwEntry("a", CwString("b"))]


def test_words_without_equals_are_keyless_entries() -> None:
    assert parse("a b").entries == [CwEntry("", CwString("a")), CwEntry("", CwString("b"))]


def test_top_level_is_never_devolved() -> None:
    data = parse("a b c")

    assert isinstance(data, CwTable)
    assert len(data) == 3


def test_unseparated_nesting() -> None:
    data = parse("foo={bar=1}baz=2")

    assert data.entries == [
        CwEntry("foo", CwTable([CwEntry("bar", CwString("1"))])),
        CwEntry("baz", CwString("2")),
    ]


def test_duplicate_keys_are_kept_and_first_wins() -> None:
    data = parse("a=1\na=2")

    assert len(data) == 2
    assert data.get_string("a") == "1"


def test_empty_group_devolves_to_empty_array() -> None:
    assert parse(case_source("empty_group")).get("a") == CwArray([])


def test_group_with_one_keyed_entry_stays_a_table() -> None:
    value = parse("g = { x y k = v z }").get("g")

    assert isinstance(value, CwTable)
    assert value.keys() == ["", "", "k", ""]


def test_all_keyless_group_devolves_with_order_preserved() -> None:
    value = parse("g = { 3 { a = 1 } \"two\" { } }").get("g")

    assert value == CwArray(
        [
            CwString("3"),
            CwTable([CwEntry("a", CwString("1"))]),
            CwString("two"),
            CwArray([]),
        ]
    )


def test_devolve_rule() -> None:
    assert devolve([]) == CwArray([])
    assert devolve([CwEntry("", CwString("x"))]) == CwArray([CwString("x")])
    assert devolve([CwEntry("", CwString("x")), CwEntry("k", CwString("y"))]) == CwTable(
        [CwEntry("", CwString("x")), CwEntry("k", CwString("y"))]
    )


def test_adjacent_quoted_values() -> None:
    assert as_array(parse(case_source("adjacent_quoted_values")).get("list")) == [
        CwString("a"),
        CwString("b"),
        CwString(""),
    ]


def test_escape_fidelity() -> None:
    assert parse('"\\n"').entries == [CwEntry("", CwString("\n"))]
    assert parse('"\\q"').entries == [CwEntry("", CwString("q"))]


def test_quoted_values_keep_inner_whitespace_and_newlines() -> None:
    assert parse(case_source("multiline_quoted_value")).get_string("desc") == "line one\nline two"


def test_full_consumption_failure_position() -> None:
    with pytest.raises(ParseFailure) as excinfo:
        parse("a=1 }")

    failure = excinfo.value
    assert failure.code == "PARSER_UNEXPECTED_CONTENT"
    assert (failure.line, failure.column) == (1, 5)
    assert str(failure).startswith("1:5: ")


def test_missing_closing_brace_reported_at_end_of_input() -> None:
    with pytest.raises(ParseFailure) as excinfo:
        parse(case_source("missing_closing_brace"))

    assert (excinfo.value.line, excinfo.value.column) == (3, 1)


def test_missing_value_reported_after_equals() -> None:
    with pytest.raises(ParseFailure) as excinfo:
        parse("x = \n")

    assert excinfo.value.code == "PARSER_EXPECTED_VALUE"
    assert (excinfo.value.line, excinfo.value.column) == (2, 1)


def test_unterminated_string_reported_at_opening_quote() -> None:
    with pytest.raises(ParseFailure) as excinfo:
        parse(case_source("unterminated_string"))

    assert (excinfo.value.line, excinfo.value.column) == (1, 5)


def test_strict_mode_rejects_unknown_escapes() -> None:
    assert parse('a = "\\q"', mode=ParseMode.LENIENT).get_string("a") == "q"

    with pytest.raises(ParseFailure) as excinfo:
        parse('a = "\\q"', mode=ParseMode.STRICT)
    assert excinfo.value.code == "LEXER_INVALID_ESCAPE"


def test_strict_mode_accepts_known_escapes() -> None:
    assert parse('a = "tab\\there"', mode=ParseMode.STRICT).get_string("a") == "tab\there"


def test_nesting_limit() -> None:
    options = ParserOptions(max_depth=2)

    assert parse("a={b={c=1}}", options).get_table("a") is not None
    with pytest.raises(ParseFailure) as excinfo:
        parse("a={b={c={d=1}}}", options)
    assert excinfo.value.code == "PARSER_NESTING_TOO_DEEP"


def test_default_nesting_limit() -> None:
    depth = ParserOptions().max_depth
    assert depth is not None

    parse("{" * depth + "}" * depth)
    with pytest.raises(ParseFailure):
        parse("{" * (depth + 1) + "}" * (depth + 1))


def test_deep_nesting_builds_nested_arrays() -> None:
    data = parse("{{{}}}")

    assert data.entries == [CwEntry("", CwArray([CwArray([CwArray([])])]))]


def test_options_and_mode_are_mutually_exclusive() -> None:
    with pytest.raises(ValueError, match="either options or mode"):
        parse("a=1", ParserOptions(), mode=ParseMode.STRICT)


def test_options_for_mode() -> None:
    assert ParserOptions.for_mode(ParseMode.STRICT).strict_escapes is True
    assert ParserOptions.for_mode(ParseMode.LENIENT).strict_escapes is False


def test_max_depth_must_be_positive() -> None:
    with pytest.raises(ValueError):
        ParserOptions(max_depth=0)


def test_table_parse_entrypoint() -> None:
    assert CwTable.parse("a=1") == parse("a=1")
