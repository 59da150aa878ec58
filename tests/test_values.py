import pytest

from ocrmatch.decoding import NumberLiteral, ValueSyntaxError, parse_members, parse_value


def test_parse_value_builds_native_tree():
    tree = parse_value('{"a": [1, 2.5, -3, true, false, null], "b": {"c": "d"}}')

    assert tree == {"a": [1, 2.5, -3, True, False, None], "b": {"c": "d"}}
    assert isinstance(tree["a"][0], int)
    assert isinstance(tree["a"][1], float)


def test_parse_value_resolves_escapes_in_one_pass():
    assert parse_value(r'"a\"b\\c\nd\re\tf\/g"') == 'a"b\\c\nd\re\tf/g'
    # an escaped backslash followed by n stays a backslash and an n
    assert parse_value(r'"\\n"') == "\\n"


def test_parse_value_resolves_unicode_escapes():
    assert parse_value(r'"don\u0027t \u00e9"') == "don't \u00e9"


def test_parse_value_keeps_unknown_escapes_verbatim():
    assert parse_value(r'"C:\Temp\x"') == r"C:\Temp\x"


def test_parse_value_accepts_signed_numbers_and_exponents():
    assert parse_value("+7") == 7
    assert parse_value("-0.25") == -0.25
    assert parse_value("1e3") == 1000.0


@pytest.mark.parametrize("text", ['"open', "[1, 2", "{\"a\" 1}", "NaN", "1 2", ""])
def test_parse_value_rejects_malformed_input(text):
    with pytest.raises(ValueSyntaxError):
        parse_value(text)


def test_parse_members_reads_top_level_keys_only():
    members = parse_members('{"Text": "a", "Meta": {"Left": 9}, "Left": 3}')

    assert members == {"Text": "a", "Meta": {"Left": 9}, "Left": 3}


def test_parse_members_first_duplicate_wins():
    assert parse_members('{"Left": 1, "Left": 2}') == {"Left": 1}


def test_parse_members_skips_malformed_member_and_keeps_the_rest():
    members = parse_members('{"Left": abc, "Top": 5, "Width": 1.2.3, "Height": 4}')

    assert "Left" not in members
    assert members["Top"] == 5
    assert members["Height"] == 4


def test_parse_members_resyncs_past_broken_nested_value():
    members = parse_members('{"Meta": {"a": }, "Left": 3}')

    assert members == {"Left": 3}


def test_parse_members_tolerates_missing_comma_between_members():
    assert parse_members('{"Text": "a" "Left": 2}') == {"Text": "a", "Left": 2}


def test_parse_members_tolerates_unquoted_keys_by_skipping_them():
    assert parse_members('{Text: "a", "Top": 1}') == {"Top": 1}


def test_parse_members_honours_bounds():
    text = 'xx{"Left": 1}yy{"Left": 2}'

    assert parse_members(text, 2, 13) == {"Left": 1}
    assert parse_members(text, 15) == {"Left": 2}


@pytest.mark.parametrize("text", ["", "[]", "null", "   ", '"Text"'])
def test_parse_members_non_object_yields_empty_mapping(text):
    assert parse_members(text) == {}


def test_parse_members_handles_truncated_object():
    assert parse_members('{"Text": "a", "Left": 4') == {"Text": "a", "Left": 4}


def test_parse_value_joins_surrogate_pairs():
    assert parse_value(r'"ok \ud83d\ude00"') == "ok \U0001F600"
    assert parse_value(r'"\ud83d\ude00"') == "\U0001F600"


@pytest.mark.parametrize("text", [r'"\ud83d"', r'"\ud83d x"', r'"\ude00"', r'"\ud83dA"'])
def test_parse_value_replaces_lone_surrogates(text):
    value = parse_value(text)

    assert "\ufffd" in value
    value.encode("utf-8")


def test_parse_value_keeps_lexeme_for_non_plain_numbers():
    assert isinstance(parse_value("-12"), int)
    assert parse_value("+5").lexeme == "+5"
    assert parse_value("1e3").lexeme == "1e3"
    assert isinstance(parse_value("2.5"), NumberLiteral)
