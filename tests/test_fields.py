import pytest

from ocrmatch.decoding import FieldKind, extract, project


def test_extract_text_is_case_insensitive():
    assert extract('{"text": "Login"}', "Text", FieldKind.TEXT) == "Login"
    assert extract('{"TEXT": "Login"}', "text", "text") == "Login"


def test_extract_text_requires_a_string_value():
    assert extract('{"Text": 42}', "Text", FieldKind.TEXT) == ""
    assert extract('{"Text": null}', "Text", FieldKind.TEXT) == ""


def test_extract_returns_zero_values_for_absent_fields():
    obj = '{"Other": 1}'

    assert extract(obj, "Text", FieldKind.TEXT) == ""
    assert extract(obj, "Left", FieldKind.INTEGER) == 0
    assert extract(obj, "Confidence", FieldKind.FLOAT) == 0.0


def test_extract_integer_accepts_negative_values():
    assert extract('{"Left": -12}', "Left", FieldKind.INTEGER) == -12


def test_extract_integer_truncates_fractional_numbers():
    assert extract('{"Left": 12.7}', "Left", FieldKind.INTEGER) == 12
    assert extract('{"Left": -3.9}', "Left", FieldKind.INTEGER) == -3


def test_extract_integer_rejects_quoted_numbers():
    assert extract('{"Left": "12"}', "Left", FieldKind.INTEGER) == 0


def test_extract_float_uses_period_decimal_separator():
    assert extract('{"Confidence": 93.5}', "Confidence", FieldKind.FLOAT) == pytest.approx(93.5)
    assert extract('{"Confidence": 93,5}', "Confidence", FieldKind.FLOAT) == pytest.approx(93.0)


def test_extract_float_promotes_integers():
    value = extract('{"Confidence": 88}', "Confidence", FieldKind.FLOAT)

    assert value == 88.0
    assert isinstance(value, float)


@pytest.mark.parametrize("raw", ["true", "false", '"high"', "[1]", '{"v": 1}', "null"])
def test_extract_numeric_kinds_default_on_wrong_shape(raw):
    obj = '{"Confidence": %s, "Left": %s}' % (raw, raw)

    assert extract(obj, "Confidence", FieldKind.FLOAT) == 0.0
    assert extract(obj, "Left", FieldKind.INTEGER) == 0


def test_extract_ignores_field_names_inside_nested_values():
    obj = '{"Meta": {"Left": 99}, "Note": "\\"Left\\": 5"}'

    assert extract(obj, "Left", FieldKind.INTEGER) == 0


def test_extract_never_raises_on_garbage():
    for obj in ["", "{", "}", '{"Left":', "not json", '{"Left": 1e999}']:
        assert extract(obj, "Left", FieldKind.INTEGER) == 0


def test_project_rejects_non_finite_floats():
    assert project(float("inf"), FieldKind.FLOAT) == 0.0
    assert project(float("nan"), FieldKind.INTEGER) == 0


def test_field_kind_zero_values():
    assert FieldKind.TEXT.zero == ""
    assert FieldKind.INTEGER.zero == 0
    assert FieldKind.FLOAT.zero == 0.0


def test_extract_integer_rejects_plus_sign():
    assert extract('{"Left": +5}', "Left", FieldKind.INTEGER) == 0
    assert extract('{"Confidence": +5}', "Confidence", FieldKind.FLOAT) == 5.0


def test_extract_integer_reads_leading_digits_of_exponent_form():
    assert extract('{"Left": 1e3}', "Left", FieldKind.INTEGER) == 1
    assert extract('{"Left": -2.5E2}', "Left", FieldKind.INTEGER) == -2
    assert extract('{"Confidence": 1e3}', "Confidence", FieldKind.FLOAT) == 1000.0


def test_project_truncates_plain_floats():
    assert project(7.9, FieldKind.INTEGER) == 7
