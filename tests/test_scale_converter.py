import math

import pytest

from fbgraphsdk.scale_converter import ScaleConverter


@pytest.fixture
def converter():
    return ScaleConverter()


def test_factor_one_is_identity(converter):
    assert converter.convert(42.5, float, "1", "en-US") == 42.5


def test_factor_two_doubles(converter):
    value = 17.25
    assert converter.convert(value, float, "2", None) == value + value


def test_trailing_text_is_ignored(converter):
    assert converter.convert(8.0, float, "0.5px", "en") == converter.convert(8.0, float, "0.5", "en")


def test_leading_whitespace_and_exponent(converter):
    assert converter.convert(3.0, float, "  1e0", "en") == 3.0


def test_integer_value_accepted(converter):
    assert converter.convert(4, float, "1", "en") == 4.0


def test_nan_factor(converter):
    result = converter.convert(1.0, float, "nan", "en")
    assert math.isnan(result)
    assert str(result) == "nan"


def test_wrong_target_type(converter):
    with pytest.raises(ValueError):
        converter.convert(1.0, int, "2", "en")


def test_unparsable_parameter(converter):
    with pytest.raises(ValueError):
        converter.convert(1.0, float, "abc", "en")


def test_non_numeric_value(converter):
    with pytest.raises(TypeError):
        converter.convert("1.0", float, "2", "en")


def test_convert_back_not_supported(converter):
    with pytest.raises(NotImplementedError):
        converter.convert_back(1.0, float, "2", "en")