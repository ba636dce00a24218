import math

import pytest

from plcdsl.core import Id, SourceSpan
from plcdsl.literals import (
    BitStringLiteral,
    Boolean,
    BooleanLiteral,
    CharacterStringLiteral,
    ElementaryTypeName,
    FixedPoint,
    Integer,
    IntegerLiteral,
    RealLiteral,
    SignedInteger,
    TryFromIntegerError,
    Type,
    integer_constant,
)


def test_integer_new_ignores_underscores():
    assert Integer.new("1_000") == Integer.new("1000")
    assert str(Integer.new("42")) == "42"


def test_integer_new_empty_is_error():
    with pytest.raises(ValueError, match="dec"):
        Integer.new("")


def test_integer_new_beyond_128_bits_is_error():
    with pytest.raises(ValueError, match="dec"):
        Integer.new(str(2**128))
    assert Integer.new(str(2**128 - 1)).value == 2**128 - 1


def test_prefixed_bases_agree():
    hex_value = Integer.try_hex("16#F_F")
    assert hex_value == Integer.try_octal("8#377")
    assert hex_value == Integer.try_binary("2#1111_1111")
    assert hex_value.value == 255


@pytest.mark.parametrize(
    "func, text, message",
    [
        (Integer.try_hex, "FF", "Non-hex start"),
        (Integer.try_hex, "16#FG", "Non-hex characters"),
        (Integer.try_hex, "16#", "hex"),
        (Integer.try_octal, "16#7", "Non-octal start"),
        (Integer.try_octal, "8#78", "Non-octal characters"),
        (Integer.try_binary, "8#1", "Non-binary start"),
        (Integer.try_binary, "2#102", "Non-binary characters"),
    ],
)
def test_prefixed_errors(func, text, message):
    with pytest.raises(ValueError, match=message):
        func(text)


def test_unprefixed_bases_match_prefixed():
    assert Integer.hex("A_B") == Integer.try_hex("16#AB")
    assert Integer.octal("7_7") == Integer.try_octal("8#77")
    assert Integer.binary("1_01") == Integer.try_binary("2#101")


def test_integer_keeps_span():
    span = SourceSpan.range(3, 7)
    assert Integer.new("5", span).span().start == 3
    assert Integer.hex("5", span).span().end == 7


def test_to_u8_limits():
    assert Integer.new("255").to_u8() == 255
    with pytest.raises(TryFromIntegerError):
        Integer.new("256").to_u8()


def test_to_u32_limits():
    assert Integer.new(str(2**32 - 1)).to_u32() == 2**32 - 1
    with pytest.raises(TryFromIntegerError):
        Integer.new(str(2**32)).to_u32()


def test_to_i128_limits():
    assert Integer.new(str(2**127 - 1)).to_i128() == 2**127 - 1
    with pytest.raises(TryFromIntegerError):
        Integer.new(str(2**127)).to_i128()


def test_to_f64_requires_u32():
    assert Integer.new("7").to_f64() == 7.0
    with pytest.raises(TryFromIntegerError):
        Integer.new(str(2**32)).to_f64()


def test_to_f32_rounds_to_single_precision():
    assert Integer.new(str(2**24 + 1)).to_f32() == Integer.new(str(2**24)).to_f32()
    assert Integer.new(str(2**128 - 1)).to_f32() == math.inf


def test_signed_integer_signs():
    neg = SignedInteger.new("-5")
    assert neg.is_neg
    assert neg.to_i128() == -5
    assert neg.to_u8() == 5
    assert not SignedInteger.new("+5").is_neg
    assert SignedInteger.new("+5") == SignedInteger.new("5")


def test_signed_integer_str_round_trip():
    assert str(SignedInteger.new("-12")) == "-12"
    assert str(SignedInteger.new("12")) == "12"


def test_signed_integer_sign_only_is_error():
    with pytest.raises(ValueError):
        SignedInteger.new("-")


def test_positive_negative_and_from_integer():
    assert SignedInteger.positive("3") == SignedInteger.new("3")
    assert SignedInteger.negative("3") == SignedInteger.new("-3")
    assert SignedInteger.from_integer(Integer.new("9")) == SignedInteger.new("9")


def test_integer_constant():
    literal = integer_constant("-3")
    assert literal.value.to_i128() == -3
    assert literal.data_type is None
    assert literal == IntegerLiteral(SignedInteger.negative("3"))


def test_fixed_point_whole_number():
    value = FixedPoint.parse("12")
    assert (value.whole, value.femptos) == (12, 0)


def test_fixed_point_fraction_scale():
    assert FixedPoint.parse("1.000000000000001").femptos == 1
    assert FixedPoint.parse("0.1").femptos * 10 == FixedPoint.FRACTIONAL_UNITS


def test_fixed_point_ignores_underscores():
    assert FixedPoint.parse("1_000.25") == FixedPoint.parse("1000.25")


@pytest.mark.parametrize(
    "text, message",
    [
        ("1.0000000000000001", "excessive precision"),
        ("", "u64"),
        (".5", "whole not valid"),
        ("1.2.3", "decimal not valid"),
    ],
)
def test_fixed_point_errors(text, message):
    with pytest.raises(ValueError, match=message):
        FixedPoint.parse(text)


def test_fixed_point_from_integer():
    value = FixedPoint.from_integer(Integer.new("8"))
    assert value == FixedPoint.parse("8")


def test_real_literal_parse():
    literal = RealLiteral.try_parse("1_0.5", ElementaryTypeName.LREAL)
    assert literal.value == float("10.5")
    assert literal.data_type is ElementaryTypeName.LREAL
    assert RealLiteral.try_parse("1.5e3").value == float("1.5e3")


def test_real_literal_errors():
    with pytest.raises(ValueError, match="Non-real characters"):
        RealLiteral.try_parse("1.0x")
    with pytest.raises(ValueError, match="real"):
        RealLiteral.try_parse("e")


def test_type_is_case_insensitive():
    assert Type("abc") == Type("ABC")
    assert hash(Type("abc")) == hash(Type("ABC"))
    assert str(Type("MyType")) == "MyType"
    assert Type.from_id(Id("X")) == Type("x")


def test_type_span_is_name_span():
    name = Id("t").with_position(SourceSpan.range(4, 5))
    assert Type.from_id(name).span().start == 4


def test_elementary_type_name_ids():
    assert ElementaryTypeName.TIME_OF_DAY.as_id() == Id("time_of_day")
    assert str(ElementaryTypeName.DATE_AND_TIME.as_id()) == "DATE_AND_TIME"
    assert ElementaryTypeName.BOOL.as_type() == Type("BOOL")


def test_simple_literals_compare_by_value():
    assert BooleanLiteral(Boolean.TRUE) != BooleanLiteral(Boolean.FALSE)
    assert BooleanLiteral(Boolean.TRUE) == BooleanLiteral(Boolean.TRUE)
    assert CharacterStringLiteral("abc") == CharacterStringLiteral("abc")
    bits = BitStringLiteral(Integer.try_hex("16#FF"), ElementaryTypeName.BYTE)
    assert bits.value.to_u8() == Integer.try_binary("2#11111111").to_u8()