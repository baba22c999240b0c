import math

import pytest

from lox.types import NIL, Nil, format_number, is_truthy, to_string, type_name, values_equal


def test_nil_is_a_singleton():
    assert Nil() is NIL
    assert repr(NIL) == 'nil'


def test_format_number():
    assert format_number(2.0) == '2'
    assert format_number(-3.0) == '-3'
    assert format_number(123.0) == '123'
    assert format_number(2.5) == '2.5'
    assert format_number(0.1) == '0.1'
    assert format_number(math.inf) == 'inf'
    assert format_number(-math.inf) == '-inf'
    assert format_number(math.nan) == 'nan'


def test_format_number_large_and_signed_zero():
    assert format_number(1e17) == '100000000000000000'
    assert format_number(1e25) == '10000000000000000000000000'
    assert format_number(-1e25) == '-10000000000000000000000000'
    assert format_number(-0.0) == '-0'
    assert format_number(0.0) == '0'


def test_signed_zeros_print_differently_and_are_unequal():
    assert to_string(-0.0) == '-0'
    assert not values_equal(-0.0, 0.0)


def test_to_string():
    assert to_string(NIL) == 'nil'
    assert to_string(None) == 'nil'
    assert to_string(True) == 'true'
    assert to_string(False) == 'false'
    assert to_string('text') == 'text'
    assert to_string(7.0) == '7'


@pytest.mark.parametrize('value', [NIL, None, False])
def test_falsy_values(value):
    assert not is_truthy(value)


@pytest.mark.parametrize('value', [0.0, '', True, 'false', -1.0])
def test_truthy_values(value):
    assert is_truthy(value)


def test_equality_requires_same_tag():
    assert not values_equal('1', 1.0)
    assert not values_equal('true', True)
    assert not values_equal('nil', NIL)
    assert values_equal(NIL, None)
    assert values_equal(1.0, 1.0)
    assert values_equal('a', 'a')
    assert not values_equal(1.0, 2.0)


def test_type_name_rejects_foreign_values():
    assert type_name(1.0) == 'Number'
    assert type_name(True) == 'Boolean'
    with pytest.raises(TypeError):
        type_name(object())
