'''
Value, Matrix and Stack tests
'''

import math
import sys

from pc.util import DimensionMismatch, StackUnderflow, format_number
from pc.stack import Stack
from pc.value import Matrix, Value

from pytest import mark, raises


def test_number_variant():
    v = Value.number(2)
    assert v.isnumber() and not v.ismatrix()
    assert v.tonumber() == 2.0
    assert isinstance(v.tonumber(), float)
    assert v.tomatrix() is None


def test_matrix_variant():
    m = Matrix(1, 2, [1, 2])
    v = Value.matrix(m)
    assert v.ismatrix() and not v.isnumber()
    assert v.tomatrix() is m
    assert v.tonumber() is None


def test_bad_kind():
    with raises(ValueError):
        Value('string', 'foo')


def test_row_major():
    m = Matrix(2, 3, [1, 2, 3, 4, 5, 6])
    assert (m.rows, m.cols) == (2, 3)
    assert m[0, 2] == 3.0
    assert m[1, 0] == 4.0
    assert m.data == (1.0, 2.0, 3.0, 4.0, 5.0, 6.0)


def test_construction_length_mismatch():
    with raises(ValueError):
        Matrix(2, 2, [1, 2, 3])


def test_add_sub():
    a = Matrix(2, 2, [1, 2, 3, 4])
    b = Matrix(2, 2, [5, 6, 7, 8])
    assert a + b == Matrix(2, 2, [6, 8, 10, 12])
    assert b - a == Matrix(2, 2, [4, 4, 4, 4])
    # Operands untouched
    assert a.data == (1.0, 2.0, 3.0, 4.0)


@mark.parametrize('shape', [(1, 4), (4, 1), (2, 1)])
def test_dimension_mismatch(shape):
    a = Matrix(2, 2, [1, 2, 3, 4])
    b = Matrix(*shape, [0] * (shape[0] * shape[1]))
    with raises(DimensionMismatch, match='2x2'):
        a + b
    with raises(DimensionMismatch):
        a - b


def test_matrix_str():
    assert str(Matrix(2, 2, [1, 2.5, 3, 4])) == '    1 2.5\n    3 4'
    assert str(Value.matrix(Matrix(1, 1, [7]))) == '\n    7'


@mark.parametrize('number, text', [(3.0, '3'),
                                   (0.5, '0.5'),
                                   (-2.0, '-2'),
                                   (-0.0, '-0'),
                                   (2 * math.pi, '6.283185307179586'),
                                   (1e20, '100000000000000000000'),
                                   (1e-7, '0.0000001'),
                                   (math.inf, 'inf'),
                                   (-math.inf, '-inf'),
                                   (math.nan, 'NaN')])
def test_format_number(number, text):
    assert format_number(number) == text
    assert str(Value.number(number)) == text


def test_stack_pop_topmost_first():
    s = Stack([Value.number(1), Value.number(2), Value.number(3)])
    assert s.pop(2) == [Value.number(3), Value.number(2)]
    assert list(s) == [Value.number(1)]


def test_stack_peek_leaves_stack():
    s = Stack([Value.number(1), Value.number(2)])
    assert s.peek(2) == [Value.number(2), Value.number(1)]
    assert len(s) == 2


def test_stack_underflow_pops_nothing():
    s = Stack([Value.number(1)])
    with raises(StackUnderflow, match='Less than 2 element'):
        s.pop(2)
    with raises(StackUnderflow):
        s.peek(2)
    assert list(s) == [Value.number(1)]
    s.pop()
    with raises(StackUnderflow):
        s.pop()


def test_empty_matrix_str():
    m = Matrix(sys.maxsize, 0, [])
    assert (m.rows, m.cols) == (sys.maxsize, 0)
    assert str(m) == ''
    assert str(Value.matrix(m)) == ''
