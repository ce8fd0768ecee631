'''
Operator table: names to stack operations.

Every operation takes the stack, checks its operands in place, and only
then pops them and pushes its result, so a rejected operation leaves the
stack as it found it.
'''

from types import MappingProxyType
import math
import sys
import operator

import numpy

from .util import MatrixTypeError, UnsupportedOperation
from .value import Matrix, Value


def _arity(pops, pushes):
    '''
    Record how many values an operation pops and pushes (None if variable).
    '''
    def decorator(f):
        f.pops = pops
        f.pushes = pushes
        return f
    return decorator


def _ieee(f):
    '''
    Run float function on float64 operands: inf and NaN instead of errors.
    '''
    def wrapped(*args):
        with numpy.errstate(all='ignore'):
            return float(f(*map(numpy.float64, args)))
    return wrapped


def _nullary(constant):
    @_arity(0, 1)
    def operation(stack):
        stack.push(Value.number(constant))
    return operation


def _unary(f):
    f = _ieee(f)

    @_arity(1, 1)
    def operation(stack):
        value, = stack.peek()
        if not value.isnumber():
            raise UnsupportedOperation(value)
        stack.pop()
        stack.push(Value.number(f(value.tonumber())))
    return operation


def _binary(f, matrices=None):
    '''
    Wrap float function of (lower, top) into an operation.

    :param matrices: Function of two Matrices, if matrices are allowed too.
    '''
    f = _ieee(f)

    @_arity(2, 1)
    def operation(stack):
        # If you don't reverse, you'll do 2**9 when you say 9 2 ^ instead of
        # 9**2.
        right, left = stack.peek(2)
        if left.isnumber() and right.isnumber():
            result = Value.number(f(left.tonumber(), right.tonumber()))
        elif matrices is not None and left.ismatrix() and right.ismatrix():
            result = Value.matrix(matrices(left.tomatrix(),
                                           right.tomatrix()))
        else:
            raise UnsupportedOperation(left, right)
        stack.pop(2)
        stack.push(result)
    return operation


def _size(value):
    '''
    Truncate matrix size to a non-negative integer.

    Saturates: NaN and negatives are 0, anything too big (inf included) is
    sys.maxsize.
    '''
    number = value.tonumber()
    if math.isnan(number) or number < 1:
        return 0
    elif number >= sys.maxsize:
        return sys.maxsize
    return int(number)


@_arity(None, 1)
def matrix(stack):
    '''
    Build a matrix: elements, then row count, then column count on top.

    1 2 3 4 2 2 matrix is the 2x2 matrix with rows 1 2 and 3 4.
    '''
    col_value, row_value = stack.peek(2)
    if not (row_value.isnumber() and col_value.isnumber()):
        raise MatrixTypeError('Matrix size must be numbers',
                              row_value, col_value)
    rows, cols = _size(row_value), _size(col_value)
    elements = stack.peek(2 + rows * cols)[2:]
    for element in elements:
        if not element.isnumber():
            raise MatrixTypeError('Matrix elements must be numbers', element)
    stack.pop(2 + rows * cols)
    # Elements come off the stack last pushed first.
    stack.push(Value.matrix(Matrix(rows, cols,
                                   [element.tonumber()
                                    for element
                                    in reversed(elements)])))


@_arity(0, 0)
def printstack(stack):
    '''
    Print all elements on the stack, top of the stack first.

    Top is -1, the one below -2, and so on, like Python negative indices.
    '''
    for i in range(len(stack)):
        value = stack[~i]
        # Matrices start on the next line.
        print('{}:{}{}'.format(~i, '' if value.ismatrix() else ' ', value))


def _cot(x):
    return numpy.float64(1.0) / numpy.tan(x)


def _acot(x):
    return numpy.arctan(numpy.float64(1.0) / x)


OPERATORS = MappingProxyType({
    'pi': _nullary(math.pi),
    'matrix': matrix,

    # Arithmetic
    '+': _binary(operator.__add__, matrices=operator.__add__),
    '-': _binary(operator.__sub__, matrices=operator.__sub__),
    '*': _binary(operator.__mul__),
    '/': _binary(operator.__truediv__),
    '^': _binary(numpy.power),

    # Trigonometry and friends
    'sin': _unary(numpy.sin),
    'cos': _unary(numpy.cos),
    'tan': _unary(numpy.tan),
    'cot': _unary(_cot),
    'exp': _unary(numpy.exp),
    'asin': _unary(numpy.arcsin),
    'acos': _unary(numpy.arccos),
    'atan': _unary(numpy.arctan),
    'acot': _unary(_acot),
    'atan2': _binary(numpy.arctan2),

    'p': printstack,
})
