from functools import wraps
from decimal import Decimal

import math


class PCError(Exception):
    pass


class StackUnderflow(PCError):
    def __init__(self, n):
        super().__init__('Less than {} element(s) on stack'.format(n))
        self.n = n


class UnsupportedOperation(PCError):
    def __init__(self, *values):
        if len(values) == 1:
            message = 'Unsupported operation on {}'.format(*values)
        else:
            message = 'Unsupported operations on {}'.format(
                ' and '.join(map(str, values)))
        super().__init__(message)
        self.values = values


class MatrixTypeError(UnsupportedOperation):
    '''
    Matrix sizes and elements must be numbers.
    '''
    def __init__(self, message, *values):
        PCError.__init__(self, message)
        self.values = values


class UndefinedOperator(PCError):
    def __init__(self, identifier):
        super().__init__('Undefined operator: {}'.format(identifier))
        self.identifier = identifier


class DimensionMismatch(PCError):
    def __init__(self, left, right):
        super().__init__('Dimension mismatch: {}x{} and {}x{}'.format(
            *left, *right))
        self.shapes = left, right


def wrap_user_errors(fmt):
    '''
    Ugly hack decorator that converts exceptions to user errors.

    Passes through PCErrors.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except PCError:
                raise
            except Exception as e:
                raise PCError(fmt.format(*args, **kwargs), e)
        return wrapper
    return decorator


def format_number(number):
    '''
    Shortest round-tripping decimal text for number.

    Never uses exponent notation, and drops the .0 of integral values, so
    3.0 shows as 3 and 1e-07 as 0.0000001.
    '''
    if math.isnan(number):
        return 'NaN'
    elif math.isinf(number):
        return 'inf' if number > 0 else '-inf'
    text = repr(float(number))
    if 'e' in text:
        text = format(Decimal(text), 'f')
    if text.endswith('.0'):
        text = text[:-2]
    return text
