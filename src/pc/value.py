'''
Values living on the calculator stack: numbers and matrices.
'''

import operator

import numpy

from .util import DimensionMismatch, format_number


class Matrix:
    '''
    Fixed size two dimensional block of floats, stored row-major.

    Keeps its own shape next to a flat array, so a matrix with no elements
    may have any number of rows or columns.
    '''

    def __init__(self, rows, cols, data):
        '''
        Create rows by cols matrix.

        :param data: rows * cols numbers, row after row.
        '''
        data = numpy.array(data, dtype=numpy.float64).ravel()
        if data.size != rows * cols:
            raise ValueError('{}x{} matrix needs {} element(s), got {}'.format(
                rows, cols, rows * cols, data.size))
        data.flags.writeable = False
        self.rows = rows
        self.cols = cols
        self._data = data

    @property
    def shape(self):
        return self.rows, self.cols

    @property
    def data(self):
        '''
        All elements, row-major.
        '''
        return tuple(self._data.tolist())

    def __getitem__(self, index):
        row, col = index
        return float(self._data[row * self.cols + col])

    def _elementwise(self, other, f):
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            raise DimensionMismatch(self.shape, other.shape)
        with numpy.errstate(all='ignore'):
            result = f(self._data, other._data)
        return type(self)(self.rows, self.cols, result)

    def __add__(self, other):
        return self._elementwise(other, operator.__add__)

    def __sub__(self, other):
        return self._elementwise(other, operator.__sub__)

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return (self.shape == other.shape and
                numpy.array_equal(self._data, other._data, equal_nan=True))

    def __repr__(self):
        return '{}({}, {}, {})'.format(type(self).__name__,
                                       self.rows, self.cols, list(self.data))

    def __str__(self):
        # Nothing to show without elements, however many rows.
        if not self._data.size:
            return ''
        return '\n'.join('    ' + ' '.join(format_number(self[row, col])
                                           for col
                                           in range(self.cols))
                         for row
                         in range(self.rows))


class Value:
    '''
    Tagged union of a number (float) or a Matrix.

    Consumers ask which variant they hold rather than relying on the
    payload's own methods; the set of variants is closed.
    '''

    NUMBER = 'number'
    MATRIX = 'matrix'

    __slots__ = 'kind', 'payload'

    def __init__(self, kind, payload):
        if kind not in {type(self).NUMBER, type(self).MATRIX}:
            raise ValueError('No such value kind {}'.format(repr(kind)))
        self.kind = kind
        self.payload = payload

    @classmethod
    def number(cls, number):
        return cls(cls.NUMBER, float(number))

    @classmethod
    def matrix(cls, matrix):
        return cls(cls.MATRIX, matrix)

    def isnumber(self):
        return self.kind == type(self).NUMBER

    def ismatrix(self):
        return self.kind == type(self).MATRIX

    def tonumber(self):
        '''
        Return the float, or None if not a number.
        '''
        return self.payload if self.isnumber() else None

    def tomatrix(self):
        '''
        Return the Matrix, or None if not a matrix.
        '''
        return self.payload if self.ismatrix() else None

    def __eq__(self, other):
        if not isinstance(other, Value):
            return NotImplemented
        return self.kind == other.kind and self.payload == other.payload

    __hash__ = None

    def __repr__(self):
        return '{}.{}({})'.format(type(self).__name__, self.kind,
                                  repr(self.payload))

    def __str__(self):
        if self.isnumber():
            return format_number(self.payload)
        # Grid starts on its own line, under the stack index.
        grid = str(self.payload)
        return '\n' + grid if grid else ''
