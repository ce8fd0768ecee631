from collections import deque

from .util import StackUnderflow


class Stack:
    '''
    Operand stack of Values. Grows and shrinks at the top only.
    '''

    def __init__(self, values=()):
        self._values = deque(values)

    def push(self, *new):
        '''
        Push all elements onto stack, leftmost at the bottom.
        '''
        self._values.extend(new)

    def peek(self, n=1):
        '''
        Return n elements from the top of the stack, topmost first.

        Leaves the stack untouched, like a pop that changed its mind.
        '''
        self._require(n)
        return [self._values[-i] for i in range(1, n + 1)]

    def pop(self, n=1):
        '''
        Pop n elements from the stack, topmost first.

        Pops nothing unless all n are there.
        '''
        self._require(n)
        return [self._values.pop() for _ in range(n)]

    def _require(self, n):
        if len(self._values) < n:
            raise StackUnderflow(n)

    def __len__(self):
        return len(self._values)

    def __iter__(self):
        # Bottom to top
        return iter(self._values)

    def __getitem__(self, index):
        return self._values[index]

    def __eq__(self, other):
        if isinstance(other, Stack):
            return list(self) == list(other)
        return NotImplemented

    __hash__ = None

    def __repr__(self):
        return '{}({})'.format(type(self).__name__, list(self._values))
