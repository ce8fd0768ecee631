'''
pc: a postfix calculator.

Numbers and matrices on a stack, operators after their operands:

    > 1 2 3 4 2 2 matrix 5 6 7 8 2 2 matrix + p
    -1:
        6 8
        10 12

Plain old arithmetic (+ - * / ^), pi, the trigonometric functions and their
inverses (sin cos tan cot asin acos atan acot atan2), exp, matrix to build a
matrix out of the numbers on the stack, and p to print the stack. Not
intended to be Turing-complete! No variables, no control flow.
'''

__version__ = '0.0.1'

from .cli import CLI
from .lexer import Lexer
from .machine import Machine, evaluate
from .session import Session
from .stack import Stack
from .value import Matrix, Value


__all__ = ('Machine', 'Lexer', 'CLI', 'Session', 'Stack', 'Matrix', 'Value',
           'evaluate')
