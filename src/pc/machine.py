from .util import UndefinedOperator, wrap_user_errors
from .lexer import Lexer
from .operators import OPERATORS
from .stack import Stack
from .value import Value


class Machine:
    '''
    Stack machine (postfix calculator).

    Takes lines, or lexemes, and runs them against its stack.
    '''

    def __init__(self, stack=None, operators=OPERATORS):
        '''
        Create stack machine.

        :param stack: Stack to work on; a fresh empty one if not given.
        :param operators: Mapping of names to stack operations.
        '''
        self.stack = Stack() if stack is None else stack
        self.operators = operators
        self.lexer = Lexer()

    def evaluate(self, line):
        '''
        Run every lexeme of line, in order.

        Whatever ran before an error stays done; the rest of the line doesn't
        run.
        '''
        for match in self.lexer.lex(line):
            if self.lexer.isfeedable(match):
                self.feed(self.lexer.matchedgroups(match))

    def feed(self, groups):
        '''
        Stack or run lexeme on machine.

        :param groups: Matched lexeme groups, by kind.
        '''
        parsed = self.parse(groups)
        if self.isstackable(groups):
            self.stack.push(parsed)
        else:
            parsed(self.stack)

    def parse(self, groups):
        '''
        Parse lexeme into a Value, or the operation an identifier names.
        '''
        if 'number' in groups:
            return Value.number(self._iconvert(groups['number']))
        elif 'identifier' in groups:
            return self.dispatch(groups['identifier'])

    def isstackable(self, groups):
        '''
        Return true if stackable lexeme (a number), rather than runnable.
        '''
        return 'number' in groups

    def dispatch(self, identifier):
        '''
        Return operation registered under identifier.
        '''
        try:
            return self.operators[identifier]
        except KeyError:
            raise UndefinedOperator(identifier) from None

    # Guard only: the lexer hands over float literals.
    @wrap_user_errors('Cannot convert {1}')
    def _iconvert(self, number):
        '''
        Convert number lexeme to float.
        '''
        return float(number)


def evaluate(expression):
    '''
    Evaluate expression on a fresh, empty stack, and return the stack.
    '''
    machine = Machine()
    machine.evaluate(expression)
    return machine.stack
