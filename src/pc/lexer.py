from functools import reduce
import operator

import regex


class Lexer:
    '''
    Lexer for the postfix calculator's *regular* grammar.

    Lexemes are numbers, identifiers (anything else that isn't space), and
    the space between them. For consistency, needs to be instantiated,
    despite holding no internal state.
    '''
    # Mantissa of a number
    MANTISSA = r'''
                (?:
                    # 1, 12, 1. (notice trailing dot), 1.5
                    [0-9]+
                    (?:
                        \.
                        [0-9]*
                    )?
                    |
                    # .5
                    \.
                    [0-9]+
                )
                '''
    # Optional exponent
    EXPONENT = r'''
                (?:
                    e
                    [+-]?
                    [0-9]+
                )
                '''
    # Number, of any kind a float literal can spell.
    # String formatting and regex is a tricky business, because of the braces.
    # It works here. Be careful in general!
    NUMBER = r'''
              [+-]?
              (?:
                  inf(?:inity)?
                  |
                  nan
                  |
                  {MANTISSA}
                  {EXPONENT}?
              )
              # Whole token or nothing: 5x is an identifier, not 5 then x.
              (?!\S)
              '''.format(MANTISSA=MANTISSA, EXPONENT=EXPONENT)
    # Operator or function name, resolved by the machine
    IDENTIFIER = r'\S+'
    SPACE = r'\s+'

    # All possible lexemes. Order matters: numbers win over identifiers.
    LEXEME = r'(?<number>' + NUMBER + r')|' \
             r'(?<identifier>' + IDENTIFIER + r')|' \
             r'(?<space>' + SPACE + r')'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.IGNORECASE,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def lex(self, line):
        '''
        Take a line and yield all lexemes, left to right.
        '''
        pattern = regex.compile(type(self).LEXEME, flags=type(self).FLAGS)
        position = 0
        while position < len(line):
            match = pattern.match(line, position)
            yield match
            position = match.end()

    def isfeedable(self, match):
        '''
        Return True if lexeme can be fed to machine.
        '''
        return 'space' not in self.matchedgroups(match).keys()

    def kind(self, match):
        '''
        Return which of number, identifier or space the lexeme is.
        '''
        kind, = self.matchedgroups(match).keys()
        return kind

    def matchedgroups(self, match):
        '''
        Return the lexeme's matched group, by kind.
        '''
        return {key: value
                for key, value
                in match.groupdict().items()
                if value}
