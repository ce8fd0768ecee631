from argparse import ArgumentParser, FileType, OPTIONAL
import sys

from . import __version__
from .util import PCError
from .machine import Machine
from .lexer import Lexer
from .session import InteractiveInput, Session


class CLI:
    '''
    Command line interface to the postfix calculator.
    '''

    DEFAULT_PROMPT = '> '

    def dumper(self):
        '''
        Dump all lexemes, their kind, and arity.
        '''
        machine = Machine()
        lexer = Lexer()
        print('<kind>\t<repr(lexeme)>\t<pops>\t<pushes>')
        for line in self._lines():
            for match in lexer.lex(line):
                if not lexer.isfeedable(match):
                    continue
                groups = lexer.matchedgroups(match)
                try:
                    parsed = machine.parse(groups)
                except PCError:
                    pops = pushes = '?'
                else:
                    pops = getattr(parsed, 'pops', 0)
                    pushes = getattr(parsed, 'pushes', 1)
                print(lexer.kind(match),
                      repr(match.group(0)),
                      'n' if pops is None else pops,
                      pushes,
                      sep='\t')
        return 0

    def executor(self):
        '''
        Run machine (postfix calculator).
        '''
        session = Session(verbose=self.args.verbose)
        if self.args.string is not None:
            # One shot: fresh stack, discarded on exit.
            session.feed(self.args.string)
        else:
            session.run(self._lines())
        return 1 if session.errors else 0

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        print(Lexer.LEXEME)
        return 0

    def _lines(self):
        '''
        Return lines to evaluate, according to mode.

        Interactive wins over a single expression, which wins over a file.
        '''
        if self.args.interactive:
            return self._prompting_input()
        elif self.args.string is not None:
            return [self.args.string]
        elif self.args.filename is not None:
            return self.args.filename
        return self._prompting_input()

    def _prompting_input(self):
        '''
        Return line editor, or plain stdin.

        Line editor if either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           sys.stdin.isatty() and sys.stdout.isatty():
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT,
                                    vi_mode=self.args.vi)
        else:
            return sys.stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(
            prog='pc',
            description='A postfix calculator')
        self.argument_parser.add_argument('--version', action='version',
                                          version='%(prog)s ' + __version__)
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        self.argument_parser.add_argument('filename', nargs=OPTIONAL,
                                          type=FileType('r'),
                                          help='evaluate file line by line')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-i', '--interactive',
                                       action='store_true')
        int_nonint_groups.add_argument('-s', '--string',
                                       metavar='STRING',
                                       help='evaluate STRING on an empty '
                                            'stack and exit')
        self.argument_parser.add_argument('-p', '--prompt',
                                          nargs=OPTIONAL,
                                          const=self.DEFAULT_PROMPT)
        self.argument_parser.add_argument('--vi', action='store_true',
                                          help='vi key bindings')
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or process command line args.

        Return exit status.
        '''
        self.args = self.argument_parser.parse_args(args)
        try:
            return self.args.action()
        except KeyboardInterrupt:
            return 1
        finally:
            if self.args.filename is not None:
                self.args.filename.close()


def main():
    sys.exit(CLI().run())
