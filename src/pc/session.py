import sys
import traceback

from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory

from .util import PCError
from .machine import Machine


class InteractiveInput:
    '''
    Lines typed at a prompt, with editing and recall of earlier lines.

    Iterating reads a line at a time until end of input (Ctrl-D) or an
    interrupted read (Ctrl-C). History lasts as long as this object.
    '''

    def __init__(self, prompt, *, vi_mode=False, **kwargs):
        '''
        :param kwargs: Passed on to PromptSession (e.g., input, output).
        '''
        self.prompt = prompt
        self.vi_mode = vi_mode
        self.history = InMemoryHistory()
        self.kwargs = kwargs

    def __iter__(self):
        session = PromptSession(message=self.prompt,
                                vi_mode=self.vi_mode,
                                enable_suspend=True,
                                enable_open_in_editor=True,
                                # Not persistent
                                history=self.history,
                                prompt_continuation=' ' * len(self.prompt),
                                # Certainly not! But be explicit.
                                erase_when_done=False,
                                **self.kwargs)
        while True:
            try:
                yield session.prompt()
            except (EOFError, KeyboardInterrupt):
                return


class Session:
    '''
    Feed lines to one machine, keeping its stack from line to line.
    '''

    def __init__(self, machine=None, *, fatal=False, verbose=False,
                 file=None):
        '''
        :param fatal: Re-raise evaluation errors instead of reporting them.
        :param verbose: Show stack traces on bad user commands.
        :param file: Where to report errors; stderr by default.
        '''
        self.machine = Machine() if machine is None else machine
        self.fatal = fatal
        self.verbose = verbose
        self.errors = 0
        self.file = file

    @property
    def stack(self):
        return self.machine.stack

    def run(self, lines):
        '''
        Evaluate every line, in order. Return number of failed lines.
        '''
        for line in lines:
            self.feed(line)
        return self.errors

    def feed(self, line):
        '''
        Evaluate one line. Return True if it ran to the end.
        '''
        try:
            self.machine.evaluate(line)
        # Abort entire rest of line, makes sense anyway
        except PCError as e:
            self.errors += 1
            if self.fatal:
                raise
            self.report(e)
            return False
        return True

    def report(self, error):
        file = sys.stderr if self.file is None else self.file
        if self.verbose:
            traceback.print_exception(type(error), error,
                                      error.__traceback__, file=file)
        print(error.args[0], file=file)
