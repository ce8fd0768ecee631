from pytest import Item, fixture

from pc.machine import Machine


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every assertion, in case we later need to audit a run.

    Excessive in most cases, so off by default; anything printed lands in
    capsys captures.

    Use with pytest -rP -o enable_assertion_pass_hook=true.
    '''
    print('given', item.name + ':' + str(lineno), str(orig))  # no repr()!
    print('actual', item.name + ':' + str(lineno),
          # Drop the full diff; -vv for that.
          '\n'.join(str(expl).splitlines()[:-2]))


@fixture
def machine():
    '''
    Machine with an empty stack.
    '''
    return Machine()
