'''
Command line tests
'''

import io

from pc import __version__
from pc.cli import CLI
from pc.lexer import Lexer

from pytest import raises


def test_string(capsys):
    assert CLI().run(args=['-s', '1 2 + p']) == 0
    assert capsys.readouterr().out == '-1: 3\n'


def test_string_error(capsys):
    assert CLI().run(args=['-s', '1 foo p']) == 1
    captured = capsys.readouterr()
    assert captured.out == ''
    assert captured.err == 'Undefined operator: foo\n'


def test_file(tmp_path, capsys):
    script = tmp_path / 'script.pc'
    script.write_text('1 2\n+\n1 2 3 4 2 2 matrix p\n')
    assert CLI().run(args=[str(script)]) == 0
    assert capsys.readouterr().out == ('-1:\n'
                                       '    1 2\n'
                                       '    3 4\n'
                                       '-2: 3\n')


def test_string_wins_over_file(tmp_path, capsys):
    script = tmp_path / 'script.pc'
    script.write_text('1 p\n')
    assert CLI().run(args=['-s', '2 p', str(script)]) == 0
    assert capsys.readouterr().out == '-1: 2\n'


def test_piped_stdin(monkeypatch, capsys):
    monkeypatch.setattr('sys.stdin', io.StringIO('6 7\n* p\nfoo\n1 p\n'))
    assert CLI().run(args=[]) == 1
    captured = capsys.readouterr()
    assert captured.out == '-1: 42\n-1: 1\n-2: 42\n'
    assert captured.err == 'Undefined operator: foo\n'


def test_interactive_flag_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr('sys.stdin', io.StringIO('pi p\n'))
    assert CLI().run(args=['-i']) == 0
    assert capsys.readouterr().out == '-1: 3.141592653589793\n'


def test_interactive_and_string_exclusive(capsys):
    with raises(SystemExit):
        CLI().run(args=['-i', '-s', '1'])


def test_dump(capsys):
    assert CLI().run(args=['-D', '-s', '1 matrix + foo']) == 0
    assert capsys.readouterr().out.splitlines() == [
        '<kind>\t<repr(lexeme)>\t<pops>\t<pushes>',
        "number\t'1'\t0\t1",
        "identifier\t'matrix'\tn\t1",
        "identifier\t'+'\t2\t1",
        "identifier\t'foo'\t?\t?",
    ]


def test_raw_grammar(capsys):
    assert CLI().run(args=['-G']) == 0
    assert capsys.readouterr().out == Lexer.LEXEME + '\n'


def test_version(capsys):
    with raises(SystemExit):
        CLI().run(args=['--version'])
    assert __version__ in capsys.readouterr().out
