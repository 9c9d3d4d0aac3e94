from pathlib import Path

from tinypas.__main__ import main

PROGRAMS = Path(__file__).parent / 'programs'


def test_program_6_comments_and_reals(capsys):
    main(['--show-env', str(PROGRAMS / 'program_6.pas')])
    out = capsys.readouterr().out.strip().splitlines()
    assert out == [
        'Success!',
        'pi = Real(3.14)',
        'radius = Real(2.0)',
        'area = Real(12.56)',
        'sides = Int(3)',
    ]
