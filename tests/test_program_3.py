from pathlib import Path

from tinypas.__main__ import main

PROGRAMS = Path(__file__).parent / 'programs'


def test_program_3_nested_procedures(capsys):
    main(['--show-env', str(PROGRAMS / 'program_3.pas')])
    out = capsys.readouterr().out.strip().splitlines()
    # Procedure bodies are checked but never run, so z is never assigned
    assert out == ['Success!', 'a = Int(10)']
