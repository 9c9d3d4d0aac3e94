import json
from pathlib import Path

import pytest

from tinypas.ast_json import ast_from_obj, ast_to_obj
from tinypas.parser import parse_program

PROGRAMS = Path(__file__).parent / 'programs'


def test_program_survives_json():
    program = parse_program((PROGRAMS / 'program_4.pas').read_text(encoding='utf-8'))
    text = json.dumps(ast_to_obj(program))
    assert ast_from_obj(json.loads(text)) == program


def test_object_shape():
    program = parse_program('PROGRAM p; VAR a : INTEGER; BEGIN a := -1.5 END.')
    obj = ast_to_obj(program)
    assert obj['type'] == 'Program'
    assert obj['name'] == 'p'
    assert obj['block']['declarations'] == [{
        'type': 'Declaration',
        'var': {'type': 'Var', 'name': 'a'},
        'type_spec': {'type': 'TypeSpec', 'builtin': 'INTEGER'},
    }]
    assign = obj['block']['compound_statement']['children'][0]
    assert assign['value'] == {
        'type': 'UnaryOp',
        'op': '-',
        'operand': {'type': 'RealLiteral', 'value': 1.5},
    }


def test_unknown_node_type():
    with pytest.raises(ValueError):
        ast_from_obj({'type': 'WhileStmt'})


def test_invalid_object():
    with pytest.raises(TypeError):
        ast_from_obj(['Program'])
    with pytest.raises(TypeError):
        ast_to_obj(42)
