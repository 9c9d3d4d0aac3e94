"""JSON serialization/deserialization for the Pascal subset AST.

This module converts between the AST dataclasses and plain Python
dict/list structures suitable for JSON encoding. It supports a full
round-trip for every node type.
"""

from __future__ import annotations

from typing import Any, Dict

from .ast import (
    Program,
    Block,
    Declaration,
    TypeSpec,
    IntegerLiteral,
    RealLiteral,
    BinaryOp,
    UnaryOp,
    Compound,
    Assign,
    Var,
    Procedure,
    Parameter,
    NoOp,
)
from .types import BuiltinType


def ast_to_obj(node: Any) -> Dict[str, Any]:
    if isinstance(node, Program):
        return {"type": "Program", "name": node.name, "block": ast_to_obj(node.block)}
    if isinstance(node, Block):
        return {
            "type": "Block",
            "declarations": [ast_to_obj(d) for d in node.declarations],
            "compound_statement": ast_to_obj(node.compound_statement),
        }
    if isinstance(node, Declaration):
        return {"type": "Declaration", "var": ast_to_obj(node.var), "type_spec": ast_to_obj(node.type_spec)}
    if isinstance(node, Parameter):
        return {"type": "Parameter", "var": ast_to_obj(node.var), "type_spec": ast_to_obj(node.type_spec)}
    if isinstance(node, TypeSpec):
        return {"type": "TypeSpec", "builtin": node.type.value}
    if isinstance(node, Procedure):
        return {
            "type": "Procedure",
            "name": node.name,
            "params": [ast_to_obj(p) for p in node.params],
            "block": ast_to_obj(node.block),
        }
    if isinstance(node, Compound):
        return {"type": "Compound", "children": [ast_to_obj(c) for c in node.children]}
    if isinstance(node, Assign):
        return {"type": "Assign", "target": ast_to_obj(node.target), "value": ast_to_obj(node.value)}
    if isinstance(node, NoOp):
        return {"type": "NoOp"}
    if isinstance(node, BinaryOp):
        return {"type": "BinaryOp", "op": node.op, "left": ast_to_obj(node.left), "right": ast_to_obj(node.right)}
    if isinstance(node, UnaryOp):
        return {"type": "UnaryOp", "op": node.op, "operand": ast_to_obj(node.operand)}
    if isinstance(node, IntegerLiteral):
        return {"type": "IntegerLiteral", "value": node.value}
    if isinstance(node, RealLiteral):
        return {"type": "RealLiteral", "value": node.value}
    if isinstance(node, Var):
        return {"type": "Var", "name": node.name}

    raise TypeError(f"Unsupported node for serialization: {type(node).__name__}")


def ast_from_obj(obj: Any) -> Any:
    if not isinstance(obj, dict):
        raise TypeError("Invalid AST object")
    t = obj.get("type")
    if t == "Program":
        return Program(name=obj["name"], block=ast_from_obj(obj["block"]))
    if t == "Block":
        return Block(
            declarations=tuple(ast_from_obj(d) for d in obj["declarations"]),
            compound_statement=ast_from_obj(obj["compound_statement"]),
        )
    if t == "Declaration":
        return Declaration(var=ast_from_obj(obj["var"]), type_spec=ast_from_obj(obj["type_spec"]))
    if t == "Parameter":
        return Parameter(var=ast_from_obj(obj["var"]), type_spec=ast_from_obj(obj["type_spec"]))
    if t == "TypeSpec":
        return TypeSpec(type=BuiltinType(obj["builtin"]))
    if t == "Procedure":
        return Procedure(
            name=obj["name"],
            params=tuple(ast_from_obj(p) for p in obj["params"]),
            block=ast_from_obj(obj["block"]),
        )
    if t == "Compound":
        return Compound(children=tuple(ast_from_obj(c) for c in obj["children"]))
    if t == "Assign":
        return Assign(target=ast_from_obj(obj["target"]), value=ast_from_obj(obj["value"]))
    if t == "NoOp":
        return NoOp()
    if t == "BinaryOp":
        return BinaryOp(left=ast_from_obj(obj["left"]), op=obj["op"], right=ast_from_obj(obj["right"]))
    if t == "UnaryOp":
        return UnaryOp(op=obj["op"], operand=ast_from_obj(obj["operand"]))
    if t == "IntegerLiteral":
        return IntegerLiteral(value=int(obj["value"]))
    if t == "RealLiteral":
        return RealLiteral(value=float(obj["value"]))
    if t == "Var":
        return Var(name=obj["name"])

    raise ValueError(f"Unknown AST node type: {t}")
