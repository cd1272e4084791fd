"""JSON serialization/deserialization for the Pastel AST.

This module converts between Pastel AST dataclasses and plain Python
dict/list structures suitable for JSON encoding. Every node carries a
``"type"`` key naming its class; decoding rebuilds an equal tree.
"""

from __future__ import annotations

from typing import Any, Dict

from .ast import (
    Program,
    VarDecl,
    CompoundStmt,
    AssignStmt,
    PrintStmt,
    IntegerLiteral,
    RealLiteral,
    BooleanLiteral,
    CharLiteral,
    StringLiteral,
    Identifier,
    BinaryExpr,
)


def ast_to_obj(node: Any) -> Any:
    if node is None:
        return None

    if isinstance(node, Program):
        return {
            "type": "Program",
            "name": node.name,
            "declarations": [ast_to_obj(d) for d in node.declarations],
            "main": ast_to_obj(node.main),
        }
    if isinstance(node, VarDecl):
        return {"type": "VarDecl", "name": node.name, "type_name": node.type_name}
    if isinstance(node, CompoundStmt):
        return {"type": "CompoundStmt", "statements": [ast_to_obj(s) for s in node.statements]}
    if isinstance(node, AssignStmt):
        return {"type": "AssignStmt", "name": node.name, "value": ast_to_obj(node.value)}
    if isinstance(node, PrintStmt):
        return {"type": "PrintStmt", "argument": ast_to_obj(node.argument)}
    if isinstance(node, BinaryExpr):
        return {
            "type": "BinaryExpr",
            "operator": node.operator,
            "left": ast_to_obj(node.left),
            "right": ast_to_obj(node.right),
        }
    if isinstance(node, Identifier):
        return {"type": "Identifier", "name": node.name}
    if isinstance(node, (IntegerLiteral, RealLiteral, BooleanLiteral, CharLiteral, StringLiteral)):
        return {"type": type(node).__name__, "value": node.value}

    raise TypeError(f"Unsupported node for serialization: {type(node).__name__}")


def ast_from_obj(obj: Any) -> Any:
    if obj is None:
        return None
    if not isinstance(obj, dict):
        raise TypeError("Invalid AST object")
    t = obj.get("type")
    if t == "Program":
        return Program(
            name=obj["name"],
            declarations=tuple(ast_from_obj(d) for d in obj["declarations"]),
            main=ast_from_obj(obj["main"]),
        )
    if t == "VarDecl":
        return VarDecl(name=obj["name"], type_name=obj["type_name"])
    if t == "CompoundStmt":
        return CompoundStmt(statements=tuple(ast_from_obj(s) for s in obj["statements"]))
    if t == "AssignStmt":
        return AssignStmt(name=obj["name"], value=ast_from_obj(obj["value"]))
    if t == "PrintStmt":
        return PrintStmt(argument=ast_from_obj(obj["argument"]))
    if t == "BinaryExpr":
        return BinaryExpr(
            left=ast_from_obj(obj["left"]),
            operator=obj["operator"],
            right=ast_from_obj(obj["right"]),
        )
    if t == "Identifier":
        return Identifier(name=obj["name"])
    if t == "IntegerLiteral":
        return IntegerLiteral(int(obj["value"]))
    if t == "RealLiteral":
        return RealLiteral(float(obj["value"]))
    if t == "BooleanLiteral":
        return BooleanLiteral(bool(obj["value"]))
    if t == "CharLiteral":
        return CharLiteral(str(obj["value"]))
    if t == "StringLiteral":
        return StringLiteral(str(obj["value"]))

    raise ValueError(f"Unknown AST node type: {t}")


def dump_program(program: Program) -> Dict[str, Any]:
    """Return a JSON-ready dict for a whole program."""
    return ast_to_obj(program)


def load_program(obj: Dict[str, Any]) -> Program:
    program = ast_from_obj(obj)
    if not isinstance(program, Program):
        raise ValueError(f"Expected a Program at the top level, got {obj.get('type')!r}")
    return program
