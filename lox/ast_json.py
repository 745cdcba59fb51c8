"""JSON serialization/deserialization for the Lox AST.

This module converts between Lox AST dataclasses and plain Python
dict/list structures suitable for JSON encoding. It supports a full
round-trip for all node types and for `Token`. A program is stored as the
list of its top-level statements.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from .ast import (
    Stmt,
    Binary,
    Grouping,
    Literal,
    Unary,
    Variable,
    Assign,
    Logical,
    Expression,
    Print,
    Var,
    Block,
    If,
    While,
)
from .tokens import Token, TokenType


def token_to_obj(t: Token) -> Dict[str, Any]:
    return {"type": t.type.name, "lexeme": t.lexeme, "literal": t.literal, "line": t.line}


def token_from_obj(o: Dict[str, Any]) -> Token:
    literal = o.get("literal")
    if isinstance(literal, int) and not isinstance(literal, bool):
        literal = float(literal)
    return Token(TokenType[o["type"]], o["lexeme"], literal, o["line"])


def literal_from_obj(value: Any) -> Any:
    # numbers are always floats at runtime, JSON may hand back ints
    if isinstance(value, int) and not isinstance(value, bool):
        return float(value)
    return value


def ast_to_obj(node: Any) -> Any:
    if node is None:
        return None
    if isinstance(node, list):
        return [ast_to_obj(n) for n in node]
    if isinstance(node, Token):
        return {"__type__": "Token", "value": token_to_obj(node)}

    # Expressions
    if isinstance(node, Binary):
        return {
            "type": "Binary",
            "left": ast_to_obj(node.left),
            "operator": ast_to_obj(node.operator),
            "right": ast_to_obj(node.right),
        }
    if isinstance(node, Grouping):
        return {"type": "Grouping", "expression": ast_to_obj(node.expression)}
    if isinstance(node, Literal):
        return {"type": "Literal", "value": node.value}
    if isinstance(node, Unary):
        return {"type": "Unary", "operator": ast_to_obj(node.operator), "right": ast_to_obj(node.right)}
    if isinstance(node, Variable):
        return {"type": "Variable", "name": ast_to_obj(node.name)}
    if isinstance(node, Assign):
        return {"type": "Assign", "name": ast_to_obj(node.name), "value": ast_to_obj(node.value)}
    if isinstance(node, Logical):
        return {
            "type": "Logical",
            "left": ast_to_obj(node.left),
            "operator": ast_to_obj(node.operator),
            "right": ast_to_obj(node.right),
        }

    # Statements
    if isinstance(node, Expression):
        return {"type": "Expression", "expression": ast_to_obj(node.expression)}
    if isinstance(node, Print):
        return {"type": "Print", "expression": ast_to_obj(node.expression)}
    if isinstance(node, Var):
        return {"type": "Var", "name": ast_to_obj(node.name), "initializer": ast_to_obj(node.initializer)}
    if isinstance(node, Block):
        return {"type": "Block", "statements": [ast_to_obj(s) for s in node.statements]}
    if isinstance(node, If):
        return {
            "type": "If",
            "condition": ast_to_obj(node.condition),
            "then_branch": ast_to_obj(node.then_branch),
            "else_branch": ast_to_obj(node.else_branch),
        }
    if isinstance(node, While):
        return {"type": "While", "condition": ast_to_obj(node.condition), "body": ast_to_obj(node.body)}

    raise TypeError(f"Unsupported node for serialization: {type(node).__name__}")


def ast_from_obj(obj: Any) -> Any:
    if obj is None:
        return None
    if isinstance(obj, list):
        return [ast_from_obj(o) for o in obj]
    if not isinstance(obj, dict):
        raise TypeError("Invalid AST object")
    if obj.get("__type__") == "Token":
        return token_from_obj(obj["value"])
    t = obj.get("type")
    if t == "Binary":
        return Binary(
            left=ast_from_obj(obj["left"]),
            operator=ast_from_obj(obj["operator"]),
            right=ast_from_obj(obj["right"]),
        )
    if t == "Grouping":
        return Grouping(expression=ast_from_obj(obj["expression"]))
    if t == "Literal":
        return Literal(value=literal_from_obj(obj.get("value")))
    if t == "Unary":
        return Unary(operator=ast_from_obj(obj["operator"]), right=ast_from_obj(obj["right"]))
    if t == "Variable":
        return Variable(name=ast_from_obj(obj["name"]))
    if t == "Assign":
        return Assign(name=ast_from_obj(obj["name"]), value=ast_from_obj(obj["value"]))
    if t == "Logical":
        return Logical(
            left=ast_from_obj(obj["left"]),
            operator=ast_from_obj(obj["operator"]),
            right=ast_from_obj(obj["right"]),
        )
    if t == "Expression":
        return Expression(expression=ast_from_obj(obj["expression"]))
    if t == "Print":
        return Print(expression=ast_from_obj(obj["expression"]))
    if t == "Var":
        return Var(name=ast_from_obj(obj["name"]), initializer=ast_from_obj(obj.get("initializer")))
    if t == "Block":
        return Block(statements=[ast_from_obj(s) for s in obj["statements"]])
    if t == "If":
        return If(
            condition=ast_from_obj(obj["condition"]),
            then_branch=ast_from_obj(obj["then_branch"]),
            else_branch=ast_from_obj(obj.get("else_branch")),
        )
    if t == "While":
        return While(condition=ast_from_obj(obj["condition"]), body=ast_from_obj(obj["body"]))

    raise ValueError(f"Unknown AST node type: {t}")


def program_to_obj(statements: List[Optional[Stmt]]) -> List[Any]:
    return [ast_to_obj(s) for s in statements]


def program_from_obj(data: Any) -> List[Stmt]:
    if not isinstance(data, list):
        raise TypeError("AST program must be a list of statements")
    return [ast_from_obj(s) for s in data]
