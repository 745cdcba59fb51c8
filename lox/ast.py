"""Abstract Syntax Tree (AST) definitions for Lox.

Two closed families of nodes are defined here: expressions and statements.
Nodes are immutable once the parser builds them. Consumers such as the
interpreter and the debug printer implement `ExprVisitor` / `StmtVisitor`;
both declare one abstract method per node kind, so a visitor that forgets a
kind cannot be instantiated.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Generic, List, Optional, TypeVar

from .tokens import Token

R = TypeVar('R')


class ExprVisitor(ABC, Generic[R]):
    @abstractmethod
    def visit_binary_expr(self, expr: 'Binary') -> R: ...

    @abstractmethod
    def visit_grouping_expr(self, expr: 'Grouping') -> R: ...

    @abstractmethod
    def visit_literal_expr(self, expr: 'Literal') -> R: ...

    @abstractmethod
    def visit_unary_expr(self, expr: 'Unary') -> R: ...

    @abstractmethod
    def visit_variable_expr(self, expr: 'Variable') -> R: ...

    @abstractmethod
    def visit_assign_expr(self, expr: 'Assign') -> R: ...

    @abstractmethod
    def visit_logical_expr(self, expr: 'Logical') -> R: ...


class StmtVisitor(ABC, Generic[R]):
    @abstractmethod
    def visit_expression_stmt(self, stmt: 'Expression') -> R: ...

    @abstractmethod
    def visit_print_stmt(self, stmt: 'Print') -> R: ...

    @abstractmethod
    def visit_var_stmt(self, stmt: 'Var') -> R: ...

    @abstractmethod
    def visit_block_stmt(self, stmt: 'Block') -> R: ...

    @abstractmethod
    def visit_if_stmt(self, stmt: 'If') -> R: ...

    @abstractmethod
    def visit_while_stmt(self, stmt: 'While') -> R: ...


@dataclass(frozen=True)
class Expr:
    """Base class for expression nodes."""
    def accept(self, visitor: ExprVisitor[R]) -> R:
        raise NotImplementedError


@dataclass(frozen=True)
class Binary(Expr):
    left: Expr
    operator: Token
    right: Expr

    def accept(self, visitor: ExprVisitor[R]) -> R:
        return visitor.visit_binary_expr(self)


@dataclass(frozen=True)
class Grouping(Expr):
    expression: Expr

    def accept(self, visitor: ExprVisitor[R]) -> R:
        return visitor.visit_grouping_expr(self)


@dataclass(frozen=True)
class Literal(Expr):
    value: Any  # None, bool, float or str

    def accept(self, visitor: ExprVisitor[R]) -> R:
        return visitor.visit_literal_expr(self)


@dataclass(frozen=True)
class Unary(Expr):
    operator: Token
    right: Expr

    def accept(self, visitor: ExprVisitor[R]) -> R:
        return visitor.visit_unary_expr(self)


@dataclass(frozen=True)
class Variable(Expr):
    name: Token

    def accept(self, visitor: ExprVisitor[R]) -> R:
        return visitor.visit_variable_expr(self)


@dataclass(frozen=True)
class Assign(Expr):
    name: Token
    value: Expr

    def accept(self, visitor: ExprVisitor[R]) -> R:
        return visitor.visit_assign_expr(self)


@dataclass(frozen=True)
class Logical(Expr):
    left: Expr
    operator: Token  # AND or OR
    right: Expr

    def accept(self, visitor: ExprVisitor[R]) -> R:
        return visitor.visit_logical_expr(self)


@dataclass(frozen=True)
class Stmt:
    """Base class for statement nodes."""
    def accept(self, visitor: StmtVisitor[R]) -> R:
        raise NotImplementedError


@dataclass(frozen=True)
class Expression(Stmt):
    expression: Expr

    def accept(self, visitor: StmtVisitor[R]) -> R:
        return visitor.visit_expression_stmt(self)


@dataclass(frozen=True)
class Print(Stmt):
    expression: Expr

    def accept(self, visitor: StmtVisitor[R]) -> R:
        return visitor.visit_print_stmt(self)


@dataclass(frozen=True)
class Var(Stmt):
    name: Token
    initializer: Optional[Expr]

    def accept(self, visitor: StmtVisitor[R]) -> R:
        return visitor.visit_var_stmt(self)


@dataclass(frozen=True)
class Block(Stmt):
    statements: List[Stmt]

    def accept(self, visitor: StmtVisitor[R]) -> R:
        return visitor.visit_block_stmt(self)


@dataclass(frozen=True)
class If(Stmt):
    condition: Expr
    then_branch: Stmt
    else_branch: Optional[Stmt]

    def accept(self, visitor: StmtVisitor[R]) -> R:
        return visitor.visit_if_stmt(self)


@dataclass(frozen=True)
class While(Stmt):
    condition: Expr
    body: Stmt

    def accept(self, visitor: StmtVisitor[R]) -> R:
        return visitor.visit_while_stmt(self)
