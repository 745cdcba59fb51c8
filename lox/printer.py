"""Debug printer rendering Lox syntax trees as parenthesized text.

`print 1 + 2 * 3;` becomes ``(print (+ 1 (* 2 3)))``. The printer is a
diagnostic aid only and plays no part in execution.
"""

from __future__ import annotations

from typing import Optional

from .ast import (
    ExprVisitor, StmtVisitor, Expr, Stmt,
    Binary, Grouping, Literal, Unary, Variable, Assign, Logical,
    Expression, Print, Var, Block, If, While,
)
from .types import stringify


class AstPrinter(ExprVisitor[str], StmtVisitor[str]):
    def print(self, node: Optional[Expr | Stmt]) -> str:
        if node is None:
            return '<error>'
        return node.accept(self)

    def parenthesize(self, name: str, *parts: Expr | Stmt | str) -> str:
        rendered = [part if isinstance(part, str) else part.accept(self) for part in parts]
        return '(' + ' '.join([name, *rendered]) + ')'

    def visit_binary_expr(self, expr: Binary) -> str:
        return self.parenthesize(expr.operator.lexeme, expr.left, expr.right)

    def visit_grouping_expr(self, expr: Grouping) -> str:
        return self.parenthesize('group', expr.expression)

    def visit_literal_expr(self, expr: Literal) -> str:
        if isinstance(expr.value, str):
            return f'"{expr.value}"'
        return stringify(expr.value)

    def visit_unary_expr(self, expr: Unary) -> str:
        return self.parenthesize(expr.operator.lexeme, expr.right)

    def visit_variable_expr(self, expr: Variable) -> str:
        return expr.name.lexeme

    def visit_assign_expr(self, expr: Assign) -> str:
        return self.parenthesize('=', expr.name.lexeme, expr.value)

    def visit_logical_expr(self, expr: Logical) -> str:
        return self.parenthesize(expr.operator.lexeme, expr.left, expr.right)

    def visit_expression_stmt(self, stmt: Expression) -> str:
        return self.parenthesize(';', stmt.expression)

    def visit_print_stmt(self, stmt: Print) -> str:
        return self.parenthesize('print', stmt.expression)

    def visit_var_stmt(self, stmt: Var) -> str:
        if stmt.initializer is None:
            return self.parenthesize('var', stmt.name.lexeme)
        return self.parenthesize('var', stmt.name.lexeme, stmt.initializer)

    def visit_block_stmt(self, stmt: Block) -> str:
        return self.parenthesize('block', *stmt.statements)

    def visit_if_stmt(self, stmt: If) -> str:
        if stmt.else_branch is None:
            return self.parenthesize('if', stmt.condition, stmt.then_branch)
        return self.parenthesize('if-else', stmt.condition, stmt.then_branch, stmt.else_branch)

    def visit_while_stmt(self, stmt: While) -> str:
        return self.parenthesize('while', stmt.condition, stmt.body)
