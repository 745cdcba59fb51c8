"""Tree-walking interpreter for Lox.

The interpreter evaluates the statements produced by the parser against a
chain of `Environment` frames. One global frame lives as long as the
interpreter itself, so consecutive `interpret` calls share definitions.
A `LoxRuntimeError` aborts the remaining statements of the current call and
is reported through the session `Reporter`.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator, List, Optional, TextIO

from .ast import (
    ExprVisitor, StmtVisitor, Expr, Stmt,
    Binary, Grouping, Literal, Unary, Variable, Assign, Logical,
    Expression, Print, Var, Block, If, While,
)
from .environment import Environment
from .errors import LoxRuntimeError, Reporter
from .tokens import Token, TokenType
from .types import divide, is_equal, is_number, is_truthy, stringify, type_name


class Interpreter(ExprVisitor[Any], StmtVisitor[None]):
    """Core interpreter that executes Lox statements."""
    def __init__(self, reporter: Optional[Reporter] = None, out: Optional[TextIO] = None,
                 debug_level: int = 0, debug_file: Optional[TextIO] = None):
        self.reporter = reporter if reporter is not None else Reporter()
        self.out = out
        self.globals = Environment()
        self.environment = self.globals
        self.debug_level = debug_level
        self.debug_fp = debug_file

    def debug(self, msg: str):
        if self.debug_level > 0:
            if self.debug_fp:
                self.debug_fp.write(msg + '\n')
                self.debug_fp.flush()
            else:
                print(msg)

    # Public API
    def interpret(self, statements: List[Optional[Stmt]]):
        if self.debug_level >= 1:
            self.debug(f"interpret {len(statements)} statement(s)")
        try:
            for stmt in statements:
                if stmt is not None:
                    self.execute(stmt)
        except LoxRuntimeError as error:
            if self.debug_level >= 1:
                self.debug(f"runtime error at line {error.token.line}: {error.message}")
            self.reporter.runtime_error(error)

    def execute(self, stmt: Stmt):
        stmt.accept(self)

    def evaluate(self, expr: Expr) -> Any:
        return expr.accept(self)

    @contextmanager
    def scope(self, environment: Environment) -> Iterator[Environment]:
        """Make `environment` current, restoring the previous frame on exit."""
        previous = self.environment
        self.environment = environment
        try:
            yield environment
        finally:
            self.environment = previous

    def execute_block(self, statements: List[Stmt], environment: Environment):
        with self.scope(environment):
            for stmt in statements:
                self.execute(stmt)

    # Statements
    def visit_expression_stmt(self, stmt: Expression) -> None:
        self.evaluate(stmt.expression)

    def visit_print_stmt(self, stmt: Print) -> None:
        value = self.evaluate(stmt.expression)
        print(stringify(value), file=self.out)

    def visit_var_stmt(self, stmt: Var) -> None:
        value = None
        if stmt.initializer is not None:
            value = self.evaluate(stmt.initializer)
        self.environment.define(stmt.name.lexeme, value)
        if self.debug_level >= 2:
            self.debug(f"define {stmt.name.lexeme}: {type_name(value)} = {stringify(value)}"
                       f" (depth {self.environment.depth})")

    def visit_block_stmt(self, stmt: Block) -> None:
        self.execute_block(stmt.statements, Environment(self.environment))

    def visit_if_stmt(self, stmt: If) -> None:
        truthy = is_truthy(self.evaluate(stmt.condition))
        if self.debug_level >= 3:
            self.debug(f"if condition at line {self.line_of(stmt.condition)} -> {truthy}")
        if truthy:
            self.execute(stmt.then_branch)
        elif stmt.else_branch is not None:
            self.execute(stmt.else_branch)

    def visit_while_stmt(self, stmt: While) -> None:
        iterations = 0
        while is_truthy(self.evaluate(stmt.condition)):
            self.execute(stmt.body)
            iterations += 1
        if self.debug_level >= 3:
            self.debug(f"while loop at line {self.line_of(stmt.condition)} ran {iterations} time(s)")

    # Expressions
    def visit_literal_expr(self, expr: Literal) -> Any:
        return expr.value

    def visit_grouping_expr(self, expr: Grouping) -> Any:
        return self.evaluate(expr.expression)

    def visit_variable_expr(self, expr: Variable) -> Any:
        return self.environment.get(expr.name)

    def visit_assign_expr(self, expr: Assign) -> Any:
        value = self.evaluate(expr.value)
        self.environment.assign(expr.name, value)
        if self.debug_level >= 2:
            self.debug(f"assign {expr.name.lexeme} = {stringify(value)}")
        return value

    def visit_logical_expr(self, expr: Logical) -> Any:
        left = self.evaluate(expr.left)
        if expr.operator.type == TokenType.OR:
            if is_truthy(left):
                return left
        elif not is_truthy(left):
            return left
        return self.evaluate(expr.right)

    def visit_unary_expr(self, expr: Unary) -> Any:
        right = self.evaluate(expr.right)
        op = expr.operator.type
        if op == TokenType.BANG:
            return not is_truthy(right)
        if op == TokenType.MINUS:
            self.check_number_operand(expr.operator, right)
            return -right
        raise LoxRuntimeError(expr.operator, f"Unknown unary operator '{expr.operator.lexeme}'.")

    def visit_binary_expr(self, expr: Binary) -> Any:
        # left operand first; the order is observable through assignments
        left = self.evaluate(expr.left)
        right = self.evaluate(expr.right)
        op = expr.operator.type

        if op == TokenType.PLUS:
            if is_number(left) and is_number(right):
                return left + right
            if isinstance(left, str) and isinstance(right, str):
                return left + right
            raise LoxRuntimeError(expr.operator, 'Operands must be two numbers or two strings.')
        if op == TokenType.EQUAL_EQUAL:
            return is_equal(left, right)
        if op == TokenType.BANG_EQUAL:
            return not is_equal(left, right)

        self.check_number_operands(expr.operator, left, right)
        if op == TokenType.MINUS:
            return left - right
        if op == TokenType.STAR:
            return left * right
        if op == TokenType.SLASH:
            return divide(left, right)
        if op == TokenType.GREATER:
            return left > right
        if op == TokenType.GREATER_EQUAL:
            return left >= right
        if op == TokenType.LESS:
            return left < right
        if op == TokenType.LESS_EQUAL:
            return left <= right
        raise LoxRuntimeError(expr.operator, f"Unknown binary operator '{expr.operator.lexeme}'.")

    # Helpers
    def check_number_operand(self, operator: Token, operand: Any):
        if not is_number(operand):
            raise LoxRuntimeError(operator, 'Operand must be a number.')

    def check_number_operands(self, operator: Token, left: Any, right: Any):
        if not (is_number(left) and is_number(right)):
            raise LoxRuntimeError(operator, 'Operands must be numbers.')

    def line_of(self, expr: Expr) -> Optional[int]:
        """Best-effort source line of an expression, for tracing only."""
        if isinstance(expr, (Binary, Logical)):
            return expr.operator.line
        if isinstance(expr, Unary):
            return expr.operator.line
        if isinstance(expr, (Variable, Assign)):
            return expr.name.line
        if isinstance(expr, Grouping):
            return self.line_of(expr.expression)
        return None
