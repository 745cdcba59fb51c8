import pytest

from lox.environment import Environment
from lox.errors import LoxRuntimeError
from lox.tokens import Token, TokenType


def name(text, line=1):
    return Token(TokenType.IDENTIFIER, text, None, line)


def test_define_and_get():
    env = Environment()
    env.define('a', 1.0)
    assert env.get(name('a')) == 1.0


def test_redefinition_overwrites_in_same_frame():
    env = Environment()
    env.define('a', 1.0)
    env.define('a', 'two')
    assert env.get(name('a')) == 'two'


def test_lookup_walks_enclosing_frames():
    outer = Environment()
    outer.define('a', 'outer')
    inner = Environment(Environment(outer))
    assert inner.get(name('a')) == 'outer'


def test_inner_definition_shadows_without_touching_outer():
    outer = Environment()
    outer.define('a', 1.0)
    inner = Environment(outer)
    inner.define('a', 2.0)
    assert inner.get(name('a')) == 2.0
    assert outer.get(name('a')) == 1.0


def test_assign_updates_nearest_binding():
    outer = Environment()
    outer.define('a', 1.0)
    inner = Environment(outer)
    inner.assign(name('a'), 5.0)
    assert outer.values == {'a': 5.0}
    assert inner.values == {}


def test_get_undefined_raises():
    env = Environment(Environment())
    with pytest.raises(LoxRuntimeError) as excinfo:
        env.get(name('missing', line=4))
    assert excinfo.value.message == "Undefined variable 'missing'."
    assert excinfo.value.token.line == 4


def test_assign_undefined_raises():
    env = Environment()
    with pytest.raises(LoxRuntimeError, match="Undefined variable 'x'."):
        env.assign(name('x'), 1.0)
    assert 'x' not in env.values


def test_nil_value_is_still_defined():
    env = Environment()
    env.define('a', None)
    assert env.get(name('a')) is None


def test_depth():
    globals_ = Environment()
    assert globals_.depth == 0
    assert Environment(Environment(globals_)).depth == 2
