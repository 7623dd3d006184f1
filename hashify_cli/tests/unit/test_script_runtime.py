# Path: hashify_cli/tests/unit/test_script_runtime.py
"""
Unit Tests for ScriptRuntime

Tests value collection, error translation, scoped bindings, resource
release on re-binding and the runtime lifecycle.
"""

import pytest

from hashify_cli.core.errors import ScriptFailure, ScriptRuntimeError
from hashify_cli.process.scripting import ScriptRuntime


class Resource:
    """Bound value that records whether it was released."""

    def __init__(self):
        self.closed = False

    def close(self):
        self.closed = True


class TestEvaluate:
    """Test ScriptRuntime.evaluate()."""

    def test_trailing_expression_is_the_value(self, runtime):
        assert runtime.evaluate("'abc'", 'input') == ['abc']

    def test_statements_then_expression(self, runtime):
        assert runtime.evaluate('x = 20\ny = 22\nx + y', 'input') == [42]

    def test_no_trailing_expression_gives_no_values(self, runtime):
        assert runtime.evaluate('x = 1', 'input') == []

    def test_none_gives_no_values(self, runtime):
        assert runtime.evaluate('None', 'input') == []

    def test_tuple_expression_gives_several_values(self, runtime):
        assert runtime.evaluate('1, 2', 'input') == [1, 2]

    def test_tuple_value_from_call_is_one_value(self, runtime):
        """Only a literal tuple expression splits into several values."""
        assert runtime.evaluate('tuple([1, 2])', 'input') == [(1, 2)]

    def test_namespace_persists_between_scripts(self, runtime):
        runtime.evaluate('counter = 5', 'input')
        assert runtime.evaluate('counter * 2', 'output') == [10]

    def test_syntax_error_is_script_runtime_error(self, runtime):
        with pytest.raises(ScriptRuntimeError) as exc_info:
            runtime.evaluate('1 +', 'input-finalizer')
        assert exc_info.value.stage == 'input-finalizer'
        assert 'syntax error' in str(exc_info.value)

    def test_exception_is_wrapped_with_cause(self, runtime):
        with pytest.raises(ScriptRuntimeError) as exc_info:
            runtime.evaluate('1 / 0', 'output')
        assert isinstance(exc_info.value.__cause__, ZeroDivisionError)
        assert 'ZeroDivisionError' in str(exc_info.value)

    @pytest.mark.parametrize('source', ['raise SystemExit(0)', 'raise SystemExit(3)', 'exit(0)'])
    def test_system_exit_is_script_runtime_error(self, runtime, source):
        """Scripts cannot end the process or choose its exit code."""
        with pytest.raises(ScriptRuntimeError) as exc_info:
            runtime.evaluate(source, 'input')

        assert exc_info.value.stage == 'input'
        assert isinstance(exc_info.value.__cause__, SystemExit)

    def test_fail_passes_through(self, runtime):
        """Fail() should surface as ScriptFailure, not a runtime error."""
        with pytest.raises(ScriptFailure) as exc_info:
            runtime.evaluate("Fail('bad value {0}', 7)", 'output')
        assert str(exc_info.value) == 'bad value 7'


class TestBindings:
    """Test bind / unbind / reset_bindings."""

    def test_bound_value_is_visible(self, runtime):
        runtime.bind('Input', 'hello')
        assert runtime.evaluate('Input.upper()', 'input-finalizer') == ['HELLO']

    def test_reset_drops_scoped_bindings(self, runtime):
        runtime.bind('Input', 'hello')
        runtime.reset_bindings()

        assert not runtime.is_bound('Input')
        with pytest.raises(ScriptRuntimeError):
            runtime.evaluate('Input', 'input-finalizer')

    def test_reset_keeps_permanent_bindings(self, runtime):
        runtime.reset_bindings()
        assert runtime.is_bound('StringToArray')
        assert runtime.evaluate("StringToArray('a')", 'input-finalizer') == [b'a']

    def test_rebinding_releases_previous_resource(self, runtime):
        first = Resource()
        runtime.bind('Result', first)
        runtime.bind('Result', 'text')

        assert first.closed is True
        assert runtime.lookup('Result') == 'text'

    def test_reset_releases_resources(self, runtime):
        resource = Resource()
        runtime.bind('Result', resource)
        runtime.reset_bindings()
        assert resource.closed is True

    def test_classes_are_not_released(self, runtime):
        """A bound class with a close() method is not an owned resource."""
        runtime.bind('ResourceType', Resource)
        runtime.bind('ResourceType', None)
        assert runtime.lookup('ResourceType') is None

    def test_invalid_name_rejected(self, runtime):
        with pytest.raises(ValueError):
            runtime.bind('not a name', 1)


class TestLifecycle:
    """Test context manager and close()."""

    def test_close_releases_everything(self):
        resource = Resource()
        with ScriptRuntime() as runtime:
            runtime.bind('Kept', resource, scoped=False)

        assert runtime.closed
        assert resource.closed

    def test_close_is_idempotent(self):
        runtime = ScriptRuntime()
        runtime.close()
        runtime.close()
        assert runtime.closed

    def test_closed_runtime_rejects_evaluation(self):
        runtime = ScriptRuntime()
        runtime.close()
        with pytest.raises(RuntimeError):
            runtime.evaluate('1', 'input')

    def test_closed_on_exception(self):
        with pytest.raises(KeyError):
            with ScriptRuntime() as runtime:
                raise KeyError('boom')
        assert runtime.closed
