"""Tests for expanding the wrapper command template."""

import pytest

from cargo_with.errors import EmptyTemplateError
from cargo_with.template import WithCommand, expand


class TestExpand:
    """Tests for expand."""

    def test_no_placeholders_appends_bin_and_args(self) -> None:
        assert expand("echo", ["--flag"], "/tmp/bin") == ["echo", "/tmp/bin", "--flag"]

    def test_explicit_placeholders(self) -> None:
        result = expand("gdb --args {bin} {args}", ["x", "y"], "/a/b")
        assert result == ["gdb", "--args", "/a/b", "x", "y"]

    def test_bin_without_args_appends_args(self) -> None:
        result = expand("valgrind {bin} --leak-check=full", ["a"], "/a/b")
        assert result == ["valgrind", "/a/b", "--leak-check=full", "a"]

    def test_args_without_bin_appends_bin(self) -> None:
        result = expand("strace {args}", ["a", "b"], "/a/b")
        assert result == ["strace", "a", "b", "/a/b"]

    def test_args_before_bin(self) -> None:
        result = expand("tool {args} -- {bin}", ["-x"], "/a/b")
        assert result == ["tool", "-x", "--", "/a/b"]

    def test_empty_args_vanish(self) -> None:
        """Test that {args} with no trailing args contributes no tokens."""
        assert expand("gdb --args {bin} {args}", [], "/a/b") == ["gdb", "--args", "/a/b"]
        assert expand("echo", [], "/a/b") == ["echo", "/a/b"]

    def test_bin_inside_token(self) -> None:
        result = expand("tool --exe={bin} {bin}", [], "/a/b")
        assert result == ["tool", "--exe=/a/b", "/a/b"]

    def test_bin_only_inside_token_still_appends_bin(self) -> None:
        """Test that only a whole {bin} token suppresses the default append."""
        result = expand("tool --exe={bin}", [], "/a/b")
        assert result == ["tool", "--exe=/a/b", "/a/b"]

    def test_args_only_replaced_as_whole_token(self) -> None:
        result = expand("tool --extra={args} {args}", ["x"], "/a/b")
        assert result == ["tool", "--extra={args}", "x", "/a/b"]

    def test_bin_repeated(self) -> None:
        result = expand("cmp {bin} {bin}", [], "/a/b")
        assert result == ["cmp", "/a/b", "/a/b"]

    def test_args_repeated(self) -> None:
        result = expand("tool {args} {bin} {args}", ["x", "y"], "/a/b")
        assert result == ["tool", "x", "y", "/a/b", "x", "y"]

    def test_bin_as_executable(self) -> None:
        assert expand("{bin} --help", [], "/a/b") == ["/a/b", "--help"]

    def test_whitespace_splitting_does_not_interpret_quotes(self) -> None:
        result = expand('rr record "--env X=1"', [], "/a/b")
        assert result == ["rr", "record", '"--env', 'X=1"', "/a/b"]

    def test_collapses_runs_of_whitespace(self) -> None:
        result = expand("  gdb\t --args   {bin}  ", [], "/a/b")
        assert result == ["gdb", "--args", "/a/b"]

    def test_trailing_args_keep_spaces(self) -> None:
        result = expand("echo", ["hello world"], "/a/b")
        assert result == ["echo", "/a/b", "hello world"]

    def test_idempotent(self) -> None:
        args = ["x", "y"]
        first = expand("gdb --args {bin} {args}", args, "/a/b")
        second = expand("gdb --args {bin} {args}", args, "/a/b")
        assert first == second
        assert args == ["x", "y"]

    @pytest.mark.parametrize("template", ["", "   ", "\t\n"])
    def test_empty_template(self, template) -> None:
        with pytest.raises(EmptyTemplateError, match="Empty with command"):
            expand(template, ["x"], "/a/b")

    def test_result_always_contains_bin(self) -> None:
        """Test a template of only {args} still gets the artifact."""
        assert expand("{args}", [], "/a/b") == ["/a/b"]


class TestWithCommand:
    """Tests for WithCommand."""

    def test_from_raw_strips_and_keeps_args(self) -> None:
        cmd = WithCommand.from_raw("  gdb --args  ", ["a", "b"])

        assert cmd.template == "gdb --args"
        assert cmd.trailing_args == ("a", "b")

    def test_from_raw_rejects_blank(self) -> None:
        with pytest.raises(EmptyTemplateError):
            WithCommand.from_raw("   ")

    def test_expand(self) -> None:
        cmd = WithCommand.from_raw("lldb {bin} -- {args}", ["--flag"])
        assert cmd.expand("/t/hello") == ["lldb", "/t/hello", "--", "--flag"]
