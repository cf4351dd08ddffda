"""Tests for diagnostics: codes, spans, templates, formatter, exceptions.

Python 3.13+.
"""

from __future__ import annotations

import json

import pytest

from message_format import (
    DepthLimitExceededError,
    MessageFormatError,
    MissingArgumentError,
    MissingContextValueError,
    ParseError,
    RenderError,
    SerializationError,
    TypeMismatchError,
)
from message_format.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorTemplate,
    OutputFormat,
    SourceSpan,
)
from message_format.enums import ParseErrorKind


class TestSourceSpan:
    """SourceSpan validation."""

    def test_valid_span(self) -> None:
        span = SourceSpan(start=3, end=5, line=1, column=4)
        assert (span.start, span.end, span.line, span.column) == (3, 5, 1, 4)

    @pytest.mark.parametrize(
        ("start", "end", "line", "column", "match"),
        [
            (-1, 0, 1, 1, "start"),
            (5, 4, 1, 1, "end"),
            (0, 0, 0, 1, "line"),
            (0, 0, 1, 0, "column"),
        ],
    )
    def test_invalid_span(
        self, start: int, end: int, line: int, column: int, match: str
    ) -> None:
        with pytest.raises(ValueError, match=match):
            SourceSpan(start=start, end=end, line=line, column=column)


class TestDiagnosticCode:
    """Code numbering by category."""

    def test_codes_unique(self) -> None:
        values = [code.value for code in DiagnosticCode]
        assert len(values) == len(set(values))

    def test_parse_codes_in_syntax_range(self) -> None:
        for code in DiagnosticCode:
            if code.name.startswith("PARSE_"):
                assert 3000 <= code.value < 4000


class TestErrorTemplate:
    """Templates fill in structured fields."""

    def test_argument_missing(self) -> None:
        diagnostic = ErrorTemplate.argument_missing("name")
        assert diagnostic.code is DiagnosticCode.ARGUMENT_MISSING
        assert diagnostic.message == "Argument 'name' not provided"
        assert diagnostic.argument_name == "name"

    def test_argument_type_mismatch(self) -> None:
        diagnostic = ErrorTemplate.argument_type_mismatch("n", "Number", "Str", "plural")
        assert diagnostic.message == "Argument 'n' used in plural must be Number, got Str"
        assert diagnostic.expected_type == "Number"
        assert diagnostic.received_type == "Str"
        assert diagnostic.hint == "Pass an int for 'n'"

    def test_parse_templates_carry_span(self) -> None:
        span = SourceSpan(start=0, end=1, line=1, column=1)
        diagnostics = [
            ErrorTemplate.parse_incomplete(span),
            ErrorTemplate.parse_expected_token(("{",), "x", span),
            ErrorTemplate.parse_unknown_keyword("number", span),
            ErrorTemplate.parse_invalid_branch_key("bogus", span),
            ErrorTemplate.parse_duplicate_branch("one", span),
            ErrorTemplate.parse_missing_other_branch("plural", span),
            ErrorTemplate.parse_nesting_too_deep(5, span),
        ]
        assert all(d.span is span for d in diagnostics)

    def test_expected_token_lists_alternatives(self) -> None:
        span = SourceSpan(start=0, end=1, line=1, column=1)
        diagnostic = ErrorTemplate.parse_expected_token(("plural", "select"), "}", span)
        assert diagnostic.message == "Expected 'plural', 'select' but found '}'"

    def test_unrepresentable_text(self) -> None:
        diagnostic = ErrorTemplate.unrepresentable_text("a{b", "{")
        assert diagnostic.code is DiagnosticCode.SERIALIZE_UNREPRESENTABLE_TEXT
        assert "'a{b'" in diagnostic.message


class TestDiagnosticFormatter:
    """Rust-style, simple, and JSON output."""

    def test_rust_format(self) -> None:
        output = DiagnosticFormatter().format(ErrorTemplate.argument_missing("name"))
        assert output == (
            "error[ARGUMENT_MISSING]: Argument 'name' not provided\n"
            "  = argument: name\n"
            "  = help: Attach 'name' to the arguments with arg('name', ...)"
        )

    def test_rust_format_with_span_and_url(self) -> None:
        span = SourceSpan(start=4, end=10, line=2, column=3)
        output = DiagnosticFormatter().format(ErrorTemplate.parse_unknown_keyword("number", span))
        assert "  --> line 2, column 3" in output
        assert "  = note: see https://unicode-org.github.io/" in output

    def test_color_output(self) -> None:
        output = DiagnosticFormatter(color=True).format(ErrorTemplate.argument_missing("x"))
        assert output.startswith("\033[1;31merror\033[0m[ARGUMENT_MISSING]")

    def test_warning_severity(self) -> None:
        diagnostic = Diagnostic(
            code=DiagnosticCode.MAX_DEPTH_EXCEEDED, message="deep", severity="warning"
        )
        assert DiagnosticFormatter().format(diagnostic) == "warning[MAX_DEPTH_EXCEEDED]: deep"

    def test_simple_format(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        output = formatter.format(ErrorTemplate.argument_missing("name"))
        assert output == "ARGUMENT_MISSING: Argument 'name' not provided"

    def test_json_format(self) -> None:
        span = SourceSpan(start=4, end=10, line=2, column=3)
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        data = json.loads(formatter.format(ErrorTemplate.parse_duplicate_branch("one", span)))
        assert data["code"] == "PARSE_DUPLICATE_BRANCH"
        assert data["code_value"] == 3005
        assert (data["line"], data["column"], data["start"], data["end"]) == (2, 3, 4, 10)
        assert data["severity"] == "error"

    def test_control_characters_escaped(self) -> None:
        output = DiagnosticFormatter().format(ErrorTemplate.argument_missing("a\nb\x1b"))
        assert output.count("\n") == 2
        assert "a\\nb\\x1b" in output

    def test_sanitize_truncates(self) -> None:
        formatter = DiagnosticFormatter(
            output_format=OutputFormat.SIMPLE, sanitize=True, max_content_length=10
        )
        output = formatter.format(ErrorTemplate.argument_missing("long_variable_name"))
        assert output == "ARGUMENT_MISSING: Argument '..."

    def test_format_all(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        output = formatter.format_all(
            [ErrorTemplate.argument_missing("a"), ErrorTemplate.argument_missing("b")]
        )
        assert output == (
            "ARGUMENT_MISSING: Argument 'a' not provided\n\n"
            "ARGUMENT_MISSING: Argument 'b' not provided"
        )

    def test_diagnostic_str_is_message(self) -> None:
        assert str(ErrorTemplate.argument_missing("x")) == "Argument 'x' not provided"


class TestExceptionHierarchy:
    """Every error is a MessageFormatError."""

    @pytest.mark.parametrize(
        "error_type",
        [
            MissingArgumentError,
            TypeMismatchError,
            MissingContextValueError,
            DepthLimitExceededError,
        ],
    )
    def test_render_errors(self, error_type: type[Exception]) -> None:
        assert issubclass(error_type, RenderError)
        assert issubclass(error_type, MessageFormatError)

    def test_parse_and_serialization_errors(self) -> None:
        assert issubclass(ParseError, MessageFormatError)
        assert issubclass(SerializationError, MessageFormatError)
        assert not issubclass(ParseError, RenderError)

    def test_plain_string_message(self) -> None:
        error = MessageFormatError("plain")
        assert str(error) == "plain"
        assert error.diagnostic is None

    def test_diagnostic_message(self) -> None:
        diagnostic = ErrorTemplate.argument_missing("name")
        error = MissingArgumentError(diagnostic, variable_name="name")
        assert error.diagnostic is diagnostic
        assert str(error) == diagnostic.format_error()
        assert error.variable_name == "name"

    def test_parse_error_defaults(self) -> None:
        error = ParseError("bad", kind=ParseErrorKind.INCOMPLETE)
        assert (error.position, error.expected, error.source) == (0, (), "")

    def test_parse_error_context_without_diagnostic(self) -> None:
        error = ParseError("bad", kind=ParseErrorKind.EXPECTED_TOKEN, position=2, source="abc")
        assert error.format_with_context().startswith("1:3: bad")
