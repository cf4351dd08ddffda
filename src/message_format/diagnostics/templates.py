"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages:
        - Testable
        - Consistent in wording
        - Documented in one place
    """

    # Base documentation URL
    _DOCS_BASE = "https://unicode-org.github.io/icu/userguide/format_parse/messages"

    # ------------------------------------------------------------------
    # Render errors
    # ------------------------------------------------------------------

    @staticmethod
    def argument_missing(variable_name: str) -> Diagnostic:
        """Argument referenced by a format node was not supplied.

        Args:
            variable_name: Name the node referenced

        Returns:
            Diagnostic for ARGUMENT_MISSING
        """
        msg = f"Argument '{variable_name}' not provided"
        return Diagnostic(
            code=DiagnosticCode.ARGUMENT_MISSING,
            message=msg,
            argument_name=variable_name,
            hint=f"Attach '{variable_name}' to the arguments with arg('{variable_name}', ...)",
        )

    @staticmethod
    def argument_type_mismatch(
        variable_name: str, expected: str, received: str, node_kind: str
    ) -> Diagnostic:
        """Argument holds the wrong value variant for the node.

        Args:
            variable_name: Name the node referenced
            expected: Value variant the node needs ("Number" or "Str")
            received: Value variant actually supplied
            node_kind: Human-readable node kind ("plural", "select")

        Returns:
            Diagnostic for ARGUMENT_TYPE_MISMATCH
        """
        msg = f"Argument '{variable_name}' used in {node_kind} must be {expected}, got {received}"
        return Diagnostic(
            code=DiagnosticCode.ARGUMENT_TYPE_MISMATCH,
            message=msg,
            argument_name=variable_name,
            expected_type=expected,
            received_type=received,
            hint=f"Pass {'an int' if expected == 'Number' else 'a str'} for '{variable_name}'",
            help_url=f"{ErrorTemplate._DOCS_BASE}/",
        )

    @staticmethod
    def placeholder_without_value() -> Diagnostic:
        """'#' rendered with no plural value in the context.

        Returns:
            Diagnostic for PLACEHOLDER_WITHOUT_VALUE
        """
        return Diagnostic(
            code=DiagnosticCode.PLACEHOLDER_WITHOUT_VALUE,
            message="Placeholder '#' rendered outside of a plural branch",
            hint="Use '#' only inside plural branches, or set Context.placeholder_value",
            help_url=f"{ErrorTemplate._DOCS_BASE}/",
        )

    @staticmethod
    def expression_depth_exceeded(max_depth: int) -> Diagnostic:
        """Nested sub-message rendering went beyond the depth limit.

        Args:
            max_depth: Configured limit

        Returns:
            Diagnostic for MAX_DEPTH_EXCEEDED
        """
        msg = f"Maximum nesting depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.MAX_DEPTH_EXCEEDED,
            message=msg,
            hint="Reduce the nesting of plural/select formats",
        )

    # ------------------------------------------------------------------
    # Syntax errors
    # ------------------------------------------------------------------

    @staticmethod
    def parse_incomplete(span: SourceSpan) -> Diagnostic:
        """Template ended while a '{' was still open.

        Args:
            span: Location of the end of input

        Returns:
            Diagnostic for PARSE_INCOMPLETE
        """
        return Diagnostic(
            code=DiagnosticCode.PARSE_INCOMPLETE,
            message="Unterminated '{' in template",
            span=span,
            hint="Close every '{' with a matching '}'",
        )

    @staticmethod
    def parse_expected_token(
        expected: tuple[str, ...], found: str, span: SourceSpan
    ) -> Diagnostic:
        """A required token is missing.

        Args:
            expected: Acceptable tokens
            found: Character actually present
            span: Location of the offending character

        Returns:
            Diagnostic for PARSE_EXPECTED_TOKEN
        """
        expected_str = ", ".join(f"'{e}'" for e in expected)
        msg = f"Expected {expected_str} but found '{found}'"
        return Diagnostic(
            code=DiagnosticCode.PARSE_EXPECTED_TOKEN,
            message=msg,
            span=span,
        )

    @staticmethod
    def parse_unknown_keyword(keyword: str, span: SourceSpan) -> Diagnostic:
        """Format keyword is not 'plural' or 'select'.

        Args:
            keyword: Keyword found in the template
            span: Location of the keyword

        Returns:
            Diagnostic for PARSE_UNKNOWN_KEYWORD
        """
        msg = f"Unknown format keyword '{keyword}'"
        return Diagnostic(
            code=DiagnosticCode.PARSE_UNKNOWN_KEYWORD,
            message=msg,
            span=span,
            hint="Supported keywords are 'plural' and 'select'",
            help_url=f"{ErrorTemplate._DOCS_BASE}/",
        )

    @staticmethod
    def parse_invalid_branch_key(key: str, span: SourceSpan) -> Diagnostic:
        """Plural branch key is neither '=N' nor a CLDR category.

        Args:
            key: Key found in the template
            span: Location of the key

        Returns:
            Diagnostic for PARSE_INVALID_BRANCH_KEY
        """
        msg = f"Invalid plural branch key '{key}'"
        return Diagnostic(
            code=DiagnosticCode.PARSE_INVALID_BRANCH_KEY,
            message=msg,
            span=span,
            hint="Use '=N' for an exact value or one of zero, one, two, few, many, other",
        )

    @staticmethod
    def parse_duplicate_branch(key: str, span: SourceSpan) -> Diagnostic:
        """Same branch key given twice.

        Args:
            key: Repeated key
            span: Location of the second occurrence

        Returns:
            Diagnostic for PARSE_DUPLICATE_BRANCH
        """
        msg = f"Duplicate branch '{key}'"
        return Diagnostic(
            code=DiagnosticCode.PARSE_DUPLICATE_BRANCH,
            message=msg,
            span=span,
            hint="Each branch key may appear only once",
        )

    @staticmethod
    def parse_missing_other_branch(keyword: str, span: SourceSpan) -> Diagnostic:
        """Plural/select body lacks the mandatory 'other' branch.

        Args:
            keyword: 'plural' or 'select'
            span: Location of the closing brace

        Returns:
            Diagnostic for PARSE_MISSING_OTHER_BRANCH
        """
        msg = f"The {keyword} format has no 'other' branch"
        return Diagnostic(
            code=DiagnosticCode.PARSE_MISSING_OTHER_BRANCH,
            message=msg,
            span=span,
            hint="Add an 'other {...}' branch as the fallback",
            help_url=f"{ErrorTemplate._DOCS_BASE}/",
        )

    @staticmethod
    def parse_nesting_too_deep(max_depth: int, span: SourceSpan) -> Diagnostic:
        """Branch bodies nested beyond the parser limit.

        Args:
            max_depth: Configured limit
            span: Location where the limit was hit

        Returns:
            Diagnostic for PARSE_NESTING_DEPTH_EXCEEDED
        """
        msg = f"Nesting depth limit ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.PARSE_NESTING_DEPTH_EXCEEDED,
            message=msg,
            span=span,
        )

    @staticmethod
    def parse_source_too_large(size: int, max_size: int) -> Diagnostic:
        """Template longer than the parser limit.

        Args:
            size: Template length in characters
            max_size: Configured limit

        Returns:
            Diagnostic for PARSE_SOURCE_TOO_LARGE
        """
        msg = f"Template size ({size} characters) exceeds limit ({max_size})"
        return Diagnostic(
            code=DiagnosticCode.PARSE_SOURCE_TOO_LARGE,
            message=msg,
            hint="Split the template or raise max_source_size",
        )

    # ------------------------------------------------------------------
    # Serialization errors
    # ------------------------------------------------------------------

    @staticmethod
    def unrepresentable_text(text: str, char: str) -> Diagnostic:
        """Plain text holds a character the template grammar reserves here.

        Args:
            text: Offending plain text
            char: Reserved character found in it

        Returns:
            Diagnostic for SERIALIZE_UNREPRESENTABLE_TEXT
        """
        msg = f"Text {text!r} contains '{char}', which cannot appear in this position"
        return Diagnostic(
            code=DiagnosticCode.SERIALIZE_UNREPRESENTABLE_TEXT,
            message=msg,
        )

    @staticmethod
    def invalid_name(role: str, name: str) -> Diagnostic:
        """Variable name or branch key cannot be written as template text.

        Args:
            role: What the name is ("variable name", "select key")
            name: Offending name

        Returns:
            Diagnostic for SERIALIZE_INVALID_NAME
        """
        msg = f"Invalid {role} {name!r}"
        return Diagnostic(
            code=DiagnosticCode.SERIALIZE_INVALID_NAME,
            message=msg,
            hint="Names must be non-empty, without surrounding whitespace, ',' or braces",
        )
