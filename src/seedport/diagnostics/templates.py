"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every failure case in one place.
    """

    @staticmethod
    def entry_point_not_found(entry_point: str) -> Diagnostic:
        """No function declaration carries the requested name.

        Args:
            entry_point: Name of the fuzz entry point

        Returns:
            Diagnostic for ENTRY_POINT_NOT_FOUND
        """
        msg = f"Fuzz entry point '{entry_point}' not found in harness source"
        return Diagnostic(
            code=DiagnosticCode.ENTRY_POINT_NOT_FOUND,
            message=msg,
            hint="Check the function name; it must be declared as func "
            f"{entry_point}(f *testing.F)",
            entry_point=entry_point,
        )

    @staticmethod
    def fuzz_call_not_found(
        entry_point: str, receiver: str, method: str, span: SourceSpan | None = None
    ) -> Diagnostic:
        """The entry point does not call <receiver>.<method>(func(...) {...}).

        Args:
            entry_point: Name of the fuzz entry point
            receiver: Receiver identifier searched for
            method: Method name searched for
            span: Location of the entry point declaration

        Returns:
            Diagnostic for FUZZ_CALL_NOT_FOUND
        """
        msg = (
            f"Entry point '{entry_point}' has no {receiver}.{method}() call "
            "with a single function literal argument"
        )
        return Diagnostic(
            code=DiagnosticCode.FUZZ_CALL_NOT_FOUND,
            message=msg,
            span=span,
            hint=f"Pass the fuzz function inline: {receiver}.{method}(func(t *testing.T, ...) {{ ... }})",
            entry_point=entry_point,
        )

    @staticmethod
    def missing_context_parameter(
        entry_point: str, receiver: str, method: str, span: SourceSpan | None = None
    ) -> Diagnostic:
        """The fuzz function literal declares no parameters at all.

        Args:
            entry_point: Name of the fuzz entry point
            receiver: Receiver identifier of the fuzz call
            method: Method name of the fuzz call
            span: Location of the fuzz call

        Returns:
            Diagnostic for MISSING_CONTEXT_PARAM
        """
        msg = f"The {receiver}.{method}() function literal in '{entry_point}' has no parameters"
        return Diagnostic(
            code=DiagnosticCode.MISSING_CONTEXT_PARAM,
            message=msg,
            span=span,
            hint="The first parameter must be the execution context: func(t *testing.T, ...)",
            entry_point=entry_point,
        )

    @staticmethod
    def unsupported_type_syntax(
        entry_point: str, param_index: int, type_text: str, span: SourceSpan | None = None
    ) -> Diagnostic:
        """A retained parameter uses type syntax the extractor cannot map.

        Args:
            entry_point: Name of the fuzz entry point
            param_index: 0-based index after the dropped context parameter
            type_text: Source spelling of the type
            span: Location of the type in the harness

        Returns:
            Diagnostic for UNSUPPORTED_TYPE_SYNTAX
        """
        msg = f"Parameter {param_index} has unsupported type syntax '{type_text}'"
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_TYPE_SYNTAX,
            message=msg,
            span=span,
            hint="Only bare type names (int, string) and slices of a name ([]byte) are supported",
            entry_point=entry_point,
            param_index=param_index,
            param_type=type_text,
        )

    @staticmethod
    def source_syntax(message: str, span: SourceSpan | None = None) -> Diagnostic:
        """Harness source could not be tokenized or is unbalanced.

        Args:
            message: Description of the malformed construct
            span: Location of the problem

        Returns:
            Diagnostic for SOURCE_SYNTAX
        """
        return Diagnostic(
            code=DiagnosticCode.SOURCE_SYNTAX,
            message=message,
            span=span,
            hint="Make sure the harness compiles with `go vet` before translating seeds",
        )

    @staticmethod
    def input_exhausted(
        param_index: int, param_type: str, offset: int | None, entry_point: str | None = None
    ) -> Diagnostic:
        """The testcase ran out of bytes before a parameter was decoded.

        Args:
            param_index: 0-based index of the parameter being decoded
            param_type: Go spelling of its type
            offset: Cursor position when decoding failed, if the cursor reports one
            entry_point: Name of the fuzz entry point, when known

        Returns:
            Diagnostic for INPUT_EXHAUSTED
        """
        msg = f"Testcase exhausted while decoding parameter {param_index} ({param_type})"
        return Diagnostic(
            code=DiagnosticCode.INPUT_EXHAUSTED,
            message=msg,
            hint="The testcase is shorter than the harness signature requires",
            entry_point=entry_point,
            param_index=param_index,
            param_type=param_type,
            offset=offset,
        )

    @staticmethod
    def unsupported_param_type(
        param_index: int, param_type: str, entry_point: str | None = None
    ) -> Diagnostic:
        """A parameter type has no entry in the type catalog.

        Args:
            param_index: 0-based index of the parameter
            param_type: Go spelling of its type
            entry_point: Name of the fuzz entry point, when known

        Returns:
            Diagnostic for UNSUPPORTED_PARAM_TYPE
        """
        msg = f"Parameter {param_index} has type '{param_type}' which cannot be decoded"
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_PARAM_TYPE,
            message=msg,
            hint="Supported: []byte, string, int*, uint*, rune, float32, float64, bool",
            entry_point=entry_point,
            param_index=param_index,
            param_type=param_type,
            offset=0,
        )
