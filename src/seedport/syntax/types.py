"""Harness signature data structures.

These classes describe what the signature extractor recovers from a harness:
the declared type syntax of each fuzz parameter, and the locations the
harness front-end reports back while searching.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from seedport.diagnostics import SourceSpan

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Type syntax
    "NamedType",
    "SequenceType",
    "OpaqueType",
    "ParamType",
    "TypeSyntax",
    # Front-end results
    "Parameter",
    "Declaration",
    "CallSite",
    # Signature
    "HarnessSignature",
]

# ============================================================================
# TYPE SYNTAX
# ============================================================================


@dataclass(frozen=True, slots=True)
class NamedType:
    """Bare named type: int, string, MyStruct."""

    name: str

    @property
    def spelling(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class SequenceType:
    """Single-level slice of a named element type: []byte, []int."""

    element: str

    @property
    def spelling(self) -> str:
        return f"[]{self.element}"

    def __str__(self) -> str:
        return self.spelling


@dataclass(frozen=True, slots=True)
class OpaqueType:
    """Any other type syntax, kept verbatim for error reporting.

    Pointers, qualified names, maps, fixed arrays, nested slices, generic
    instantiations and variadics all land here. Only the dropped context
    parameter may legitimately carry one.
    """

    text: str

    @property
    def spelling(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text


type ParamType = NamedType | SequenceType
"""Type of a retained fuzz parameter."""

type TypeSyntax = NamedType | SequenceType | OpaqueType
"""Type syntax of any literal parameter, as the front-end reads it."""

# ============================================================================
# FRONT-END RESULTS
# ============================================================================


@dataclass(frozen=True, slots=True)
class Parameter:
    """One parameter of the fuzz function literal.

    Attributes:
        name: Declared name, or None for unnamed parameters
        type: Declared type syntax
        span: Location of the type in the harness source
    """

    name: str | None
    type: TypeSyntax
    span: SourceSpan | None = None


@dataclass(frozen=True, slots=True)
class Declaration:
    """A function declaration located by name.

    Attributes:
        name: Declared function (or method) name
        span: Location of the name in the harness source
        body_start: Front-end handle for the start of the body
        body_end: Front-end handle for the end of the body
    """

    name: str
    span: SourceSpan
    body_start: int
    body_end: int


@dataclass(frozen=True, slots=True)
class CallSite:
    """A receiver.method(func(...) {...}) call inside a declaration body.

    Attributes:
        receiver: Receiver identifier
        method: Method name
        span: Location of the receiver in the harness source
        params_start: Front-end handle for the start of the literal's parameter list
        params_end: Front-end handle for the end of the literal's parameter list
    """

    receiver: str
    method: str
    span: SourceSpan
    params_start: int
    params_end: int


# ============================================================================
# SIGNATURE
# ============================================================================


@dataclass(frozen=True, slots=True)
class HarnessSignature:
    """Ordered fuzz parameter types of one entry point.

    The execution-context parameter is never part of params.

    Example:
        >>> sig = HarnessSignature("FuzzParse", (SequenceType("byte"), NamedType("int")))
        >>> str(sig)
        'FuzzParse([]byte, int)'
        >>> len(sig)
        2
    """

    entry_point: str
    params: tuple[ParamType, ...]

    @property
    def spellings(self) -> tuple[str, ...]:
        """Go spelling of every parameter type, in order."""
        return tuple(param.spelling for param in self.params)

    def __len__(self) -> int:
        return len(self.params)

    def __str__(self) -> str:
        return f"{self.entry_point}({', '.join(self.spellings)})"
