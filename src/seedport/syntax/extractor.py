"""Signature extraction: harness source -> ordered fuzz parameter types.

Locates the named entry point, finds the f.Fuzz(func(t *testing.T, ...) {...})
call in its body and reads the literal's parameter types, dropping the
execution-context parameter.

Python 3.13+. Zero external dependencies.
"""

import logging
from collections.abc import Callable

from seedport.constants import DEFAULT_METHOD, DEFAULT_RECEIVER, MAX_SOURCE_SIZE
from seedport.diagnostics import ErrorTemplate, StructuralError
from seedport.syntax.frontend import GoHarnessFrontend, HarnessFrontend
from seedport.syntax.types import HarnessSignature, OpaqueType, ParamType

__all__ = ["decode_source", "extract_signature"]

logger = logging.getLogger(__name__)

type FrontendFactory = Callable[[str], HarnessFrontend]


def decode_source(source: str | bytes, *, max_source_size: int = MAX_SOURCE_SIZE) -> str:
    """Normalize harness source to text and enforce the size limit.

    Args:
        source: Harness source as text or UTF-8 bytes
        max_source_size: Maximum length; 0 disables the check

    Raises:
        ValueError: If source exceeds max_source_size (DoS prevention)
        StructuralError: If bytes are not valid UTF-8
    """
    if max_source_size > 0 and len(source) > max_source_size:
        msg = (
            f"Harness source size ({len(source):,}) exceeds maximum "
            f"({max_source_size:,}). Pass max_source_size to increase the limit."
        )
        raise ValueError(msg)
    if isinstance(source, bytes):
        try:
            return source.decode("utf-8")
        except UnicodeDecodeError as e:
            msg = f"Harness source is not valid UTF-8: {e.reason} at byte {e.start}"
            raise StructuralError(ErrorTemplate.source_syntax(msg)) from e
    return source


def extract_signature(
    source: str | bytes,
    entry_point: str,
    *,
    receiver: str = DEFAULT_RECEIVER,
    method: str = DEFAULT_METHOD,
    max_source_size: int = MAX_SOURCE_SIZE,
    frontend_factory: FrontendFactory = GoHarnessFrontend,
) -> HarnessSignature:
    """Recover the ordered parameter types of a fuzz entry point.

    Args:
        source: Harness source (text or UTF-8 bytes)
        entry_point: Name of the fuzz function, e.g. "FuzzParse"
        receiver: Identifier the fuzz method is called on
        method: Name of the fuzz method
        max_source_size: Maximum source length; 0 disables the check
        frontend_factory: Builds the structural scanner for the source

    Returns:
        HarnessSignature whose params exclude the first literal parameter

    Raises:
        StructuralError: Entry point or fuzz call not found, a literal
            without parameters, malformed source, or a retained parameter
            with unsupported type syntax
        ValueError: If source exceeds max_source_size

    Example:
        >>> sig = extract_signature('''
        ... func FuzzParse(f *testing.F) {
        ...     f.Fuzz(func(t *testing.T, data []byte, n int, ok bool) {})
        ... }''', "FuzzParse")
        >>> sig.spellings
        ('[]byte', 'int', 'bool')
    """
    text = decode_source(source, max_source_size=max_source_size)
    frontend = frontend_factory(text)

    declarations = frontend.find_declarations(entry_point)
    if not declarations:
        raise StructuralError(ErrorTemplate.entry_point_not_found(entry_point))

    for declaration in declarations:
        calls = frontend.find_method_calls(declaration, receiver, method)
        if calls:
            break
    else:
        raise StructuralError(
            ErrorTemplate.fuzz_call_not_found(entry_point, receiver, method, declarations[0].span)
        )

    if len(calls) > 1:
        logger.warning(
            "%s calls %s.%s %d times; using the call at line %d",
            entry_point,
            receiver,
            method,
            len(calls),
            calls[0].span.line,
        )

    parameters = frontend.literal_parameters(calls[0])
    if not parameters:
        raise StructuralError(
            ErrorTemplate.missing_context_parameter(entry_point, receiver, method, calls[0].span)
        )

    params: list[ParamType] = []
    # parameters[0] is the *testing.T execution context
    for index, parameter in enumerate(parameters[1:]):
        if isinstance(parameter.type, OpaqueType):
            raise StructuralError(
                ErrorTemplate.unsupported_type_syntax(
                    entry_point, index, parameter.type.text, parameter.span
                )
            )
        params.append(parameter.type)

    signature = HarnessSignature(entry_point=entry_point, params=tuple(params))
    logger.debug("Extracted signature %s", signature)
    return signature
