"""Type catalog: GoKind -> (cursor operation, literal renderer).

The single table driving both decode dispatch and rendering. Every GoKind
has exactly one entry; the module refuses to import otherwise, so a kind
added to the enum without a catalog entry fails loudly instead of falling
through to a default.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import cast

from seedport.decoding import ByteSource
from seedport.diagnostics import DecodeError, ErrorTemplate
from seedport.enums import GoKind
from seedport.syntax.types import NamedType, ParamType, SequenceType

from .quoting import format_fixed, go_quote, quote_rune

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Catalog
    "CatalogEntry",
    "TYPE_CATALOG",
    "catalog_entry",
    # Resolution
    "resolve_kind",
]

type Decoder = Callable[[ByteSource], object]
type Renderer = Callable[[GoKind, object], str]

# ============================================================================
# RENDERERS
# ============================================================================


def _render_bytes(kind: GoKind, value: object) -> str:
    return f"[]byte({go_quote(cast(bytes, value))})"


def _render_string(kind: GoKind, value: object) -> str:
    return f"string({go_quote(cast(str, value))})"


def _render_integer(kind: GoKind, value: object) -> str:
    return f"{kind}({value:d})"


def _render_rune(kind: GoKind, value: object) -> str:
    return f"rune({quote_rune(cast(str, value))})"


def _render_float(kind: GoKind, value: object) -> str:
    return f"{kind}({format_fixed(cast(float, value))})"


def _render_bool(kind: GoKind, value: object) -> str:
    return "bool(true)" if value else "bool(false)"


# ============================================================================
# CATALOG
# ============================================================================


@dataclass(frozen=True, slots=True)
class CatalogEntry:
    """How one GoKind is read from the cursor and written as a literal.

    Attributes:
        kind: Catalog tag
        decode: ByteSource operation producing the value
        render: Formats the decoded value as a Go corpus literal
    """

    kind: GoKind
    decode: Decoder
    render: Renderer

    def encode(self, source: ByteSource) -> str:
        """Decode one value from source and render it.

        Raises:
            EOFError: If source cannot supply the value
        """
        return self.render(self.kind, self.decode(source))


def _entries() -> dict[GoKind, CatalogEntry]:
    table: list[tuple[GoKind, Decoder, Renderer]] = [
        (GoKind.BYTES, lambda s: s.get_bytes(), _render_bytes),
        (GoKind.STRING, lambda s: s.get_string(), _render_string),
        # One byte serves int, every signed width, uint and uint8
        (GoKind.INT, lambda s: s.get_int(), _render_integer),
        (GoKind.INT8, lambda s: s.get_int(), _render_integer),
        (GoKind.INT16, lambda s: s.get_int(), _render_integer),
        (GoKind.INT32, lambda s: s.get_int(), _render_integer),
        (GoKind.INT64, lambda s: s.get_int(), _render_integer),
        (GoKind.UINT, lambda s: s.get_int(), _render_integer),
        (GoKind.UINT8, lambda s: s.get_int(), _render_integer),
        (GoKind.UINT16, lambda s: s.get_uint16(), _render_integer),
        (GoKind.UINT32, lambda s: s.get_uint32(), _render_integer),
        (GoKind.UINT64, lambda s: s.get_uint64(), _render_integer),
        (GoKind.RUNE, lambda s: s.get_rune(), _render_rune),
        (GoKind.FLOAT32, lambda s: s.get_float32(), _render_float),
        (GoKind.FLOAT64, lambda s: s.get_float64(), _render_float),
        (GoKind.BOOL, lambda s: s.get_bool(), _render_bool),
    ]
    return {kind: CatalogEntry(kind, decode, render) for kind, decode, render in table}


TYPE_CATALOG: Mapping[GoKind, CatalogEntry] = MappingProxyType(_entries())

_missing = [kind.value for kind in GoKind if kind not in TYPE_CATALOG]
if _missing:  # pragma: no cover
    msg = f"Type catalog has no entry for: {', '.join(_missing)}"
    raise RuntimeError(msg)
del _missing


def catalog_entry(kind: GoKind, param_index: int, entry_point: str | None = None) -> CatalogEntry:
    """Look up the catalog entry for kind.

    Raises:
        DecodeError: If kind has no entry (UNSUPPORTED_PARAM_TYPE)
    """
    entry = TYPE_CATALOG.get(kind)
    if entry is None:
        raise DecodeError(ErrorTemplate.unsupported_param_type(param_index, str(kind), entry_point))
    return entry


# ============================================================================
# RESOLUTION
# ============================================================================

_NAMED_KINDS: Mapping[str, GoKind] = MappingProxyType(
    {kind.value: kind for kind in GoKind if kind is not GoKind.BYTES} | {"byte": GoKind.UINT8}
)

_BYTE_ELEMENTS: frozenset[str] = frozenset({"byte", "uint8"})


def resolve_kind(param: ParamType, param_index: int, entry_point: str | None = None) -> GoKind:
    """Map the declared type of a fuzz parameter to its catalog tag.

    Args:
        param: Declared parameter type
        param_index: 0-based position in the signature, for diagnostics
        entry_point: Name of the fuzz entry point, for diagnostics

    Returns:
        GoKind of the parameter

    Raises:
        DecodeError: If the type is outside the catalog (UNSUPPORTED_PARAM_TYPE)

    Example:
        >>> resolve_kind(SequenceType("byte"), 0)
        <GoKind.BYTES: '[]byte'>
        >>> resolve_kind(NamedType("byte"), 1)
        <GoKind.UINT8: 'uint8'>
    """
    match param:
        case NamedType(name) if name in _NAMED_KINDS:
            return _NAMED_KINDS[name]
        case SequenceType(element) if element in _BYTE_ELEMENTS:
            return GoKind.BYTES
        case _:
            raise DecodeError(
                ErrorTemplate.unsupported_param_type(param_index, param.spelling, entry_point)
            )
