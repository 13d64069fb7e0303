"""Tests for corpus.catalog: the GoKind decode/render table."""

from __future__ import annotations

import struct

import pytest

from seedport.corpus import TYPE_CATALOG, CatalogEntry, catalog_entry, resolve_kind
from seedport.decoding import ConsumerCursor
from seedport.diagnostics import DecodeError, DiagnosticCode
from seedport.enums import GoKind
from seedport.syntax.types import NamedType, SequenceType

# ============================================================================
# TABLE SHAPE
# ============================================================================


class TestCatalogTable:
    """TYPE_CATALOG is total and read-only."""

    def test_every_kind_has_an_entry(self) -> None:
        """No GoKind is missing."""
        assert set(TYPE_CATALOG) == set(GoKind)

    def test_entries_are_tagged_with_their_kind(self) -> None:
        """entry.kind matches its key."""
        for kind, entry in TYPE_CATALOG.items():
            assert isinstance(entry, CatalogEntry)
            assert entry.kind is kind

    def test_read_only(self) -> None:
        """The mapping cannot be modified."""
        with pytest.raises(TypeError):
            TYPE_CATALOG[GoKind.INT] = TYPE_CATALOG[GoKind.BOOL]  # type: ignore[index]

    def test_catalog_entry_lookup(self) -> None:
        """catalog_entry returns the table entry."""
        assert catalog_entry(GoKind.UINT16, 0) is TYPE_CATALOG[GoKind.UINT16]


# ============================================================================
# ENCODING
# ============================================================================


class TestCatalogEncode:
    """Each entry decodes through the cursor and renders a literal."""

    @pytest.mark.parametrize(
        "kind",
        [
            GoKind.INT,
            GoKind.INT8,
            GoKind.INT16,
            GoKind.INT32,
            GoKind.INT64,
            GoKind.UINT,
            GoKind.UINT8,
        ],
    )
    def test_single_byte_integers(self, kind: GoKind) -> None:
        """All of these read one byte."""
        cursor = ConsumerCursor(b"\xc8rest")

        assert TYPE_CATALOG[kind].encode(cursor) == f"{kind}(200)"
        assert cursor.position == 1

    @pytest.mark.parametrize(
        ("kind", "data", "expected"),
        [
            (GoKind.UINT16, b"\x01\x02\x00", "uint16(258)"),
            (GoKind.UINT32, b"\x00\x00\x00\x05\x00", "uint32(5)"),
            (GoKind.UINT64, b"\x07" + bytes(7) + b"\x01", "uint64(7)"),
            (GoKind.FLOAT32, struct.pack("<f", 0.5) + b"\x01", "float32(0.500000)"),
            (GoKind.FLOAT64, struct.pack(">d", -3.0) + b"\x00", "float64(-3.000000)"),
            (GoKind.FLOAT64, struct.pack(">d", float("inf")) + b"\x00", "float64(+Inf)"),
            (GoKind.BOOL, b"\x03", "bool(true)"),
            (GoKind.BOOL, b"\x04", "bool(false)"),
            (GoKind.BYTES, b"\x02\x00\x00\x00\x01\x00\xff", '[]byte("\\x00\\xff")'),
            (GoKind.STRING, b"\x00\x00\x00\x02\x00hi", 'string("hi")'),
            (GoKind.RUNE, b"\x00\x00\x00\x02\x00\xc3\xa9", "rune('é')"),
            (GoKind.RUNE, b"\x00\x00\x00\x01\x00'", "rune('\\'')"),
        ],
    )
    def test_encode(self, kind: GoKind, data: bytes, expected: str) -> None:
        """Decoded values render as typed Go literals."""
        assert TYPE_CATALOG[kind].encode(ConsumerCursor(data)) == expected

    def test_exhaustion_propagates(self) -> None:
        """Entries let EOFError through."""
        with pytest.raises(EOFError):
            TYPE_CATALOG[GoKind.UINT32].encode(ConsumerCursor(b"\x00"))


# ============================================================================
# TYPE RESOLUTION
# ============================================================================


class TestResolveKind:
    """Declared types map to catalog kinds."""

    @pytest.mark.parametrize("kind", [k for k in GoKind if k is not GoKind.BYTES])
    def test_named_kinds(self, kind: GoKind) -> None:
        """Every named kind resolves from its own spelling."""
        assert resolve_kind(NamedType(kind.value), 0) is kind

    def test_byte_alias(self) -> None:
        """byte is uint8."""
        assert resolve_kind(NamedType("byte"), 0) is GoKind.UINT8

    @pytest.mark.parametrize("element", ["byte", "uint8"])
    def test_byte_slices(self, element: str) -> None:
        """[]byte and []uint8 are byte slices."""
        assert resolve_kind(SequenceType(element), 0) is GoKind.BYTES

    def test_rune_is_not_int32(self) -> None:
        """rune and int32 stay distinct kinds."""
        assert resolve_kind(NamedType("rune"), 0) is GoKind.RUNE
        assert resolve_kind(NamedType("int32"), 0) is GoKind.INT32

    @pytest.mark.parametrize(
        "param",
        [NamedType("MyStruct"), NamedType("complex128"), NamedType("[]byte"), SequenceType("int")],
    )
    def test_unsupported(self, param: NamedType | SequenceType) -> None:
        """Types outside the catalog raise UNSUPPORTED_PARAM_TYPE."""
        with pytest.raises(DecodeError) as exc_info:
            resolve_kind(param, 3, "FuzzX")

        diagnostic = exc_info.value.diagnostic
        assert diagnostic is not None
        assert diagnostic.code == DiagnosticCode.UNSUPPORTED_PARAM_TYPE
        assert diagnostic.param_index == 3
        assert diagnostic.param_type == param.spelling
        assert diagnostic.entry_point == "FuzzX"
