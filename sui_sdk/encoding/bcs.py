"""
BCS (Binary Canonical Serialization) encoder
============================================

Deterministic encoder for the subset of BCS the SDK needs to produce
canonical transaction bytes. Types are addressed by name, and every call
names the schema it encodes under, so the same Python value never ends up
serialized under two different shapes by accident.

Type language
-------------
- primitives: ``u8 u16 u32 u64 u128 u256 bool string address``
- ``bytes``: raw byte string (uleb128 length + bytes), same wire form as
  ``vector<u8>`` but also accepts bytes-like values
- generics: ``vector<T>``, ``Option<T>``
- named structs (ordered fields) and enums (uleb128 variant index), added
  with `BCS.register_struct` / `BCS.register_enum`
- custom leaf types with `BCS.register_type(name, encode_fn)`

Python value shapes
-------------------
- integers: ``int`` within range (``bool`` is rejected)
- ``address``: hex text (normalized first) or 20 raw bytes
- ``Option<T>``: ``None`` or the inner value
- structs: a mapping (or an object with matching attributes)
- enums: ``{"Variant": payload}``, or ``"Variant"`` for unit variants
- ``TypeTag``: Move type text (``"0x2::coin::Coin<0x2::sui::SUI>"``) or the
  enum shape; see `parse_type_tag`

Every failure raises `BcsEncodeError` carrying the type name and the dotted
path of the offending field.

`default_bcs()` returns a fresh registry preloaded with the transaction
shapes (``TransactionData`` and its parts); callers adding their own types
should do so on their own instance.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Callable, Dict, List, Optional, Tuple

from ..address import address_to_bytes, normalize_sui_address
from ..constants import SUI_ADDRESS_LENGTH
from ..errors import AddressError, BcsEncodeError, Base64DecodeError
from ..utils.base64 import b64decode
from ..utils.bytes import ULEB128_MAX, uleb128_encode

__all__ = ["BCS", "default_bcs", "EncodeFn", "TYPE_TAG_VARIANTS", "parse_type_tag"]

# (bcs, value, path) -> bytes
EncodeFn = Callable[["BCS", Any, str], bytes]

_UINT_BITS = {"u8": 8, "u16": 16, "u32": 32, "u64": 64, "u128": 128, "u256": 256}


def _split_generic(type_name: str) -> Tuple[str, Optional[str]]:
    """'vector<Option<u8>>' -> ('vector', 'Option<u8>'); 'u8' -> ('u8', None)."""
    t = type_name.strip()
    lt = t.find("<")
    if lt == -1:
        return t, None
    if not t.endswith(">"):
        raise BcsEncodeError(f"malformed type name {type_name!r}", type_name=type_name)
    return t[:lt].strip(), t[lt + 1 : -1].strip()


def _field(value: Any, name: str) -> Any:
    if isinstance(value, Mapping):
        if name in value:
            return value[name]
    elif hasattr(value, name):
        return getattr(value, name)
    raise KeyError(name)


def _join(path: str, part: str) -> str:
    return f"{path}.{part}" if path else part


class BCS:
    """Registry of named BCS types plus the encoder that walks them."""

    def __init__(self) -> None:
        self._structs: Dict[str, List[Tuple[str, str]]] = {}
        self._enums: Dict[str, List[Tuple[str, Optional[str]]]] = {}
        self._custom: Dict[str, EncodeFn] = {}

    # ---- registration ------------------------------------------------------

    def _check_free(self, name: str) -> None:
        if not name or "<" in name or ">" in name:
            raise ValueError(f"invalid type name {name!r}")
        if self.has_type(name):
            raise ValueError(f"type {name!r} is already registered")

    def register_struct(self, name: str, fields: Sequence[Tuple[str, str]]) -> "BCS":
        """Register a struct; `fields` are ``(field_name, type_name)`` in wire order."""
        self._check_free(name)
        self._structs[name] = [(str(f), str(t)) for f, t in fields]
        return self

    def register_enum(
        self, name: str, variants: Sequence[Tuple[str, Optional[str]]]
    ) -> "BCS":
        """Register an enum; a variant's index is its position in `variants`."""
        self._check_free(name)
        self._enums[name] = [(str(v), t) for v, t in variants]
        return self

    def register_type(self, name: str, encode: EncodeFn) -> "BCS":
        self._check_free(name)
        self._custom[name] = encode
        return self

    def has_type(self, type_name: str) -> bool:
        base, inner = _split_generic(type_name)
        if inner is not None:
            return base in ("vector", "Option") and self.has_type(inner)
        return (
            base in _UINT_BITS
            or base in ("bool", "string", "address", "bytes")
            or base in self._structs
            or base in self._enums
            or base in self._custom
        )

    # ---- encoding ----------------------------------------------------------

    def ser(self, type_name: str, value: Any) -> bytes:
        """Serialize `value` under the registered type `type_name`."""
        return self._encode(type_name, value, "")

    def serialize(self, type_tag: str, value: Any) -> bytes:
        return self.ser(type_tag, value)

    def _encode(self, type_name: str, value: Any, path: str) -> bytes:
        base, inner = _split_generic(type_name)
        if inner is not None:
            if base == "vector":
                return self._encode_vector(inner, value, path)
            if base == "Option":
                if value is None:
                    return b"\x00"
                return b"\x01" + self._encode(inner, value, path)
            raise BcsEncodeError(f"unknown generic {base!r}", type_name=type_name, path=path)

        if base in _UINT_BITS:
            return self._encode_uint(base, value, path)
        if base == "bool":
            if not isinstance(value, bool):
                raise BcsEncodeError("expected bool", type_name=base, path=path)
            return b"\x01" if value else b"\x00"
        if base == "string":
            if not isinstance(value, str):
                raise BcsEncodeError("expected str", type_name=base, path=path)
            raw = value.encode("utf-8")
            return uleb128_encode(len(raw)) + raw
        if base == "address":
            return self._encode_address(value, path)
        if base == "bytes":
            if not isinstance(value, (bytes, bytearray, memoryview)):
                raise BcsEncodeError("expected bytes", type_name=base, path=path)
            raw = bytes(value)
            return uleb128_encode(len(raw)) + raw
        if base in self._structs:
            return self._encode_struct(base, value, path)
        if base in self._enums:
            return self._encode_enum(base, value, path)
        if base in self._custom:
            return self._custom[base](self, value, path)
        raise BcsEncodeError("unknown type", type_name=type_name, path=path)

    def _encode_uint(self, name: str, value: Any, path: str) -> bytes:
        if not isinstance(value, int) or isinstance(value, bool):
            raise BcsEncodeError("expected int", type_name=name, path=path)
        bits = _UINT_BITS[name]
        if value < 0 or value >= (1 << bits):
            raise BcsEncodeError(f"{value} out of range", type_name=name, path=path)
        return value.to_bytes(bits // 8, "little")

    def _encode_address(self, value: Any, path: str) -> bytes:
        if isinstance(value, (bytes, bytearray, memoryview)):
            raw = bytes(value)
            if len(raw) != SUI_ADDRESS_LENGTH:
                raise BcsEncodeError(
                    f"address must be {SUI_ADDRESS_LENGTH} bytes, got {len(raw)}",
                    type_name="address",
                    path=path,
                )
            return raw
        if not isinstance(value, str):
            raise BcsEncodeError("expected address text or bytes", type_name="address", path=path)
        try:
            return address_to_bytes(normalize_sui_address(value))
        except AddressError as e:
            raise BcsEncodeError(str(e), type_name="address", path=path) from e

    def _encode_vector(self, inner: str, value: Any, path: str) -> bytes:
        if inner == "u8" and isinstance(value, (bytes, bytearray, memoryview)):
            raw = bytes(value)
            return uleb128_encode(len(raw)) + raw
        if isinstance(value, (str, bytes, bytearray, memoryview, Mapping)) or not isinstance(
            value, Sequence
        ):
            raise BcsEncodeError("expected a sequence", type_name=f"vector<{inner}>", path=path)
        if len(value) > ULEB128_MAX:
            raise BcsEncodeError("sequence too long", type_name=f"vector<{inner}>", path=path)
        out = bytearray(uleb128_encode(len(value)))
        for i, item in enumerate(value):
            out += self._encode(inner, item, f"{path}[{i}]")
        return bytes(out)

    def _encode_struct(self, name: str, value: Any, path: str) -> bytes:
        out = bytearray()
        for field_name, field_type in self._structs[name]:
            try:
                field_value = _field(value, field_name)
            except KeyError:
                raise BcsEncodeError(
                    f"missing field {field_name!r}", type_name=name, path=path
                ) from None
            out += self._encode(field_type, field_value, _join(path, field_name))
        return bytes(out)

    def _encode_enum(self, name: str, value: Any, path: str) -> bytes:
        variants = self._enums[name]
        if isinstance(value, str):
            variant, payload = value, None
        elif isinstance(value, Mapping) and len(value) == 1:
            ((variant, payload),) = value.items()
        else:
            raise BcsEncodeError(
                "enum value must be a variant name or a single-key mapping",
                type_name=name,
                path=path,
            )
        for index, (vname, vtype) in enumerate(variants):
            if vname != variant:
                continue
            tag = uleb128_encode(index)
            if vtype is None:
                if payload is not None:
                    raise BcsEncodeError(
                        f"unit variant {vname!r} takes no payload", type_name=name, path=path
                    )
                return tag
            return tag + self._encode(vtype, payload, _join(path, vname))
        raise BcsEncodeError(f"unknown variant {variant!r}", type_name=name, path=path)


# ---------------------------------------------------------------------------
# Move type tags
# ---------------------------------------------------------------------------

# Wire order of the TypeTag enum; new variants were appended at the end.
TYPE_TAG_VARIANTS: Tuple[str, ...] = (
    "Bool",
    "U8",
    "U64",
    "U128",
    "Address",
    "Signer",
    "Vector",
    "Struct",
    "U16",
    "U32",
    "U256",
)

_TYPE_TAG_INDEX = {name: i for i, name in enumerate(TYPE_TAG_VARIANTS)}

_PRIMITIVE_TYPE_TAGS = {
    "bool": "Bool",
    "u8": "U8",
    "u16": "U16",
    "u32": "U32",
    "u64": "U64",
    "u128": "U128",
    "u256": "U256",
    "address": "Address",
    "signer": "Signer",
}


def _split_type_params(text: str) -> List[str]:
    """Split ``A, B<C, D>`` on top-level commas."""
    parts: List[str] = []
    depth = 0
    start = 0
    for i, ch in enumerate(text):
        if ch == "<":
            depth += 1
        elif ch == ">":
            depth -= 1
            if depth < 0:
                raise ValueError(f"unbalanced '>' in {text!r}")
        elif ch == "," and depth == 0:
            parts.append(text[start:i].strip())
            start = i + 1
    if depth != 0:
        raise ValueError(f"unbalanced '<' in {text!r}")
    parts.append(text[start:].strip())
    if any(not p for p in parts):
        raise ValueError(f"empty type parameter in {text!r}")
    return parts


def parse_type_tag(text: str) -> Any:
    """
    Parse Move type syntax into the value shape the ``TypeTag`` type encodes.

        parse_type_tag("u64")            -> "U64"
        parse_type_tag("vector<u8>")     -> {"Vector": "U8"}
        parse_type_tag("0x2::sui::SUI")  -> {"Struct": {"address": "0x2",
                                              "module": "sui", "name": "SUI",
                                              "typeParams": []}}

    Raises ValueError on malformed input.
    """
    t = text.strip()
    prim = _PRIMITIVE_TYPE_TAGS.get(t)
    if prim is not None:
        return prim
    lt = t.find("<")
    if lt == -1:
        head, params = t, []
    else:
        if not t.endswith(">"):
            raise ValueError(f"malformed type {text!r}")
        head, params = t[:lt].strip(), _split_type_params(t[lt + 1 : -1])
    if head == "vector":
        if len(params) != 1:
            raise ValueError(f"vector takes one type parameter: {text!r}")
        return {"Vector": parse_type_tag(params[0])}
    parts = head.split("::")
    if len(parts) != 3 or not all(p.strip() for p in parts):
        raise ValueError(f"expected address::module::name, got {text!r}")
    address, module, name = (p.strip() for p in parts)
    return {
        "Struct": {
            "address": address,
            "module": module,
            "name": name,
            "typeParams": [parse_type_tag(p) for p in params],
        }
    }


def _encode_type_tag(bcs: BCS, value: Any, path: str) -> bytes:
    # Accepts Move type text or the enum shape ("U8", {"Vector": ...}, {"Struct": {...}}).
    if isinstance(value, str) and value not in _TYPE_TAG_INDEX:
        try:
            value = parse_type_tag(value)
        except ValueError as e:
            raise BcsEncodeError(str(e), type_name="TypeTag", path=path) from e
    if isinstance(value, str):
        variant, payload = value, None
    elif isinstance(value, Mapping) and len(value) == 1:
        ((variant, payload),) = value.items()
    else:
        raise BcsEncodeError(
            "expected Move type text or a TypeTag variant", type_name="TypeTag", path=path
        )
    index = _TYPE_TAG_INDEX.get(variant)
    if index is None:
        raise BcsEncodeError(f"unknown variant {variant!r}", type_name="TypeTag", path=path)
    tag = uleb128_encode(index)
    if variant == "Vector":
        return tag + _encode_type_tag(bcs, payload, _join(path, "Vector"))
    if variant == "Struct":
        return tag + bcs._encode("StructTag", payload, _join(path, "Struct"))
    if payload is not None:
        raise BcsEncodeError(
            f"unit variant {variant!r} takes no payload", type_name="TypeTag", path=path
        )
    return tag


# ---------------------------------------------------------------------------
# Transaction shapes
# ---------------------------------------------------------------------------


def _encode_object_digest(bcs: BCS, value: Any, path: str) -> bytes:
    # Object digests travel as base64 text in RPC responses.
    if isinstance(value, str):
        try:
            value = b64decode(value)
        except Base64DecodeError as e:
            raise BcsEncodeError(str(e), type_name="ObjectDigest", path=path) from e
    return bcs._encode("vector<u8>", value, path)


def default_bcs() -> BCS:
    """Fresh registry with the transaction data schema registered."""
    bcs = BCS()
    bcs.register_type("ObjectDigest", _encode_object_digest)
    bcs.register_struct(
        "SuiObjectRef",
        [("objectId", "address"), ("version", "u64"), ("digest", "ObjectDigest")],
    )
    bcs.register_struct(
        "TransferObjectTx", [("recipient", "address"), ("object_ref", "SuiObjectRef")]
    )
    bcs.register_struct("TransferSuiTx", [("recipient", "address"), ("amount", "Option<u64>")])
    bcs.register_struct("PublishTx", [("modules", "vector<vector<u8>>")])
    bcs.register_enum(
        "ObjectArg", [("ImmOrOwnedObject", "SuiObjectRef"), ("SharedObject", "address")]
    )
    bcs.register_type("TypeTag", _encode_type_tag)
    bcs.register_struct(
        "StructTag",
        [
            ("address", "address"),
            ("module", "string"),
            ("name", "string"),
            ("typeParams", "vector<TypeTag>"),
        ],
    )
    bcs.register_enum("CallArg", [("Pure", "vector<u8>"), ("Object", "ObjectArg")])
    bcs.register_struct(
        "MoveCallTx",
        [
            ("package", "SuiObjectRef"),
            ("module", "string"),
            ("function", "string"),
            ("typeArguments", "vector<TypeTag>"),
            ("arguments", "vector<CallArg>"),
        ],
    )
    bcs.register_enum(
        "SingleTransactionKind",
        [
            ("TransferObject", "TransferObjectTx"),
            ("Publish", "PublishTx"),
            ("Call", "MoveCallTx"),
            ("TransferSui", "TransferSuiTx"),
        ],
    )
    bcs.register_enum(
        "TransactionKind",
        [("Single", "SingleTransactionKind"), ("Batch", "vector<SingleTransactionKind>")],
    )
    bcs.register_struct(
        "TransactionData",
        [
            ("kind", "TransactionKind"),
            ("sender", "address"),
            ("gasPayment", "SuiObjectRef"),
            ("gasPrice", "u64"),
            ("gasBudget", "u64"),
        ],
    )
    return bcs
