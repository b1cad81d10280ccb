from __future__ import annotations

import hashlib
import struct
from typing import Any, Dict, Mapping

from solders.pubkey import Pubkey

from pool_api.program.idl import ACCOUNT_LAYOUTS, InstructionDef

# Borsh scalar formats (little endian)
_FORMATS = {
    "u8": "<B",
    "u64": "<Q",
    "f64": "<d",
}

DISCRIMINATOR_SIZE = 8


def instruction_discriminator(name: str) -> bytes:
    """First 8 bytes of sha256("global:<name>")."""
    return hashlib.sha256(f"global:{name}".encode()).digest()[:DISCRIMINATOR_SIZE]


def account_discriminator(name: str) -> bytes:
    """First 8 bytes of sha256("account:<Name>")."""
    return hashlib.sha256(f"account:{name}".encode()).digest()[:DISCRIMINATOR_SIZE]


def _pack(kind: str, value: Any) -> bytes:
    if kind == "pubkey":
        return bytes(value)
    fmt = _FORMATS.get(kind)
    if fmt is None:
        raise ValueError(f"Unsupported argument type: {kind}")
    try:
        return struct.pack(fmt, value)
    except struct.error as e:
        raise ValueError(f"Value {value!r} does not fit {kind}") from e


def encode_instruction_data(ix: InstructionDef, args: Mapping[str, Any]) -> bytes:
    """
    Discriminator followed by the instruction args in interface order.
    Raises ValueError when an arg is missing or out of range.
    """
    out = bytearray(instruction_discriminator(ix.name))
    for arg_name, kind in ix.args:
        if arg_name not in args or args[arg_name] is None:
            raise ValueError(f"Missing argument '{arg_name}' for {ix.name}")
        out += _pack(kind, args[arg_name])
    return bytes(out)


def decode_account(name: str, data: bytes) -> Dict[str, Any]:
    """
    Decode raw account bytes using the named layout.
    Checks the discriminator first; trailing bytes (account padding) are ignored.
    """
    layout = ACCOUNT_LAYOUTS[name]

    if data[:DISCRIMINATOR_SIZE] != account_discriminator(name):
        raise ValueError(f"Account data is not a {name} account")

    offset = DISCRIMINATOR_SIZE
    fields: Dict[str, Any] = {}
    for field_name, kind in layout:
        if kind == "pubkey":
            size = 32
            if len(data) < offset + size:
                raise ValueError(f"{name} account data too short")
            fields[field_name] = Pubkey.from_bytes(data[offset:offset + size])
        else:
            fmt = _FORMATS[kind]
            size = struct.calcsize(fmt)
            if len(data) < offset + size:
                raise ValueError(f"{name} account data too short")
            (fields[field_name],) = struct.unpack_from(fmt, data, offset)
        offset += size

    return fields


def encode_account(name: str, fields: Mapping[str, Any]) -> bytes:
    """Inverse of decode_account (used for fixtures and local tooling)."""
    out = bytearray(account_discriminator(name))
    for field_name, kind in ACCOUNT_LAYOUTS[name]:
        out += _pack(kind, fields[field_name])
    return bytes(out)
