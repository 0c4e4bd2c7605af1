"""Shared msgspec policy and helpers."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Literal

import msgspec


class StructBaseStrict(
    msgspec.Struct,
    frozen=True,
    kw_only=True,
    omit_defaults=True,
    repr_omit_defaults=True,
    forbid_unknown_fields=True,
):
    """Base struct for strict contracts."""


class StructBaseCompat(
    msgspec.Struct,
    frozen=True,
    kw_only=True,
    omit_defaults=True,
    repr_omit_defaults=True,
    forbid_unknown_fields=False,
):
    """Base struct for forward-compatible payloads written by other tools."""


_DEFAULT_ORDER: Literal["deterministic"] = "deterministic"

_VALIDATION_RE = re.compile(r"^(?P<summary>.*?)(?:\s+-\s+at\s+`(?P<path>[^`]+)`)?$")


def _json_enc_hook(obj: object) -> object:
    if isinstance(obj, Path):
        return obj.as_posix()
    if isinstance(obj, (bytes, bytearray, memoryview)):
        return bytes(obj).hex()
    raise TypeError


JSON_ENCODER = msgspec.json.Encoder(
    enc_hook=_json_enc_hook,
    order=_DEFAULT_ORDER,
)


def validation_error_payload(exc: msgspec.DecodeError) -> dict[str, str]:
    """Normalize a msgspec decode or validation error for diagnostics.

    Parameters
    ----------
    exc
        Error raised by msgspec decoding/conversion.

    Returns
    -------
    dict[str, str]
        Normalized error payload containing type, summary, and optional path.
    """
    message = str(exc).strip()
    match = _VALIDATION_RE.match(message)
    payload: dict[str, str] = {"type": exc.__class__.__name__}
    if match:
        summary = (match.group("summary") or "").strip()
        if summary:
            payload["summary"] = summary
        path = match.group("path")
        if path:
            payload["path"] = path
        return payload
    payload["summary"] = message
    return payload


def describe_decode_error(exc: msgspec.DecodeError) -> str:
    """Render a decode error as a single human-readable line.

    Returns
    -------
    str
        ``summary`` or ``summary (at path)``.
    """
    payload = validation_error_payload(exc)
    summary = payload.get("summary", payload["type"])
    path = payload.get("path")
    return f"{summary} (at {path})" if path else summary


def dumps_json(obj: object, *, pretty: bool = False) -> bytes:
    """Serialize an object to JSON bytes.

    Parameters
    ----------
    obj
        Object to serialize.
    pretty
        Whether to format with indentation.

    Returns
    -------
    bytes
        JSON payload.
    """
    raw = JSON_ENCODER.encode(obj)
    if not pretty:
        return raw
    return msgspec.json.format(raw, indent=2)


def loads_json[T](buf: bytes | str, *, target_type: type[T], strict: bool = True) -> T:
    """Deserialize JSON bytes into the requested type.

    Parameters
    ----------
    buf
        JSON payload.
    target_type
        Target type for decoding.
    strict
        Whether to enforce strict decoding.

    Returns
    -------
    T
        Decoded payload.
    """
    decoder = msgspec.json.Decoder(type=target_type, strict=strict)
    return decoder.decode(buf)


def loads_json_builtins(buf: bytes | str) -> Any:
    """Deserialize JSON bytes into builtin Python values.

    Returns
    -------
    Any
        Decoded payload.
    """
    return msgspec.json.decode(buf)


def convert[T](obj: object, *, target_type: type[T], strict: bool = True) -> T:
    """Convert an object into a target type.

    Parameters
    ----------
    obj
        Object to convert.
    target_type
        Target type for conversion.
    strict
        Whether to enforce strict conversion.

    Returns
    -------
    T
        Converted payload.
    """
    return msgspec.convert(obj, type=target_type, strict=strict)


def ensure_raw(payload: bytes | msgspec.Raw, *, copy: bool = False) -> msgspec.Raw:
    """Return a msgspec.Raw wrapper, optionally detaching the buffer.

    Parameters
    ----------
    payload
        Bytes or existing Raw payload.
    copy
        Whether to detach the Raw buffer with ``Raw.copy()``.

    Returns
    -------
    msgspec.Raw
        Raw wrapper for the payload.
    """
    raw = payload if isinstance(payload, msgspec.Raw) else msgspec.Raw(payload)
    return raw.copy() if copy else raw


__all__ = [
    "JSON_ENCODER",
    "StructBaseCompat",
    "StructBaseStrict",
    "convert",
    "describe_decode_error",
    "dumps_json",
    "ensure_raw",
    "loads_json",
    "loads_json_builtins",
    "validation_error_payload",
]
