"""Declarative request-body builder shared by all resource adapters.

Each resource describes its outgoing payload once, as a ``PayloadSpec``:
the encoding the backend expects (multipart or JSON) and how each client
field maps onto a backend key. ``build_payload`` turns form values into
either a ``FormPayload`` (multipart) or a plain ``dict`` (JSON).

Multipart rules:
- scalar text fields are sent as strings
- list fields (tags) are sent as one JSON string under a single key
- file fields are sent only for a fresh ``FileUpload``; a stored path
  means "unchanged" and is never re-uploaded
"""

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

from cms_admin.files import FileUpload


class Encoding(str, Enum):
    MULTIPART = "multipart"
    JSON = "json"


class Kind(str, Enum):
    TEXT = "text"  # str(value)
    JSON = "json"  # json.dumps(value) as one text part
    FILE = "file"  # FileUpload only
    RAW = "raw"  # value as-is (JSON bodies: bools, nulls, numbers)
    CHOICE = "choice"  # value translated through FieldMap.choices


class When(str, Enum):
    PRESENT = "present"  # key given and value not None
    ALWAYS = "always"  # default substituted when missing or None
    TRUTHY = "truthy"  # non-empty values only


_MISSING = object()


@dataclass(frozen=True)
class FieldMap:
    """How one client field is written to the backend payload."""

    client: str
    backend: str | None = None
    kind: Kind = Kind.TEXT
    when: When = When.PRESENT
    default: Any = _MISSING
    choices: Mapping[Any, Any] | None = None

    @property
    def key(self) -> str:
        return self.backend or self.client


@dataclass(frozen=True)
class PayloadSpec:
    encoding: Encoding
    fields: tuple[FieldMap, ...]


@dataclass
class FormPayload:
    """An ordered multipart body: text parts and file parts."""

    fields: list[tuple[str, str]] = field(default_factory=list)
    files: list[tuple[str, FileUpload]] = field(default_factory=list)

    def get(self, key: str) -> str | None:
        for name, value in self.fields:
            if name == key:
                return value
        return None

    def keys(self) -> list[str]:
        return [name for name, _ in self.fields] + [name for name, _ in self.files]

    def __contains__(self, key: str) -> bool:
        return key in self.keys()

    def as_httpx_files(self) -> list[tuple[str, tuple]]:
        """Render for ``httpx``'s ``files=`` argument.

        Text parts go in as ``(None, value)`` so the request is always
        ``multipart/form-data``, even when no file is attached.
        """
        parts: list[tuple[str, tuple]] = [(name, (None, value)) for name, value in self.fields]
        parts.extend((name, upload.as_httpx_file()) for name, upload in self.files)
        return parts

    def describe(self) -> dict[str, str]:
        """Loggable summary (file contents replaced by name and size)."""
        summary = {name: value for name, value in self.fields}
        for name, upload in self.files:
            summary[name] = repr(upload)
        return summary


def _resolve(spec: FieldMap, values: Mapping[str, Any]) -> Any:
    """Return the value to write, or ``_MISSING`` to skip the field."""
    value = values.get(spec.client)

    if spec.when is When.ALWAYS:
        if value is None:
            if spec.default is _MISSING:
                return None
            return spec.default
        return value

    if spec.client not in values:
        return _MISSING
    if value is None:
        # Present but null: fall back to the default when one is declared.
        return _MISSING if spec.default is _MISSING else spec.default
    if spec.when is When.TRUTHY and not value:
        return _MISSING
    return value


def _text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_payload(spec: PayloadSpec, values: Mapping[str, Any]) -> FormPayload | dict[str, Any]:
    if spec.encoding is Encoding.JSON:
        return build_json(spec, values)
    return build_form(spec, values)


def build_form(spec: PayloadSpec, values: Mapping[str, Any]) -> FormPayload:
    form = FormPayload()
    for mapping in spec.fields:
        if mapping.kind is Kind.FILE:
            value = values.get(mapping.client)
            if isinstance(value, FileUpload):
                form.files.append((mapping.key, value))
            continue

        value = _resolve(mapping, values)
        if value is _MISSING:
            continue
        if mapping.kind is Kind.JSON:
            if not isinstance(value, (list, tuple)):
                continue
            form.fields.append((mapping.key, json.dumps(list(value), separators=(",", ":"))))
        elif mapping.kind is Kind.CHOICE:
            form.fields.append((mapping.key, _text(mapping.choices.get(value, value))))
        else:
            form.fields.append((mapping.key, _text(value)))
    return form


def build_json(spec: PayloadSpec, values: Mapping[str, Any]) -> dict[str, Any]:
    """Build a JSON body. Only mapped fields are sent (explicit allow-list)."""
    body: dict[str, Any] = {}
    for mapping in spec.fields:
        if mapping.kind is Kind.FILE:
            continue
        value = _resolve(mapping, values)
        if value is _MISSING:
            continue
        if mapping.kind is Kind.CHOICE:
            value = mapping.choices.get(value, value)
        body[mapping.key] = value
    return body
