"""
Partial update merge

Applies a PATCH payload onto a stored record: every non-null field of the
patch overwrites the record, null or missing fields leave it untouched.
Shared by all entity services.
"""
from collections.abc import Mapping, MutableMapping
from typing import Any, Iterable, Optional

from pydantic import BaseModel


def _patch_fields(patch: Any) -> Iterable[str]:
    if isinstance(patch, BaseModel):
        return type(patch).model_fields.keys()
    if isinstance(patch, Mapping):
        return patch.keys()
    raise TypeError(f"Unsupported patch type: {type(patch).__name__}")


def _read(obj: Any, name: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def _write(obj: Any, name: str, value: Any) -> None:
    if isinstance(obj, MutableMapping):
        obj[name] = value
    else:
        setattr(obj, name, value)


def merge_partial(
    existing: Any,
    patch: Any,
    fields: Optional[Iterable[str]] = None,
    id_field: str = "id",
) -> Any:
    """
    Copy the non-null fields of ``patch`` onto ``existing``

    Args:
        existing: Stored record (ORM instance, attribute object or dict).
            Mutated in place.
        patch: Pydantic model or mapping with the same field names. None
            means "leave unchanged".
        fields: Field names to consider (default: every field of the patch)
        id_field: Identifier field, never copied

    Returns:
        The same ``existing`` object

    The caller guarantees ``existing`` and ``patch`` share the same id.
    """
    names = fields if fields is not None else _patch_fields(patch)

    for name in names:
        if name == id_field:
            continue
        value = _read(patch, name)
        if value is not None:
            _write(existing, name, value)

    return existing
