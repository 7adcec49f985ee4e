"""
Typed access to field values.

Item fields carry their values as untyped wire data. The helpers here decode
them according to the field's declared ``type`` string; nothing in the core
models depends on this module.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Dict, List, Optional

from .core.errors import PodioDecodeError
from .models import Field, Item, Value

TEXT_TYPES = frozenset({"text", "title", "email", "phone"})
NUMBER_TYPES = frozenset({"number", "money", "progress", "calculation", "duration"})


@dataclass(frozen=True)
class DateRange:
    start: Optional[datetime]
    end: Optional[datetime] = None


def _extra(value: Value, key: str) -> Any:
    return (value.model_extra or {}).get(key)


def _parse_datetime(raw: Any, field: Field) -> Optional[datetime]:
    if raw in (None, ""):
        return None
    try:
        return datetime.fromisoformat(str(raw))
    except ValueError as exc:
        raise PodioDecodeError(
            f"Field {field.external_id or field.field_id} has invalid date {raw!r}"
        ) from exc


def text_values(field: Field) -> List[str]:
    return ["" if v.value is None else str(v.value) for v in field.values]


def number_values(field: Field) -> List[Decimal]:
    out: List[Decimal] = []
    for v in field.values:
        try:
            out.append(Decimal(str(v.value)))
        except InvalidOperation as exc:
            raise PodioDecodeError(
                f"Field {field.external_id or field.field_id} has non-numeric "
                f"value {v.value!r}"
            ) from exc
    return out


def date_values(field: Field) -> List[DateRange]:
    out: List[DateRange] = []
    for v in field.values:
        start = _extra(v, "start")
        end = _extra(v, "end")
        # Some payloads nest the range under "value".
        if start is None and isinstance(v.value, dict):
            start = v.value.get("start")
            end = v.value.get("end")
        out.append(
            DateRange(
                start=_parse_datetime(start, field),
                end=_parse_datetime(end, field),
            )
        )
    return out


def related_item_ids(field: Field) -> List[int]:
    """Item ids referenced by an ``app`` (relationship) field."""
    ids: List[int] = []
    for v in field.values:
        if isinstance(v.value, dict) and "item_id" in v.value:
            ids.append(int(v.value["item_id"]))
        elif isinstance(v.value, int):
            ids.append(v.value)
        else:
            raise PodioDecodeError(
                f"Field {field.external_id or field.field_id} has unexpected "
                f"relationship value {v.value!r}"
            )
    return ids


def category_values(field: Field) -> List[str]:
    return [
        str(v.value.get("text", "")) if isinstance(v.value, dict) else str(v.value)
        for v in field.values
    ]


_DECODERS: Dict[str, Callable[[Field], List[Any]]] = {
    "date": date_values,
    "app": related_item_ids,
    "category": category_values,
}
for _t in TEXT_TYPES:
    _DECODERS[_t] = text_values
for _t in NUMBER_TYPES:
    _DECODERS[_t] = number_values


def decode_values(field: Field) -> List[Any]:
    """Decode a field's values by its type; unknown types return raw values."""
    decoder = _DECODERS.get(field.type)
    if decoder is None:
        return [v.value for v in field.values]
    return decoder(field)


def field_by_external_id(item: Item, external_id: str) -> Optional[Field]:
    return next((f for f in item.fields if f.external_id == external_id), None)


__all__ = [
    "DateRange",
    "decode_values",
    "text_values",
    "number_values",
    "date_values",
    "related_item_ids",
    "category_values",
    "field_by_external_id",
]
