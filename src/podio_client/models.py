from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field as PydField, model_validator


class PodioModel(BaseModel):
    """
    Base for wire records.
    - Every field has a zero-value default, so any JSON object decodes
    - JSON null on a typed field leaves its default in place
    - Unknown keys are ignored; records are frozen once decoded
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        # Untyped (Any) fields keep an explicit null.
        keep = set()
        for name, info in cls.model_fields.items():
            if info.annotation is Any:
                keep.add(name)
                if info.alias:
                    keep.add(info.alias)
        return {k: v for k, v in data.items() if v is not None or k in keep}


class Token(PodioModel):
    access_token: str = ""
    token_type: str = ""
    expires_in: int = 0
    refresh_token: str = ""
    ref: Dict[str, Any] = PydField(default_factory=dict)
    transfer_token: str = ""


# --- Hierarchy: organization -> space -> app ---


class Organization(PodioModel):
    id: int = PydField(default=0, alias="org_id")
    slug: str = PydField(default="", alias="url_label")
    name: str = ""


class Space(PodioModel):
    id: int = PydField(default=0, alias="space_id")
    slug: str = PydField(default="", alias="url_label")
    name: str = ""


class App(PodioModel):
    id: int = PydField(default=0, alias="app_id")
    slug: str = PydField(default="", alias="url_label")
    name: str = ""


# --- Items ---


class File(PodioModel):
    id: int = PydField(default=0, alias="file_id")
    name: str = ""
    link: str = ""
    size: int = 0


class Value(PodioModel):
    # Heterogeneous per field type; see podio_client.values for typed access.
    # Extra keys are kept: date values arrive as start/end, not value.
    value: Any = None

    model_config = ConfigDict(populate_by_name=True, extra="allow", frozen=True)


class Field(PodioModel):
    field_id: int = 0
    external_id: str = ""
    type: str = ""
    label: str = ""
    values: List[Value] = PydField(default_factory=list)


class Item(PodioModel):
    id: int = PydField(default=0, alias="item_id")
    app_item_id: int = 0
    formatted_app_item_id: str = PydField(default="", alias="app_item_id_formatted")
    title: str = ""
    files: List[File] = PydField(default_factory=list)
    fields: List[Field] = PydField(default_factory=list)


class ItemList(PodioModel):
    """One page of a filter call; there is no continuation cursor."""

    filtered: int = 0
    total: int = 0
    items: List[Item] = PydField(default_factory=list)


class CreatedItem(PodioModel):
    item_id: int = 0


class Comment(PodioModel):
    id: int = PydField(default=0, alias="comment_id")
    value: str = ""
    ref: Dict[str, Any] = PydField(default_factory=dict)
    files: List[File] = PydField(default_factory=list)
    created_by: Any = None
    created_via: Any = None
    created_on: Any = None
    is_liked: bool = False
    like_count: int = 0


# --- Errors ---


class ErrorRequest(PodioModel):
    url: str = ""
    query_string: str = ""


class APIErrorPayload(PodioModel):
    type: str = PydField(default="", alias="error")
    description: str = PydField(default="", alias="error_description")
    detail: Any = PydField(default=None, alias="error_detail")
    parameters: Any = PydField(default=None, alias="error_parameters")
    propagate: bool = PydField(default=False, alias="error_propagate")
    request: ErrorRequest = PydField(default_factory=ErrorRequest)


__all__ = [
    "PodioModel",
    "Token",
    "Organization",
    "Space",
    "App",
    "File",
    "Value",
    "Field",
    "Item",
    "ItemList",
    "CreatedItem",
    "Comment",
    "ErrorRequest",
    "APIErrorPayload",
]
