from datetime import datetime
from decimal import Decimal

import pytest
from conftest import load_fixture
from podio_client.core.errors import PodioDecodeError
from podio_client.models import Field, Item
from podio_client.values import (
    DateRange,
    decode_values,
    field_by_external_id,
    number_values,
    related_item_ids,
)


@pytest.fixture
def item() -> Item:
    return Item.model_validate(load_fixture("item.json"))


def test_text_field(item):
    assert decode_values(field_by_external_id(item, "title")) == ["Quarterly invoice"]


def test_money_field_is_decimal(item):
    assert decode_values(field_by_external_id(item, "amount")) == [Decimal("1250.5")]


def test_date_field_keeps_start_and_end(item):
    assert decode_values(field_by_external_id(item, "due-date")) == [
        DateRange(start=datetime(2024, 3, 31, 12, 0), end=datetime(2024, 4, 2))
    ]


def test_app_field_yields_item_ids(item):
    assert decode_values(field_by_external_id(item, "customer")) == [77, 78]


def test_category_field_yields_option_text(item):
    assert decode_values(field_by_external_id(item, "status")) == ["Sent"]


def test_unknown_type_returns_raw_values(item):
    assert decode_values(field_by_external_id(item, "location")) == ["Copenhagen"]


def test_field_lookup_missing(item):
    assert field_by_external_id(item, "nope") is None


def test_number_field_rejects_garbage():
    field = Field.model_validate(
        {"external_id": "n", "type": "number", "values": [{"value": "abc"}]}
    )
    with pytest.raises(PodioDecodeError):
        number_values(field)


def test_relationship_rejects_unexpected_shape():
    field = Field.model_validate(
        {"external_id": "rel", "type": "app", "values": [{"value": "x"}]}
    )
    with pytest.raises(PodioDecodeError):
        related_item_ids(field)


def test_invalid_date_raises_decode_error():
    field = Field.model_validate(
        {"external_id": "d", "type": "date", "values": [{"start": "31/12/2024"}]}
    )
    with pytest.raises(PodioDecodeError):
        decode_values(field)
