"""Tests for response decoding."""

import json

import pytest

from mywaifu_client.errors.models import ApiError, ErrorKind, MappingError
from mywaifu_client.mapping import ENTITY_SCHEMAS, EntityKind, ListOf, Paginated, Single, decode
from mywaifu_client.models import FilteredWaifu, PaginationEnvelope, Waifu
from mywaifu_client.result import Failure, Success
from mywaifu_client.transport.models import RawResult

ALL_SHAPES = [shape(kind) for shape in (Single, ListOf, Paginated) for kind in EntityKind]


@pytest.mark.unit
def test_every_entity_kind_has_a_schema():
    assert set(ENTITY_SCHEMAS) == set(EntityKind)


@pytest.mark.unit
def test_decode_single_waifu():
    """Test decoding a single object into the requested entity."""
    result = decode(RawResult(200, '{"id":1,"name":"X"}'), Single(EntityKind.WAIFU))

    assert result == Success(Waifu(id=1, name="X"))


@pytest.mark.unit
def test_decode_single_nested_fields():
    body = {
        "id": 1,
        "name": "Rem",
        "creator": {"id": 9, "name": "goudham"},
        "tags": [{"id": 1, "name": "Maid"}],
        "appearances": [{"id": 11, "name": "Re:Zero"}],
        "husbando": False,
        "unknown_field": "ignored",
    }

    waifu = decode(RawResult(200, json.dumps(body)), Single(EntityKind.WAIFU)).unwrap()

    assert waifu.creator.name == "goudham"
    assert waifu.tags[0].name == "Maid"
    assert waifu.appearances[0].id == 11
    assert waifu.husbando is False


@pytest.mark.unit
def test_decode_list():
    body = json.dumps([{"id": 1, "name": "A"}, {"id": 2, "name": "B"}])

    result = decode(RawResult(200, body), ListOf(EntityKind.FILTERED_WAIFU))

    assert result == Success([FilteredWaifu(id=1, name="A"), FilteredWaifu(id=2, name="B")])


@pytest.mark.unit
def test_decode_empty_list():
    assert decode(RawResult(200, "[]"), ListOf(EntityKind.USER_LIST)) == Success([])


@pytest.mark.unit
def test_decode_paginated():
    """Test decoding a pagination envelope exposes data as items."""
    body = '{"data":[{"id":1,"name":"A"}],"current_page":1,"last_page":3}'

    result = decode(RawResult(200, body), Paginated(EntityKind.FILTERED_WAIFU))

    page = result.unwrap()
    assert isinstance(page, PaginationEnvelope)
    assert page.items == [FilteredWaifu(id=1, name="A")]
    assert page.current_page == 1
    assert page.last_page == 3
    assert page.total is None


@pytest.mark.unit
def test_decode_paginated_full_metadata():
    body = {
        "data": [],
        "current_page": 2,
        "last_page": 2,
        "total": 11,
        "per_page": 10,
        "from": 11,
        "to": 11,
        "next_page_url": None,
        "prev_page_url": "https://mywaifulist.moe/api/v1/waifu?page=1",
    }

    page = decode(RawResult(200, json.dumps(body)), Paginated(EntityKind.FILTERED_WAIFU)).unwrap()

    assert page.from_ == 11
    assert page.per_page == 10
    assert page.prev_page_url.endswith("page=1")
    assert not page.has_next_page


@pytest.mark.unit
def test_paginated_envelope_survives_reencoding():
    """Test an envelope dumped with API field names decodes to an equal value."""
    original = PaginationEnvelope[FilteredWaifu](
        data=[FilteredWaifu(id=1, name="A", likes=4)], current_page=1, last_page=1, total=1
    )

    decoded = decode(
        RawResult(200, original.model_dump_json(by_alias=True)), Paginated(EntityKind.FILTERED_WAIFU)
    ).unwrap()

    assert decoded.items == original.items
    assert decoded.model_dump() == original.model_dump()


@pytest.mark.unit
def test_decode_any_2xx_is_success():
    assert decode(RawResult(203, '{"id":1,"name":"X"}'), Single(EntityKind.USER)).is_success


@pytest.mark.unit
def test_missing_required_field_is_mapping_error():
    """Test valid JSON lacking a required field fails with MappingError."""
    result = decode(RawResult(200, '{"id":1}'), Single(EntityKind.WAIFU))

    assert isinstance(result, Failure)
    assert isinstance(result.error, MappingError)
    assert result.error.kind is ErrorKind.MAPPING
    assert result.error.field_path == "name"
    assert result.error.shape == "Single(waifu)"


@pytest.mark.unit
def test_type_mismatch_is_mapping_error():
    result = decode(RawResult(200, '{"id":"abc","name":"X"}'), Single(EntityKind.WAIFU))

    assert result.error.field_path == "id"


@pytest.mark.unit
def test_nested_field_path_in_paginated_error():
    body = '{"data":[{"id":1,"name":"A"},{"id":2}],"current_page":1,"last_page":1}'

    result = decode(RawResult(200, body), Paginated(EntityKind.FILTERED_WAIFU))

    assert result.error.field_path == "data.1.name"
    assert "Paginated(filtered-waifu)" in result.error.message


@pytest.mark.unit
def test_paginated_without_metadata_is_mapping_error():
    result = decode(RawResult(200, '{"data":[]}'), Paginated(EntityKind.SERIES))

    assert isinstance(result.error, MappingError)


@pytest.mark.unit
def test_array_for_single_is_mapping_error():
    result = decode(RawResult(200, '[{"id":1,"name":"X"}]'), Single(EntityKind.WAIFU))

    assert isinstance(result.error, MappingError)


@pytest.mark.unit
@pytest.mark.parametrize("body", ["", "not json", '{"id":1,', "null"])
def test_malformed_success_body_is_mapping_error(body):
    result = decode(RawResult(200, body), Single(EntityKind.WAIFU))

    assert isinstance(result.error, MappingError)


@pytest.mark.unit
def test_not_found_envelope():
    result = decode(RawResult(404, '{"message":"not found"}'), Single(EntityKind.WAIFU))

    assert result == Failure(ApiError(http_status=404, message="not found"))


@pytest.mark.unit
@pytest.mark.parametrize("shape", ALL_SHAPES, ids=str)
def test_error_envelope_ignores_shape(shape):
    """Test a non-2xx envelope decodes to the same ApiError for every shape."""
    result = decode(RawResult(401, '{"status":401,"message":"Invalid API key"}'), shape)

    assert result == Failure(ApiError(http_status=401, message="Invalid API key"))


@pytest.mark.unit
def test_error_status_uses_response_status_not_envelope():
    result = decode(RawResult(503, '{"status":500,"message":"down"}'), ListOf(EntityKind.SERIES))

    assert result.error.http_status == 503
    assert result.error.envelope.status == 500


@pytest.mark.unit
@pytest.mark.parametrize(
    "body",
    ["", "<html>Bad Gateway</html>", "[]", '{"unrelated": true}', "[" * 100000 + "]" * 100000],
)
def test_unparseable_error_body_gets_fallback_message(body):
    result = decode(RawResult(502, body), Single(EntityKind.WAIFU))

    assert isinstance(result.error, ApiError)
    assert result.error.http_status == 502
    assert result.error.message.startswith("HTTP 502")


@pytest.mark.unit
def test_decode_is_deterministic():
    raw = RawResult(200, '{"id":1,"name":"X"}')

    assert decode(raw, Single(EntityKind.SERIES)) == decode(raw, Single(EntityKind.SERIES))
