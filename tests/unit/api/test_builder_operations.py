"""Unit tests for QueryBuilder terminal operations against a mock gateway."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from airquery.api import QueryBuilder
from airquery.core import ApiError, ValidationError
from airquery.models import TableRef


def envelope(record_id: str, **fields):
    return {"id": record_id, "createdTime": "2024-01-01T00:00:00Z", "fields": fields}


@pytest.fixture
def gateway():
    gw = MagicMock()
    gw.request = AsyncMock()
    return gw


@pytest.fixture
def sleep():
    return AsyncMock()


@pytest.fixture
def builder(gateway, sleep):
    return QueryBuilder(gateway, TableRef(base_id="app1", name="Tasks"), sleep=sleep)


class TestReads:
    @pytest.mark.asyncio
    async def test_get_sends_only_configured_params(self, builder, gateway):
        gateway.request.return_value = {"records": [envelope("rec1", Name="a")]}

        records = await (
            builder.where("Status", "Done")
            .view("Grid")
            .order_by("Name", "desc")
            .fields(["Name"])
            .take(50)
            .get()
        )

        assert records == [{"Name": "a", "createdTime": "2024-01-01T00:00:00Z", "id": "rec1"}]
        gateway.request.assert_awaited_once_with(
            "GET",
            "Tasks",
            params=[
                ("filterByFormula", '{Status}="Done"'),
                ("view", "Grid"),
                ("fields[]", "Name"),
                ("sort[0][field]", "Name"),
                ("sort[0][direction]", "desc"),
                ("pageSize", "50"),
            ],
        )

    @pytest.mark.asyncio
    async def test_bare_get_sends_no_params(self, builder, gateway):
        gateway.request.return_value = {"records": []}

        assert await builder.all() == []
        gateway.request.assert_awaited_once_with("GET", "Tasks", params=[])

    @pytest.mark.asyncio
    async def test_get_follows_cursor_and_delay(self, builder, gateway, sleep):
        gateway.request.side_effect = [
            {"records": [envelope("rec1")], "offset": "itr1"},
            {"records": [envelope("rec2")]},
        ]

        records = await builder.delay(0.5).offset("itr0").get()

        assert [r["id"] for r in records] == ["rec1", "rec2"]
        first_params = gateway.request.await_args_list[0].kwargs["params"]
        second_params = gateway.request.await_args_list[1].kwargs["params"]
        assert first_params == [("offset", "itr0")]
        assert second_params == [("offset", "itr1")]
        sleep.assert_awaited_once_with(0.5)

    @pytest.mark.asyncio
    async def test_first_returns_first_record(self, builder, gateway):
        gateway.request.return_value = {"records": [envelope("rec1"), envelope("rec2")]}

        record = await builder.first()

        assert record["id"] == "rec1"

    @pytest.mark.asyncio
    async def test_first_on_empty_result_returns_none(self, builder, gateway):
        gateway.request.return_value = {"records": []}

        assert await builder.first() is None

    @pytest.mark.asyncio
    async def test_count(self, builder, gateway):
        gateway.request.return_value = {"records": [envelope("rec1"), envelope("rec2")]}

        assert await builder.count() == 2

    @pytest.mark.asyncio
    async def test_find_bypasses_pagination(self, builder, gateway):
        gateway.request.return_value = envelope("rec9", Name="x")

        record = await builder.take(5).where("A", 1).find("rec9")

        assert record == {"Name": "x", "createdTime": "2024-01-01T00:00:00Z", "id": "rec9"}
        gateway.request.assert_awaited_once_with("GET", "Tasks/rec9")


class TestWrites:
    @pytest.mark.asyncio
    async def test_insert(self, builder, gateway):
        gateway.request.return_value = envelope("rec1", Name="new")

        record = await builder.typecast(True).insert({"Name": "new"})

        assert record["id"] == "rec1"
        assert record["Name"] == "new"
        gateway.request.assert_awaited_once_with(
            "POST", "Tasks", json_body={"fields": {"Name": "new"}, "typecast": True}
        )

    @pytest.mark.asyncio
    async def test_single_update_uses_put(self, builder, gateway):
        gateway.request.return_value = envelope("rec1", Name="b")

        record = await builder.update("rec1", {"Name": "b"})

        assert record["Name"] == "b"
        gateway.request.assert_awaited_once_with(
            "PUT", "Tasks/rec1", json_body={"fields": {"Name": "b"}, "typecast": False}
        )

    @pytest.mark.asyncio
    async def test_single_patch_uses_patch(self, builder, gateway):
        gateway.request.return_value = envelope("rec1", Name="c")

        await builder.patch("rec1", {"Name": "c"})

        gateway.request.assert_awaited_once_with(
            "PATCH", "Tasks/rec1", json_body={"fields": {"Name": "c"}, "typecast": False}
        )

    @pytest.mark.asyncio
    async def test_mass_patch_is_chunked(self, builder, gateway, sleep):
        payload = {f"rec{i}": {"n": i} for i in range(12)}
        gateway.request.side_effect = [
            {"records": [envelope(f"rec{i}", n=i) for i in range(10)]},
            {"records": [envelope(f"rec{i}", n=i) for i in range(10, 12)]},
        ]

        records = await builder.delay(0.1).patch(payload)

        assert [r["id"] for r in records] == [f"rec{i}" for i in range(12)]
        methods = [c.args[0] for c in gateway.request.await_args_list]
        paths = [c.args[1] for c in gateway.request.await_args_list]
        assert methods == ["PATCH", "PATCH"]
        assert paths == ["Tasks", "Tasks"]
        sleep.assert_awaited_once_with(0.1)

    @pytest.mark.asyncio
    async def test_mass_update_uses_put(self, builder, gateway):
        gateway.request.return_value = {"records": [envelope("rec1")]}

        await builder.update({"rec1": {"n": 1}})

        gateway.request.assert_awaited_once_with(
            "PUT", "Tasks", json_body={"fields": {"rec1": {"n": 1}}, "typecast": False}
        )

    @pytest.mark.asyncio
    async def test_single_update_requires_data(self, builder, gateway):
        with pytest.raises(ValidationError):
            await builder.update("rec1")
        gateway.request.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_mass_update_rejects_extra_data(self, builder, gateway):
        with pytest.raises(ValidationError):
            await builder.patch({"rec1": {"n": 1}}, {"n": 2})
        gateway.request.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_delete_returns_raw_response(self, builder, gateway):
        ack = {"id": "rec1", "deleted": True}
        gateway.request.return_value = ack

        result = await builder.delete("rec1")

        assert result is ack
        gateway.request.assert_awaited_once_with("DELETE", "Tasks/rec1")


    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "operation",
        [
            lambda b: b.find(""),
            lambda b: b.find("   "),
            lambda b: b.update("", {"a": 1}),
            lambda b: b.patch("", {"a": 1}),
            lambda b: b.delete(""),
        ],
    )
    async def test_blank_record_id_is_rejected(self, builder, gateway, operation):
        with pytest.raises(ValidationError):
            await operation(builder)
        gateway.request.assert_not_awaited()


class TestErrorPropagation:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "operation",
        [
            lambda b: b.get(),
            lambda b: b.all(),
            lambda b: b.first(),
            lambda b: b.count(),
            lambda b: b.find("rec1"),
            lambda b: b.insert({"a": 1}),
            lambda b: b.update("rec1", {"a": 1}),
            lambda b: b.patch("rec1", {"a": 1}),
            lambda b: b.update({"rec1": {"a": 1}}),
            lambda b: b.patch({"rec1": {"a": 1}}),
            lambda b: b.delete("rec1"),
        ],
    )
    async def test_api_error_surfaces_unchanged(self, builder, gateway, operation):
        error = ApiError("NOT_FOUND", status_code=404)
        gateway.request.side_effect = error

        with pytest.raises(ApiError) as exc_info:
            await operation(builder)

        assert exc_info.value is error
        assert str(exc_info.value) == "NOT_FOUND"
