"""Unit tests for QuerySpec, SortTerm and TableRef models."""

import pydantic
import pytest

from airquery.core import SortDirection
from airquery.models import QuerySpec, SortTerm, TableRef


class TestQuerySpec:
    def test_defaults(self):
        spec = QuerySpec()
        assert spec.formula is None
        assert spec.view is None
        assert spec.sort == ()
        assert spec.field_names == ()
        assert spec.page_size is None
        assert spec.cursor is None
        assert spec.typecast is False
        assert spec.delay == 0.2

    def test_is_frozen(self):
        spec = QuerySpec(view="Grid")
        with pytest.raises(pydantic.ValidationError):
            spec.view = "Other"

    def test_lists_become_tuples(self):
        spec = QuerySpec(field_names=["a", "b"], sort=[SortTerm(field="a")])
        assert spec.field_names == ("a", "b")
        assert spec.sort[0].direction == SortDirection.ASC

    def test_rejects_zero_page_size(self):
        with pytest.raises(pydantic.ValidationError):
            QuerySpec(page_size=0)

    def test_rejects_negative_delay(self):
        with pytest.raises(pydantic.ValidationError):
            QuerySpec(delay=-1)


class TestTableRef:
    def test_paths(self):
        table = TableRef(base_id="app1", name="Tasks")
        assert table.path == "Tasks"
        assert table.record_path("rec1") == "Tasks/rec1"

    def test_table_name_is_quoted(self):
        table = TableRef(base_id="app1", name="My Tasks/2024")
        assert table.path == "My%20Tasks%2F2024"

    def test_requires_name(self):
        with pytest.raises(pydantic.ValidationError):
            TableRef(base_id="app1", name="")
