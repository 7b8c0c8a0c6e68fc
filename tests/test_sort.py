from typing import Optional

import pytest
from hypothesis import HealthCheck, given, settings

from maintable.exceptions import MainTableError, SortDataError
from maintable.models import Header, Row, SortDirection, SortState
from maintable.sort import (
    UNSORTED,
    SortEngine,
    compare,
    default_state,
    make_comparator,
    sort_rows,
    toggle,
)

from .strategies import ROWS, SORT_KEY, labels


def test_toggle_cycle() -> None:
    state = toggle(UNSORTED, "status")
    assert state == SortState("status", SortDirection.ASCENDING)
    state = toggle(state, "status")
    assert state == SortState("status", SortDirection.DESCENDING)
    state = toggle(state, "status")
    assert state == SortState(None, SortDirection.NONE)
    assert not state.active


def test_toggle_other_key_starts_ascending() -> None:
    state = SortState("status", SortDirection.DESCENDING)
    assert toggle(state, "cores") == SortState("cores", SortDirection.ASCENDING)


def test_toggle_non_sortable_is_noop() -> None:
    state = SortState("status", SortDirection.ASCENDING)
    assert toggle(state, None) is state
    assert toggle(UNSORTED, None) is UNSORTED


def test_default_state() -> None:
    assert default_state(None, SortDirection.DESCENDING) == UNSORTED
    assert default_state("ram", "descending") == SortState(
        "ram", SortDirection.DESCENDING
    )


def test_compare() -> None:
    a = Row(sort_data={"n": 2, "s": "B"})
    b = Row(sort_data={"n": 10, "s": "a"})
    # numbers compare numerically
    assert compare(a, b, "n") < 0
    assert compare(b, a, "n") > 0
    assert compare(a, a, "n") == 0
    # strings compare case-sensitively
    assert compare(a, b, "s") < 0
    assert compare(a, b, "s", SortDirection.DESCENDING) > 0


def test_missing_sort_data() -> None:
    rows = [Row(key=1, sort_data={"a": 1}), Row(key=2)]
    with pytest.raises(SortDataError) as exc_info:
        sort_rows(rows, SortState("a", SortDirection.ASCENDING))
    assert exc_info.value.key == "a"
    assert isinstance(exc_info.value, KeyError)
    assert isinstance(exc_info.value, MainTableError)

    with pytest.raises(SortDataError):
        sort_rows(rows, SortState("b", SortDirection.ASCENDING))


def test_make_comparator_inactive() -> None:
    assert make_comparator(UNSORTED) is None
    assert make_comparator(SortState("a", SortDirection.NONE)) is None


@given(ROWS)
@settings(max_examples=50, suppress_health_check=[HealthCheck.too_slow])
def test_sort_is_stable(rows: list[Row]) -> None:
    def value(row: Row) -> object:
        return row.sort_data[SORT_KEY]  # type: ignore[index]

    asc = sort_rows(rows, SortState(SORT_KEY, SortDirection.ASCENDING))
    assert labels(asc) == labels(sorted(rows, key=value))

    desc = sort_rows(rows, SortState(SORT_KEY, SortDirection.DESCENDING))
    # sorted() keeps equal elements in input order even when reversed
    assert labels(desc) == labels(sorted(rows, key=value, reverse=True))


@given(ROWS)
@settings(max_examples=50, suppress_health_check=[HealthCheck.too_slow])
def test_sort_cycle_closure(rows: list[Row]) -> None:
    state = UNSORTED
    for _ in range(3):
        state = toggle(state, SORT_KEY)
        sort_rows(rows, state)
    assert state == UNSORTED
    assert labels(sort_rows(rows, state)) == labels(rows)


def test_sort_does_not_mutate_input() -> None:
    rows = [Row(key=i, sort_data={"n": n}) for i, n in enumerate([3, 1, 2])]
    result = sort_rows(rows, SortState("n", SortDirection.ASCENDING))
    assert [r.key for r in result] == [1, 2, 0]
    assert [r.key for r in rows] == [0, 1, 2]


def test_custom_sort_function() -> None:
    calls: list[tuple[SortDirection, Optional[str]]] = []

    def by_length(a: Row, b: Row, direction: SortDirection, key: Optional[str]) -> int:
        calls.append((direction, key))
        la = len(a.sort_data[key])  # type: ignore[index]
        lb = len(b.sort_data[key])  # type: ignore[index]
        return la - lb

    rows = [Row(key=w, sort_data={"w": w}) for w in ["ccc", "a", "bb"]]
    state = SortState("w", SortDirection.DESCENDING)
    result = sort_rows(rows, state, by_length)
    # the custom function owns the direction
    assert [r.key for r in result] == ["a", "bb", "ccc"]
    assert calls and all(c == (SortDirection.DESCENDING, "w") for c in calls)


class TestSortEngine:
    def test_activate(self) -> None:
        updates: list[Optional[str]] = []
        engine = SortEngine(on_update_sort=updates.append)
        engine.activate("status")
        engine.activate("status")
        engine.activate("status")
        assert engine.state == UNSORTED
        assert updates == ["status", "status", None]

    def test_activate_non_sortable(self) -> None:
        updates: list[Optional[str]] = []
        engine = SortEngine("status", on_update_sort=updates.append)
        assert engine.activate(None) == SortState("status", SortDirection.ASCENDING)
        assert updates == []

    def test_sync_defaults_unchanged_keeps_state(self) -> None:
        engine = SortEngine("status", SortDirection.DESCENDING)
        engine.activate("cores")
        state = engine.sync_defaults("status", SortDirection.DESCENDING)
        assert state == SortState("cores", SortDirection.ASCENDING)

    def test_sync_defaults_changed_replaces_state(self) -> None:
        engine = SortEngine("status", SortDirection.DESCENDING)
        engine.activate("ram")
        state = engine.sync_defaults("cores", SortDirection.ASCENDING)
        assert state == SortState("cores", SortDirection.ASCENDING)
        # direction-only change also counts as a new default
        state = engine.sync_defaults("cores", SortDirection.DESCENDING)
        assert state == SortState("cores", SortDirection.DESCENDING)
        state = engine.sync_defaults(None, SortDirection.DESCENDING)
        assert state == UNSORTED

    def test_header_sort(self) -> None:
        engine = SortEngine("status", SortDirection.DESCENDING)
        assert engine.header_sort(Header(content="Status", sort_key="status")) == (
            SortDirection.DESCENDING
        )
        assert engine.header_sort(Header(content="Cores", sort_key="cores")) == (
            SortDirection.NONE
        )
        assert engine.header_sort(Header(content="Disks")) is None
