import os

# Tests must not depend on the developer's environment
os.environ.pop("MAINTABLE_CLAMP_PAGE", None)
os.environ.pop("MAINTABLE_DEBUG", None)

import pytest

from maintable.models import Cell, Header, Markup, Row


@pytest.fixture(scope="function")
def headers() -> list[Header]:
    return [
        Header(content="Status"),
        Header(content="Cores", class_name="u-align--right"),
        Header(content="RAM", class_name="u-align--right"),
        Header(
            content=Markup("<span>Disks <i class='p-icon--information'></i></span>"),
            class_name="u-align--right",
        ),
    ]


@pytest.fixture(scope="function")
def rows() -> list[Row]:
    return [
        Row(
            columns=[
                Cell(content="Ready", role="rowheader"),
                Cell(content=1, class_name="u-align--right"),
                Cell(content="1 GiB", class_name="u-align--right"),
                Cell(content=2, class_name="u-align--right"),
            ]
        ),
        Row(
            columns=[
                Cell(content="Waiting", role="rowheader"),
                Cell(content=1, class_name="u-align--right"),
                Cell(content="1 GiB", class_name="u-align--right"),
                Cell(content=2, class_name="u-align--right"),
            ]
        ),
        Row(
            columns=[
                Cell(content="Idle", role="rowheader"),
                Cell(content=8, class_name="u-align--right"),
                Cell(content="3.9 GiB", class_name="u-align--right"),
                Cell(content=3, class_name="u-align--right"),
            ]
        ),
    ]


@pytest.fixture(scope="function")
def sortable_headers(headers: list[Header]) -> list[Header]:
    keys = ["status", "cores", "ram"]
    return [
        h.model_copy(update={"sort_key": keys[i]}) if i < len(keys) else h
        for i, h in enumerate(headers)
    ]


@pytest.fixture(scope="function")
def sortable_rows(rows: list[Row]) -> list[Row]:
    sort_data = [
        {"status": "ready", "cores": 2, "ram": 1},
        {"status": "waiting", "cores": 1, "ram": 1},
        {"status": "idle", "cores": 8, "ram": 3.9},
    ]
    return [r.model_copy(update={"sort_data": d}) for r, d in zip(rows, sort_data)]
