from __future__ import annotations

from datetime import datetime, timezone

from cli.ui_components import build_launches_table, parse_launch_date
from core.domain.models import Launch


def test_parse_launch_date_handles_api_format():
    assert parse_launch_date("2006-03-24T22:30:00.000Z") == datetime(2006, 3, 24, 22, 30, tzinfo=timezone.utc)


def test_parse_launch_date_tolerates_missing_or_bad_values():
    assert parse_launch_date(None) is None
    assert parse_launch_date("") is None
    assert parse_launch_date("soon") is None


def test_table_has_one_row_per_launch(launch_docs):
    table = build_launches_table([Launch.model_validate(doc) for doc in launch_docs])

    assert table.row_count == 3
