from __future__ import annotations

import io
import json
from pathlib import Path

import pandas as pd
import pytest

from freightsched.app import build_arg_parser, format_order, main, run
from freightsched.core.scheduler import OrderReport
from freightsched.settings import Settings

SCHEDULE = """Day 1:
Flight 1: Montreal airport(YUL) to Toronto(YYZ)
Flight 2: Montreal(YUL) to Calgary(YYC)
Day 2:
Flight 3: Montreal(YUL) to Vancouver(YVR)
"""


@pytest.fixture()
def inputs(tmp_path) -> tuple[Path, Path]:
    schedule = tmp_path / "schedule.txt"
    schedule.write_text(SCHEDULE, encoding="utf-8")
    orders = tmp_path / "orders.json"
    orders.write_text(
        json.dumps(
            {
                "order-001": {"destination": "YYZ"},
                "order-002": {"destination": "YVR"},
                "order-003": {"destination": "YOW"},
            }
        ),
        encoding="utf-8",
    )
    return schedule, orders


def test_main_prints_schedule_then_orders(inputs, capsys):
    schedule, orders = inputs
    assert main([str(schedule), str(orders)]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Flight: 1, departure: YUL, arrival: YYZ, day: 1",
        "Flight: 2, departure: YUL, arrival: YYC, day: 1",
        "Flight: 3, departure: YUL, arrival: YVR, day: 2",
        "order: order-001, flightNumber: 1, departure: YUL, arrival: YYZ, day: 1",
        "order: order-002, flightNumber: 3, departure: YUL, arrival: YVR, day: 2",
        "order: order-003, flightNumber: not scheduled",
    ]


def test_no_schedule_flag_hides_flights(inputs, capsys):
    schedule, orders = inputs
    assert main([str(schedule), str(orders), "--no-schedule"]) == 0
    out = capsys.readouterr().out
    assert "Flight:" not in out
    assert "order: order-001" in out


def test_bad_schedule_stops_before_scheduling(tmp_path, inputs):
    _, orders = inputs
    bad = tmp_path / "bad.txt"
    bad.write_text("Flight 1: Montreal(YUL) to Toronto(YYZ)\n", encoding="utf-8")

    out = io.StringIO()
    code = run(Settings(schedule_path=bad, orders_path=orders), out)

    assert code == 1
    assert "order:" not in out.getvalue()
    assert "before any day" in out.getvalue()


def test_missing_schedule_file(tmp_path, inputs):
    _, orders = inputs
    out = io.StringIO()
    assert run(Settings(schedule_path=tmp_path / "missing.txt", orders_path=orders), out) == 1
    assert out.getvalue().strip() == "Flight schedule file does not exist."


def test_bad_orders_file(tmp_path, inputs):
    schedule, _ = inputs
    orders = tmp_path / "orders.json"
    orders.write_text("[]", encoding="utf-8")
    out = io.StringIO()
    assert run(Settings(schedule_path=schedule, orders_path=orders, show_schedule=False), out) == 1
    assert "order:" not in out.getvalue()


def test_empty_orders_message(tmp_path, inputs):
    schedule, _ = inputs
    orders = tmp_path / "orders.json"
    orders.write_text("{}", encoding="utf-8")
    out = io.StringIO()
    assert run(Settings(schedule_path=schedule, orders_path=orders, show_schedule=False), out) == 0
    assert out.getvalue().strip() == "There are no orders to display"


def test_export_writes_workbook(tmp_path, inputs):
    schedule, orders = inputs
    target = tmp_path / "report.xlsx"
    assert main([str(schedule), str(orders), "--export", str(target), "--no-schedule"]) == 0

    sheets = pd.read_excel(target, sheet_name=None)
    assert sheets["orders"]["order"].tolist() == ["order-001", "order-002", "order-003"]
    assert sheets["flights"]["load"].tolist() == [1, 0, 1]


def test_arg_parser_defaults():
    args = build_arg_parser().parse_args(["s.txt", "o.json"])
    assert args.schedule == Path("s.txt")
    assert args.export is None
    assert args.log_level == "WARNING"
    assert args.no_schedule is False


def test_format_order_unscheduled():
    row = OrderReport(order_id="x", flight_number=None, departure="YUL", destination="YYZ", day=None)
    assert format_order(row) == "order: x, flightNumber: not scheduled"


def test_schedule_file_with_bad_encoding_exits_1(tmp_path, inputs):
    _, orders = inputs
    bad = tmp_path / "latin1.txt"
    bad.write_bytes(b"Day 1:\nFlight 1: Montr\xe9al(YUL) to Toronto(YYZ)\n")

    out = io.StringIO()
    assert run(Settings(schedule_path=bad, orders_path=orders), out) == 1
    assert "UTF-8" in out.getvalue()
    assert "order:" not in out.getvalue()


def test_empty_orders_file_exits_1(tmp_path, inputs):
    schedule, _ = inputs
    orders = tmp_path / "orders.json"
    orders.write_bytes(b"")
    out = io.StringIO()
    assert run(Settings(schedule_path=schedule, orders_path=orders, show_schedule=False), out) == 1
    assert out.getvalue().strip() == "Orders file is empty."
