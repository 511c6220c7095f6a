"""
Common fixtures for pytest unit and integration tests for the macc-viz library.

"""

from __future__ import annotations

import matplotlib

# Headless canvas for every test touching matplotlib
matplotlib.use("Agg")

import pytest  # noqa: E402

from macc_viz.library.config.models import MaccStyle  # noqa: E402


def make_row(action=None, abatement=None, cost=None, category=None):
    """Build a host row in object-transform form (each field a one-item list)."""
    row = {}
    if action is not None:
        row["actionDim"] = [action]
    if abatement is not None:
        row["abatementMetric"] = [abatement]
    if cost is not None:
        row["costMetric"] = [cost]
    if category is not None:
        row["categoryDim"] = [category]
    return row


def make_payload(rows, style=None, fields=None, **extra):
    """Build a host render message around a list of rows."""
    payload = {"tables": {"DEFAULT": rows}}
    if style is not None:
        payload["style"] = style
    if fields is not None:
        payload["fields"] = fields
    payload.update(extra)
    return payload


@pytest.fixture
def scenario_rows():
    """Three actions, one of which has no abatement and must be dropped."""
    return [
        {"actionDim": "A", "abatementMetric": 10, "costMetric": 5},
        {"actionDim": "B", "abatementMetric": 20, "costMetric": -3},
        {"actionDim": "C", "abatementMetric": 0, "costMetric": 1},
    ]


@pytest.fixture
def industry_rows():
    """A realistic mix of saving and costly measures, in object-transform form."""
    return [
        make_row("Heat pumps", 120.0, 45.5, "Buildings"),
        make_row("LED lighting", 35.0, -80.0, "Buildings"),
        make_row("Solar PV", 210.0, 12.0, "Power"),
        make_row("Process efficiency", 60.0, -25.0, "Industry"),
        make_row("CCS", 150.0, 95.0, "Industry"),
    ]


@pytest.fixture
def action_fields():
    return {"actionDim": [{"id": "qt_action", "name": "Action"}]}


@pytest.fixture
def default_style():
    return MaccStyle()


@pytest.fixture
def payload_factory():
    return make_payload


@pytest.fixture
def row_factory():
    return make_row
