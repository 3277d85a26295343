'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

import pytest

from core.order import to_order
from utils.sample_data import sample_data, sample_schema

from tests.geometry import measure


@pytest.fixture
def schema():
    return sample_schema()


@pytest.fixture
def data():
    return sample_data()


@pytest.fixture
def order(data, schema):
    return to_order(data, schema)


@pytest.fixture
def store(data, schema):
    return measure(data, schema)
