'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

import copy
import random
from typing import Any, Dict, List, Optional

from core.schema import Schema

__all__ = ["CONTAINER_PATH", "sample_schema", "sample_data", "random_data", "random_label"]

# Demo data keeps container children under "data".
CONTAINER_PATH = "data"

_SAMPLE = [
    {"value": "0", "id": 0},
    {"value": "1", "id": 1},
    {"value": "2", "id": 2},
    {
        "id": 3,
        "data": [
            {"value": "4", "id": 4},
            {"value": "5", "id": 5},
        ],
    },
    {"value": "6", "id": 6},
    {
        "id": 7,
        "data": [{"value": "8", "id": 8}],
    },
]

_LABELS = [
    "Buy groceries",
    "Call the plumber",
    "Water the plants",
    "Renew passport",
    "Book dentist appointment",
    "Back up laptop",
    "Return library books",
    "Pay electricity bill",
    "Fix the bike tyre",
    "Plan weekend trip",
    "Sort the photo archive",
    "Clean the gutters",
]


def _is_container(element: Dict[str, Any]) -> bool:
    return CONTAINER_PATH in element


def sample_schema() -> Schema:
    """Schema for the demo data: containers are dicts holding a "data" list."""
    return Schema(is_container=_is_container, items_path=CONTAINER_PATH)


def sample_data() -> List[Dict[str, Any]]:
    """A fresh copy of the built-in demo list (three items, two containers)."""
    return copy.deepcopy(_SAMPLE)


def random_label(rng: Optional[random.Random] = None) -> str:
    rng = rng or random
    return rng.choice(_LABELS)


def random_data(
        count: int,
        container_ratio: float = 0.25,
        max_children: int = 4,
        rng: Optional[random.Random] = None,
) -> List[Dict[str, Any]]:
    """
    Generate `count` root elements; roughly container_ratio of them are
    containers holding 0..max_children items. Ids are unique integers.
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    rng = rng or random.Random()

    data: List[Dict[str, Any]] = []
    next_id = 0
    for _ in range(count):
        if rng.random() < container_ratio:
            container = {"id": next_id, "title": f"Group {next_id}", CONTAINER_PATH: []}
            next_id += 1
            for _ in range(rng.randint(0, max_children)):
                container[CONTAINER_PATH].append({"id": next_id, "value": random_label(rng)})
                next_id += 1
            data.append(container)
        else:
            data.append({"id": next_id, "value": random_label(rng)})
            next_id += 1
    return data
