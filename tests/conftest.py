"""
Pytest configuration and fixtures for lexiform tests.
"""

import json

import pytest

from lexiform.services.analysis import TypeMetaCache
from lexiform.services.conjugation import Conjugator, KnownVerbs


@pytest.fixture
def conjugator():
    """Conjugator over the built-in known-verbs table."""
    return Conjugator(KnownVerbs.default())


@pytest.fixture
def deriving_conjugator():
    """Conjugator with no known verbs, so every action is derived."""
    return Conjugator(KnownVerbs())


@pytest.fixture
def type_cache():
    """An isolated, empty TypeMeta cache."""
    return TypeMetaCache()


@pytest.fixture
def known_verbs_file(tmp_path):
    """A known-verbs JSON file registering 'ship' and overriding 'update'."""
    path = tmp_path / "verbs.json"
    path.write_text(json.dumps({
        "ship": {
            "action": "ship",
            "actor": "shipper",
            "act": "ships",
            "activity": "shipping",
            "result": "shipment",
            "reverse": {"at": "shippedAt", "by": "shippedBy", "in": "shippedIn"},
            "inverse": "return",
            "description": "Send an order to the customer",
        },
        "update": {
            "action": "update",
            "actor": "editor",
            "act": "updates",
            "activity": "updating",
            "result": "revision",
            "reverse": {"at": "revisedAt"},
        },
    }))
    return path
