import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from billdiff.config import reset_config
from billdiff.models.bill_version import BillSection, BillVersion


@pytest.fixture(autouse=True)
def fresh_config():
    """Every test starts without a cached global configuration."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def make_version():
    """Build a BillVersion from (id, title, content) tuples."""
    def _make(version_id, sections, name=None):
        return BillVersion(
            id=version_id,
            name=name or version_id.title(),
            sections=tuple(BillSection(id=s[0], title=s[1], content=s[2]) for s in sections),
        )
    return _make


@pytest.fixture
def introduced(make_version):
    return make_version("introduced", [
        ("s1", "Sec. 1. Short title", "This Act may be cited as the Clean Water Act of 2025."),
        ("s2", "Sec. 2. Definitions", "In this Act, the term 'Administrator' means the EPA Administrator."),
        ("s3", "Sec. 3. Repeal", "Section 404 of the Federal Water Pollution Control Act is repealed."),
    ])


@pytest.fixture
def amended(make_version):
    return make_version("amended", [
        ("s1", "Sec. 1. Short title", "This Act may be cited as the Clean Water Act of 2025."),
        ("s2", "Sec. 2. Definitions", "In this Act, the term 'Administrator' means the Administrator of the EPA."),
        ("s4", "Sec. 4. Funding", "There are authorized to be appropriated $5,000,000 for fiscal year 2026."),
    ])
