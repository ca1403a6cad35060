"""Shared pytest fixtures for minimime tests."""

from __future__ import annotations

import pytest

from minimime.db.dataset import Entry


@pytest.fixture(autouse=True)
def _reset_singletons():
    from minimime.util.singletons import reset_all_singletons

    reset_all_singletons()
    yield
    reset_all_singletons()


@pytest.fixture()
def sample_entries() -> list[Entry]:
    return [
        Entry("xml", "application/xml", "8bit"),
        Entry("jpeg", "image/jpeg", "base64"),
        Entry("jpg", "image/jpeg", "base64"),
        Entry("xml", "text/xml", "quoted-printable"),
    ]
