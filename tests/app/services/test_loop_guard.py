"""Testes do guard de loop de sincronização."""

from __future__ import annotations

import pytest

from app.domain.calendar_event import SYNC_TAG, append_sync_tag
from app.services.loop_guard import is_synced


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("daily\n\n[SyncedByMyApp]", True),
        ("[SyncedByMyApp]", True),
        ("prefixo [SyncedByMyApp] sufixo", True),
        ("daily", False),
        ("[syncedbymyapp]", False),
        ("", False),
        (None, False),
    ],
)
def test_is_synced(text: str | None, expected: bool) -> None:
    assert is_synced(text) is expected


def test_append_sync_tag_with_empty_text() -> None:
    assert append_sync_tag(None) == "\n\n[SyncedByMyApp]"
    assert append_sync_tag("") == "\n\n[SyncedByMyApp]"


def test_append_sync_tag_output_is_always_synced() -> None:
    assert is_synced(append_sync_tag("qualquer texto"))
    assert append_sync_tag("x").endswith(SYNC_TAG)
