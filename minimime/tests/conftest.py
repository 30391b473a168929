"""Shared pytest fixtures for minimime tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from minimime.database import MimeDatabase


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MINIMIME_EXT_DB", raising=False)
    monkeypatch.delenv("MINIMIME_CONTENT_TYPE_DB", raising=False)


@pytest.fixture(autouse=True)
def _reset_singletons(_isolate_env: None):
    from minimime.util.singletons import reset_all_singletons

    reset_all_singletons()
    yield
    reset_all_singletons()


@pytest.fixture()
def small_db() -> MimeDatabase:
    return MimeDatabase(
        [
            "pdf   application/pdf   base64",
            "txt   text/plain        quoted-printable",
            "text  text/plain        quoted-printable",
            "ZIP   application/zip   base64",
        ],
        [
            "pdf   application/pdf   base64",
            "txt   text/plain        quoted-printable",
        ],
    )


@pytest.fixture()
def dataset_files(tmp_path: Path) -> tuple[Path, Path]:
    ext = tmp_path / "ext.db"
    ext.write_text("frog  application/x-frog  base64\nshort line\n")
    ct = tmp_path / "ct.db"
    ct.write_text("frog  application/x-frog  base64\n")
    return ext, ct
