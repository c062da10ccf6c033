"""Shared fixtures for CLI execution tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from fitfocus.decoder.reader import FitDecoder, source_name
from fitfocus.errors import DecodeError
from fitfocus.models.record import GenericRecord
from tests.conftest import make_record


class FakeDecodes:
    """Canned decode results keyed by input file name (or ``"<stdin>"``)."""

    def __init__(self) -> None:
        self.results: dict[str, list[GenericRecord] | Exception] = {}
        self.calls: list[str] = []
        self.options: list[Any] = []

    def add(self, name: str, records: list[GenericRecord] | Exception) -> None:
        self.results[name] = records

    def decode(self, decoder: FitDecoder, source: Any) -> list[GenericRecord]:
        name = Path(source).name if isinstance(source, Path) else source_name(source)
        self.calls.append(name)
        self.options.append(decoder.options)
        result = self.results[name]
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture()
def fake_decodes(monkeypatch: pytest.MonkeyPatch) -> FakeDecodes:
    """Replace FIT decoding with canned results."""
    fakes = FakeDecodes()
    monkeypatch.setattr(FitDecoder, "decode", lambda self, source: fakes.decode(self, source))
    return fakes


@pytest.fixture()
def fit_files(tmp_path: Path, fake_decodes: FakeDecodes) -> list[Path]:
    """Three input files with 2, 1 and 3 records respectively."""
    files = []
    for stem, n in (("a", 2), ("b", 1), ("c", 3)):
        path = tmp_path / f"{stem}.fit"
        path.write_bytes(b"")
        fake_decodes.add(
            path.name,
            [make_record("Record", power=i, source=stem) for i in range(n)],
        )
        files.append(path)
    return files


@pytest.fixture()
def decode_failure() -> DecodeError:
    return DecodeError("b.fit: CRC mismatch", source="b.fit")


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep a developer's FITFOCUS_* environment out of CLI tests."""
    for key in ("FITFOCUS_PLAYBACK_OUTPUT", "FITFOCUS_PLAYBACK_DELAY_MS", "FITFOCUS_VERBOSE"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
