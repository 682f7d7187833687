from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest

from edcore import config, patterns
from edcore.buffer import ErrorKind, MatchError, VecBuffer, read_file


@pytest.fixture(autouse=True)
def restore_config() -> Iterator[None]:
    yield
    config.configure(config.EngineConfig())


def test_defaults_without_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("EDCORE_ENCODING", raising=False)
    monkeypatch.delenv("EDCORE_REGEX_CACHE", raising=False)

    active = config.configure()

    assert active == config.EngineConfig(encoding="utf-8", regex_cache_size=0)
    assert config.get_config() is active


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EDCORE_ENCODING", "latin-1")
    monkeypatch.setenv("EDCORE_REGEX_CACHE", "8")

    active = config.configure()

    assert active.encoding == "latin-1"
    assert active.regex_cache_size == 8


def test_bad_cache_size(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EDCORE_REGEX_CACHE", "lots")

    with pytest.raises(ValueError):
        config.EngineConfig.from_env()


def test_encoding_used_for_reading(tmp_path: Path) -> None:
    path = tmp_path / "latin.txt"
    path.write_bytes("caf\xe9\n".encode("latin-1"))

    config.configure(config.EngineConfig(encoding="latin-1"))

    assert read_file(str(path), True) == ["café\n"]


def test_pattern_cache_is_bounded() -> None:
    config.configure(config.EngineConfig(regex_cache_size=2))

    first = patterns.compile_pattern("a+")
    assert patterns.compile_pattern("a+") is first
    patterns.compile_pattern("b+")
    patterns.compile_pattern("c+")

    assert list(patterns._CACHE) == ["b+", "c+"]


def test_patterns_not_cached_by_default() -> None:
    patterns.compile_pattern("x+")

    assert len(patterns._CACHE) == 0


def test_cached_patterns_behave_the_same() -> None:
    config.configure(config.EngineConfig(regex_cache_size=4))
    buffer = VecBuffer.from_lines(["foo\n", "bar\n", "foo\n"])

    assert buffer.get_matching("foo", 0, False) == 2
    assert buffer.get_matching("foo", 0, False) == 2
    with pytest.raises(MatchError) as excinfo:
        patterns.compile_pattern("[")
    assert excinfo.value.kind is ErrorKind.INVALID_REGEX


def test_utf16_round_trip(tmp_path: Path) -> None:
    path = str(tmp_path / "wide.txt")
    config.configure(config.EngineConfig(encoding="utf-16"))
    source = VecBuffer.from_lines(["first\n", "sécond\r\n", "third\n"])

    source.write_to(None, path, False)
    target = VecBuffer()
    count = target.read_from(path, None, True)

    assert count == 3
    assert target.lines() == source.lines()
