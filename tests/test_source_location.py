from pathlib import Path

import pytest

from autobots_contract.file_io.source_location import (
    SourceLocation,
    finding_path_to_pointer,
    format_source,
    lookup_source,
)


@pytest.mark.parametrize(
    "path, pointer",
    [
        ("apiVersion", "/apiVersion"),
        ("spec.surface.http.auth.scheme", "/spec/surface/http/auth/scheme"),
        ("spec.bindings.tests[1].covers[0]", "/spec/bindings/tests/1/covers/0"),
        ("spec.assertions", "/spec/assertions"),
        ("metadata.labels.a/b~c", "/metadata/labels/a~1b~0c"),
        ("", ""),
    ],
)
def test_finding_path_to_pointer(path, pointer):
    assert finding_path_to_pointer(path) == pointer


def test_lookup_falls_back_to_parent():
    source_map = {"": {"line": 1, "column": 1}, "/spec": {"line": 3, "column": 3}}

    loc = lookup_source(source_map, "/spec/consumer/component")

    assert loc == SourceLocation(yaml_path="/spec/consumer/component", line=3, column=3)


def test_lookup_without_source_map():
    assert lookup_source(None, "/kind") == SourceLocation(yaml_path="/kind")


def test_format_source(monkeypatch):
    monkeypatch.delenv("AUTOBOTS_SOURCE_ROOT", raising=False)
    loc = SourceLocation(file_path=Path("a.contract.yaml"), yaml_path="/kind", line=2, column=7)

    assert format_source(loc) == " (source= a.contract.yaml:2:7  yaml_path=/kind)"
    assert format_source(SourceLocation()) == ""
    assert format_source(None) == ""


def test_format_source_relative_to_root(monkeypatch, tmp_path):
    monkeypatch.setenv("AUTOBOTS_SOURCE_ROOT", str(tmp_path))
    loc = SourceLocation(file_path=tmp_path / "contracts" / "a.contract.yaml", line=1)

    assert format_source(loc) == f" (source= {Path('contracts') / 'a.contract.yaml'}:1 )"
