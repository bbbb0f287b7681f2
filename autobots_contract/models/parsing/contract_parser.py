# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Build the Contract entity graph from a loaded YAML/JSON mapping.

The parser is deliberately lenient about *content*: absent keys become empty
values so that the validator can report them by path. It is strict about
*shape*: an object where a list is expected (or vice versa) is a load error.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..contract import (
    Assertion,
    Contract,
    ContractBindings,
    ContractMeta,
    ContractParty,
    ContractSpec,
    ContractSurface,
    HTTPAuth,
    HTTPSurface,
    TestBinding,
)
from .yaml_parser import yaml_parser
from ...exceptions import ContractLoadError


def _mapping(value: Any, path: str) -> Optional[Dict[str, Any]]:
    if value is None:
        return None
    if not isinstance(value, dict):
        raise ContractLoadError(f"{path}: expected a mapping, got {type(value).__name__}")
    return value


def _sequence(value: Any, path: str) -> List[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ContractLoadError(f"{path}: expected a list, got {type(value).__name__}")
    return value


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _flag(value: Any, path: str) -> Optional[bool]:
    if value is None or isinstance(value, bool):
        return value
    raise ContractLoadError(f"{path}: expected a boolean, got {type(value).__name__}")


def _parse_party(data: Any, path: str) -> ContractParty:
    party = _mapping(data, path) or {}
    return ContractParty(component=_text(party.get("component")))


def _parse_surface(data: Any) -> ContractSurface:
    surface = _mapping(data, "spec.surface") or {}

    http = _mapping(surface.get("http"), "spec.surface.http")
    http_surface = None
    if http is not None:
        auth = _mapping(http.get("auth"), "spec.surface.http.auth")
        http_surface = HTTPSurface(
            method=_text(http.get("method")),
            path=_text(http.get("path")),
            auth=None if auth is None else HTTPAuth(
                scheme=_text(auth.get("scheme")),
                scopes=[_text(s) for s in _sequence(auth.get("scopes"), "spec.surface.http.auth.scopes")],
            ),
        )

    return ContractSurface(kind=_text(surface.get("kind")), http=http_surface)


def _parse_assertions(data: Any) -> List[Assertion]:
    assertions = []
    for i, item in enumerate(_sequence(data, "spec.assertions")):
        entry = _mapping(item, f"spec.assertions[{i}]") or {}
        assertions.append(Assertion(id=_text(entry.get("id")), text=_text(entry.get("text"))))
    return assertions


def _parse_bindings(data: Any) -> ContractBindings:
    bindings = _mapping(data, "spec.bindings") or {}

    tests = []
    for i, item in enumerate(_sequence(bindings.get("tests"), "spec.bindings.tests")):
        prefix = f"spec.bindings.tests[{i}]"
        entry = _mapping(item, prefix) or {}
        tests.append(
            TestBinding(
                id=_text(entry.get("id")),
                kind=_text(entry.get("kind")),
                path=_text(entry.get("path")),
                required=bool(_flag(entry.get("required"), f"{prefix}.required")),
                covers=[_text(c) for c in _sequence(entry.get("covers"), f"{prefix}.covers")],
            )
        )
    return ContractBindings(tests=tests)


def _parse_spec(data: Any) -> Optional[ContractSpec]:
    spec = _mapping(data, "spec")
    if spec is None:
        return None

    return ContractSpec(
        consumer=_parse_party(spec.get("consumer"), "spec.consumer"),
        provider=_parse_party(spec.get("provider"), "spec.provider"),
        surface=_parse_surface(spec.get("surface")),
        assertions=_parse_assertions(spec.get("assertions")),
        bindings=_parse_bindings(spec.get("bindings")),
    )


def parse_contract(data: Any) -> Contract:
    """Convert a loaded document into a :class:`Contract`.

    Args:
        data: Result of YAML/JSON loading.

    Returns:
        The parsed contract. It is not validated.

    Raises:
        ContractLoadError: If the document does not have the expected shape.
    """
    if not isinstance(data, dict):
        raise ContractLoadError(f"Contract document must be a mapping, got {type(data).__name__}")

    metadata = _mapping(data.get("metadata"), "metadata") or {}
    labels = _mapping(metadata.get("labels"), "metadata.labels") or {}

    return Contract(
        api_version=_text(data.get("apiVersion")),
        kind=_text(data.get("kind")),
        metadata=ContractMeta(
            is_draft=_flag(metadata.get("is_draft"), "metadata.is_draft"),
            labels={str(k): _text(v) for k, v in labels.items()},
        ),
        spec=_parse_spec(data.get("spec")),
    )


def load_contract(file_path: Union[str, Path]) -> Contract:
    """Load and parse a contract file. The result is not validated."""
    return parse_contract(yaml_parser.load_document(file_path))
