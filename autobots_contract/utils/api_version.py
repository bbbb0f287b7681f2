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

"""apiVersion utilities for contract documents.

The ``apiVersion`` field declares which schema a document was written for,
as ``<group>/<version>`` (e.g. ``autobots/v1alpha1``). Exactly one revision is
supported; anything else is reported as a warning by the linter, since the
document may still validate.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from .. import SUPPORTED_API_VERSION
from ..exceptions import ApiVersionError


_API_VERSION_RE = re.compile(r"^([a-z0-9]([a-z0-9.-]*[a-z0-9])?)/(v\d+((alpha|beta)\d+)?)$")


@dataclass(frozen=True)
class ApiVersion:
    """A parsed ``group/version`` pair."""

    group: str
    version: str

    def __str__(self) -> str:
        return f"{self.group}/{self.version}"


def parse_api_version(raw: str) -> ApiVersion:
    """Parse an apiVersion string like ``autobots/v1alpha1``.

    Raises:
        ApiVersionError: If the string cannot be parsed.
    """
    if not isinstance(raw, str):
        raise ApiVersionError(
            f"apiVersion must be a string, got {type(raw).__name__}: {raw!r}"
        )

    m = _API_VERSION_RE.match(raw.strip())
    if m is None:
        raise ApiVersionError(
            f"Invalid apiVersion string: '{raw}'. "
            "Expected '<group>/<version>' (e.g. 'autobots/v1alpha1')."
        )
    return ApiVersion(group=m.group(1), version=m.group(3))


SUPPORTED = parse_api_version(SUPPORTED_API_VERSION)


@dataclass(frozen=True)
class ApiVersionCheckResult:
    """Result of an apiVersion compatibility check."""

    compatible: bool
    message: str
    api_version: Optional[ApiVersion] = None


def check_api_version(raw: Optional[str]) -> ApiVersionCheckResult:
    """Check whether *raw* names the supported contract revision.

    An empty value is reported as compatible here; the contract validator
    already flags it as a required field.
    """
    if raw is None or not raw.strip():
        return ApiVersionCheckResult(compatible=True, message="apiVersion not set")

    try:
        parsed = parse_api_version(raw)
    except ApiVersionError as exc:
        return ApiVersionCheckResult(compatible=False, message=str(exc))

    if parsed != SUPPORTED:
        return ApiVersionCheckResult(
            compatible=False,
            message=(
                f"Unsupported apiVersion '{parsed}'; this tool only understands "
                f"'{SUPPORTED}'. Validation results may be inaccurate."
            ),
            api_version=parsed,
        )

    return ApiVersionCheckResult(
        compatible=True,
        message=f"apiVersion {parsed} is supported.",
        api_version=parsed,
    )
