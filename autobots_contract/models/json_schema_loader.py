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

"""JSON Schema loader for contract documents."""

import json
from pathlib import Path
from typing import Dict

from .. import SCHEMA_REVISION


# Schema cache to avoid reloading files
_SCHEMA_CACHE: Dict[str, dict] = {}


def get_schema_path(entity: str, revision: str = SCHEMA_REVISION) -> Path:
    """Get the path to a JSON Schema file.

    Args:
        entity: Document kind in lower case (e.g. "contract")
        revision: Schema revision directory (e.g. "v1alpha1")

    Returns:
        Path to the schema file
    """
    schema_dir = Path(__file__).parent.parent / "schema"
    return schema_dir / revision / f"{entity}.json"


def load_schema(entity: str = "contract", revision: str = SCHEMA_REVISION) -> dict:
    """Load a JSON Schema, caching it per entity and revision.

    Raises:
        FileNotFoundError: If no schema exists for the entity and revision.
    """
    cache_key = f"{revision}/{entity}"
    if cache_key in _SCHEMA_CACHE:
        return _SCHEMA_CACHE[cache_key]

    schema_path = get_schema_path(entity, revision)
    if not schema_path.exists():
        raise FileNotFoundError(f"JSON Schema not found for {entity} (revision {revision}): {schema_path}")

    with open(schema_path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    _SCHEMA_CACHE[cache_key] = schema
    return schema
