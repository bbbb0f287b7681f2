"""Shared fixtures for contract tests."""

import logging
from pathlib import Path

import pytest

from autobots_contract.models.contract import (
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

DATA_DIR = Path(__file__).parent / "data"


def make_valid_contract() -> Contract:
    """The smallest contract that passes validation."""
    return Contract(
        api_version="autobots/v1alpha1",
        kind="Contract",
        metadata=ContractMeta(is_draft=False),
        spec=ContractSpec(
            consumer=ContractParty(component="web-ui"),
            provider=ContractParty(component="billing-api"),
            surface=ContractSurface(
                kind="http",
                http=HTTPSurface(
                    method="POST",
                    path="/v1/invoices",
                    auth=HTTPAuth(scheme="Bearer"),
                ),
            ),
            assertions=[Assertion(id="a1", text="Status is 200")],
            bindings=ContractBindings(
                tests=[
                    TestBinding(
                        id="t1",
                        kind="postman",
                        path="./tests/t1.json",
                        required=True,
                        covers=["a1"],
                    )
                ]
            ),
        ),
    )


@pytest.fixture
def contract() -> Contract:
    return make_valid_contract()


@pytest.fixture
def data_dir() -> Path:
    return DATA_DIR


@pytest.fixture
def valid_document() -> dict:
    return {
        "apiVersion": "autobots/v1alpha1",
        "kind": "Contract",
        "metadata": {"is_draft": True, "labels": {"team": "payments"}},
        "spec": {
            "consumer": {"component": "web-ui"},
            "provider": {"component": "billing-api"},
            "surface": {
                "kind": "http",
                "http": {
                    "method": "POST",
                    "path": "/v1/invoices",
                    "auth": {"scheme": "Bearer", "scopes": ["invoices:write"]},
                },
            },
            "assertions": [{"id": "a1", "text": "Status is 200"}],
            "bindings": {
                "tests": [
                    {
                        "id": "t1",
                        "kind": "postman",
                        "path": "./tests/t1.json",
                        "required": True,
                        "covers": ["a1"],
                    }
                ]
            },
        },
    }


@pytest.fixture(autouse=True)
def _restore_root_logging():
    # the CLI reconfigures root logging
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)
