"""Tests for YAML loading and contract parsing."""

import pytest

from autobots_contract.exceptions import ContractLoadError
from autobots_contract.models.contract import ContractBindings, ContractSurface
from autobots_contract.models.parsing import YamlParser, load_contract, parse_contract
from autobots_contract.validation import Finding, validate_contract


class TestYamlParser:
    def test_source_map_records_nested_paths(self):
        parser = YamlParser(cache_enabled=False)
        content = "kind: Contract\nspec:\n  assertions:\n    - id: a1\n      text: ok\n"

        data, source_map = parser.load_document_from_string_with_source(content)

        assert data["spec"]["assertions"][0]["id"] == "a1"
        assert source_map["/kind"] == {"line": 1, "column": 7}
        assert source_map["/spec/assertions/0"]["line"] == 4
        assert source_map["/spec/assertions/0/text"] == {"line": 5, "column": 13}

    def test_empty_document_loads_as_mapping(self):
        data, source_map = YamlParser(cache_enabled=False).load_document_from_string_with_source("")

        assert data == {}
        assert source_map == {}

    def test_syntax_error(self):
        with pytest.raises(ContractLoadError, match="Failed to parse YAML"):
            YamlParser(cache_enabled=False).load_document_from_string_with_source("kind: [unclosed")

    def test_missing_file(self, tmp_path):
        with pytest.raises(ContractLoadError, match="not found"):
            YamlParser(cache_enabled=False).load_document(tmp_path / "nope.contract.yaml")

    def test_directory_is_not_a_file(self, tmp_path):
        with pytest.raises(ContractLoadError, match="not a file"):
            YamlParser(cache_enabled=False).load_document(tmp_path)

    def test_bad_file_names_the_path(self, tmp_path):
        path = tmp_path / "bad.contract.yaml"
        path.write_text("kind: [unclosed\n", encoding="utf-8")

        with pytest.raises(ContractLoadError, match="bad.contract.yaml"):
            YamlParser(cache_enabled=False).load_document(path)

    def test_cache_returns_first_load(self, tmp_path):
        path = tmp_path / "c.contract.yaml"
        path.write_text("kind: Contract\n", encoding="utf-8")
        parser = YamlParser(cache_enabled=True)

        first = parser.load_document(path)
        path.write_text("kind: Changed\n", encoding="utf-8")

        assert parser.load_document(path) == first
        parser.clear_cache()
        assert parser.load_document(path) == {"kind": "Changed"}

    def test_json_documents_load(self, tmp_path):
        path = tmp_path / "c.contract.json"
        path.write_text('{"apiVersion": "autobots/v1alpha1", "kind": "Contract"}', encoding="utf-8")

        data = YamlParser(cache_enabled=False).load_document(path)

        assert data == {"apiVersion": "autobots/v1alpha1", "kind": "Contract"}


class TestParseContract:
    """Mapping to entity graph conversion."""

    def test_full_document(self, valid_document):
        contract = parse_contract(valid_document)

        assert contract.api_version == "autobots/v1alpha1"
        assert contract.metadata.is_draft is True
        assert contract.metadata.labels == {"team": "payments"}
        assert contract.spec.surface.http.auth.scopes == ["invoices:write"]
        assert contract.spec.bindings.tests[0].covers == ["a1"]
        assert validate_contract(contract).ok

    def test_absent_draft_flag_stays_none(self, valid_document):
        del valid_document["metadata"]["is_draft"]

        assert parse_contract(valid_document).metadata.is_draft is None

    def test_missing_keys_become_empty_values(self):
        contract = parse_contract({"spec": {"surface": {"kind": "http"}, "bindings": {}}})

        assert contract.api_version == ""
        assert contract.spec.consumer.component == ""
        assert contract.spec.surface.http is None
        assert contract.spec.assertions == []
        assert contract.spec.bindings.tests == []

    def test_missing_spec_is_none(self):
        contract = parse_contract({"apiVersion": "autobots/v1alpha1", "kind": "Contract"})
        assert contract.spec is None

    def test_missing_containers_become_empty(self):
        spec = parse_contract({"spec": {}}).spec
        assert spec.surface == ContractSurface()
        assert spec.bindings == ContractBindings()

    def test_missing_surface_is_reported_at_kind(self, valid_document):
        del valid_document["spec"]["surface"]

        result = validate_contract(parse_contract(valid_document))

        assert result.findings == [Finding("spec.surface.kind", "required")]

    def test_missing_bindings_is_reported_at_tests(self, valid_document):
        del valid_document["spec"]["bindings"]

        result = validate_contract(parse_contract(valid_document))

        assert result.findings == [Finding("spec.bindings.tests", "must have at least one test binding")]

    def test_scalars_are_stringified(self):
        contract = parse_contract({"spec": {"assertions": [{"id": 1, "text": "x"}], "bindings": {"tests": [{"covers": [1]}]}}})

        assert contract.spec.assertions[0].id == "1"
        assert contract.spec.bindings.tests[0].covers == ["1"]
        assert contract.spec.bindings.tests[0].required is False

    def test_root_must_be_mapping(self):
        with pytest.raises(ContractLoadError, match="must be a mapping"):
            parse_contract(["not", "a", "mapping"])

    def test_wrong_shape_names_the_path(self):
        with pytest.raises(ContractLoadError, match=r"spec\.bindings\.tests\[0\]"):
            parse_contract({"spec": {"bindings": {"tests": ["t1"]}}})

    def test_non_boolean_required(self):
        with pytest.raises(ContractLoadError, match="required: expected a boolean"):
            parse_contract({"spec": {"bindings": {"tests": [{"required": "yes"}]}}})

    def test_load_contract_from_file(self, data_dir):
        contract = load_contract(data_dir / "billing.contract.yaml")

        assert contract.spec.provider.component == "billing-api"
        assert [t.id for t in contract.spec.bindings.tests] == ["t1", "t2"]
        assert validate_contract(contract).ok
