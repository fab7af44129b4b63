"""
Functional tests for the PipelineGenerator.

Each case in test_data/functional/*_tests.json gives a schema, a config
and patterns expected (or not) in the generated Go source.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from json_schema_to_go.pipeline import PipelineGenerator
from json_schema_to_go.pipeline.config import CodeGeneratorConfig


def load_all_test_cases():
    """Load all test cases from all JSON files in test_data/functional directory"""
    functional_dir = Path(__file__).parent / "test_data" / "functional"
    test_cases = []

    for json_file in sorted(functional_dir.glob("*_tests.json")):
        with open(json_file) as f:
            data = json.load(f)

        for test_case in data:
            # Add source file info for debugging
            test_case["_source_file"] = json_file.name
            test_cases.append(test_case)

    return test_cases


def _generate_code(schema, config_dict, class_name="TestSchema"):
    """Helper to generate code with given schema and config"""
    config = CodeGeneratorConfig()

    if config_dict:
        for key, value in config_dict.items():
            if hasattr(config, key):
                setattr(config, key, value)

    generator = PipelineGenerator(class_name, schema, config)
    return generator.generate()


@pytest.mark.parametrize("test_case", load_all_test_cases(), ids=lambda tc: tc["name"])
def test_functional_generation(test_case):
    """Unified test for all JSON test cases using a single pattern"""
    print(f"\nTesting: {test_case['name']} (from {test_case['_source_file']})")
    print(f"Description: {test_case['description']}")

    generated_code = _generate_code(test_case["schema"], test_case.get("config", {}))

    for pattern in test_case.get("expected_contains", []):
        assert pattern in generated_code, f"Expected pattern {pattern!r} not found in output"

    for pattern in test_case.get("expected_not_contains", []):
        assert pattern not in generated_code, f"Unexpected pattern {pattern!r} found in output"
