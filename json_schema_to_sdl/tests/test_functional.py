"""
Functional tests for the SDL pipeline.

Each JSON file in test_data/functional holds cases made of a definition
table, an optional config and fragments expected (or not) in the output.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from json_schema_to_sdl.pipeline import CodeGeneratorConfig, PipelineGenerator, SchemaParser


def load_all_test_cases():
    """Load all test cases from all JSON files in test_data/functional directory."""
    functional_dir = Path(__file__).parent / "test_data" / "functional"
    test_cases = []

    for json_file in sorted(functional_dir.glob("*_tests.json")):
        with open(json_file) as f:
            data = json.load(f)

        for test_case in data:
            test_case["_source_file"] = json_file.name
            test_cases.append(test_case)

    return test_cases


def _generate_sdl(definitions, config_dict):
    config = CodeGeneratorConfig.from_dict(config_dict or {})
    table = SchemaParser().parse({"definitions": definitions})
    return PipelineGenerator(table, config).generate()


@pytest.mark.parametrize("test_case", load_all_test_cases(), ids=lambda tc: tc["name"])
def test_functional_generation(test_case):
    """Unified test for all JSON test cases using a single pattern."""
    generated = _generate_sdl(test_case["definitions"], test_case.get("config"))

    for pattern in test_case["expected_contains"]:
        assert pattern in generated, f"Expected pattern {pattern!r} not found in output:\n{generated}"

    for pattern in test_case["expected_not_contains"]:
        assert pattern not in generated, f"Unexpected pattern {pattern!r} found in output:\n{generated}"


if __name__ == "__main__":
    pytest.main([__file__])
