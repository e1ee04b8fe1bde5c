from json_schema_to_sdl.pipeline import (
    CodeGeneratorConfig,
    EmptyObjectPolicy,
    OutputMode,
    ReferencePolicy,
)


def test_defaults():
    config = CodeGeneratorConfig()
    assert config.ref_prefix == "#/definitions/"
    assert config.unknown_reference == ReferencePolicy.ERROR
    assert config.empty_object == EmptyObjectPolicy.SKIP
    assert config.formatter.enabled is True
    assert config.output.mode == OutputMode.ERROR_IF_EXISTS


def test_from_dict():
    config = CodeGeneratorConfig.from_dict(
        {
            "ref_prefix": "#/components/schemas/",
            "unknown_reference": "placeholder",
            "empty_object": "error",
            "formatter": {"enabled": False},
            "output": {"mode": "force"},
            "not_an_option": 1,
        }
    )
    assert config.ref_prefix == "#/components/schemas/"
    assert config.unknown_reference == ReferencePolicy.PLACEHOLDER
    assert config.empty_object == EmptyObjectPolicy.ERROR
    assert config.formatter.enabled is False
    assert config.output.mode == OutputMode.FORCE
    assert config.output.atomic_write is True
    assert not hasattr(config, "not_an_option")


def test_to_dict_is_json_friendly():
    d = CodeGeneratorConfig(empty_object=EmptyObjectPolicy.ERROR).to_dict()
    assert d["empty_object"] == "error"
    assert d["unknown_reference"] == "error"
    assert d["output"] == {"mode": "error", "atomic_write": True}
    assert CodeGeneratorConfig.from_dict(d) == CodeGeneratorConfig(empty_object=EmptyObjectPolicy.ERROR)
