import pytest

from json_schema_to_sdl.pipeline import FormatterConfig, MalformedGeneratedOutputError
from json_schema_to_sdl.pipeline.formatters import GraphQLFormatter, format_sdl


def test_format_indents_fields():
    assert format_sdl("type Pet {\nid: ID!\n}") == "type Pet {\n  id: ID!\n}\n"


def test_format_separates_declarations():
    formatted = GraphQLFormatter().format("type A {\na: Int\n}\nunion B = A | C", FormatterConfig())
    assert formatted == "type A {\n  a: Int\n}\n\nunion B = A | C\n"


@pytest.mark.parametrize("code", ["type Pet {\nid: ID!", "type {\nid: ID\n}", "enum E {\n1A\n}"])
def test_invalid_sdl(code):
    with pytest.raises(MalformedGeneratedOutputError, match="Generated SDL is not valid"):
        format_sdl(code)
