from json_schema_to_sdl.pipeline import Definition, SchemaParser


def test_swagger_definitions():
    table = SchemaParser().parse({"swagger": "2.0", "definitions": {"Pet": {"type": "object"}}})
    assert list(table) == ["Pet"]
    assert table["Pet"].type == "object"


def test_openapi_components():
    table = SchemaParser().parse({"openapi": "3.0.0", "components": {"schemas": {"Pet": {"type": "string"}}}})
    assert table == {"Pet": Definition(type="string")}


def test_api_document_without_schemas_is_empty():
    paths = {"/pets": {"get": {"responses": {"200": {"description": "ok"}}}}}
    swagger = {"swagger": "2.0", "info": {"title": "Petstore", "version": "1.0"}, "paths": paths}
    openapi = {"openapi": "3.0.0", "info": {"title": "Petstore", "version": "1.0"}, "components": {}, "paths": paths}
    assert SchemaParser().parse(swagger) == {}
    assert SchemaParser().parse(openapi) == {}


def test_bare_table_skips_comments():
    table = SchemaParser().parse({"_comment": "ignored", "_comment_2": {"type": "string"}, "Tag": {"type": "string"}})
    assert list(table) == ["Tag"]


def test_definition_from_dict():
    definition = Definition.from_dict(
        {
            "type": "object",
            "description": "A pet",
            "required": ["name"],
            "allOf": [{"$ref": "#/definitions/Base"}],
            "properties": {
                "name": {"type": "string"},
                "tags": {"type": "array", "items": {"type": "string"}},
                "kind": {"oneOf": [{"type": "string"}, {"type": "integer"}]},
                "size": {"enum": ["s", "m"]},
                "weight": {"type": "number", "format": "float"},
            },
        }
    )
    assert definition.description == "A pet"
    assert definition.required == ["name"]
    assert definition.all_of == [Definition(ref="#/definitions/Base")]
    assert list(definition.properties) == ["name", "tags", "kind", "size", "weight"]
    assert definition.properties["tags"].items == Definition(type="string")
    assert definition.properties["tags"].is_list_wrapper is False
    assert len(definition.properties["kind"].one_of) == 2
    assert definition.properties["size"].enum == ["s", "m"]
    assert definition.properties["weight"].format == "float"


def test_list_wrapper():
    assert Definition.from_dict({"type": "array", "items": {"$ref": "#/definitions/Pet"}}).is_list_wrapper
    assert not Definition.from_dict({"type": "array"}).is_list_wrapper
