"""
Tests for the assembled GraphQL schema
"""

import pytest

from pointmap.graphql.schema import schema, validate_schema


@pytest.mark.unit
def test_schema_validates():
    validate_schema()


@pytest.mark.unit
def test_schema_exposes_map_and_point_surface():
    sdl = schema.as_str()

    for fragment in (
        "type Map",
        "type Point",
        "type Coordinates",
        "input MapListQuery",
        "input PointListQuery",
        "input PointAdd",
        "enum Operation",
        "enum PointCategory",
        "map(id: ID!): Map",
        "point(id: ID!): Point",
        "mapList(",
        "pointList(",
        "addMap(",
        "addPoint(",
        "saveMap(",
    ):
        assert fragment in sdl


@pytest.mark.unit
def test_category_is_a_closed_enum():
    category = schema._schema.get_type("PointCategory")

    assert set(category.values) == {
        "ART",
        "MONUMENT",
        "PUBLICSPACE",
        "RESIDENCE",
        "SCHOOL",
        "BUSINESS",
        "WORKPLACE",
        "OTHER",
    }


@pytest.mark.unit
def test_fields_and_arguments_are_documented():
    graphql_schema = schema._schema

    map_fields = graphql_schema.get_type("Map").fields
    assert map_fields["id"].description == "The ID of this map"
    assert map_fields["mapName"].description == "The name of this map"
    assert map_fields["creatorName"].description == "The creator of this map"

    point_fields = graphql_schema.get_type("Point").fields
    assert point_fields["name"].description == "The name of this point"
    assert point_fields["category"].description == "The category of this point"

    map_list_args = graphql_schema.query_type.fields["mapList"].args
    assert map_list_args["query"].description == "Query object for more specific searches"
    assert "(default 10)" in map_list_args["size"].description
    assert "(default 0)" in map_list_args["page"].description

    add_point_args = graphql_schema.mutation_type.fields["addPoint"].args
    assert add_point_args["mapId"].description == "The ID of the point's map"
    save_map_args = graphql_schema.mutation_type.fields["saveMap"].args
    assert save_map_args["points"].description == "A list of the points to add"

    point_add_fields = graphql_schema.get_type("PointAdd").fields
    assert point_add_fields["name"].description == "The name of this point"
    assert graphql_schema.get_type("PointAdd").description == "Input for adding a point"
