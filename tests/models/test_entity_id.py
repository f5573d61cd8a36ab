import pytest

from wikibase_datavalues.models import EntityId, MalformedIdentifierError


def test_parse_item_id():
    """Test parsing a compact item id"""
    entity_id = EntityId.parse("Q11573")
    assert entity_id.prefix == "Q"
    assert entity_id.serial_number == 11573
    assert entity_id.prefixed_id == "Q11573"
    assert entity_id.entity_type == "item"
    assert str(entity_id) == "Q11573"


def test_parse_normalizes_prefix_case():
    """Test lower-case prefixes canonicalize to upper case"""
    entity_id = EntityId.parse("p31")
    assert entity_id.prefixed_id == "P31"
    assert entity_id == EntityId.parse("P31")
    assert entity_id.entity_type == "property"


def test_entity_type_by_prefix():
    """Test well-known prefixes map to their entity type"""
    assert EntityId.parse("Q1").entity_type == "item"
    assert EntityId.parse("P1").entity_type == "property"
    assert EntityId.parse("L1").entity_type == "lexeme"


def test_unknown_prefix_has_no_entity_type():
    """Test ids with other prefixes still parse"""
    entity_id = EntityId.parse("M123")
    assert entity_id.prefixed_id == "M123"
    assert entity_id.entity_type is None


@pytest.mark.parametrize("text", [
    "",
    "Q",
    "42",
    "Q!!notanid",
    "Q042",
    "Q0",
    "Q 42",
    "Q42\n",
    "Q-42",
    "L1-S2",
    "Q18446744073709551616",
])
def test_parse_malformed(text):
    """Test malformed ids are rejected"""
    with pytest.raises(MalformedIdentifierError):
        EntityId.parse(text)


def test_parse_max_serial_number():
    """Test the largest unsigned 64-bit serial number is accepted"""
    entity_id = EntityId.parse("Q18446744073709551615")
    assert entity_id.serial_number == 2**64 - 1


def test_parse_non_string():
    """Test non-string input is rejected"""
    with pytest.raises(MalformedIdentifierError):
        EntityId.parse(None)


def test_from_uri():
    """Test the last URI path segment is parsed"""
    assert EntityId.from_uri("http://www.wikidata.org/entity/Q42").prefixed_id == "Q42"
    assert EntityId.from_uri("Q42").prefixed_id == "Q42"


def test_from_uri_trailing_slash():
    """Test a URI with an empty last segment is rejected"""
    with pytest.raises(MalformedIdentifierError):
        EntityId.from_uri("http://www.wikidata.org/entity/")


def test_to_uri():
    """Test concept URI rendering with default and explicit base"""
    entity_id = EntityId.parse("Q42")
    assert entity_id.to_uri() == "http://www.wikidata.org/entity/Q42"
    assert entity_id.to_uri("https://example.org/entity/") == "https://example.org/entity/Q42"


def test_from_entity_type():
    """Test building an id from entity type and numeric id"""
    assert EntityId.from_entity_type("item", 5).prefixed_id == "Q5"
    assert EntityId.from_entity_type("lexeme", 7).prefixed_id == "L7"


@pytest.mark.parametrize("entity_type,numeric_id", [("form", 1), ("item", 0), ("item", -3)])
def test_from_entity_type_invalid(entity_type, numeric_id):
    """Test unknown entity types and non-positive numbers are rejected"""
    with pytest.raises(MalformedIdentifierError):
        EntityId.from_entity_type(entity_type, numeric_id)


def test_entity_id_is_hashable():
    """Test frozen ids can be used as dict keys"""
    units = {EntityId.parse("Q11573"): "metre"}
    assert units[EntityId.parse("q11573")] == "metre"


def test_model_dump_includes_prefixed_id():
    """Test the computed prefixed id is serialized"""
    assert EntityId.parse("Q42").model_dump() == {
        "prefix": "Q",
        "serial_number": 42,
        "prefixed_id": "Q42"
    }
