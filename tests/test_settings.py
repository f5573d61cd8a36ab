from wikibase_datavalues.config.settings import Settings
from wikibase_datavalues.models import EntityId
from wikibase_datavalues.models.values import TimeValue


def test_default_entity_base_uri():
    """Test the default base URI points at Wikidata"""
    assert Settings().entity_base_uri == "http://www.wikidata.org/entity/"


def test_entity_base_uri_from_environment(monkeypatch):
    """Test the base URI can be overridden from the environment"""
    monkeypatch.setenv("DATAVALUES_ENTITY_BASE_URI", "https://wikibase.example/entity/")
    custom = Settings()
    assert custom.entity_base_uri == "https://wikibase.example/entity/"
    assert custom.entity_uri("Q1") == "https://wikibase.example/entity/Q1"


def test_module_settings_drive_uri_expansion(monkeypatch):
    """Test bare ids expand with the module level settings"""
    from wikibase_datavalues.config.settings import settings

    monkeypatch.setattr(settings, "entity_base_uri", "https://wikibase.example/entity/")
    assert EntityId.parse("Q42").to_uri() == "https://wikibase.example/entity/Q42"
    value = TimeValue(time="+2001-01-01T00:00:00Z", precision=11, calendarmodel="Q1985727")
    assert value.calendarmodel == "https://wikibase.example/entity/Q1985727"
