from wikibase_datavalues.config.settings import Settings, settings

__all__ = ["Settings", "settings"]
