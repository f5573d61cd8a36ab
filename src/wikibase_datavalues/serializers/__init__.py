from wikibase_datavalues.serializers.value_serializer import dumps_datavalue, serialize_datavalue

__all__ = ["dumps_datavalue", "serialize_datavalue"]
