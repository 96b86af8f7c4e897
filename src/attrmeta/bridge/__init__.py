from .lookups import LookupCatalog, LookupRequest, RegisteredLookup, import_target, to_json

__all__ = ["LookupCatalog", "LookupRequest", "RegisteredLookup", "import_target", "to_json"]
