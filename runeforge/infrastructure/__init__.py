from .catalog_loader import DEFAULT_RUNES_PATH, load_catalog, load_runes_from_yaml

__all__ = ["DEFAULT_RUNES_PATH", "load_catalog", "load_runes_from_yaml"]
