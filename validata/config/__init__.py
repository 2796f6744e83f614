from validata.config.loader import load_schema

__all__ = ["load_schema"]
