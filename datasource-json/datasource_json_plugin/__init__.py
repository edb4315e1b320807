from .plugin import JsonDatasourcePlugin

__all__ = ["JsonDatasourcePlugin"]
