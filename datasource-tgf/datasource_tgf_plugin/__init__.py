from .plugin import TgfDatasourcePlugin

__all__ = ["TgfDatasourcePlugin"]
