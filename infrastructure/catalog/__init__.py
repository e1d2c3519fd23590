"""
Exercise catalog adapters.

Usage:
    from infrastructure.catalog import YamlExerciseCatalog

    catalog = YamlExerciseCatalog()
    records = catalog.get_all_exercises()
"""

from infrastructure.catalog.yaml_catalog import YamlExerciseCatalog, load_library

__all__ = [
    "YamlExerciseCatalog",
    "load_library",
]
