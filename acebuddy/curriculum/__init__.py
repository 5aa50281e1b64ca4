"""
Curriculum catalog: authored syllabus topics and per-country exam levels.
"""

from acebuddy.curriculum.catalog import CurriculumCatalog, build_catalog, get_catalog
from acebuddy.curriculum.data import EXAM_LEVELS_BY_COUNTRY, HOMEWORK_TOPICS

__all__ = [
    "CurriculumCatalog",
    "build_catalog",
    "get_catalog",
    "EXAM_LEVELS_BY_COUNTRY",
    "HOMEWORK_TOPICS",
]
