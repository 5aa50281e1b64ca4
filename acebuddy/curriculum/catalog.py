"""
Curriculum Catalog

Dense, read-only lookup of syllabus topics keyed by
(country, exam level, subject), plus the exam levels offered per country.

The authored data is sparse. ``build_catalog`` expands it so that every
(country, exam level, subject) triple resolves to a tuple of topics:
- authored subjects keep their topics verbatim and in order
- unauthored subjects get ``()``
- the "Other" subject falls back to ``("General Topics",)``

Consumers never need absence checks.
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType

from acebuddy.curriculum.data import (
    AUTHORED_TOPICS,
    EXAM_LEVELS_BY_COUNTRY,
    GENERAL_TOPICS,
    PREFERRED_EXAM_LEVELS,
)
from acebuddy.schemas.base import Country, ExamLevel, Subject

logger = logging.getLogger(__name__)

Topics = tuple[str, ...]
SubjectTopics = Mapping[Subject, Topics]
LevelTopics = Mapping[ExamLevel, SubjectTopics]


def _fill_subjects(authored: Mapping[Subject, list[str]]) -> SubjectTopics:
    """Complete a subject mapping for one exam level."""
    filled: dict[Subject, Topics] = {}
    for subject in Subject:
        if subject in authored:
            filled[subject] = tuple(authored[subject])
        elif subject == Subject.OTHER:
            filled[subject] = (GENERAL_TOPICS,)
        else:
            filled[subject] = ()
    return MappingProxyType(filled)


def _fill_exam_levels(
    authored: Mapping[ExamLevel, Mapping[Subject, list[str]]],
) -> LevelTopics:
    """Complete the exam level mapping for one country."""
    return MappingProxyType({
        level: _fill_subjects(authored.get(level, {}))
        for level in ExamLevel
    })


class CurriculumCatalog:
    """
    Immutable curriculum lookup. Build once with ``build_catalog`` and pass
    the instance to whatever needs it.
    """

    def __init__(
        self,
        topics: Mapping[Country, LevelTopics],
        exam_levels: Mapping[Country, tuple[ExamLevel, ...]],
    ) -> None:
        self._topics = topics
        self._exam_levels = exam_levels

    def topics_for(self, country: Country, exam_level: ExamLevel, subject: Subject) -> Topics:
        """Ordered topics for a triple. Empty when nothing is authored."""
        try:
            return self._topics[country][exam_level][subject]
        except KeyError:
            return ()

    def exam_levels_for(self, country: Country) -> tuple[ExamLevel, ...]:
        """Exam levels offered in a country, in display order."""
        return self._exam_levels.get(country, ())

    def is_valid_exam_level(self, country: Country, exam_level: ExamLevel) -> bool:
        return exam_level in self.exam_levels_for(country)

    def default_exam_level(
        self,
        country: Country,
        current: ExamLevel | None = None,
    ) -> ExamLevel:
        """
        Exam level to select after the country changes.

        Keeps ``current`` when the country offers it, otherwise prefers the
        country's headline exam, otherwise its first level.
        """
        levels = self.exam_levels_for(country)
        if not levels:
            return ExamLevel.OTHER
        if current in levels:
            return current
        preferred = PREFERRED_EXAM_LEVELS.get(country)
        if preferred in levels:
            return preferred
        return levels[0]

    def default_topic(
        self,
        country: Country,
        exam_level: ExamLevel,
        subject: Subject,
        current: str | None = None,
    ) -> str:
        """Topic to select after any selector changes. ``""`` when none exist."""
        topics = self.topics_for(country, exam_level, subject)
        if not topics:
            return ""
        if current in topics:
            return current
        return topics[0]


def build_catalog(
    authored: Mapping[Country, Mapping[ExamLevel, Mapping[Subject, list[str]]]] = AUTHORED_TOPICS,
    exam_levels: Mapping[Country, list[ExamLevel]] = EXAM_LEVELS_BY_COUNTRY,
) -> CurriculumCatalog:
    """Expand sparse authored data into a total, immutable catalog."""
    topics = MappingProxyType({
        country: _fill_exam_levels(authored.get(country, {}))
        for country in Country
    })
    levels = MappingProxyType({
        country: tuple(exam_levels.get(country, ()))
        for country in Country
    })

    for country in Country:
        if not levels[country]:
            logger.warning(f"No exam levels configured for {country.value}")

    return CurriculumCatalog(topics, levels)


# Global catalog instance
_catalog: CurriculumCatalog | None = None


def get_catalog() -> CurriculumCatalog:
    """Get or build the process-wide catalog."""
    global _catalog
    if _catalog is None:
        _catalog = build_catalog()
    return _catalog
