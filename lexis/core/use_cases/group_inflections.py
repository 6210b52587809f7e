# lexis/core/use_cases/group_inflections.py
import structlog
from typing import Iterable, List

from lexis.core.domain.exceptions import DomainError, UnsupportedLanguageError
from lexis.core.domain.grouping import InflectionGroup, group_for_display
from lexis.core.domain.inflection import Inflection, languages_of
from lexis.core.ports.language_support import ILanguageSupport
from lexis.shared.observability import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)

class GroupInflectionsForDisplay:
    """
    Use Case: Arranges the inflections of an analysis into the display forest.

    Responsibilities:
    1. Materializes the input once so the grouping passes see a fixed list.
    2. Checks every inflection language against the enabled languages.
    3. Runs the four-pass grouping algorithm.
    4. Traces and logs the run.
    5. Surfaces unexpected failures as DomainError.
    """

    def __init__(self, languages: ILanguageSupport):
        self.languages = languages

    def execute(self, inflections: Iterable[Inflection]) -> List[InflectionGroup]:
        """
        Args:
            inflections: Fully built Inflection objects (features attached).

        Returns:
            Root InflectionGroups, sorted by part of speech sort order.
        """
        items = list(inflections)
        with tracer.start_as_current_span("use_case.group_for_display") as span:
            span.set_attribute("lexis.inflection_count", len(items))

            languages = languages_of(items)
            logger.info("grouping_started", inflections=len(items), languages=languages)

            for code in languages:
                if not self.languages.supports_language(code):
                    logger.warning("grouping_rejected", language=code)
                    raise UnsupportedLanguageError(code)

            try:
                forest = group_for_display(items)
            except DomainError:
                raise
            except Exception as e:
                logger.error("grouping_failed", error=str(e), exc_info=True)
                raise DomainError(f"Unexpected grouping failure: {str(e)}")

            span.set_attribute("lexis.root_group_count", len(forest))
            logger.info(
                "grouping_completed",
                root_groups=len(forest),
                keys=[str(group.grouping_key) for group in forest],
            )
            return forest
