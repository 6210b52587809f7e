# lexis\shared\container.py
from dependency_injector import containers, providers

from lexis.shared.config import settings
from lexis.core.domain.feature_registry import FeatureRegistry
from lexis.core.domain.language_models import LanguageModelRegistry
from lexis.core.use_cases.group_inflections import GroupInflectionsForDisplay

class Container(containers.DeclarativeContainer):
    """
    Dependency Injection Container.

    Holds the per-process language context: which language codes are
    enabled, the FeatureTypes registered for them, and the grouping use case.
    """

    # 1. Configuration
    config = providers.Configuration(pydantic_settings=[settings])

    # 2. Language context (Singletons: built once at startup, then read-only)
    language_registry = providers.Singleton(
        LanguageModelRegistry,
        enabled_codes=config.ENABLED_LANGUAGES,
    )

    feature_registry = providers.Singleton(
        FeatureRegistry
    )

    # 3. Use Cases (Factory: stateless, new instance per call)
    group_inflections_use_case = providers.Factory(
        GroupInflectionsForDisplay,
        languages=language_registry,
    )

# Instantiate the container for global access
container = Container()
