# enellerett/shared/container.py
from dependency_injector import containers, providers

from enellerett.adapters.hit_recorder import QueuedHitRecorder
from enellerett.adapters.persistence.word_list_loader import load_lexicon
from enellerett.core.use_cases.lookup_noun import LookupNoun
from enellerett.core.use_cases.quiz import Quiz
from enellerett.shared.config import settings


class Container(containers.DeclarativeContainer):
    """
    Dependency Injection Container.

    The lexicon store is built once, on first use, from the configured word
    lists. Tests override `lexicon_store` / `hit_recorder` with their own.
    """

    # 1. Configuration
    config = providers.Configuration(pydantic_settings=[settings])

    # 2. Gateways (Infrastructure Adapters)

    # Loads both word lists; raises LexiconLoadError if either is unreadable.
    lexicon_store = providers.Singleton(
        load_lexicon,
        en_path=config.EN_WORDS_PATH,
        ett_path=config.ETT_WORDS_PATH,
    )

    hit_recorder = providers.Singleton(
        QueuedHitRecorder,
        store=lexicon_store,
        max_pending=config.HIT_QUEUE_SIZE.as_int(),
    )

    # 3. Use Cases (Application Logic)

    lookup_noun_use_case = providers.Factory(
        LookupNoun,
        store=lexicon_store,
        hits=hit_recorder,
    )

    quiz_use_case = providers.Factory(
        Quiz,
        store=lexicon_store,
    )
