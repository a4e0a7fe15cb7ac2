from .models import KanaItem, EnrichmentResult, SelectionState, FALLBACK_ENRICHMENT, card_faces
from .interfaces import EnrichmentProvider, StrokeDiagramProvider
from .utils import derive_pool, shuffle
from .display import DisplaySwapScheduler
from .session import StudySession
from .kana_data import ALL_KANA, KANA_GROUPS, KANA_TYPES, DIACRITIC_GROUPS
from .config import (
    SETTLE_DELAY_SECONDS, ENRICHMENT_TIMEOUT_SECONDS, FALLBACK_MNEMONIC,
    STUDY_MODES, GEMINI_MODEL
)

__all__ = [
    'KanaItem', 'EnrichmentResult', 'SelectionState', 'FALLBACK_ENRICHMENT', 'card_faces',
    'EnrichmentProvider', 'StrokeDiagramProvider',
    'derive_pool', 'shuffle',
    'DisplaySwapScheduler', 'StudySession',
    'ALL_KANA', 'KANA_GROUPS', 'KANA_TYPES', 'DIACRITIC_GROUPS',
    'SETTLE_DELAY_SECONDS', 'ENRICHMENT_TIMEOUT_SECONDS', 'FALLBACK_MNEMONIC',
    'STUDY_MODES', 'GEMINI_MODEL'
]
