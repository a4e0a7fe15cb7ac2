"""Domain models for kanacards application."""

from dataclasses import dataclass

from .config import (
    DEFAULT_GROUPS, DEFAULT_TYPES, DEFAULT_STUDY_MODE, STUDY_MODES,
    FALLBACK_MNEMONIC
)


@dataclass(frozen=True)
class KanaItem:
    """A single kana character. Equality is structural over all fields."""
    char: str
    romaji: str
    group: str
    type: str

    def to_dict(self) -> dict:
        return {
            'char': self.char,
            'romaji': self.romaji,
            'group': self.group,
            'type': self.type
        }


@dataclass(frozen=True)
class EnrichmentResult:
    """Mnemonic note and example words for one character."""
    mnemonic: str
    examples: tuple = ()

    def to_dict(self) -> dict:
        return {
            'mnemonic': self.mnemonic,
            'examples': [{'word': word, 'meaning': meaning} for word, meaning in self.examples]
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'EnrichmentResult':
        """Build a result from a provider response, raising ValueError on a bad shape."""
        if not isinstance(data, dict):
            raise ValueError(f"Enrichment response is not a dict: {type(data)}")
        mnemonic = data.get('mnemonic')
        if not isinstance(mnemonic, str):
            raise ValueError(f"Invalid mnemonic: {mnemonic!r}")
        raw_examples = data.get('examples', [])
        if not isinstance(raw_examples, list):
            raise ValueError(f"Invalid examples: {raw_examples!r}")
        examples = []
        for example in raw_examples:
            if not isinstance(example, dict):
                raise ValueError(f"Invalid example entry: {example!r}")
            word = example.get('word')
            meaning = example.get('meaning')
            if not isinstance(word, str) or not isinstance(meaning, str):
                raise ValueError(f"Example missing word or meaning: {example!r}")
            examples.append((word, meaning))
        return cls(mnemonic=mnemonic, examples=tuple(examples))


FALLBACK_ENRICHMENT = EnrichmentResult(mnemonic=FALLBACK_MNEMONIC, examples=())


class SelectionState:
    """Active groups, script types and study direction.

    Neither set may become empty: a toggle that would remove the last
    member is rejected and reported by returning False.
    """

    def __init__(self, valid_groups: list, valid_types: list, diacritic_groups: list = None,
                 groups: list = None, types: list = None, study_mode: str = DEFAULT_STUDY_MODE):
        self.valid_groups = list(valid_groups)
        self.valid_types = list(valid_types)
        self.diacritic_groups = list(diacritic_groups or [])
        self.groups = set(groups if groups is not None else DEFAULT_GROUPS)
        self.types = set(types if types is not None else DEFAULT_TYPES)
        self.study_mode = study_mode
        if not self.groups or not self.types:
            raise ValueError("Selection needs at least one group and one type")
        for group in self.groups:
            self._check_group(group)
        for kana_type in self.types:
            self._check_type(kana_type)
        self._check_mode(study_mode)

    def _check_group(self, group: str) -> None:
        if group not in self.valid_groups:
            raise ValueError(f"Unknown group: {group}")

    def _check_type(self, kana_type: str) -> None:
        if kana_type not in self.valid_types:
            raise ValueError(f"Unknown kana type: {kana_type}")

    def _check_mode(self, mode: str) -> None:
        if mode not in STUDY_MODES:
            raise ValueError(f"Unknown study mode: {mode}")

    @staticmethod
    def _toggle(members: set, value: str) -> bool:
        if value in members:
            if len(members) <= 1:
                return False
            members.discard(value)
        else:
            members.add(value)
        return True

    def toggle_group(self, group: str) -> bool:
        """Add or remove a group. Returns False if the toggle was rejected."""
        self._check_group(group)
        return self._toggle(self.groups, group)

    def toggle_type(self, kana_type: str) -> bool:
        """Add or remove a script type. Returns False if the toggle was rejected."""
        self._check_type(kana_type)
        return self._toggle(self.types, kana_type)

    @property
    def has_diacritics(self) -> bool:
        return any(group in self.groups for group in self.diacritic_groups)

    def toggle_diacritics(self) -> bool:
        """Remove every diacritic group if any is active, otherwise add them all."""
        if self.has_diacritics:
            remaining = self.groups - set(self.diacritic_groups)
            if not remaining:
                return False
            self.groups = remaining
        else:
            self.groups |= set(self.diacritic_groups)
        return True

    def set_study_mode(self, mode: str) -> None:
        self._check_mode(mode)
        self.study_mode = mode

    def ordered_groups(self) -> list[str]:
        """Active groups in dataset order."""
        return [g for g in self.valid_groups if g in self.groups]

    def ordered_types(self) -> list[str]:
        """Active types in dataset order."""
        return [t for t in self.valid_types if t in self.types]

    def to_dict(self) -> dict:
        return {
            'groups': self.ordered_groups(),
            'types': self.ordered_types(),
            'study_mode': self.study_mode,
            'has_diacritics': self.has_diacritics
        }


def card_faces(item: KanaItem, study_mode: str) -> dict:
    """Text shown on each face of the card for the given study direction."""
    if study_mode == 'romaji-first':
        return {
            'front': item.romaji,
            'front_label': 'Romaji',
            'back': item.char,
            'back_subtext': item.romaji
        }
    return {
        'front': item.char,
        'front_label': item.type,
        'back': item.romaji,
        'back_subtext': item.char
    }
