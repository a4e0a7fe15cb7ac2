"""Static kana dataset: every character with its romaji, group and script."""

from .models import KanaItem

KANA_TYPES = ['hiragana', 'katakana']

KANA_GROUPS = [
    'Vowels',
    'K-series',
    'S-series',
    'T-series',
    'N-series',
    'H-series',
    'M-series',
    'Y-series',
    'R-series',
    'W-series',
    'G-series',
    'Z-series',
    'D-series',
    'B-series',
    'P-series'
]

GROUP_LABELS = {
    'Vowels': 'Vowels (a, i, u, e, o)',
    'K-series': 'K-series (ka, ki, ku, ke, ko)',
    'S-series': 'S-series (sa, shi, su, se, so)',
    'T-series': 'T-series (ta, chi, tsu, te, to)',
    'N-series': 'N-series (na, ni, nu, ne, no)',
    'H-series': 'H-series (ha, hi, fu, he, ho)',
    'M-series': 'M-series (ma, mi, mu, me, mo)',
    'Y-series': 'Y-series (ya, yu, yo)',
    'R-series': 'R-series (ra, ri, ru, re, ro)',
    'W-series': 'W-series (wa, wo, n)',
    'G-series': 'G-series (ga, gi, gu, ge, go)',
    'Z-series': 'Z-series (za, ji, zu, ze, zo)',
    'D-series': 'D-series (da, ji, zu, de, do)',
    'B-series': 'B-series (ba, bi, bu, be, bo)',
    'P-series': 'P-series (pa, pi, pu, pe, po)'
}

# Voiced and semi-voiced rows, toggled together
DIACRITIC_GROUPS = ['G-series', 'Z-series', 'D-series', 'B-series', 'P-series']

HIRAGANA = {
    'Vowels': ['あ', 'い', 'う', 'え', 'お'],
    'K-series': ['か', 'き', 'く', 'け', 'こ'],
    'S-series': ['さ', 'し', 'す', 'せ', 'そ'],
    'T-series': ['た', 'ち', 'つ', 'て', 'と'],
    'N-series': ['な', 'に', 'ぬ', 'ね', 'の'],
    'H-series': ['は', 'ひ', 'ふ', 'へ', 'ほ'],
    'M-series': ['ま', 'み', 'む', 'め', 'も'],
    'Y-series': ['や', 'ゆ', 'よ'],
    'R-series': ['ら', 'り', 'る', 'れ', 'ろ'],
    'W-series': ['わ', 'を', 'ん'],
    'G-series': ['が', 'ぎ', 'ぐ', 'げ', 'ご'],
    'Z-series': ['ざ', 'じ', 'ず', 'ぜ', 'ぞ'],
    'D-series': ['だ', 'ぢ', 'づ', 'で', 'ど'],
    'B-series': ['ば', 'び', 'ぶ', 'べ', 'ぼ'],
    'P-series': ['ぱ', 'ぴ', 'ぷ', 'ぺ', 'ぽ']
}

KATAKANA = {
    'Vowels': ['ア', 'イ', 'ウ', 'エ', 'オ'],
    'K-series': ['カ', 'キ', 'ク', 'ケ', 'コ'],
    'S-series': ['サ', 'シ', 'ス', 'セ', 'ソ'],
    'T-series': ['タ', 'チ', 'ツ', 'テ', 'ト'],
    'N-series': ['ナ', 'ニ', 'ヌ', 'ネ', 'ノ'],
    'H-series': ['ハ', 'ヒ', 'フ', 'ヘ', 'ホ'],
    'M-series': ['マ', 'ミ', 'ム', 'メ', 'モ'],
    'Y-series': ['ヤ', 'ユ', 'ヨ'],
    'R-series': ['ラ', 'リ', 'ル', 'レ', 'ロ'],
    'W-series': ['ワ', 'ヲ', 'ン'],
    'G-series': ['ガ', 'ギ', 'グ', 'ゲ', 'ゴ'],
    'Z-series': ['ザ', 'ジ', 'ズ', 'ゼ', 'ゾ'],
    'D-series': ['ダ', 'ヂ', 'ヅ', 'デ', 'ド'],
    'B-series': ['バ', 'ビ', 'ブ', 'ベ', 'ボ'],
    'P-series': ['パ', 'ピ', 'プ', 'ペ', 'ポ']
}

# Both scripts share the same readings row by row
ROMAJI = {
    'Vowels': ['a', 'i', 'u', 'e', 'o'],
    'K-series': ['ka', 'ki', 'ku', 'ke', 'ko'],
    'S-series': ['sa', 'shi', 'su', 'se', 'so'],
    'T-series': ['ta', 'chi', 'tsu', 'te', 'to'],
    'N-series': ['na', 'ni', 'nu', 'ne', 'no'],
    'H-series': ['ha', 'hi', 'fu', 'he', 'ho'],
    'M-series': ['ma', 'mi', 'mu', 'me', 'mo'],
    'Y-series': ['ya', 'yu', 'yo'],
    'R-series': ['ra', 'ri', 'ru', 're', 'ro'],
    'W-series': ['wa', 'wo', 'n'],
    'G-series': ['ga', 'gi', 'gu', 'ge', 'go'],
    'Z-series': ['za', 'ji', 'zu', 'ze', 'zo'],
    'D-series': ['da', 'ji', 'zu', 'de', 'do'],
    'B-series': ['ba', 'bi', 'bu', 'be', 'bo'],
    'P-series': ['pa', 'pi', 'pu', 'pe', 'po']
}


def _build_all_kana() -> tuple:
    items = []
    for kana_type, table in (('hiragana', HIRAGANA), ('katakana', KATAKANA)):
        for group in KANA_GROUPS:
            for char, romaji in zip(table[group], ROMAJI[group]):
                items.append(KanaItem(char=char, romaji=romaji, group=group, type=kana_type))
    return tuple(items)


ALL_KANA = _build_all_kana()


def get_group_label(group: str) -> str:
    """Get the display label for a group id."""
    return GROUP_LABELS.get(group, group)
