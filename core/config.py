"""Configuration constants for kanacards application."""

# Selection defaults
DEFAULT_GROUPS = ['Vowels']
DEFAULT_TYPES = ['hiragana']
DEFAULT_STUDY_MODE = 'char-first'
STUDY_MODES = ['char-first', 'romaji-first']

# Card timing
SETTLE_DELAY_SECONDS = 0.7    # Matches the card flip animation

# Enrichment
GEMINI_MODEL = 'gemini-2.0-flash'
ENRICHMENT_TIMEOUT_SECONDS = 15
EXAMPLE_WORD_COUNT = 3
FALLBACK_MNEMONIC = "Keep practicing! You'll master it soon."

# Stroke order diagrams (animCJK)
STROKE_BASE_URL = 'https://raw.githubusercontent.com/parsimonhi/animCJK/master'
STROKE_REQUEST_TIMEOUT_SECONDS = 10
