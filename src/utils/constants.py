"""Application-wide constants."""

from pathlib import Path

# Application metadata
APP_NAME = "bgvocab"
APP_VERSION = "0.1.0"
APP_TITLE = "BG Vocabulary"

# Paths
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config" / "default_config.yaml"
USER_DATA_DIR = Path.home() / ".bgvocab"

# Environment
FONTS_ENV_VAR = "BGVOCAB_FONTS"

# Source files (relative to the working directory)
DEFAULT_PAIRED_PATH = "vocab.txt"
DEFAULT_PAIRED_SMALL_PATH = "vocab_small.txt"
DEFAULT_TAGGED_PATH = "bg-en.xml"

# Tagged-line layout: fixed prefix/suffix around `key">value`
TAGGED_PREFIX_BYTES = 92
TAGGED_DELIMITER = '">'
TAGGED_VALUE_LEAD = 2
TAGGED_SUFFIX_CHARS = 10

# Batching
MIN_BATCH_SIZE = 3
DEFAULT_BATCH_SIZE = 10

# Presentation
DEFAULT_WRAP_WIDTH = 100

# PDF export
DEFAULT_FONT_FAMILY = "LiberationMono"
WORDS_PER_PDF = 50
PDF_TITLE_PREFIX = "BG vocabulary"
PDF_MARGIN_MM = 10
PDF_WORD_FONT_SIZE = 40
PDF_TRANSLATION_FONT_SIZE = 20
PDF_WORD_GAP_MM = 45

EXPORT_FORMATS = ("pdf", "csv", "json")
