# src/aliasify/config.py

VERSION = "0.1.0"

# TypeScript sources, plain and JSX-embedding
SOURCE_EXTENSIONS = (".ts", ".tsx")

# Directory name that anchors the alias root
SOURCE_ROOT_MARKER = "src"

IMPORT_KEYWORD = "import"
ASCENT_SEGMENT = "../"
ALIAS_PREFIX = "@/"
QUOTE_CHAR = "'"

DEFAULT_EXCLUDE_PATTERNS = [
    "# Never descend into installed packages",
    "node_modules/",
]
