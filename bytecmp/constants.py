"""Shared constants for bytecode comparison and display."""

# Placeholders substituted for masked regions
BYTECODE_HASH_PLACEHOLDER = "[BYTECODE_HASH]"
CBOR_METADATA_PLACEHOLDER = "[CBOR_METADATA]"

# CBOR map header "ipfs" key followed by a 34-byte multihash (68 hex digits)
DEFAULT_HASH_PATTERN = r"a264697066735822[0-9a-fA-F]{68}"

DEFAULT_CBOR_PATTERN = r"a2644970667358[0-9a-fA-F]+?6673"

# Characters of masked text shown on each side of a difference run
CONTEXT_SIZE = 16

# Masked region content is truncated to this many characters in reports
PREVIEW_LENGTH = 30

# Display width constant - standardize to 80 characters max
MAX_DISPLAY_WIDTH = 80
