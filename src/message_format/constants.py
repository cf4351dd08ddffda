"""Shared constants for message-format.

Centralized limits used by the parser and the renderer. Placing them here
avoids circular imports and gives one place to look when tuning.

Constants are grouped by domain:
- Depth limits: Recursion protection for parsing and rendering
- Input limits: Size constraints on template text
- Defaults: Values used when the caller supplies nothing

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    # Input limits
    "MAX_SOURCE_SIZE",
    # Defaults
    "DEFAULT_LANGUAGE_TAG",
    # Integer range accepted for Number values
    "INT64_MIN",
    "INT64_MAX",
    "UINT64_MAX",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================
#
# One limit is shared by the parser (nested plural/select branch bodies) and
# the renderer (nested sub-message rendering). Real templates nest two or
# three levels; anything near 100 is malformed or adversarial input.
MAX_DEPTH: int = 100

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum template length in characters (1 MiB).
# A single message template is a sentence or a paragraph, never a file.
MAX_SOURCE_SIZE: int = 1024 * 1024

# ============================================================================
# DEFAULTS
# ============================================================================

# Language tag carried by a default Context. Opaque to the engine.
DEFAULT_LANGUAGE_TAG: str = "en"

# ============================================================================
# NUMBER RANGE
# ============================================================================

INT64_MIN: int = -(2**63)
INT64_MAX: int = 2**63 - 1
UINT64_MAX: int = 2**64 - 1
