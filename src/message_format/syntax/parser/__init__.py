"""Message template parser module.

Module Organization:
- core.py: Main MessageParser class
- primitives.py: Basic parsers (variable names, words, integers) and error helpers
- rules.py: Grammar rules (message, plain text, formats, branch bodies)

Public API:
    MessageParser: Main parser class
    ParseContext: Parse context for depth tracking (advanced usage)
"""

from message_format.syntax.parser.core import MessageParser
from message_format.syntax.parser.rules import ParseContext

__all__ = ["MessageParser", "ParseContext"]
