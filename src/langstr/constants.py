from __future__ import annotations

"""Project-wide constants used across modules.

Both tables are built once at import time and never mutated.
"""

from typing import FrozenSet

# Java keywords plus the boolean and null literals (JLS 3.9).
RESERVED_WORDS: FrozenSet[str] = frozenset({
    'abstract', 'assert', 'boolean', 'break', 'byte', 'case', 'catch', 'char',
    'class', 'const', 'continue', 'default', 'do', 'double', 'else', 'enum',
    'extends', 'false', 'final', 'finally', 'float', 'for', 'goto', 'if',
    'implements', 'import', 'instanceof', 'int', 'interface', 'long', 'native',
    'new', 'null', 'package', 'private', 'protected', 'public', 'return',
    'short', 'static', 'strictfp', 'super', 'switch', 'synchronized', 'this',
    'throw', 'throws', 'transient', 'true', 'try', 'void', 'volatile', 'while',
})

# Word separators for the camelCase family. Not the same thing as "illegal
# identifier characters": '$' is kept, ' ' and '+' are not separators.
DISCARD_TOKENS: FrozenSet[str] = frozenset('!"#%&\'()*,-./:;<>?@[\\]^_`{|}~')

DEFAULT_OPEN_TOKEN: str = '{{'
DEFAULT_CLOSE_TOKEN: str = '}}'

# Upper bound for strings built by `repeat`.
MAX_STRING_LENGTH: int = 2 ** 31 - 1

TRUNCATION_MARKER: str = '...'
