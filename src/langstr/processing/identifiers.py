"""
identifiers – Validation and transformation of Java identifiers.

Arbitrary text is turned into a legal identifier in one of several casing
conventions:

  • to_identifier     "my-var"       → "myvar"
  • to_camel_case     "foo-bar"      → "fooBar"
  • to_instance_case  "HTTPRequest"  → "httpRequest"
  • to_class_case     "foo_bar"      → "FooBar"
  • to_package_case   "Com-Example"  → "com_example"

Character handling is driven by an :class:`IdentifierPolicy`. Each mode has its
own default policy (see ``langstr.core.models``). ``None`` and ``""`` are
returned unchanged by every transform.

See JLS §3.8 (identifiers) and §3.9 (keywords).
"""

import logging
import unicodedata
from typing import List, Optional

from langstr.constants import DISCARD_TOKENS, RESERVED_WORDS
from langstr.core.models import (
    CAMEL_CASE_POLICY,
    CLASS_CASE_POLICY,
    IDENTIFIER_POLICY,
    INSTANCE_CASE_POLICY,
    PACKAGE_CASE_POLICY,
    IdentifierPolicy,
)
from langstr.logging.helpers import get_logger, trace
from langstr.processing.text_ops import to_lower_case, to_upper_case

_START_CATEGORIES = frozenset({'Lu', 'Ll', 'Lt', 'Lm', 'Lo', 'Nl', 'Sc', 'Pc'})
_PART_CATEGORIES = _START_CATEGORIES | {'Nd', 'Mn', 'Mc'}


def is_identifier_ignorable(ch: str) -> bool:
    """Return True for characters Java silently ignores inside identifiers."""
    cp = ord(ch)
    if 0x00 <= cp <= 0x08 or 0x0E <= cp <= 0x1B or 0x7F <= cp <= 0x9F:
        return True
    return unicodedata.category(ch) == 'Cf'


def is_identifier_start(ch: str) -> bool:
    """Return True if *ch* may begin an identifier."""
    return unicodedata.category(ch) in _START_CATEGORIES


def is_identifier_part(ch: str) -> bool:
    """Return True if *ch* may appear after the first identifier character."""
    return unicodedata.category(ch) in _PART_CATEGORIES or is_identifier_ignorable(ch)


def is_reserved_word(word: str) -> bool:
    return word in RESERVED_WORDS


def _is_simple_identifier(text: str) -> bool:
    if not text or not is_identifier_start(text[0]):
        return False
    return all(is_identifier_part(ch) for ch in text[1:])


class IdentifierTransformer:
    """Turns arbitrary text into valid identifiers.

    All operations are pure. The instance only carries a logger used to
    report reserved-word collisions at debug level.
    """

    def __init__(self, *, logger: Optional[logging.Logger] = None) -> None:
        self._log = logger or get_logger('identifiers')

    # ------------------------------------------------------------------ #
    #  Validation                                                        #
    # ------------------------------------------------------------------ #
    def is_valid(self, text: str, qualified: bool = True) -> bool:
        """Return True if *text* is a valid identifier.

        Args:
            text: Candidate identifier.
            qualified: Accept a dot-separated sequence of identifiers
                (``java.lang.Object``) instead of a single one.

        Raises:
            ValueError: *text* is None.
        """
        if text is None:
            raise ValueError('text is None')
        if not qualified:
            return _is_simple_identifier(text)
        return all(_is_simple_identifier(part) for part in text.split('.'))

    # ------------------------------------------------------------------ #
    #  Builders                                                          #
    # ------------------------------------------------------------------ #
    @staticmethod
    def _build_plain(text: str, policy: IdentifierPolicy) -> str:
        out: List[str] = []
        if not is_identifier_start(text[0]) and policy.prefix is not None:
            out.append(policy.prefix)

        # The first character is kept when it can continue an identifier
        # ("1st" -> "_1st"); anything else goes through the substitutions.
        for ch in text:
            if is_identifier_part(ch):
                out.append(ch)
                continue
            replacement = policy.replacement_for(ch)
            if replacement is not None:
                out.append(replacement)
        return ''.join(out)

    @staticmethod
    def _build_camel(text: str, policy: IdentifierPolicy) -> str:
        out: List[str] = []
        cap_next = False
        for i, ch in enumerate(text):
            if i == 0 and not is_identifier_start(ch) and policy.prefix is not None:
                out.append(policy.prefix)

            if ch in DISCARD_TOKENS:
                cap_next = i != 0
                replacement = policy.replacement_for(ch)
                if replacement is not None:
                    out.append(replacement)
            elif cap_next:
                out.append(ch.upper())
                cap_next = False
            else:
                out.append(ch)
        return ''.join(out)

    def _not_reserved(self, word: str, prefix: Optional[str], suffix: Optional[str]) -> str:
        if not is_reserved_word(word):
            return word
        trace(self._log, 'reserved word collision', word=word, prefix=prefix, suffix=suffix)
        if suffix is not None:
            return word + suffix
        if prefix is not None:
            return prefix + word
        self._log.debug('reserved word %r left as is: no prefix or suffix configured', word)
        return word

    # ------------------------------------------------------------------ #
    #  Public transforms                                                 #
    # ------------------------------------------------------------------ #
    def to_identifier(self, text: Optional[str], policy: Optional[IdentifierPolicy] = None) -> Optional[str]:
        """Transform *text* into a valid identifier.

        Text that starts with an illegal character is prefixed with
        ``policy.prefix``; reserved words are prefixed too (``policy.suffix`` is
        not used in this mode). Every other illegal character is replaced
        according to ``policy.substitutes`` / ``policy.substitute`` or dropped.
        """
        if not text:
            return text
        policy = policy or IDENTIFIER_POLICY
        return self._not_reserved(self._build_plain(text, policy), policy.prefix, None)

    def to_package_case(self, text: Optional[str], policy: Optional[IdentifierPolicy] = None) -> Optional[str]:
        """Transform *text* into a lower-case identifier suitable as a package name.

        Follows the Java naming guidelines for package components: illegal
        characters become ``_``, a component starting with an illegal
        character is prefixed with ``_`` and a keyword gets ``_`` appended.
        """
        if not text:
            return text
        policy = policy or PACKAGE_CASE_POLICY
        word = self._build_plain(text, policy).lower()
        return self._not_reserved(word, policy.prefix, policy.suffix)

    def to_camel_case(self, text: Optional[str], policy: Optional[IdentifierPolicy] = None) -> Optional[str]:
        """Transform *text* into a camelCase identifier.

        Discard tokens (punctuation such as ``-``, ``_`` or ``.``) mark word
        boundaries: they are substituted or dropped and the next character is
        upper-cased. Reserved words get ``policy.suffix`` appended if set,
        otherwise ``policy.prefix`` prepended.
        """
        if not text:
            return text
        policy = policy or CAMEL_CASE_POLICY
        return self._not_reserved(self._build_camel(text, policy), policy.prefix, policy.suffix)

    def to_instance_case(self, text: Optional[str], policy: Optional[IdentifierPolicy] = None) -> Optional[str]:
        """Transform *text* into a lower-camelCase identifier.

        The leading run of upper-case characters is lower-cased up to, but
        not including, its last character, so ``HTTPRequest`` becomes
        ``httpRequest``. A result without any lower-case letter or digit is
        lower-cased entirely.
        """
        if not text:
            return text
        policy = policy or INSTANCE_CASE_POLICY
        word = self._lower_leading_run(self._build_camel(text, policy))
        return self._not_reserved(word, policy.prefix, policy.suffix)

    def to_class_case(self, text: Optional[str], policy: Optional[IdentifierPolicy] = None) -> Optional[str]:
        """Transform *text* into a Title-CamelCase identifier.

        No reserved-word handling: every reserved word is lower-case.
        """
        if not text:
            return text
        policy = policy or CLASS_CASE_POLICY
        word = self._build_camel(text, policy)
        if not word or word[0].isupper():
            return word
        return to_upper_case(word, 0, 1)

    @staticmethod
    def _lower_leading_run(word: str) -> str:
        size = len(word)
        if size == 0:
            return word
        if size == 1:
            return word.lower()

        boundary = size
        for i, ch in enumerate(word):
            if ch.isdigit() or ch.islower():
                boundary = i
                break

        if boundary <= 1:
            return word
        if boundary == size:
            return word.lower()
        return to_lower_case(word, 0, boundary - 1)


_DEFAULT = IdentifierTransformer()

is_valid = _DEFAULT.is_valid
to_identifier = _DEFAULT.to_identifier
to_package_case = _DEFAULT.to_package_case
to_camel_case = _DEFAULT.to_camel_case
to_instance_case = _DEFAULT.to_instance_case
to_class_case = _DEFAULT.to_class_case
