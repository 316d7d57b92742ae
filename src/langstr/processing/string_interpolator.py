"""
string_interpolator – Transitive {{key}} placeholder interpolation.

Semantics:

  • <open>key<close>  → the value mapped to "key", itself interpolated first
  • unknown key       → UnresolvedKeyError (never left as literal text)
  • key re-entered    → CycleDetectedError ("Loop detected.")
  • <open> without a following <close> is copied verbatim

Delimiters are literal strings chosen per call ("{{" / "}}" by default).
There is no escape syntax and no expression evaluation.
"""

import logging
from typing import Dict, List, Mapping, MutableMapping, Optional

from langstr.constants import DEFAULT_CLOSE_TOKEN, DEFAULT_OPEN_TOKEN
from langstr.errors import CycleDetectedError, UnresolvedKeyError
from langstr.logging.helpers import get_logger, trace


class _Resolution:
    """State of one interpolation call: the active key chain and a memo."""

    def __init__(self, mapping: Mapping[str, str], open_token: str, close_token: str) -> None:
        self.mapping = mapping
        self.open_token = open_token
        self.close_token = close_token
        self.chain: List[str] = []
        self.resolved: Dict[str, str] = {}


class StringInterpolator:
    """Resolves placeholders against a key/value mapping.

    Values may reference other keys; they are resolved depth-first before
    being substituted. Each call is independent, the instance only holds a
    logger.
    """

    def __init__(self, *, logger: Optional[logging.Logger] = None) -> None:
        self._log = logger or get_logger('interpolator')

    @staticmethod
    def _check_tokens(open_token: str, close_token: str) -> None:
        if not open_token or not close_token:
            raise ValueError('open_token and close_token must be non-empty strings')

    def interpolate(
        self,
        text: str,
        mapping: Mapping[str, str],
        open_token: str = DEFAULT_OPEN_TOKEN,
        close_token: str = DEFAULT_CLOSE_TOKEN,
    ) -> str:
        """Return *text* with every placeholder replaced by its resolved value.

        Parameters
        ----------
        text:
            Template potentially containing ``<open>key<close>`` placeholders.
        mapping:
            Values to inject. Read only; values may contain placeholders.
        open_token, close_token:
            Placeholder delimiters.

        Raises
        ------
        UnresolvedKeyError
            A placeholder names a key missing from *mapping*.
        CycleDetectedError
            A value references itself, directly or transitively.
        """
        if text is None:
            raise ValueError('text is None')
        self._check_tokens(open_token, close_token)
        return self._resolve_text(text, _Resolution(mapping, open_token, close_token))

    def interpolate_all(
        self,
        mapping: MutableMapping[str, str],
        open_token: str = DEFAULT_OPEN_TOKEN,
        close_token: str = DEFAULT_CLOSE_TOKEN,
    ) -> MutableMapping[str, str]:
        """Resolve every value of *mapping* against *mapping* itself.

        Resolution runs on a private snapshot; *mapping* is updated only after
        every key resolved, so on error it is left exactly as it was.

        Returns:
            The same *mapping*, fully resolved.
        """
        self._check_tokens(open_token, close_token)
        state = _Resolution(dict(mapping), open_token, close_token)
        for key in state.mapping:
            self._resolve_key(key, state)

        mapping.update(state.resolved)
        self._log.debug('interpolated %d keys', len(state.resolved))
        return mapping

    def _resolve_text(self, text: str, state: _Resolution) -> str:
        open_len = len(state.open_token)
        close_len = len(state.close_token)
        out: List[str] = []
        i = 0
        while True:
            start = text.find(state.open_token, i)
            if start == -1:
                break
            end = text.find(state.close_token, start + open_len)
            if end == -1:
                break
            out.append(text[i:start])
            out.append(self._resolve_key(text[start + open_len:end], state))
            i = end + close_len
        out.append(text[i:])
        return ''.join(out)

    def _resolve_key(self, key: str, state: _Resolution) -> str:
        cached = state.resolved.get(key)
        if cached is not None:
            return cached
        if key in state.chain:
            self._log.debug('loop detected resolving %r via %s', key, ' -> '.join(state.chain))
            raise CycleDetectedError(key, [*state.chain, key])

        value = state.mapping.get(key)
        if value is None:
            self._log.debug('no value for placeholder key %r', key)
            raise UnresolvedKeyError(key)

        trace(self._log, 'resolving placeholder', key=key, depth=len(state.chain))
        state.chain.append(key)
        try:
            if state.open_token in value:
                value = self._resolve_text(value, state)
        finally:
            state.chain.pop()

        state.resolved[key] = value
        return value


_DEFAULT = StringInterpolator()

interpolate = _DEFAULT.interpolate
interpolate_all = _DEFAULT.interpolate_all
