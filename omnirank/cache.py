import re

from .utils import escape_pattern, has_uppercase


class PatternCache:
    """
    Memoizes compiled patterns for query terms.

    - The term is escaped, so any user input is matched literally.
    - `prefix`/`suffix` are raw pattern fragments (e.g. word boundaries) wrapped
      around the escaped term; they are not escaped.
    - Smartcase: the pattern ignores case unless the raw term has an uppercase
      letter.

    The same (term, prefix, suffix) always returns the same pattern object.
    Entries are never evicted; call `clear()` between independent sessions.
    """

    def __init__(self):
        self._entries: dict[str, re.Pattern] | None = None
        self.hits = 0
        self.misses = 0

    @property
    def initialized(self) -> bool:
        return self._entries is not None

    def init(self):
        if self._entries is None:
            self._entries = {}

    def clear(self):
        self._entries = {}
        self.hits = 0
        self.misses = 0

    def get(self, term: str, prefix: str = "", suffix: str = "") -> re.Pattern:
        self.init()
        key = escape_pattern(term)
        # Skip building new strings for the common empty prefix/suffix case.
        if prefix:
            key = prefix + key
        if suffix:
            key = key + suffix

        pattern = self._entries.get(key)
        if pattern is not None:
            self.hits += 1
            return pattern

        self.misses += 1
        flags = 0 if has_uppercase(term) else re.IGNORECASE
        # setdefault keeps the first insert if another thread raced us here.
        return self._entries.setdefault(key, re.compile(key, flags))

    def __len__(self) -> int:
        return len(self._entries or {})

    def __contains__(self, key: str) -> bool:
        return key in (self._entries or {})
