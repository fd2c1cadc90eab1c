# Pluralization of model names for collection paths and JSON:API types
# The client accepts any object implementing plural() and singular()
import inflect
from functools import lru_cache


class Pluralizer:
    """
    English pluralization using inflect
    """

    def __init__(self) -> None:
        self._engine = inflect.engine()
        # caches are per instance
        self.plural = lru_cache(maxsize=256)(self._plural)
        self.singular = lru_cache(maxsize=256)(self._singular)

    def _plural(self, word: str) -> str:
        if not word:
            return word
        return self._engine.plural_noun(word)

    def _singular(self, word: str) -> str:
        if not word:
            return word
        # singular_noun returns False when the word is not a plural
        result = self._engine.singular_noun(word)
        return result if result else word

    def __call__(self, word: str) -> str:
        return self.plural(word)


class NoPluralizer:
    """
    Leaves model names untouched, used with `pluralize=False`
    """

    def plural(self, word: str) -> str:
        return word

    def singular(self, word: str) -> str:
        return word

    def __call__(self, word: str) -> str:
        return word


def get_pluralizer(pluralize=None):
    """
    :param pluralize: None for the default Pluralizer, False to disable pluralization,
                      or an object implementing plural() and singular()
    """
    if pluralize is None or pluralize is True:
        return Pluralizer()
    if pluralize is False:
        return NoPluralizer()
    if not (hasattr(pluralize, "plural") and hasattr(pluralize, "singular")):
        raise TypeError(f"pluralize should implement plural() and singular(), got {pluralize!r}")
    return pluralize
