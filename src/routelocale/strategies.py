"""URL strategies and their per-locale policies.

A strategy decides whether a locale code is embedded as a path prefix and
which extra routes the default locale gets.  Each mode is a small policy
object so the rules stay independently testable::

    policy = policy_for(Strategy.PREFIX_EXCEPT_DEFAULT)
    policy.prefixes("fr", "en")  # True
    policy.prefixes("en", "en")  # False
"""

from enum import Enum
from typing import ClassVar

from routelocale.errors import ConfigurationError


class Strategy(Enum):
    """Policy governing whether and when a locale code prefixes a URL path."""

    NO_PREFIX = "no_prefix"
    PREFIX = "prefix"
    PREFIX_EXCEPT_DEFAULT = "prefix_except_default"
    PREFIX_AND_DEFAULT = "prefix_and_default"

    @classmethod
    def coerce(cls, value: "Strategy | str") -> "Strategy":
        """Return the member for *value*, accepting members or their string values.

        String values are matched case-insensitively, so ``"PREFIX"`` and
        ``"prefix"`` both resolve to ``Strategy.PREFIX``.

        Raises:
            ConfigurationError: If *value* names no strategy.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.lower())
            except ValueError:
                pass
        valid = ", ".join(repr(member.value) for member in cls)
        msg = f"Unknown strategy {value!r}. Expected one of: {valid}"
        raise ConfigurationError(msg)


class StrategyPolicy:
    """Base policy: prefix every locale, no extra routes."""

    __slots__ = ()

    strategy: ClassVar[Strategy]

    def prefixes(self, locale: str, default_locale: str | None) -> bool:
        """Whether *locale* gets a ``/{locale}`` path prefix under this strategy."""
        return True

    def adds_default_route(self, locale: str, default_locale: str | None) -> bool:
        """Whether *locale* gets an extra unprefixed copy of each root route."""
        return False

    def adds_unprefixed_fallback(self, locale: str, default_locale: str | None) -> bool:
        """Whether *locale* gets an unprefixed redirect to its prefixed path."""
        return False


class NoPrefixPolicy(StrategyPolicy):
    __slots__ = ()

    strategy = Strategy.NO_PREFIX

    def prefixes(self, locale: str, default_locale: str | None) -> bool:
        return False


class PrefixPolicy(StrategyPolicy):
    __slots__ = ()

    strategy = Strategy.PREFIX

    def adds_unprefixed_fallback(self, locale: str, default_locale: str | None) -> bool:
        return locale == default_locale


class PrefixExceptDefaultPolicy(StrategyPolicy):
    __slots__ = ()

    strategy = Strategy.PREFIX_EXCEPT_DEFAULT

    def prefixes(self, locale: str, default_locale: str | None) -> bool:
        return locale != default_locale


class PrefixAndDefaultPolicy(StrategyPolicy):
    __slots__ = ()

    strategy = Strategy.PREFIX_AND_DEFAULT

    def adds_default_route(self, locale: str, default_locale: str | None) -> bool:
        return locale == default_locale


_POLICIES: dict[Strategy, StrategyPolicy] = {
    policy.strategy: policy
    for policy in (
        NoPrefixPolicy(),
        PrefixPolicy(),
        PrefixExceptDefaultPolicy(),
        PrefixAndDefaultPolicy(),
    )
}


def policy_for(strategy: Strategy | str) -> StrategyPolicy:
    """Return the policy object for *strategy*."""
    return _POLICIES[Strategy.coerce(strategy)]
