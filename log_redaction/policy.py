"""
RedactionPolicy - Immutable rule set plus the text-rewriting executor.

A policy is produced once (usually by RedactionPolicyOptions.build()) and then
called for every log event. It owns no mutable state, so one instance can be
shared freely between threads.

Every enabled rule is applied in registration order, each one a global
substitution over the output of the previous rule. A later rule can therefore
match text inside an earlier rule's marker; that order sensitivity is accepted.
"""

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Optional, Pattern

from .base_profile import PatternRule
from .errors import NullInputError
from .profiles import DEFAULT_PROFILE

REDACTION_MARKER = "***REDACTED***"


@dataclass(frozen=True)
class RedactionPolicy:
    """
    Ordered, frozen set of pattern rules and the marker that replaces matches.

    Example:
        policy = RedactionPolicy(DEFAULT_PROFILE.get_rules())
        policy.redact("My SSN is 123-45-6789")
        # "My SSN is ***REDACTED***"
    """
    rules: tuple[PatternRule, ...] = ()
    marker: str = REDACTION_MARKER
    _active: tuple[Pattern[str], ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        rules = tuple(self.rules)
        object.__setattr__(self, "rules", rules)
        # Disabled rules never reach the hot path.
        object.__setattr__(
            self, "_active", tuple(rule.pattern for rule in rules if rule.enabled)
        )

    @property
    def enabled_rule_names(self) -> list[str]:
        """Names of the rules that redact() will apply, in order."""
        return [rule.name for rule in self.rules if rule.enabled]

    def redact(self, text: str) -> str:
        """
        Replace every match of every enabled rule with the marker.

        Args:
            text: The formatted log text to sanitize.

        Returns:
            The redacted text. When nothing matched (including empty or
            whitespace-only input) the same object that was passed in.

        Raises:
            NullInputError: If text is None.
        """
        if text is None:
            raise NullInputError()

        if not text or text.isspace():
            return text

        result = text
        for pattern in self._active:
            replaced, count = pattern.subn(self.marker, result)
            if count:
                result = replaced

        return result

    def try_destructure(
        self,
        value: Any,
        property_value_factory: Optional[Callable[[str], Any]] = None,
    ) -> tuple[bool, Any]:
        """
        Structured-property hook for the logging pipeline.

        Args:
            value: Any captured property value.
            property_value_factory: Wraps the redacted string into the
                pipeline's property representation. Defaults to identity.

        Returns:
            A tuple of (handled, property_value):
            - (False, None) for non-strings and strings with nothing to hide
            - (True, factory(redacted)) when something was masked
        """
        if not isinstance(value, str):
            return False, None

        redacted = self.redact(value)
        if redacted == value:
            return False, None

        if property_value_factory is None:
            return True, redacted
        return True, property_value_factory(redacted)

    @classmethod
    def from_rules(cls, rules: Iterable[PatternRule]) -> "RedactionPolicy":
        return cls(tuple(rules))


# Process-wide default, built on first use
_default_policy: Optional[RedactionPolicy] = None
_default_policy_lock = threading.Lock()


def get_default_policy() -> RedactionPolicy:
    """
    Get the default RedactionPolicy instance.

    All default rules enabled, no custom patterns. Built exactly once even
    when first requested from several threads at the same time.
    """
    global _default_policy
    if _default_policy is None:
        with _default_policy_lock:
            if _default_policy is None:
                _default_policy = RedactionPolicy.from_rules(DEFAULT_PROFILE.get_rules())
    return _default_policy


def redact_sensitive_data(text: str) -> str:
    """Redact text with the default policy."""
    return get_default_policy().redact(text)
