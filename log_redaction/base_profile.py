"""
Base Compliance Profile - Pattern rules and named groups of them.

A PatternRule is one named, compiled matcher with an enabled flag. A
ComplianceProfile groups rules under a name so they can be seeded into a
policy builder in one call. For example:
    - DefaultProfile (credit cards, SSN, passwords, API keys, secrets)
    - a PCI-only profile that keeps just the card rule
    - an internal profile for your own connection strings and tokens

Each profile defines:
    - name: Unique identifier for the profile
    - description: Human-readable description
    - get_rules(): Returns the rules in evaluation order
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Pattern, Union

from .errors import InvalidPatternError


@dataclass(frozen=True)
class PatternRule:
    """A single redaction rule. Immutable once compiled."""
    name: str  # e.g., "CreditCard", "Ssn"
    pattern: Pattern[str]  # Compiled regex pattern
    enabled: bool = True
    description: str = ""  # Human-readable description

    def with_enabled(self, enabled: bool) -> "PatternRule":
        """Return a copy of this rule with the enabled flag set."""
        if enabled == self.enabled:
            return self
        return replace(self, enabled=enabled)


def compile_pattern(pattern: Union[str, Pattern[str]], flags: int = 0) -> Pattern[str]:
    """
    Compile a caller-supplied pattern.

    Args:
        pattern: Regex source text or an already compiled pattern.
        flags: Extra ``re`` flags to compile with.

    Returns:
        The compiled pattern.

    Raises:
        InvalidPatternError: If the expression cannot be compiled.
    """
    if isinstance(pattern, re.Pattern):
        if not flags:
            return pattern
        source, flags = pattern.pattern, pattern.flags | flags
    else:
        source = pattern

    if not isinstance(source, str):
        raise InvalidPatternError(repr(source), "pattern must be a string")

    try:
        return re.compile(source, flags)
    except re.error as e:
        raise InvalidPatternError(source, str(e)) from e
    except ValueError as e:
        # e.g. incompatible flag combinations such as re.ASCII | re.UNICODE
        raise InvalidPatternError(source, str(e)) from e


class ComplianceProfile(ABC):
    """
    Abstract base class for groups of redaction rules.

    Example:
        class InternalProfile(ComplianceProfile):
            @property
            def name(self) -> str:
                return "internal"

            @property
            def description(self) -> str:
                return "Connection strings and service tokens"

            def get_rules(self) -> list[PatternRule]:
                return [
                    PatternRule(
                        name="DatabaseUrl",
                        pattern=re.compile(r'postgres://\\S+'),
                        description="Postgres connection string",
                    ),
                ]
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique identifier for this profile (e.g., 'default', 'pci')."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of what this profile covers."""
        pass

    @abstractmethod
    def get_rules(self) -> list[PatternRule]:
        """Return the rules of this profile in evaluation order."""
        pass

    def __repr__(self) -> str:
        return f"<ComplianceProfile: {self.name}>"
