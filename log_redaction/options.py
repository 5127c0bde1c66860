"""
RedactionPolicyOptions - Fluent builder for RedactionPolicy.

The builder starts from the default rules, accepts enable/disable/add calls in
any order, and freezes its current state into an immutable policy on build().

Example:
    policy = (
        RedactionPolicyOptions.create()
        .disable_credit_card_redaction()
        .add_custom_pattern(r"\\bDATABASE_URL\\b")
        .build()
    )
"""

from typing import Optional, Pattern, Union

from .base_profile import ComplianceProfile, PatternRule, compile_pattern
from .policy import RedactionPolicy
from .profiles import API_KEY, CREDIT_CARD, DEFAULT_PROFILE, PASSWORD, SECRET, SSN


class RedactionPolicyOptions:
    """
    Mutable, construction-time rule list.

    Defaults come first in their canonical order; custom patterns are always
    appended after everything already registered, so they are evaluated last.
    """

    def __init__(self, rules: Optional[list[PatternRule]] = None):
        self._rules: list[PatternRule] = list(rules or [])
        self._default_names = {rule.name for rule in self._rules}

    @classmethod
    def create(cls) -> "RedactionPolicyOptions":
        """Return a builder seeded with every default rule enabled."""
        return cls(DEFAULT_PROFILE.get_rules())

    @property
    def rules(self) -> list[PatternRule]:
        """Snapshot of the rules registered so far."""
        return list(self._rules)

    def _set_enabled(self, name: str, enabled: bool) -> "RedactionPolicyOptions":
        for index, rule in enumerate(self._rules):
            if rule.name == name:
                self._rules[index] = rule.with_enabled(enabled)
        return self

    def enable(self, name: str) -> "RedactionPolicyOptions":
        """Enable the rule called name. Unknown names are ignored."""
        return self._set_enabled(name, True)

    def disable(self, name: str) -> "RedactionPolicyOptions":
        """Disable the rule called name. Unknown names are ignored."""
        return self._set_enabled(name, False)

    def disable_credit_card_redaction(self) -> "RedactionPolicyOptions":
        return self.disable(CREDIT_CARD)

    def disable_ssn_redaction(self) -> "RedactionPolicyOptions":
        return self.disable(SSN)

    def disable_password_redaction(self) -> "RedactionPolicyOptions":
        return self.disable(PASSWORD)

    def disable_api_key_redaction(self) -> "RedactionPolicyOptions":
        return self.disable(API_KEY)

    def disable_secret_redaction(self) -> "RedactionPolicyOptions":
        return self.disable(SECRET)

    def disable_all_defaults(self) -> "RedactionPolicyOptions":
        """Disable every default rule. Rules added later are unaffected."""
        self._rules = [
            rule.with_enabled(False) if rule.name in self._default_names else rule
            for rule in self._rules
        ]
        return self

    def add_custom_pattern(
        self,
        pattern: Union[str, Pattern[str]],
        flags: int = 0,
        name: Optional[str] = None,
    ) -> "RedactionPolicyOptions":
        """
        Append an enabled custom rule.

        Args:
            pattern: Regex source text or a compiled pattern.
            flags: Extra ``re`` flags (e.g. re.IGNORECASE).
            name: Rule name. Defaults to the pattern source text, with the
                  flags appended when that source is already registered
                  under different flags.

        Raises:
            InvalidPatternError: If the pattern does not compile. The builder
                is left unchanged.

        Note:
            Adding a name that is already registered, or an unnamed pattern
            identical in source and flags to a registered one, only
            re-enables that rule; its expression and position are kept.
        """
        compiled = compile_pattern(pattern, flags)
        if name is None:
            for rule in self._rules:
                if rule.pattern == compiled:
                    return self.enable(rule.name)
            rule_name = compiled.pattern
            if any(rule.name == rule_name for rule in self._rules):
                rule_name = f"{compiled.pattern}/{compiled.flags}"
        else:
            rule_name = name

        if any(rule.name == rule_name for rule in self._rules):
            return self.enable(rule_name)

        self._rules.append(PatternRule(name=rule_name, pattern=compiled))
        return self

    def add_profile(self, profile: ComplianceProfile) -> "RedactionPolicyOptions":
        """Append every rule of profile, in profile order, as custom rules."""
        for rule in profile.get_rules():
            if any(existing.name == rule.name for existing in self._rules):
                self._set_enabled(rule.name, rule.enabled)
            else:
                self._rules.append(rule)
        return self

    def build(self) -> RedactionPolicy:
        """Freeze the current rules into a new RedactionPolicy."""
        return RedactionPolicy.from_rules(self._rules)

    def __repr__(self) -> str:
        enabled = [rule.name for rule in self._rules if rule.enabled]
        return f"<RedactionPolicyOptions enabled={enabled}>"
