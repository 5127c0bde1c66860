"""
Compliance Profiles Package

Available profiles:
    - defaults: The built-in rule set every policy builder starts from

To add your own rules as a group:
    1. Subclass ComplianceProfile
    2. Implement get_rules() with your PatternRules
    3. Append it with RedactionPolicyOptions.create().add_profile(MyProfile())
"""

from .defaults import (
    API_KEY,
    CREDIT_CARD,
    DEFAULT_PROFILE,
    PASSWORD,
    SECRET,
    SSN,
    DefaultProfile,
)

__all__ = [
    "DefaultProfile",
    "DEFAULT_PROFILE",
    "CREDIT_CARD",
    "SSN",
    "PASSWORD",
    "API_KEY",
    "SECRET",
]
