"""
Default Profile - Built-in sensitive-data shapes.

These rules are seeded into every policy builder, in this order, and stay
enabled unless explicitly disabled:
    - CreditCard: 13-19 digits, grouped in blocks of 4 or as one run
    - Ssn: North-American 3-2-4 digit grouping
    - Password: password/passwd/pwd followed by a value
    - ApiKey: api_key/apikey/access_token/bearer followed by a value
    - Secret: secret/client_secret/secret_key/private_key = value
"""

import re

from ..base_profile import ComplianceProfile, PatternRule

CREDIT_CARD = "CreditCard"
SSN = "Ssn"
PASSWORD = "Password"
API_KEY = "ApiKey"
SECRET = "Secret"


class DefaultProfile(ComplianceProfile):
    """
    The canonical default rule set.

    Rule order matters: rules are evaluated one after another, each pass
    working on the output of the previous one.
    """

    @property
    def name(self) -> str:
        return "default"

    @property
    def description(self) -> str:
        return "Credit cards, SSNs, passwords, API keys and secret key=value pairs"

    def get_rules(self) -> list[PatternRule]:
        return [
            # Grouped as 4-4-4-x (x = 1-7 digits) or an ungrouped 13-19 digit run
            PatternRule(
                name=CREDIT_CARD,
                pattern=re.compile(
                    r'\b(?:\d{4}[ -]){3}\d{1,7}\b'
                    r'|\b\d{13,19}\b'
                ),
                description="Credit card number"
            ),

            PatternRule(
                name=SSN,
                pattern=re.compile(r'\b\d{3}-\d{2}-\d{4}\b'),
                description="US Social Security Number"
            ),

            # The separator may be ':', '=' or spaces/tabs, never a line break; a
            # closing quote on the key is tolerated so '"password": "x"' is caught.
            PatternRule(
                name=PASSWORD,
                pattern=re.compile(
                    r'\b(?:password|passwd|pwd)["\']?[ \t]*[:= \t][ \t]*\S+',
                    re.IGNORECASE
                ),
                description="Password in key/value form"
            ),

            PatternRule(
                name=API_KEY,
                pattern=re.compile(
                    r'\b(?:api[_-]?key|access[_-]?token|bearer)["\']?[ \t]*[:= \t][ \t]*\S+',
                    re.IGNORECASE
                ),
                description="API key, access token or bearer credential"
            ),

            # Requires an explicit ':' or '=' so prose like "keep it secret" passes
            PatternRule(
                name=SECRET,
                pattern=re.compile(
                    r'\b(?:client[_-]?secret|secret[_-]?key|private[_-]?key|secret)'
                    r'["\']?[ \t]*[:=][ \t]*\S+',
                    re.IGNORECASE
                ),
                description="Generic secret in key=value form"
            ),
        ]


# Export the default profile
DEFAULT_PROFILE = DefaultProfile()
