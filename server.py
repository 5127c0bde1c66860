"""
Log Redaction - MCP Server for sanitizing log text

A local MCP (Model Context Protocol) server that lets AI agents and other
tools run log text through the same redaction policy the logging pipeline
uses, before the text is stored or shared.

Tools:
    - redact_text: Redact a piece of text, optionally with a custom policy
    - list_redaction_rules: Describe the rules of the configured policy

Configuration:
    The server policy is read from the environment (and a .env file), see
    log_redaction.settings for the recognised variables.
"""

import logging
import threading
from typing import Any, Optional

from dotenv import load_dotenv
from mcp.server.fastmcp import FastMCP

from log_redaction import InvalidPatternError, RedactionPolicyOptions
from log_redaction.policy import RedactionPolicy
from log_redaction.settings import policy_from_env

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)

# Initialize MCP server
mcp = FastMCP(
    "log-redaction",
    instructions="MCP Server for redacting credentials and personal data from log text"
)

_server_policy: Optional[RedactionPolicy] = None
_server_policy_lock = threading.Lock()


def get_server_policy() -> RedactionPolicy:
    """Return the policy configured from the environment, built once on first use."""
    global _server_policy
    if _server_policy is None:
        with _server_policy_lock:
            if _server_policy is None:
                _server_policy = policy_from_env()
    return _server_policy


def _build_policy(
    disabled_rules: Optional[list[str]],
    custom_patterns: Optional[list[str]],
) -> RedactionPolicy:
    options = RedactionPolicyOptions(get_server_policy().rules)
    for name in disabled_rules or []:
        options.disable(name)
    for pattern in custom_patterns or []:
        options.add_custom_pattern(pattern)
    return options.build()


@mcp.tool()
def redact_text(
    text: str,
    disabled_rules: Optional[list[str]] = None,
    custom_patterns: Optional[list[str]] = None,
) -> dict[str, Any]:
    """
    Redact sensitive data from a piece of log text.

    Args:
        text: The text to sanitize.
        disabled_rules: Optional rule names to switch off for this call.
                        Example: ["CreditCard", "Ssn"]
        custom_patterns: Optional extra regular expressions, evaluated after
                         the configured rules.

    Returns:
        A dictionary containing:
        - status: "success" or "error"
        - text: The redacted text
        - was_redacted: True if anything was replaced
        - message: Error description (only when status is "error")

    Example usage:
        redact_text("password: hunter2")
        redact_text("order 4532-1234-5678-9010", disabled_rules=["CreditCard"])
    """
    try:
        if disabled_rules or custom_patterns:
            policy = _build_policy(disabled_rules, custom_patterns)
        else:
            policy = get_server_policy()

        redacted = policy.redact(text)
        return {
            "status": "success",
            "text": redacted,
            "was_redacted": redacted != text,
        }

    except InvalidPatternError as e:
        return {
            "status": "error",
            "message": str(e),
            "pattern": e.pattern,
        }


@mcp.tool()
def list_redaction_rules() -> dict[str, Any]:
    """
    List the redaction rules of the server policy, in evaluation order.

    Returns:
        A dictionary containing:
        - status: "success"
        - rules: List of {name, enabled, description, pattern}
        - count: Number of rules
    """
    policy = get_server_policy()
    rules = [
        {
            "name": rule.name,
            "enabled": rule.enabled,
            "description": rule.description,
            "pattern": rule.pattern.pattern,
        }
        for rule in policy.rules
    ]
    return {
        "status": "success",
        "rules": rules,
        "count": len(rules),
        "marker": policy.marker,
    }


if __name__ == "__main__":
    logger.info("Starting log-redaction MCP server (stdio)")
    # Run the MCP server using stdio transport
    mcp.run()
