"""
Message templates. ":name" placeholders are filled from a rule's configuration
once, when the rule is built.
"""
import re
from typing import Any, Mapping, Optional

_TOKEN_RE = re.compile(r":([A-Za-z_][A-Za-z0-9_]*)")


def stringify(value: Any) -> str:
    # 10.0 -> "10" so numeric limits read naturally
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def render_message(template: Optional[str], tokens: Mapping[str, Any]) -> str:
    """
    Single-pass substitution: each placeholder is replaced at most once and
    substituted text is never re-scanned. Unknown placeholders are left as-is.
    """
    if not template:
        return ""

    def _sub(match: re.Match) -> str:
        key = match.group(1)
        if key in tokens:
            return stringify(tokens[key])
        return match.group(0)

    return _TOKEN_RE.sub(_sub, template)
