from .rules import RuleMatch, RULES, match_rule, is_expandable, apply_rule, fresh_constant
from .closure import find_contradiction, check_closure

__all__ = [
    "RuleMatch", "RULES", "match_rule", "is_expandable", "apply_rule", "fresh_constant",
    "find_contradiction", "check_closure",
]
