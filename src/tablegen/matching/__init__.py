from .StringMatchRule import (
    EqualsMatchRule, InfixMatchRule, PostfixMatchRule, PrefixMatchRule,
    StringMatchRule, match_rule,
)
