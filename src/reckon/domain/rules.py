"""Hand-authored `/pattern/flags` rules mapping descriptions to accounts."""

import re

from reckon.domain.entities import Rule
from reckon.domain.errors import ParseError, invalid_regex, invalid_rule

_RULE_RE = re.compile(r"^/(.*)/([ix]*)$", re.DOTALL)

_FLAG_BITS = {
    "i": re.IGNORECASE,
    "x": re.VERBOSE,
}


def parse_rule(account: str, rule_text: str) -> Rule:
    """Compile a rule string of the form /pattern/flags.

    Args:
        account: Account path the rule assigns
        rule_text: Rule such as "/^STARBUCKS/i"

    Returns:
        Compiled Rule

    Raises:
        ParseError: If rule_text is not /pattern/flags or does not compile
    """
    match = _RULE_RE.match(rule_text)
    if match is None:
        raise ParseError(invalid_rule(rule_text))

    flags = 0
    for option in match.group(2):
        flags |= _FLAG_BITS[option]

    try:
        pattern = re.compile(match.group(1), flags)
    except re.error as e:
        raise ParseError(invalid_regex(rule_text, e)) from e

    return Rule(pattern=pattern, account=account, source=rule_text)


class RuleMatcher:
    """Append-only collection of rules."""

    def __init__(self):
        self._rules: list[Rule] = []

    def add_rule(self, account: str, rule_text: str) -> Rule:
        """Parse rule_text and bind it to account.

        Raises:
            ParseError: If rule_text is not a valid /pattern/flags rule
        """
        rule = parse_rule(account, rule_text)
        self._rules.append(rule)
        return rule

    def match(self, description: str) -> list[str]:
        """Return accounts of all matching rules, shortest matched text first.

        Rules with equal match lengths keep the order they were added in.
        An account is repeated once per matching rule.
        """
        matches = []
        for rule in self._rules:
            found = rule.pattern.search(description)
            if found is not None:
                matches.append((rule.account, found.group(0)))

        matches.sort(key=lambda pair: len(pair[1]))
        return [account for account, _matched_text in matches]

    @property
    def rules(self) -> tuple[Rule, ...]:
        return tuple(self._rules)

    def __len__(self) -> int:
        return len(self._rules)
