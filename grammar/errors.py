class GrammarError(Exception):
    pass


class EmptyGrammarError(GrammarError):
    def __init__(self, message='a grammar needs at least one rule to determine its start symbol'):
        super(EmptyGrammarError, self).__init__(message)


class DerivationError(GrammarError):
    pass


# Raised when a rule is applied to a sentential form without nonterminals.
class NoNonTerminalError(DerivationError):
    def __init__(self, form):
        super(NoNonTerminalError, self).__init__('no nonterminal left in ' + repr(str(form)))
        self.form = form


# Raised when the selected rule does not rewrite the leftmost nonterminal
# or when the rule index does not name a rule of the grammar.
class InvalidRuleError(DerivationError):
    def __init__(self, rule_index, message):
        super(InvalidRuleError, self).__init__('rule ' + str(rule_index) + ': ' + message)
        self.rule_index = rule_index


__all__ = ["GrammarError", "EmptyGrammarError", "DerivationError", "NoNonTerminalError", "InvalidRuleError"]
