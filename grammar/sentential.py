from grammar.errors import NoNonTerminalError, InvalidRuleError
from grammar.rewriting import symbols, symbols_to_str


# Index of the leftmost nonterminal in form, None if there is none.
def leftmost_nonterminal_index(form):
    for i, sym in enumerate(form):
        if sym.is_nonterminal():
            return i
    return None


class SententialForm:
    """
    A string of symbols reachable from the start symbol, together with the
    position of its leftmost nonterminal. Values are never modified: every
    rewrite yields a new SententialForm.
    """
    def __init__(self, form):
        self.__form = symbols(form)
        self.__first_nt_index = leftmost_nonterminal_index(self.__form)

    @classmethod
    def initial(cls, grammar):
        """
        :type grammar: grammar.rewriting.Grammar
        :rtype: SententialForm
        """
        return cls((grammar.start,))

    @property
    def form(self):
        return self.__form

    @property
    def first_nt_index(self):
        """
        :rtype: int | None
        """
        return self.__first_nt_index

    def next(self, grammar, rule_index):
        """
        :param grammar: grammar that contains the rule
        :type grammar: grammar.rewriting.Grammar
        :param rule_index: index of the rule that rewrites the leftmost nonterminal
        :type rule_index: int
        :rtype: SententialForm
        :raises NoNonTerminalError: if the form consists of terminals only
        :raises InvalidRuleError: if the rule does not rewrite the leftmost nonterminal
        """
        if self.__first_nt_index is None:
            raise NoNonTerminalError(self)
        rule = grammar.rule(rule_index)
        pos = self.__first_nt_index
        if rule.lhs != self.__form[pos]:
            raise InvalidRuleError(rule_index, 'LHS ' + str(rule.lhs) + ' does not match leftmost nonterminal '
                                   + str(self.__form[pos]) + ' at position ' + str(pos))
        return SententialForm(self.__form[:pos] + rule.rhs + self.__form[pos + 1:])

    def is_complete(self):
        return self.__first_nt_index is None

    def leftmost_nonterminal(self):
        if self.__first_nt_index is None:
            return None
        return self.__form[self.__first_nt_index]

    def word(self):
        return symbols_to_str(self.__form)

    def __len__(self):
        return len(self.__form)

    def __eq__(self, other):
        return isinstance(other, SententialForm) and self.form == other.form

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash(self.__form)

    def __str__(self):
        return self.word()

    def __repr__(self):
        return 'SententialForm(' + repr(self.word()) + ')'


__all__ = ["SententialForm", "leftmost_nonterminal_index"]
