from abc import ABCMeta, abstractmethod


class AbstractDerivation(metaclass=ABCMeta):
    """
    A derivation as a sequence of rule applications starting from the start
    symbol of a grammar. Implementations decide which nonterminal is rewritten.
    """

    @abstractmethod
    def grammar(self):
        """
        :rtype: grammar.rewriting.Grammar
        """
        pass

    @abstractmethod
    def rule_indices(self):
        """
        :return: indices of the applied rules, in order of application
        :rtype: list[int]
        """
        pass

    @abstractmethod
    def current_form(self):
        """
        :rtype: grammar.sentential.SententialForm
        """
        pass

    def getRule(self, i):
        """
        :param i: number of the step (starting at 1)
        :rtype: grammar.rewriting.Rule
        """
        return self.grammar().rule(self.rule_indices()[i - 1])

    def length(self):
        return len(self.rule_indices())

    def is_complete(self):
        return self.current_form().is_complete()

    def word(self):
        return self.current_form().word()

    def __eq__(self, other):
        if not isinstance(other, AbstractDerivation):
            return False
        return self.grammar() == other.grammar() and self.rule_indices() == other.rule_indices()

    def __ne__(self, other):
        return not self == other
