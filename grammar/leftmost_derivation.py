from collections import namedtuple
import random

from grammar.derivation_interface import AbstractDerivation
from grammar.sentential import SententialForm

# One entry of the derivation history.
# rule_index is None for the initial sentential form.
DerivationStep = namedtuple('DerivationStep', ['rule_index', 'form'])


class LeftmostDerivation(AbstractDerivation):
    """
    Derivation that always rewrites the leftmost nonterminal. The history of
    all sentential forms is kept; steps are only ever appended.
    """
    def __init__(self, grammar):
        """
        :type grammar: grammar.rewriting.Grammar
        """
        self.__grammar = grammar
        self.__steps = [DerivationStep(None, SententialForm.initial(grammar))]

    def grammar(self):
        return self.__grammar

    @property
    def steps(self):
        """
        :rtype: list[DerivationStep]
        """
        return list(self.__steps)

    def rule_indices(self):
        return [step.rule_index for step in self.__steps[1:]]

    def current_form(self):
        return self.__steps[-1].form

    # Rewrite the leftmost nonterminal with the rule at rule_index.
    # Errors of SententialForm.next are passed on and leave the history untouched.
    # rule_index: int
    def derive_leftmost(self, rule_index):
        form = self.current_form().next(self.__grammar, rule_index)
        self.__steps.append(DerivationStep(rule_index, form))

    def leftmost_nonterminal(self):
        """
        :rtype: grammar.rewriting.NonTerminal | None
        """
        return self.current_form().leftmost_nonterminal()

    def get_history(self):
        lines = []
        for i, step in enumerate(self.__steps):
            if i == 0:
                lines.append('Start: ' + str(step.form))
            else:
                lines.append('Step ' + str(i) + ': Apply Rule ' + str(step.rule_index) + ': ' + str(step.form))
        return '\n'.join(lines)

    def derive_random(self, max_steps=None, rng=None, logger=None):
        """
        Continue the derivation with randomly chosen applicable rules.

        :param max_steps: maximal number of rule applications, None for no limit
        :type max_steps: int | None
        :param rng: source of randomness providing choice(seq)
        :param logger: text stream receiving a trace of the applied rules
        :return: the derived word, or None if the derivation got stuck or ran out of steps
        :rtype: str | None
        """
        if rng is None:
            rng = random.Random()
        applied = 0
        while True:
            if self.is_complete():
                if logger is not None:
                    print('Derived', repr(self.word()), 'in', applied, 'steps', file=logger)
                return self.word()
            if max_steps is not None and applied >= max_steps:
                if logger is not None:
                    print('Step limit', max_steps, 'reached at', repr(self.word()), file=logger)
                return None
            nont = self.leftmost_nonterminal()
            candidates = self.__grammar.rule_idxs_from_nt(nont)
            if not candidates:
                if logger is not None:
                    print('No rule for', nont, 'in', repr(self.word()), file=logger)
                return None
            rule_index = rng.choice(candidates)
            self.derive_leftmost(rule_index)
            applied += 1
            if logger is not None:
                print('Apply rule', rule_index, '(' + self.__grammar.rule(rule_index).display() + '):',
                      self.word(), file=logger)

    def __str__(self):
        return self.get_history()


def derive_random(grammar, max_steps=None, rng=None, logger=None):
    """
    Randomly derive a word from the start symbol of grammar.

    :type grammar: grammar.rewriting.Grammar
    :rtype: str | None
    """
    return LeftmostDerivation(grammar).derive_random(max_steps=max_steps, rng=rng, logger=logger)


__all__ = ["DerivationStep", "LeftmostDerivation", "derive_random"]
