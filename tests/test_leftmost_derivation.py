import io
import random
import unittest

from grammar.errors import InvalidRuleError, NoNonTerminalError
from grammar.leftmost_derivation import DerivationStep, LeftmostDerivation, derive_random
from grammar.rewriting import Grammar, NonTerminal, Rule
from grammar.sentential import SententialForm
from tests.test_rewriting import expression_grammar, sample_grammar


class FirstChoice(object):
    """
    Stub random source: always picks the first candidate and records every call.
    """
    def __init__(self):
        self.calls = []

    def choice(self, seq):
        self.calls.append(list(seq))
        return seq[0]


class LastChoice(FirstChoice):
    def choice(self, seq):
        self.calls.append(list(seq))
        return seq[-1]


class LeftmostDerivationTest(unittest.TestCase):
    def test_seeded_with_start(self):
        derivation = LeftmostDerivation(expression_grammar())
        self.assertEqual(derivation.steps, [DerivationStep(None, SententialForm('E'))])
        self.assertEqual(derivation.leftmost_nonterminal(), NonTerminal('E'))
        self.assertFalse(derivation.is_complete())
        self.assertEqual(derivation.rule_indices(), [])

    def test_derive_leftmost(self):
        derivation = LeftmostDerivation(expression_grammar())
        derivation.derive_leftmost(0)
        derivation.derive_leftmost(0)
        derivation.derive_leftmost(1)
        self.assertTrue(derivation.is_complete())
        self.assertEqual(derivation.word(), 'x+e+e')
        self.assertEqual(derivation.rule_indices(), [0, 0, 1])
        self.assertEqual(derivation.length(), 3)
        self.assertEqual(derivation.getRule(1), Rule('E', 'E+e'))
        self.assertEqual(derivation.getRule(3), Rule('E', 'x'))
        self.assertIsNone(derivation.leftmost_nonterminal())

    def test_invalid_rule_leaves_steps(self):
        derivation = LeftmostDerivation(sample_grammar())
        self.assertRaises(InvalidRuleError, derivation.derive_leftmost, 1)
        self.assertEqual(len(derivation.steps), 1)
        derivation.derive_leftmost(0)
        self.assertRaises(InvalidRuleError, derivation.derive_leftmost, 0)
        self.assertRaises(InvalidRuleError, derivation.derive_leftmost, 5)
        self.assertEqual(len(derivation.steps), 2)
        self.assertEqual(derivation.word(), 'aA')

    def test_complete_derivation(self):
        derivation = LeftmostDerivation(expression_grammar())
        derivation.derive_leftmost(1)
        self.assertRaises(NoNonTerminalError, derivation.derive_leftmost, 0)
        self.assertEqual(len(derivation.steps), 2)

    def test_steps_are_a_copy(self):
        derivation = LeftmostDerivation(expression_grammar())
        derivation.steps.append(DerivationStep(1, SententialForm('x')))
        self.assertEqual(len(derivation.steps), 1)

    def test_history(self):
        derivation = LeftmostDerivation(sample_grammar())
        for rule_index in [0, 1, 2, 2]:
            derivation.derive_leftmost(rule_index)
        history = derivation.get_history()
        self.assertEqual(history, '\n'.join(['Start: S',
                                             'Step 1: Apply Rule 0: aA',
                                             'Step 2: Apply Rule 1: aAAa',
                                             'Step 3: Apply Rule 2: abAa',
                                             'Step 4: Apply Rule 2: abba']))
        self.assertEqual(len(history.split('\n')), len(derivation.steps))
        self.assertEqual(str(derivation), history)

    def test_history_of_fresh_derivation(self):
        self.assertEqual(LeftmostDerivation(sample_grammar()).get_history(), 'Start: S')

    def test_equality(self):
        derivation_1 = LeftmostDerivation(sample_grammar())
        derivation_2 = LeftmostDerivation(sample_grammar())
        self.assertEqual(derivation_1, derivation_2)
        derivation_1.derive_leftmost(0)
        self.assertNotEqual(derivation_1, derivation_2)
        derivation_2.derive_leftmost(0)
        self.assertEqual(derivation_1, derivation_2)
        self.assertNotEqual(derivation_1, LeftmostDerivation(expression_grammar()))


class RandomDerivationTest(unittest.TestCase):
    def test_zero_steps(self):
        derivation = LeftmostDerivation(expression_grammar())
        self.assertIsNone(derivation.derive_random(max_steps=0, rng=FirstChoice()))
        self.assertEqual(len(derivation.steps), 1)

    def test_zero_steps_terminal_production(self):
        grammar = Grammar([Rule('S', 'a'), Rule('S', 'aS')])
        self.assertIsNone(derive_random(grammar, max_steps=0, rng=FirstChoice()))
        self.assertEqual(derive_random(grammar, max_steps=1, rng=FirstChoice()), 'a')

    def test_budget_respected(self):
        rng = FirstChoice()
        derivation = LeftmostDerivation(expression_grammar())
        self.assertIsNone(derivation.derive_random(max_steps=5, rng=rng))
        self.assertEqual(derivation.length(), 5)
        self.assertEqual(len(rng.calls), 5)
        self.assertEqual(derivation.word(), 'E' + '+e' * 5)

    def test_budget_respected_seeded(self):
        for seed in range(20):
            derivation = LeftmostDerivation(sample_grammar())
            word = derivation.derive_random(max_steps=7, rng=random.Random(seed))
            self.assertLessEqual(derivation.length(), 7)
            if word is None:
                self.assertFalse(derivation.is_complete())
                self.assertEqual(derivation.length(), 7)
            else:
                self.assertTrue(derivation.is_complete())
                self.assertTrue(set(word) <= {'a', 'b'})

    def test_candidates_match_leftmost_nonterminal(self):
        rng = LastChoice()
        word = derive_random(sample_grammar(), max_steps=None, rng=rng)
        self.assertEqual(word, 'ab')
        self.assertEqual(rng.calls, [[0], [1, 2]])

    def test_stuck(self):
        grammar = Grammar([Rule('S', 'aB'), Rule('S', 'b')])
        derivation = LeftmostDerivation(grammar)
        self.assertIsNone(derivation.derive_random(max_steps=10, rng=FirstChoice()))
        self.assertEqual(derivation.word(), 'aB')
        self.assertEqual(derivation.length(), 1)

    def test_complete_returns_word(self):
        derivation = LeftmostDerivation(expression_grammar())
        derivation.derive_leftmost(1)
        self.assertEqual(derivation.derive_random(max_steps=0), 'x')

    def test_continues_derivation(self):
        derivation = LeftmostDerivation(expression_grammar())
        derivation.derive_leftmost(0)
        self.assertEqual(derivation.derive_random(rng=LastChoice()), 'x+e')
        self.assertEqual(derivation.rule_indices(), [0, 1])

    def test_seed_is_reproducible(self):
        results = [derive_random(sample_grammar(), max_steps=30, rng=random.Random(42)) for _ in range(2)]
        self.assertEqual(results[0], results[1])

    def test_default_random_source(self):
        word = derive_random(Grammar([Rule('S', 'aA'), Rule('A', 'b'), Rule('A', 'c')]))
        self.assertIn(word, ['ab', 'ac'])

    def test_logger(self):
        log = io.StringIO()
        word = derive_random(sample_grammar(), rng=LastChoice(), logger=log)
        self.assertEqual(word, 'ab')
        lines = log.getvalue().splitlines()
        self.assertEqual(lines, ['Apply rule 0 (S -> aA): aA',
                                 'Apply rule 2 (A -> b): ab',
                                 "Derived 'ab' in 2 steps"])

    def test_logger_on_failure(self):
        log = io.StringIO()
        derive_random(expression_grammar(), max_steps=1, rng=FirstChoice(), logger=log)
        self.assertIn("Step limit 1 reached at 'E+e'", log.getvalue())
        log = io.StringIO()
        derive_random(Grammar([Rule('S', 'aB')]), rng=FirstChoice(), logger=log)
        self.assertIn("No rule for B in 'aB'", log.getvalue())


if __name__ == '__main__':
    unittest.main()
