# String rewriting grammars over single character symbols.
# Nonterminals are written as uppercase characters, every other character
# is a terminal. The case is read once, when a character becomes a symbol.

from collections import namedtuple, defaultdict

from grammar.errors import EmptyGrammarError, InvalidRuleError

###########################################################################
# Symbols.


class Terminal(namedtuple('Terminal', ['char'])):
    __slots__ = ()

    def is_nonterminal(self):
        return False

    def __eq__(self, other):
        return isinstance(other, Terminal) and self.char == other.char

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash(('T', self.char))

    def __str__(self):
        return self.char


class NonTerminal(namedtuple('NonTerminal', ['char'])):
    __slots__ = ()

    def is_nonterminal(self):
        return True

    def __eq__(self, other):
        return isinstance(other, NonTerminal) and self.char == other.char

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash(('N', self.char))

    def __str__(self):
        return self.char


# Turn a character into a symbol.
# char: string of length 1 (or a symbol, which is returned unchanged)
# return: Terminal or NonTerminal
def symbol(char):
    if isinstance(char, (Terminal, NonTerminal)):
        return char
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError('symbols are single characters, got ' + repr(char))
    if char.isupper():
        return NonTerminal(char)
    return Terminal(char)


# Turn a string (or an iterable of characters / symbols) into a tuple of symbols.
def symbols(chars):
    return tuple(symbol(c) for c in chars)


def symbols_to_str(syms):
    return ''.join(str(s) for s in syms)


###########################################################################
# Rules.

class Rule:
    # Constructor.
    # lhs: single character or symbol
    # rhs: string or iterable of symbols, may be empty
    def __init__(self, lhs, rhs=''):
        self.__lhs = symbol(lhs)
        self.__rhs = symbols(rhs)

    @property
    def lhs(self):
        """
        :rtype: Terminal | NonTerminal
        """
        return self.__lhs

    @property
    def rhs(self):
        """
        :rtype: tuple
        """
        return self.__rhs

    def display(self):
        return str(self.lhs) + ' -> ' + symbols_to_str(self.rhs)

    def is_valid(self):
        return self.lhs.is_nonterminal()

    # RHS is a single terminal or a nonterminal followed by a terminal.
    # return: bool
    def is_left_regular(self):
        if len(self.rhs) == 1:
            return not self.rhs[0].is_nonterminal()
        if len(self.rhs) == 2:
            return self.rhs[0].is_nonterminal() and not self.rhs[1].is_nonterminal()
        return False

    # RHS is a single terminal or a terminal followed by a nonterminal.
    # return: bool
    def is_right_regular(self):
        if len(self.rhs) == 1:
            return not self.rhs[0].is_nonterminal()
        if len(self.rhs) == 2:
            return not self.rhs[0].is_nonterminal() and self.rhs[1].is_nonterminal()
        return False

    def __eq__(self, other):
        return isinstance(other, Rule) and self.lhs == other.lhs and self.rhs == other.rhs

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((self.lhs, self.rhs))

    def __str__(self):
        return self.display()

    def __repr__(self):
        return 'Rule(' + repr(str(self.lhs)) + ', ' + repr(symbols_to_str(self.rhs)) + ')'


###########################################################################
# The grammar.

# The start symbol is the LHS of the first rule.
# Rules keep the order in which they are given; their indices are used to
# select productions during derivation.
class Grammar:
    # Constructor.
    # rules: list of Rule
    def __init__(self, rules):
        rules = tuple(rules)
        if not rules:
            raise EmptyGrammarError()
        self.__rules = rules
        self.__start = rules[0].lhs
        self.__terminals = []
        self.__nonterminals = []
        # Mapping from LHS symbol to indices of rules with that LHS.
        self.__lhs_to_idxs = defaultdict(list)
        for idx, rule in enumerate(rules):
            self.__lhs_to_idxs[rule.lhs].append(idx)
            for sym in (rule.lhs,) + rule.rhs:
                alphabet = self.__nonterminals if sym.is_nonterminal() else self.__terminals
                if sym not in alphabet:
                    alphabet.append(sym)
        self.__terminals = tuple(self.__terminals)
        self.__nonterminals = tuple(self.__nonterminals)

    @classmethod
    def from_rules(cls, rules):
        return cls(rules)

    @property
    def start(self):
        return self.__start

    @property
    def rules(self):
        """
        :rtype: tuple[Rule]
        """
        return self.__rules

    @property
    def terminals(self):
        return self.__terminals

    @property
    def nonterminals(self):
        return self.__nonterminals

    # Get rule by index.
    # idx: int
    # return: Rule
    def rule(self, idx):
        if not isinstance(idx, int) or isinstance(idx, bool) or not 0 <= idx < len(self.__rules):
            raise InvalidRuleError(idx, 'no such rule in a grammar with ' + str(len(self.__rules)) + ' rules')
        return self.__rules[idx]

    def display(self):
        s = 'Grammar:\n'
        for rule in self.__rules:
            s += rule.display() + '\n'
        return s

    def is_valid(self):
        for rule in self.__rules:
            if not rule.is_valid():
                return False
        return True

    def is_regular(self):
        """
        :rtype: bool
        :return: Does every rule satisfy exactly one of is_left_regular / is_right_regular?
        A rule satisfying both (a single terminal RHS) or neither makes the grammar non-regular.
        """
        for rule in self.__rules:
            if rule.is_left_regular() == rule.is_right_regular():
                return False
        return True

    def is_uniformly_regular(self):
        """
        :rtype: bool
        :return: Are all rules left-regular, or are all rules right-regular?
        """
        return all(rule.is_left_regular() for rule in self.__rules) \
            or all(rule.is_right_regular() for rule in self.__rules)

    def rule_idxs_from_nt(self, nont):
        """
        :param nont: nonterminal symbol or character
        :rtype: list[int]
        :return: indices of rules with nont as LHS, in rule order
        """
        nont = symbol(nont)
        if nont not in self.__lhs_to_idxs:
            return []
        return list(self.__lhs_to_idxs[nont])

    def lhs_nont_to_rules(self, nont):
        """
        :rtype: list[Rule]
        """
        return [self.__rules[idx] for idx in self.rule_idxs_from_nt(nont)]

    def __eq__(self, other):
        return isinstance(other, Grammar) and self.rules == other.rules

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash(self.rules)

    def __str__(self):
        return self.display()


__all__ = ["Terminal", "NonTerminal", "symbol", "symbols", "symbols_to_str", "Rule", "Grammar"]
