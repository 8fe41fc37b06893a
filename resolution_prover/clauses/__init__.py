from typing import Iterable, Iterator, List
import logging
from resolution_prover import Formula, Literal, Operation, Term, and_, implies, not_, or_, operation2string
from resolution_prover.notation import formula2sentence

EMPTY_CLAUSE = "□"


class ClauseConvertException(Exception):
    def __init__(self, message):
        super().__init__(message)
        self.message = message


class Clause:
    """Disjunction of literals. The empty clause stands for a contradiction."""
    def __init__(self, literals: Iterable[Literal] = ()):
        self.literals = frozenset(literals)

    @classmethod
    def from_formula(cls, formula: Formula) -> List['Clause']:
        return ClauseConverter().from_formula(formula)

    def is_empty(self) -> bool:
        return len(self.literals) == 0

    def is_tautology(self) -> bool:
        return any(literal.negate() in self.literals for literal in self.literals)

    def subsumes(self, other: 'Clause') -> bool:
        return self.literals <= other.literals

    def complementary_literals(self, other: 'Clause') -> List[Literal]:
        """Literals of this clause whose negation occurs in other."""
        return sorted(literal for literal in self.literals if literal.negate() in other.literals)

    def resolve_on(self, other: 'Clause', literal: Literal) -> 'Clause':
        # binary resolution: exactly one complementary pair is consumed
        if literal not in self.literals or literal.negate() not in other.literals:
            raise ValueError(f"{literal} does not resolve {self} against {other}")
        return Clause((self.literals - {literal}) | (other.literals - {literal.negate()}))

    def __iter__(self) -> Iterator[Literal]:
        return iter(sorted(self.literals))
    def __len__(self):
        return len(self.literals)
    def __contains__(self, literal):
        return literal in self.literals
    def __repr__(self):
        return f"clause {{{', '.join(map(str, self))}}}"
    def __str__(self):
        return clause2sentence(self)
    def __eq__(self, other):
        return isinstance(other, Clause) and self.literals == other.literals
    def __hash__(self):
        return hash(("clause", self.literals))


def clause2sentence(clause: Clause) -> str:
    if clause.is_empty():
        return EMPTY_CLAUSE
    return f" {operation2string(Operation.OR)} ".join(str(literal) for literal in clause)


class ClauseConverter:
    """Rewrites a formula into an equivalent list of clauses (CNF).

    The stages run in order, each consuming the whole tree produced by
    the previous one:

    1. eliminate_conditionals  ->  only ¬, ∧, ∨ remain
    2. reduce_negation         ->  ¬ only in front of atoms
    3. bubble_up_ands          ->  no ∧ below any ∨
    4. split_on_ands / from_or_not_formula  ->  clauses
    """

    # --- 1. conditionals ----------------------------------------------------
    def eliminate_conditionals(self, formula: Formula) -> Formula:
        match formula:
            case Term():
                return formula
            case (Operation.NEG, a):
                return not_(self.eliminate_conditionals(a))
            case (Operation.AND, a, b):
                return and_(self.eliminate_conditionals(a), self.eliminate_conditionals(b))
            case (Operation.OR, a, b):
                return or_(self.eliminate_conditionals(a), self.eliminate_conditionals(b))
            case (Operation.IMPLIE, a, b):
                return or_(not_(self.eliminate_conditionals(a)), self.eliminate_conditionals(b))
            case (Operation.AND_IMPLIE_BI, a, b):
                return and_(
                    self.eliminate_conditionals(implies(a, b)),
                    self.eliminate_conditionals(implies(b, a))
                )
        raise ClauseConvertException(f"not a formula: {formula!r}")

    # --- 2. negation normal form -------------------------------------------
    def reduce_negation(self, formula: Formula) -> Formula:
        match formula:
            case Term():
                return formula
            case (Operation.NEG, Term()):
                return formula
            case (Operation.NEG, (Operation.NEG, a)):
                return self.reduce_negation(a)
            case (Operation.NEG, (Operation.AND, a, b)):
                return or_(self.reduce_negation(not_(a)), self.reduce_negation(not_(b)))
            case (Operation.NEG, (Operation.OR, a, b)):
                return and_(self.reduce_negation(not_(a)), self.reduce_negation(not_(b)))
            case (Operation.AND, a, b):
                return and_(self.reduce_negation(a), self.reduce_negation(b))
            case (Operation.OR, a, b):
                return or_(self.reduce_negation(a), self.reduce_negation(b))
            case (Operation.IMPLIE | Operation.AND_IMPLIE_BI, _, _):
                raise ClauseConvertException(f"unexpected implies or iff: {formula!r}")
            case (Operation.NEG, (Operation.IMPLIE | Operation.AND_IMPLIE_BI, _, _)):
                raise ClauseConvertException(f"unexpected implies or iff: {formula!r}")
        raise ClauseConvertException(f"not a formula: {formula!r}")

    # --- 3. distribute ∨ over ∧ ---------------------------------------------
    def bubble_up_ands(self, formula: Formula) -> Formula:
        match formula:
            case (Operation.AND, a, b):
                return and_(self.bubble_up_ands(a), self.bubble_up_ands(b))
            case (Operation.OR, a, b):
                return self._distribute(self.bubble_up_ands(a), self.bubble_up_ands(b))
        return formula

    def _distribute(self, a: Formula, b: Formula) -> Formula:
        # a and b are already free of ∧ below ∨
        match (a, b):
            case ((Operation.AND, c, d), e):
                return and_(self._distribute(c, e), self._distribute(d, e))
            case (c, (Operation.AND, d, e)):
                return and_(self._distribute(c, d), self._distribute(c, e))
        return or_(a, b)

    # --- 4. clauses -----------------------------------------------------------
    def split_on_ands(self, formula: Formula) -> List[Formula]:
        match formula:
            case (Operation.AND, a, b):
                return self.split_on_ands(a) + self.split_on_ands(b)
        return [formula]

    def from_or_not_formula(self, formula: Formula) -> Clause:
        return Clause(self._literals(formula))

    def _literals(self, formula: Formula) -> List[Literal]:
        match formula:
            case (Operation.OR, a, b):
                return self._literals(a) + self._literals(b)
            case (Operation.NEG, Term(name=name)):
                return [Literal(name, False)]
            case Term(name=name):
                return [Literal(name)]
        raise ClauseConvertException(f"formula contained non-(or, not) term: {formula!r}")

    def from_formula(self, formula: Formula) -> List[Clause]:
        no_conditionals = self.eliminate_conditionals(formula)
        reduced = self.reduce_negation(no_conditionals)
        bubbled = self.bubble_up_ands(reduced)
        clauses = [self.from_or_not_formula(conjunct) for conjunct in self.split_on_ands(bubbled)]
        if logging.getLogger().isEnabledFor(logging.DEBUG):
            logging.debug(f"clauses:from_formula:formula={formula2sentence(formula)}:clauses={clauses}")
        return clauses
