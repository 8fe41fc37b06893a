from enum import Enum
from typing import List, Union, Tuple


_logic_operator_mapping_reversed = {
    'neg': '¬',
    'and': '∧',
    'or': '∨',
    'imp': '→',
    'and_imp_bi': '↔',
}

class FormulaConstructException(ValueError):
    def __init__(self, message):
        super().__init__(message)
        self.message = message

# Atomic proposition
class Term:
    def __init__(self, name: str):
        self.name = name
    def __repr__(self):
        return f"term {self.name}"
    def __str__(self):
        return self.name
    def __eq__(self, other):
        return isinstance(other, Term) and self.name == other.name
    def __hash__(self):
        return hash(("term", self.name))

class Literal:
    """An atomic proposition name with a polarity."""
    def __init__(self, name: str, positive: bool = True):
        self.name = name
        self.positive = positive

    def negate(self) -> 'Literal':
        return Literal(self.name, not self.positive)

    def is_complementary(self, other: 'Literal') -> bool:
        return self.name == other.name and self.positive != other.positive

    def __repr__(self):
        return f"literal {self}"
    def __str__(self):
        if self.positive:
            return self.name
        return f"{operation2string(Operation.NEG)}{self.name}"
    def __eq__(self, other):
        return (
            isinstance(other, Literal)
            and self.name == other.name
            and self.positive == other.positive
        )
    def __lt__(self, other):
        # by name, negated before positive
        return (self.name, self.positive) < (other.name, other.positive)
    def __hash__(self):
        return hash(("literal", self.name, self.positive))


class Operation(Enum):
    NEG = "neg"
    AND = "and"
    OR = "or"
    IMPLIE = "imp"
    AND_IMPLIE_BI = "and_imp_bi"

    def is_unary_ops(self) -> bool:
        return self == Operation.NEG

    def is_binary_ops(self) -> bool:
        return self in {
            Operation.AND, Operation.OR, Operation.IMPLIE, Operation.AND_IMPLIE_BI
        }

Formula = Union[
    Term,
    Tuple[Operation, 'Formula'],                # unary
    Tuple[Operation, 'Formula', 'Formula']      # binary
]

def is_atom(e) -> bool:
    return isinstance(e, Term)

def is_formula(e) -> bool:
    if is_atom(e):
        return True
    if not isinstance(e, tuple) or len(e) == 0 or not isinstance(e[0], Operation):
        return False
    if e[0].is_unary_ops():
        return len(e) == 2 and is_formula(e[1])
    return len(e) == 3 and is_formula(e[1]) and is_formula(e[2])

def is_literal_formula(e) -> bool:
    """Atom or negated atom."""
    if is_atom(e):
        return True
    return isinstance(e, tuple) and len(e) == 2 and e[0] == Operation.NEG and is_atom(e[1])

def operation2string(op: Operation) -> str:
    return _logic_operator_mapping_reversed[op.value]

# --- constructors ---------------------------------------------------------

def term(name: str) -> Term:
    if not isinstance(name, str) or len(name) == 0:
        raise FormulaConstructException(f"proposition name must be a non-empty string: {name!r}")
    return Term(name)

def not_(formula: Formula) -> Formula:
    return (Operation.NEG, formula)

def and_(a: Formula, b: Formula) -> Formula:
    return (Operation.AND, a, b)

def or_(a: Formula, b: Formula) -> Formula:
    return (Operation.OR, a, b)

def implies(a: Formula, b: Formula) -> Formula:
    return (Operation.IMPLIE, a, b)

def iff(a: Formula, b: Formula) -> Formula:
    return (Operation.AND_IMPLIE_BI, a, b)

def atoms(formula: Formula) -> List[str]:
    """Proposition names occurring in formula, in first-occurrence order."""
    if is_atom(formula):
        return [formula.name]
    names = []
    for sub_formula in formula[1:]:
        for name in atoms(sub_formula):
            if name not in names:
                names.append(name)
    return names


from resolution_prover.resolution import resolve  # noqa: E402
