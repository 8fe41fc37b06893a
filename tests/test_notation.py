import sys
sys.path.append(".")
import pytest
from resolution_prover import Literal, Operation, term, not_, and_, or_, implies, iff
from resolution_prover.clauses import Clause, clause2sentence
from resolution_prover.notation import formula2sentence, Formula2StringConvertException

def test_formula2sentence():
    p, q, r = term("p"), term("q"), term("r")
    assert formula2sentence(p) == "p"
    assert formula2sentence(not_(p)) == "¬p"
    assert formula2sentence(not_(not_(p))) == "¬¬p"
    assert formula2sentence(and_(p, not_(q))) == "p ∧ ¬q"
    assert formula2sentence(not_(and_(p, q))) == "¬(p ∧ q)"
    assert formula2sentence(implies(and_(p, q), r)) == "(p ∧ q) → r"
    assert formula2sentence(iff(p, or_(q, r))) == "p ↔ (q ∨ r)"

def test_formula2sentence_rejects_malformed():
    with pytest.raises(Formula2StringConvertException):
        formula2sentence((Operation.AND, term("p")))
    with pytest.raises(Formula2StringConvertException):
        formula2sentence("p")

def test_clause2sentence():
    clause = Clause([Literal("q"), Literal("p", False)])
    assert clause2sentence(clause) == "¬p ∨ q"
    assert str(clause) == "¬p ∨ q"
    assert repr(clause) == "clause {¬p, q}"
    assert clause2sentence(Clause()) == "□"
    assert str(Literal("p", False)) == "¬p"
