import logging
from resolution_prover import term, not_, and_, or_, implies, iff
from resolution_prover.notation import formula2sentence
from resolution_prover.resolution import Resolution

logging.basicConfig(level=logging.INFO, format="%(asctime)s:%(levelname)s:%(message)s")

if __name__ == "__main__":
    p, q, r, s, t = term("p"), term("q"), term("r"), term("s"), term("t")

    problems = [
        # p, (p ∧ q) → r, (s ∨ t) → q, t ⊢ r
        ([p, implies(and_(p, q), r), implies(or_(s, t), q), t], r),
        # same without t : r does not follow
        ([p, implies(and_(p, q), r), implies(or_(s, t), q)], r),
        # p, ¬p ⊢ q  (contradictory premises)
        ([p, not_(p)], q),
        # p ↔ q, ¬q ⊢ ¬p
        ([iff(p, q), not_(q)], not_(p)),
    ]

    prover = Resolution()
    for premises, goal in problems:
        print("premises: ")
        for premise in premises:
            print(formula2sentence(premise))
        print("goal: ")
        print(formula2sentence(goal))
        print("result: ")
        print(prover.prove(premises, goal))
        print()
