from typing import Dict, Iterator, List, Optional, Sequence, Tuple
import logging
from resolution_prover import Formula, Literal, not_
from resolution_prover.clauses import Clause, ClauseConverter
from resolution_prover.config import ResolutionConfig


class ClauseStorage:
    """Clause pool indexed by literal."""
    def __init__(self, discard_tautologies: bool = True):
        self.discard_tautologies = discard_tautologies
        self.lookup_table: Dict[Literal, List[int]] = {}
        self.clauses: List[Clause] = []
        self._indices: Dict[Clause, int] = {}

    def put(self, clause: Clause) -> int:
        if clause in self._indices:
            return self._indices[clause]
        index = len(self.clauses)
        self.clauses.append(clause)
        self._indices[clause] = index
        if self.discard_tautologies and clause.is_tautology():
            return index                 # stored but never handed out
        for literal in clause.literals:
            self.lookup_table.setdefault(literal, []).append(index)
        return index

    def get(self, literal: Literal) -> List[Clause]:
        return [self.clauses[i] for i in self.lookup_table.get(literal, [])]

    def __len__(self):
        return len(self.clauses)

    def __contains__(self, clause):
        return clause in self._indices


class DerivedClauses:
    """Every clause the search has already taken as a current clause.

    Owned by a single prove call and shared by all of its start clauses.
    A clause is entered once, so no clause is ever expanded twice.
    """
    def __init__(self):
        self.clauses: List[Clause] = []
        self._members = set()

    def add(self, clause: Clause):
        self.clauses.append(clause)
        self._members.add(clause)

    def subsumes(self, clause: Clause) -> bool:
        if clause in self._members:
            return True
        return any(derived.subsumes(clause) for derived in self.clauses if len(derived) < len(clause))

    def __len__(self):
        return len(self.clauses)


ChoicePoint = Tuple[Clause, Iterator[Tuple[Literal, Clause]]]

class Resolution:
    def __init__(self, config: Optional[ResolutionConfig] = None):
        self.config = config if config is not None else ResolutionConfig()
        self._converter = ClauseConverter()

    # --- clause set -----------------------------------------------------------
    def _premise_clauses(self, premises: Sequence[Formula]) -> List[Clause]:
        return [clause for premise in premises for clause in self._converter.from_formula(premise)]

    def _negated_goal_clauses(self, conclusion: Formula) -> List[Clause]:
        return self._converter.from_formula(not_(conclusion))

    def _build_storage(self, clauses: List[Clause]) -> ClauseStorage:
        storage = ClauseStorage(self.config.discard_tautologies)
        for clause in clauses:
            storage.put(clause)
        return storage

    # --- search -------------------------------------------------------------
    def _candidates(self, storage: ClauseStorage, current: Clause) -> List[Tuple[Literal, Clause]]:
        """Every (literal of current, pooled clause holding its negation) pair, in search order."""
        return [
            (literal, clause)
            for literal in current
            for clause in storage.get(literal.negate())
        ]

    def _admit(self, clause: Clause, storage: ClauseStorage, derived: DerivedClauses) -> bool:
        if self.config.discard_tautologies and clause.is_tautology():
            return False
        if derived.subsumes(clause):
            return False
        derived.add(clause)
        if self.config.reuse_derived_clauses:
            storage.put(clause)
        return True

    def _choice_point(self, storage: ClauseStorage, current: Clause) -> ChoicePoint:
        return (current, iter(self._candidates(storage, current)))

    def _refute(self, storage: ClauseStorage, start: Clause, derived: DerivedClauses, debug: bool = False) -> bool:
        """Depth-first search for the empty clause starting from start.

        The stack holds one choice point per clause on the current
        derivation path: the clause and the candidates not tried yet.
        A resolvent already in derived (or subsumed by a clause there) is
        never taken, so every clause is expanded at most once and the
        search ends after at most as many steps as there are clauses over
        the vocabulary.
        """
        stack: List[ChoicePoint] = [self._choice_point(storage, start)]
        while stack:
            current, candidates = stack[-1]
            for literal, clause in candidates:
                resolvent = current.resolve_on(clause, literal)
                if resolvent.is_empty():
                    if debug:
                        logging.debug(f"resolution:refute:{current} + {clause} => □")
                    return True
                if not self._admit(resolvent, storage, derived):
                    continue
                if debug:
                    logging.debug(f"resolution:refute:depth={len(stack)}:{current} + {clause} => {resolvent}")
                stack.append(self._choice_point(storage, resolvent))
                break
            else:
                if debug:
                    logging.debug(f"resolution:refute:backtrack={current}")
                stack.pop()
        return False

    def _search(self, storage: ClauseStorage, starts: List[Clause], derived: DerivedClauses, debug: bool) -> bool:
        for start in starts:
            if start.is_empty():
                return True
            if not self._admit(start, storage, derived):
                continue
            if debug:
                logging.debug(f"resolution:prove:start={start}")
            if self._refute(storage, start, derived, debug):
                return True
        return False

    def prove(self, premises: Sequence[Formula], conclusion: Formula) -> bool:
        """
        Check whether conclusion follows from premises (premises ⊨ conclusion)
        by deriving the empty clause from the premise clauses together with
        the clauses of ¬conclusion.
        Returns True when a refutation was found, False otherwise.
        """
        debug = logging.getLogger().isEnabledFor(logging.DEBUG)
        premise_clauses = self._premise_clauses(premises)
        negated_goal = self._negated_goal_clauses(conclusion)
        storage = self._build_storage(premise_clauses + negated_goal)
        derived = DerivedClauses()

        result = self._search(storage, negated_goal, derived, debug)
        if not result and self.config.fallback_to_premises:
            # only succeeds when the premises contradict each other
            result = self._search(storage, premise_clauses, derived, debug)

        logging.info(f"resolution:prove:premises={len(premise_clauses)} clauses:derived={len(derived)}:result={result}")
        return result


def resolve(assumptions: Sequence[Formula], goal: Formula, config: Optional[ResolutionConfig] = None) -> bool:
    return Resolution(config).prove(assumptions, goal)
