from resolution_prover import Formula, is_atom, is_formula, operation2string

class Formula2StringConvertException(Exception):
    def __init__(self, message):
        super().__init__(message)
        self.message = message

def _operand(formula: Formula) -> str:
    sentence = formula2sentence(formula)
    if isinstance(formula, tuple) and formula[0].is_binary_ops():
        return f"({sentence})"
    return sentence

def formula2sentence(formula: Formula) -> str:
    if is_atom(formula):
        return str(formula)
    if is_formula(formula):
        op = formula[0]
        if op.is_unary_ops():
            return f"{operation2string(op)}{_operand(formula[1])}"
        return f"{_operand(formula[1])} {operation2string(op)} {_operand(formula[2])}"
    raise Formula2StringConvertException(f"formula to string convert error: {formula!r}")
