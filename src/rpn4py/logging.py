from .tokens import StrEnum


class ParseStep(StrEnum):
    EMIT_TOKEN = "EMIT_TOKEN"
    INSERT_CONCATENATION = "INSERT_CONCATENATION"
    PUSH_OPERATOR = "PUSH_OPERATOR"
    POP_OPERATOR = "POP_OPERATOR"
    DISCARD_PAREN = "DISCARD_PAREN"


VERBOSE = 5
