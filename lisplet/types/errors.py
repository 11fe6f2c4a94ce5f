class LispletError(Exception):
    """ Base class for all Lisplet errors"""
    pass

class StructuralError(LispletError):
    """ Raised when brackets do not balance"""
    pass

class BuildError(LispletError):
    """ Raised when a special form is malformed"""

class UnboundIdentifierError(LispletError):
    """ Raised when a name resolves to nothing"""

    def __init__(self, name: str):
        super().__init__(f"Unbound identifier: {name}")
        self.name = name

class LispTypeError(LispletError):
    """ Raised when the types of arguments passed to a primitive are incorrect"""

class ArityError(LispletError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class UncallableError(LispletError):
    """ Raised when a value in function position cannot be applied"""

class ExhaustedConditionalError(LispletError):
    """ Raised when no branch of a cond has a true question"""

class UnknownPrimitiveError(LispletError):
    """ Raised when a primitive has no entry in the dispatch table"""

class EvaluationDepthError(LispletError):
    """ Raised when evaluation exhausts the host stack"""
