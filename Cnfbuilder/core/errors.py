class CnfbuilderError(Exception):
    """Base exception for all Cnfbuilder related errors."""
    pass

class ValidationError(CnfbuilderError):
    """Raised when a caller hands the builder malformed input."""
    pass

class EncodingContractError(CnfbuilderError):
    """Raised when an encoding invariant is violated.

    A corrupted formula is worse than a crash, so this is never caught
    inside the library.
    """
    pass

class CNFError(CnfbuilderError):
    """Raised when there is an issue with CNF processing or parsing."""
    pass

class IRCompileError(CnfbuilderError):
    """Raised when compiling a Boolean expression to CNF fails."""
    pass

class VerificationError(CnfbuilderError):
    """Raised when solving or checking an encoding fails."""
    pass
