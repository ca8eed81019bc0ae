from Cnfbuilder.core.errors import (
    CnfbuilderError, ValidationError, EncodingContractError, CNFError,
    IRCompileError, VerificationError
)
from Cnfbuilder.core.config import EncoderConfig
from Cnfbuilder.core.logging import get_logger

__all__ = [
    "CnfbuilderError", "ValidationError", "EncodingContractError", "CNFError",
    "IRCompileError", "VerificationError",
    "EncoderConfig", "get_logger"
]
