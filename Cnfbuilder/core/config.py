import json
import os
from typing import Optional
from pydantic import BaseModel, Field, ValidationError as PydanticValidationError
from Cnfbuilder.core.errors import ValidationError
from Cnfbuilder.core.logging import get_logger

logger = get_logger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}

class EncoderConfig(BaseModel):
    """Knobs for running and checking encodings."""
    check_invariants: bool = True
    solver_name: str = "minisat22"
    max_solutions: Optional[int] = Field(default=None, ge=1)
    trace_contexts: bool = True

    @staticmethod
    def from_env_or_file() -> "EncoderConfig":
        data = {}

        # 1. Config file
        config_path = os.environ.get("CNFBUILDER_CONFIG_PATH")
        if config_path and os.path.exists(config_path):
            try:
                with open(config_path, "r", encoding="utf-8") as f:
                    loaded = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                logger.warning(f"Ignoring unreadable config file {config_path}: {e}")
            else:
                if isinstance(loaded, dict):
                    data.update(loaded)
                else:
                    logger.warning(f"Ignoring config file {config_path}: expected a JSON object, got {type(loaded).__name__}")

        # 2. Env vars win over the file
        env_check = os.environ.get("CNFBUILDER_CHECK_INVARIANTS")
        if env_check is not None:
            data["check_invariants"] = env_check.strip().lower() in _TRUTHY
        env_solver = os.environ.get("CNFBUILDER_SOLVER")
        if env_solver:
            data["solver_name"] = env_solver

        try:
            return EncoderConfig(**data)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid encoder config: {e}") from e
