"""Public re-exports of all model types."""

from models.config import OracleConfig
from models.decision import ModelVerdict
from models.result import ParityResult

__all__ = [
    "OracleConfig",
    "ModelVerdict",
    "ParityResult",
]
