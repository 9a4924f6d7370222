"""Public API for the Sqids codec and its identifier layer."""
from .core.sqids import Sqids
from .domain.models import Sqid, SqidsOptions
from .generator import SqidGenerator
from .manager import Mint, SqidConductor
from .parser.config_loader import load_options

__all__ = [
    "Sqids",
    "Sqid",
    "SqidsOptions",
    "SqidGenerator",
    "Mint",
    "SqidConductor",
    "load_options",
]
