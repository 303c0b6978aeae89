import logging
from typing import Callable, Dict, List, NamedTuple

logger = logging.getLogger(__name__)

class OpSpec(NamedTuple):
    symbol: str
    arity: int
    build: Callable
    kind: str       # "additive" | "multiplicative"
    doc: str

REGISTRY: Dict[str, OpSpec] = {}

def register(symbol, arity, kind, doc=""):
    def deco(fn):
        if symbol in REGISTRY:
            raise ValueError(f"Operator '{symbol}' already registered")
        REGISTRY[symbol] = OpSpec(symbol, arity, fn, kind, doc)
        logger.debug("Registered operator %s (%s)", symbol, kind)
        return fn
    return deco

def get_op(symbol: str) -> OpSpec:
    if symbol not in REGISTRY:
        raise KeyError(f"Unknown operator '{symbol}'")
    return REGISTRY[symbol]

def symbols_of_kind(kind: str) -> List[str]:
    return sorted(s for s, spec in REGISTRY.items() if spec.kind == kind)

def list_operators():
    out = []
    for k, spec in sorted(REGISTRY.items()):
        out.append({"symbol": k, "arity": spec.arity, "kind": spec.kind, "doc": spec.doc})
    return out
