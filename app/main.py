import logging
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from filter_expr.analyzer import analyze
from filter_expr.ast_utils import node_to_dict, node_to_pretty
from filter_expr.config import ServiceConfig
from filter_expr.errors import FilterExprError
from filter_expr.lexer import tokenize
from filter_expr.parser import parse as parse_symbols
from filter_expr.registry import list_operators

config = ServiceConfig.from_env()
logging.basicConfig(level=config.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="Filter expression parser")

class ParseBody(BaseModel):
    expression: Optional[str] = None
    symbols: Optional[List[str]] = None   # already tokenized input


def _parse_body(body: ParseBody):
    if (body.expression is None) == (body.symbols is None):
        raise HTTPException(status_code=422, detail="provide exactly one of 'expression' or 'symbols'")
    try:
        symbols = tokenize(body.expression) if body.expression is not None else body.symbols
        if len(symbols) > config.max_symbols:
            raise HTTPException(
                status_code=413,
                detail=f"expression has {len(symbols)} symbols, limit is {config.max_symbols}",
            )
        return parse_symbols(symbols)
    except FilterExprError as e:
        logger.warning("Rejected filter expression: %s", e)
        raise HTTPException(status_code=400, detail=e.to_dict())


@app.get("/operators")
def operators():
    return {"operators": list_operators()}

@app.post("/parse")
def parse(body: ParseBody):
    tree = _parse_body(body)
    meta = analyze(tree)
    return {"ok": True, "empty": tree is None, **meta.to_dict()}

@app.post("/ast")
def ast_view(body: ParseBody):
    tree = _parse_body(body)
    if tree is None:
        return {"ok": True, "pretty": None, "tree": None}
    return {
        "ok": True,
        "pretty": node_to_pretty(tree, indent=config.indent_str),
        "tree": node_to_dict(tree),
    }
