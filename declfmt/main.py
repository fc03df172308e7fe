import logging
from typing import Any, Dict, List

from fastapi import FastAPI, HTTPException  # type: ignore
from fastapi.middleware.cors import CORSMiddleware  # type: ignore
from pydantic import BaseModel, field_validator  # type: ignore

from .adapters.cir_adapter import CIRAdapter
from .cir.model import Primitive
from .config import CORS_ORIGINS, SERVICE_TITLE, configure_logging
from .formatter import describe_type, max_common_prefix, method_string_of_values, type_string

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title=SERVICE_TITLE)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class DescribeRequest(BaseModel):
    cir: Dict[str, Any]      # expects { "nodes": [...], "edges": [...] }
    generated: bool = False  # describe as script-defined types

    @field_validator("cir")
    @classmethod
    def _has_nodes(cls, v: Dict[str, Any]) -> Dict[str, Any]:
        if not isinstance(v.get("nodes"), list):
            raise ValueError("cir.nodes must be a list")
        return v


class TypeDescription(BaseModel):
    type: str
    lines: List[str]


class DescribeResponse(BaseModel):
    declarations: List[TypeDescription]


class ValueRequest(BaseModel):
    name: str
    args: List[Any] = []


class ValueResponse(BaseModel):
    signature: str
    types: List[str]


class PrefixRequest(BaseModel):
    one: str
    two: str


class PrefixResponse(BaseModel):
    prefix: str


@app.post("/describe", response_model=DescribeResponse)
def describe(req: DescribeRequest):
    logger.debug("describe: %d nodes, generated=%s", len(req.cir["nodes"]), req.generated)
    try:
        described = CIRAdapter(generated=req.generated).to_descriptors(req.cir)
    except (KeyError, ValueError) as e:
        raise HTTPException(status_code=400, detail=f"Malformed CIR: {e}")

    return DescribeResponse(
        declarations=[
            TypeDescription(type=d.type.name, lines=describe_type(d.type, d.fields, d.methods))
            for d in described
        ]
    )


def _script_value(value: Any) -> Any:
    """JSON scalars become primitives so they report logical types (int, boolean, double)."""
    if isinstance(value, (bool, int, float)):
        return Primitive.wrap(value)
    return value


@app.post("/describe/value", response_model=ValueResponse)
def describe_value(req: ValueRequest):
    args = [_script_value(a) for a in req.args]
    return ValueResponse(
        signature=method_string_of_values(req.name, args),
        types=[type_string(a) for a in args],
    )


@app.post("/prefix", response_model=PrefixResponse)
def prefix(req: PrefixRequest):
    return PrefixResponse(prefix=max_common_prefix(req.one, req.two))
