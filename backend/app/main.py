from typing import Optional, Union

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from matrixspaces.engine import compute_report, get_examples
from matrixspaces.errors import MatrixError

app = FastAPI(title="MatrixSpaces API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class ComputeRequest(BaseModel):
    matrix: list[list[Union[int, float, str]]]
    track_operations: bool = True


class MatrixInfo(BaseModel):
    data: list[list[float]]
    display: list[list[str]]
    latex: str
    rows: int
    cols: int


class RREFInfo(BaseModel):
    matrix: list[list[float]]
    display: list[list[str]]
    latex: str
    pivots: list[int]
    pivots_display: list[int]


class SubspaceInfo(BaseModel):
    basis: list[list[float]]
    display: list[list[str]]
    latex: list[str]
    dimension: int
    description: str


class DimensionCheckInfo(BaseModel):
    rank_plus_nullity: str
    rank_plus_left_nullity: str
    valid: bool


class OperationInfo(BaseModel):
    type: str
    notation: str
    description: str
    params: dict[str, Union[int, str]]
    matrix_before: list[list[str]]
    matrix_after: list[list[str]]


class SummaryInfo(BaseModel):
    total_steps: int
    validation_status: str
    runtime_ms: float
    library: str


class ComputeResponse(BaseModel):
    matrix: MatrixInfo
    rank: int
    rref: RREFInfo
    column_space: SubspaceInfo
    row_space: SubspaceInfo
    null_space: SubspaceInfo
    left_null_space: SubspaceInfo
    dimension_check: DimensionCheckInfo
    summary: SummaryInfo
    operations: Optional[list[OperationInfo]] = None


class ExampleInfo(BaseModel):
    name: str
    description: str
    matrix: list[list[Union[int, float, str]]]


class ExamplesResponse(BaseModel):
    examples: list[ExampleInfo]


@app.post("/api/compute", response_model=ComputeResponse)
def compute(req: ComputeRequest):
    try:
        report = compute_report(req.matrix, track_operations=req.track_operations)
    except MatrixError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Computation error: {str(e)}")

    return report.to_dict()


@app.get("/api/examples", response_model=ExamplesResponse)
def examples():
    return get_examples()
