from typing import Annotated

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from classic_solver import ConstraintGraph, Graph, run_coloring, run_search
from classic_solver.logging_utils import get_logger
from classic_solver.postprocess.render_result import build_coloring_payload, build_search_payload

logger = get_logger()

app = FastAPI()

NonNegativeWeight = Annotated[float, Field(ge=0)]


class SearchRequest(BaseModel):
    vertices: list[tuple[int, int]] = []  # [id, cell]
    edges: list[tuple[int, int, NonNegativeWeight]] = []  # [u, v, weight]
    start: int | None = None
    goal: int | None = None


class ColorRequest(BaseModel):
    edges: list[tuple[int, int]] = []  # [u, v]
    colors: int = Field(ge=1)


@app.post("/api/search")
async def api_search(request: SearchRequest):
    """
    Search API endpoint.
    Builds the graph from the request and runs UCS / A* Euclidean / A* Manhattan.
    """
    if request.start is None or request.goal is None:
        # CLI と同じく、例外ではなくメッセージで返す
        return {"status": "error", "message": "Missing start or goal."}

    try:
        graph = Graph()
        for vid, cell in request.vertices:
            graph.add_vertex(vid, cell)
        for u, v, w in request.edges:
            graph.add_edge(u, v, w)

        report, results = run_search(graph, request.start, request.goal)
        return build_search_payload(report, results)
    except Exception as e:
        logger.exception("Search error")
        raise HTTPException(status_code=500, detail=str(e))


@app.post("/api/color")
async def api_color(request: ColorRequest):
    """
    Coloring API endpoint.
    Builds the constraint graph and runs AC-3 + MRV/LCV backtracking.
    """
    try:
        graph = ConstraintGraph()
        for u, v in request.edges:
            graph.add_edge(u, v)

        solution, stats = run_coloring(graph, request.colors)
        return build_coloring_payload(solution, stats)
    except Exception as e:
        logger.exception("Coloring error")
        raise HTTPException(status_code=500, detail=str(e))
