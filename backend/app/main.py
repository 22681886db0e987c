import os
from contextlib import asynccontextmanager
from typing import Dict, Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, PositiveInt
from dotenv import load_dotenv
from app.core.database import create_db_and_tables
from app.schemas.analyzer_models import WINDOW_MIN, AnalysisInput, AnalyzerView
from app.services.controller_service import AnalyzerController
from app.api import analyzer, theme

load_dotenv()


@asynccontextmanager
async def lifespan(app: FastAPI):
    create_db_and_tables()
    yield


app = FastAPI(
    title="Text Statistics API",
    description="API for live character, word, sentence and letter frequency statistics.",
    version="1.0.0",
    lifespan=lifespan,
)

origins = [
    origin.strip()
    for origin in os.environ.get("CORS_ORIGINS", "http://localhost:3000").split(",")
    if origin.strip()
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(analyzer.router)
app.include_router(theme.router)


class AnalysisRequest(BaseModel):
    """Request model for one-off text analysis."""

    text: str
    exclude_spaces: bool = False
    char_limit: Optional[PositiveInt] = None
    window_size: int = WINDOW_MIN


@app.get("/")
def read_root() -> Dict[str, str]:
    """Root endpoint to check API status.

    Returns:
        Dict[str, str]: Status message and link to docs.
    """
    return {"status": "API is ready", "docs": "/docs"}


@app.post("/analyze")
def analyze_endpoint(request: AnalysisRequest) -> AnalyzerView:
    """Analyzes a block of text without keeping any session state.

    Args:
        request (AnalysisRequest): The text and the configuration to apply.

    Returns:
        AnalyzerView: Metrics, limit state and the windowed frequency list.
    """
    analysis_input = AnalysisInput(
        text=request.text,
        exclude_spaces=request.exclude_spaces,
        char_limit=request.char_limit,
    )
    controller = AnalyzerController.from_input(analysis_input, request.window_size)
    return controller.view()
