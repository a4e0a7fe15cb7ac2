"""FastAPI server for kanacards application."""

import asyncio
import logging

from fastapi import FastAPI, HTTPException
from fastapi.responses import Response
from pydantic import BaseModel
from typing import Optional

logger = logging.getLogger(__name__)

from core.session import StudySession
from core.kana_data import KANA_GROUPS, KANA_TYPES, DIACRITIC_GROUPS, get_group_label
from core.interfaces import StrokeDiagramProvider

from server.gemini_provider import GeminiProvider
from server.stroke_provider import AnimCJKStrokeProvider
from server.settings import get_api_key, get_model_name


# Pydantic models for API
class GroupRequest(BaseModel):
    group: str


class TypeRequest(BaseModel):
    type: str


class ModeRequest(BaseModel):
    mode: str


class KanaItemResponse(BaseModel):
    char: str
    romaji: str
    group: str
    type: str


class GroupInfo(BaseModel):
    id: str
    label: str
    is_diacritic: bool


class GroupsResponse(BaseModel):
    groups: list[GroupInfo]
    types: list[str]


class ChartResponse(BaseModel):
    type: str
    items: list[KanaItemResponse]


class SelectionResponse(BaseModel):
    groups: list[str]
    types: list[str]
    study_mode: str
    has_diacritics: bool
    pool_size: int


class ToggleResponse(BaseModel):
    success: bool
    error: Optional[str] = None
    selection: SelectionResponse


class ExampleWord(BaseModel):
    word: str
    meaning: str


class EnrichmentResponse(BaseModel):
    mnemonic: str
    examples: list[ExampleWord]


class CardFaces(BaseModel):
    front: str
    front_label: str
    back: str
    back_subtext: str


class StudyStateResponse(BaseModel):
    in_study: bool
    has_item: bool
    current_item: Optional[KanaItemResponse]
    visible_item: Optional[KanaItemResponse]
    faces: Optional[CardFaces]
    is_flipped: bool
    is_loading: bool
    enrichment: Optional[EnrichmentResponse]
    seen_count: int
    pool_size: int
    progress_display: str
    study_mode: str


# Global state (single local study session)
session: StudySession = None
stroke_provider: StrokeDiagramProvider = None


app = FastAPI(title="KanaCards API", description="Kana flashcard study API")


def selection_response() -> SelectionResponse:
    return SelectionResponse(**session.selection.to_dict(), pool_size=len(session.pool))


def toggle_response(changed: bool, error: str) -> ToggleResponse:
    if changed:
        return ToggleResponse(success=True, selection=selection_response())
    return ToggleResponse(success=False, error=error, selection=selection_response())


def study_state() -> StudyStateResponse:
    return StudyStateResponse(**session.to_dict())


@app.on_event("startup")
async def startup():
    """Initialize the AI provider and the study session on startup."""
    global session, stroke_provider

    api_key = get_api_key()
    if not api_key:
        raise RuntimeError(
            "GEMINI_API_KEY environment variable not set and config file not found. "
            "Set GEMINI_API_KEY or create ~/.config/kanacards/config.json"
        )

    model_name = get_model_name()
    provider = GeminiProvider(api_key, model_name=model_name)
    session = StudySession(provider)
    stroke_provider = AnimCJKStrokeProvider()
    print(f"AI provider initialized: {model_name} (mnemonics)")


@app.on_event("shutdown")
async def shutdown():
    """Cancel pending card swaps and mnemonic fetches."""
    if session:
        session.close()


@app.get("/")
async def root():
    """Health check."""
    return {"service": "kanacards", "status": "ok"}


@app.get("/api/groups", response_model=GroupsResponse)
async def get_groups():
    """List kana groups with their display labels."""
    return GroupsResponse(
        groups=[
            GroupInfo(id=g, label=get_group_label(g), is_diacritic=g in DIACRITIC_GROUPS)
            for g in KANA_GROUPS
        ],
        types=KANA_TYPES
    )


@app.get("/api/chart/{kana_type}", response_model=ChartResponse)
async def get_chart(kana_type: str):
    """Reference chart for one script."""
    if kana_type not in KANA_TYPES:
        raise HTTPException(status_code=404, detail=f"Unknown kana type: {kana_type}")
    items = [KanaItemResponse(**item.to_dict()) for item in session.chart_items(kana_type)]
    return ChartResponse(type=kana_type, items=items)


# Selection Endpoints
@app.get("/api/selection", response_model=SelectionResponse)
async def get_selection():
    """Get the active groups, types and study mode."""
    return selection_response()


@app.post("/api/selection/group", response_model=ToggleResponse)
async def toggle_group(request: GroupRequest):
    """Toggle a group. The last active group cannot be removed."""
    try:
        changed = session.toggle_group(request.group)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return toggle_response(changed, "At least one group must stay selected")


@app.post("/api/selection/type", response_model=ToggleResponse)
async def toggle_type(request: TypeRequest):
    """Toggle a script type. The last active type cannot be removed."""
    try:
        changed = session.toggle_type(request.type)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return toggle_response(changed, "At least one kana type must stay selected")


@app.post("/api/selection/diacritics", response_model=ToggleResponse)
async def toggle_diacritics():
    """Add or remove every diacritic group at once."""
    changed = session.toggle_diacritics()
    return toggle_response(changed, "Removing diacritics would leave no groups selected")


@app.post("/api/selection/mode", response_model=ToggleResponse)
async def set_mode(request: ModeRequest):
    """Switch between char-first and romaji-first."""
    try:
        session.set_study_mode(request.mode)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return toggle_response(True, None)


# Study Endpoints
@app.post("/api/study/start", response_model=StudyStateResponse)
async def start_study():
    """Enter the study view with a freshly shuffled round."""
    session.enter_study()
    logger.info(f"Study started with {len(session.pool)} characters")
    return study_state()


@app.post("/api/study/exit", response_model=StudyStateResponse)
async def exit_study():
    """Leave the study view."""
    session.exit_study()
    return study_state()


@app.post("/api/study/next", response_model=StudyStateResponse)
async def next_card():
    """Advance to the next card."""
    session.advance()
    return study_state()


@app.post("/api/study/flip", response_model=StudyStateResponse)
async def flip_card():
    """Flip the card; the first reveal starts the mnemonic fetch."""
    session.flip()
    return study_state()


@app.get("/api/study/state", response_model=StudyStateResponse)
async def get_study_state(wait: bool = False):
    """Get the session state, optionally waiting for a mnemonic in flight."""
    if wait:
        await session.wait_for_enrichment()
    return study_state()


@app.get("/api/stroke/{char}")
async def get_stroke(char: str):
    """Stroke order SVG for a character."""
    if not char:
        raise HTTPException(status_code=404, detail="No character provided")
    loop = asyncio.get_event_loop()
    svg = await loop.run_in_executor(None, lambda: stroke_provider.get_diagram(char))
    if svg is None:
        raise HTTPException(status_code=404, detail=f"Stroke order not available for {char}")
    return Response(content=svg, media_type="image/svg+xml")
