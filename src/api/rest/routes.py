"""REST API routes for combos."""

import random
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from pydantic import BaseModel, Field

from combo.codec import DecodeError, decode, encode
from combo.config import DEFAULT_DIFFICULTY, MAX_DIFFICULTY, MIN_DIFFICULTY, ComboConfig
from combo.scenario import DI, SDI, Move, Position, Scenario, SDIStrength, Tool
from combo.share import build_share_link

from ..transformers.combo_transformer import (
    saved_combo_to_frontend,
    scenario_to_frontend,
    shared_combo_to_frontend,
)
from ...application.ports.combo_store import (
    ComboNotFoundError,
    ComboPermissionError,
    ComboStorePort,
)
from ...application.use_cases.randomize_combo import (
    RandomizeComboRequest,
    RandomizeComboUseCase,
)
from ...application.use_cases.save_combo import SaveComboRequest, SaveComboUseCase

router = APIRouter(prefix="/api", tags=["combos"])


class PositionPayload(BaseModel):
    """Fighter placement in the arena."""

    steve_x: float = Field(default=30.0, alias="steveX", ge=0, le=100)
    lucina_x: float = Field(default=70.0, alias="lucinaX", ge=0, le=100)
    bottom_offset: float = Field(default=0.0, alias="bottomOffset", ge=0)

    class Config:
        populate_by_name = True


class ScenarioPayload(BaseModel):
    """Practice combo settings and positions."""

    percentage: int = Field(default=0, ge=0)
    gold: bool = False
    starting_move: Move = Field(default=Move.JAB, alias="startingMove")
    di: DI = DI.NONE
    sdi: SDI = SDI.NONE
    sdi_strength: SDIStrength = Field(default=SDIStrength.ZERO, alias="sdiStrength")
    tool: Tool = Tool.NONE
    positions: PositionPayload = Field(default_factory=PositionPayload)

    class Config:
        populate_by_name = True

    def to_scenario(self) -> Scenario:
        return Scenario(
            percentage=self.percentage,
            gold=self.gold,
            starting_move=self.starting_move,
            di=self.di,
            sdi=self.sdi,
            sdi_strength=self.sdi_strength,
            tool=self.tool,
            positions=Position(
                steve_x=self.positions.steve_x,
                lucina_x=self.positions.lucina_x,
                bottom_offset=self.positions.bottom_offset,
            ),
        )


class SaveComboBody(ScenarioPayload):
    """Request body for saving a combo."""

    user_id: str = Field(..., alias="userId", min_length=1)
    user_name: Optional[str] = Field(default=None, alias="userName")
    name: Optional[str] = None
    description: Optional[str] = None
    solution: str = ""
    difficulty: int = Field(default=DEFAULT_DIFFICULTY, ge=MIN_DIFFICULTY, le=MAX_DIFFICULTY)
    is_published: bool = Field(default=False, alias="isPublished")


def _error(status_code: int, code: str, message: str, details: Optional[dict] = None) -> HTTPException:
    return HTTPException(
        status_code=status_code,
        detail={
            "error": {
                "code": code,
                "message": message,
                "details": details or {},
            }
        },
    )


def get_combo_store(request: Request) -> ComboStorePort:
    return request.app.state.combo_store


def get_config(request: Request) -> ComboConfig:
    return request.app.state.config


def get_rng(request: Request) -> random.Random:
    return request.app.state.rng


@router.get("/combos/random")
async def randomize_combo(
    difficulty: Optional[int] = Query(None, description="Difficulty 1-10, clamped"),
    container_height: float = Query(0.0, alias="containerHeight", ge=0),
    page_url: Optional[str] = Query(None, alias="pageUrl"),
    config: ComboConfig = Depends(get_config),
    rng: random.Random = Depends(get_rng),
):
    """Draw a new practice combo.

    Args:
        difficulty: Difficulty level; out-of-range values are clamped
        container_height: Arena height in pixels, used for the baseline offset
        page_url: Page the share link should point at

    Returns:
        Scenario, token and share link
    """
    use_case = RandomizeComboUseCase(rng)
    result = use_case.execute(
        RandomizeComboRequest(
            difficulty=difficulty if difficulty is not None else config.difficulty,
            container_height=container_height,
            page_url=page_url or config.base_url,
        )
    )
    return shared_combo_to_frontend(result.scenario, result.token, result.share_link)


@router.post("/combos/encode")
async def encode_combo(
    payload: ScenarioPayload,
    page_url: Optional[str] = Query(None, alias="pageUrl"),
    config: ComboConfig = Depends(get_config),
):
    """Encode a combo into a token and share link."""
    scenario = payload.to_scenario()
    token = encode(scenario)
    return shared_combo_to_frontend(
        scenario, token, build_share_link(page_url or config.base_url, token)
    )


@router.get("/combos/decode")
async def decode_combo(combo: str = Query(..., min_length=1, description="Combo token")):
    """Decode a combo token back into its scenario."""
    try:
        scenario = decode(combo)
    except DecodeError as e:
        raise _error(400, "INVALID_TOKEN", str(e), {"combo": combo})
    return {"scenario": scenario_to_frontend(scenario)}


@router.get("/combos")
async def list_published_combos(store: ComboStorePort = Depends(get_combo_store)):
    """List published combos, newest first."""
    return [saved_combo_to_frontend(c) for c in store.list_published()]


@router.post("/combos", status_code=201)
async def save_combo(body: SaveComboBody, store: ComboStorePort = Depends(get_combo_store)):
    """Save a combo to the library.

    Returns:
        Id of the saved combo
    """
    use_case = SaveComboUseCase(store)
    result = use_case.execute(
        SaveComboRequest(
            scenario=body.to_scenario(),
            user_id=body.user_id,
            user_name=body.user_name,
            name=body.name,
            description=body.description,
            solution=body.solution,
            difficulty=body.difficulty,
            is_published=body.is_published,
        )
    )
    if not result.success:
        raise _error(400, "INVALID_COMBO", result.error or "Combo could not be saved")
    return {"id": result.combo_id}


@router.get("/combos/{combo_id}")
async def get_combo(combo_id: str, store: ComboStorePort = Depends(get_combo_store)):
    """Fetch one saved combo."""
    try:
        return saved_combo_to_frontend(store.get(combo_id))
    except ComboNotFoundError as e:
        raise _error(404, "COMBO_NOT_FOUND", str(e), {"comboId": combo_id})


@router.get("/users/{user_id}/combos")
async def list_user_combos(user_id: str, store: ComboStorePort = Depends(get_combo_store)):
    """List a user's combos, newest first."""
    return [saved_combo_to_frontend(c) for c in store.list_for_user(user_id)]


@router.post("/combos/{combo_id}/publish")
async def publish_combo(
    combo_id: str,
    user_id: str = Query(..., alias="userId", min_length=1),
    store: ComboStorePort = Depends(get_combo_store),
):
    """Publish a combo owned by the user."""
    try:
        return saved_combo_to_frontend(store.publish(combo_id, user_id))
    except ComboNotFoundError as e:
        raise _error(404, "COMBO_NOT_FOUND", str(e), {"comboId": combo_id})
    except ComboPermissionError as e:
        raise _error(403, "FORBIDDEN", str(e), {"comboId": combo_id, "userId": user_id})


@router.delete("/combos/{combo_id}")
async def delete_combo(
    combo_id: str,
    user_id: str = Query(..., alias="userId", min_length=1),
    store: ComboStorePort = Depends(get_combo_store),
):
    """Delete a combo owned by the user."""
    try:
        store.delete(combo_id, user_id)
    except ComboNotFoundError as e:
        raise _error(404, "COMBO_NOT_FOUND", str(e), {"comboId": combo_id})
    except ComboPermissionError as e:
        raise _error(403, "FORBIDDEN", str(e), {"comboId": combo_id, "userId": user_id})
    return {"success": True}
