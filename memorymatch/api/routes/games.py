"""Memory game API routes."""

import logging

from fastapi import APIRouter, HTTPException, Response, status
from pydantic import BaseModel

from memorymatch.api.dependencies import GameManagerDep
from memorymatch.config import get_default_pair_count
from memorymatch.domain.constants import CARD_BACK, GameMessages
from memorymatch.domain.services.deck_generator import InvalidConfigurationError
from memorymatch.domain.services.game_manager import (
    GameExpiredError,
    GameLimitError,
    GameManager,
    GameNotFoundError,
)
from memorymatch.domain.services.game_session import GameSession

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/games", tags=["games"])


# =============================================================================
# Request/Response Models
# =============================================================================


class CreateGameRequest(BaseModel):
    """Request body for creating a game."""

    pair_count: int | None = None


class ConfigureGameRequest(BaseModel):
    """Request body for reconfiguring a game."""

    pair_count: int


class SelectCardRequest(BaseModel):
    """Request body for tapping a card."""

    index: int


class CardResponse(BaseModel):
    """Card in API response. Face-down cards hide their symbol."""

    index: int
    id: int
    symbol: str | None
    matched: bool
    face_up: bool


class GameResponse(BaseModel):
    """Full game snapshot."""

    game_id: str
    state: str
    pair_count: int
    cards: list[CardResponse]
    elapsed_seconds: int
    is_active: bool
    is_won: bool
    attempts: int
    matched_pairs: int
    remaining_pairs: int
    message: str | None = None


class SelectCardResponse(GameResponse):
    """Snapshot after a tap, with whether the tap was accepted."""

    accepted: bool


class PairCountOption(BaseModel):
    """Selectable pair count."""

    pair_count: int
    label: str


class GameOptionsResponse(BaseModel):
    """Configuration choices offered to the UI."""

    title: str
    options: list[PairCountOption]
    default_pair_count: int
    card_back: str
    timer_mode: str


class ErrorDetail(BaseModel):
    """Error detail structure."""

    code: str
    message: str
    details: dict | None = None


class ErrorResponse(BaseModel):
    """Error response wrapper."""

    error: ErrorDetail


# =============================================================================
# Helpers
# =============================================================================


def _error(status_code: int, code: str, message: str, details: dict | None = None) -> HTTPException:
    error: dict = {"code": code, "message": message}
    if details is not None:
        error["details"] = details
    return HTTPException(status_code=status_code, detail={"error": error})


def _invalid_configuration(e: InvalidConfigurationError) -> HTTPException:
    return _error(
        422,
        "INVALID_CONFIGURATION",
        str(e),
        {"pair_count": e.pair_count, "supported": list(e.supported)},
    )


def _get_game_or_raise(game_manager: GameManager, game_id: str) -> GameSession:
    try:
        return game_manager.get_game(game_id)
    except GameNotFoundError:
        raise _error(
            status.HTTP_404_NOT_FOUND, "GAME_NOT_FOUND", f"Game {game_id} not found"
        ) from None
    except GameExpiredError:
        raise _error(
            status.HTTP_410_GONE, "GAME_EXPIRED", "Game has timed out due to inactivity"
        ) from None


def _to_response(session: GameSession) -> dict:
    snapshot = session.snapshot()
    data = snapshot.to_dict()
    for card in data["cards"]:
        if not card["face_up"]:
            card["symbol"] = None
    data["game_id"] = session.id
    data["message"] = GameMessages.won(snapshot.elapsed_seconds) if snapshot.is_won else None
    return data


# =============================================================================
# Routes
# =============================================================================


@router.get("/options", response_model=GameOptionsResponse)
async def get_options(game_manager: GameManagerDep) -> GameOptionsResponse:
    """List the pair counts a game can be configured with."""
    return GameOptionsResponse(
        title=GameMessages.TITLE,
        options=[
            PairCountOption(pair_count=count, label=GameMessages.pair_count_label(count))
            for count in game_manager.supported_pair_counts
        ],
        default_pair_count=get_default_pair_count(),
        card_back=CARD_BACK,
        timer_mode="internal" if game_manager.auto_tick else "external",
    )


@router.post(
    "",
    response_model=GameResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        422: {"model": ErrorResponse, "description": "Unsupported pair count"},
        503: {"model": ErrorResponse, "description": "Too many games"},
    },
)
async def create_game(request: CreateGameRequest, game_manager: GameManagerDep) -> GameResponse:
    """Create a game with a freshly shuffled deck, ready to start."""
    pair_count = request.pair_count if request.pair_count is not None else get_default_pair_count()
    try:
        session = game_manager.create_game(pair_count)
    except InvalidConfigurationError as e:
        raise _invalid_configuration(e) from None
    except GameLimitError as e:
        raise _error(
            status.HTTP_503_SERVICE_UNAVAILABLE,
            "GAME_LIMIT_REACHED",
            "Too many games in progress, try again later",
            {"max_games": e.max_games},
        ) from None

    return GameResponse(**_to_response(session))


@router.get(
    "/{game_id}",
    response_model=GameResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Game not found"},
        410: {"model": ErrorResponse, "description": "Game expired"},
    },
)
async def get_game(game_id: str, game_manager: GameManagerDep) -> GameResponse:
    """Get the current snapshot of a game."""
    session = _get_game_or_raise(game_manager, game_id)
    return GameResponse(**_to_response(session))


@router.post(
    "/{game_id}/configure",
    response_model=GameResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Game not found"},
        410: {"model": ErrorResponse, "description": "Game expired"},
        422: {"model": ErrorResponse, "description": "Unsupported pair count"},
    },
)
async def configure_game(
    game_id: str,
    request: ConfigureGameRequest,
    game_manager: GameManagerDep,
) -> GameResponse:
    """Deal a new deck with the given pair count, discarding progress."""
    session = _get_game_or_raise(game_manager, game_id)
    try:
        session.configure(request.pair_count)
    except InvalidConfigurationError as e:
        raise _invalid_configuration(e) from None
    return GameResponse(**_to_response(session))


@router.post(
    "/{game_id}/start",
    response_model=GameResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Game not found"},
        410: {"model": ErrorResponse, "description": "Game expired"},
    },
)
async def start_game(game_id: str, game_manager: GameManagerDep) -> GameResponse:
    """Start (or restart) the game clock."""
    session = _get_game_or_raise(game_manager, game_id)
    session.start()
    return GameResponse(**_to_response(session))


@router.post(
    "/{game_id}/select",
    response_model=SelectCardResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Game not found"},
        410: {"model": ErrorResponse, "description": "Game expired"},
    },
)
async def select_card(
    game_id: str,
    request: SelectCardRequest,
    game_manager: GameManagerDep,
) -> SelectCardResponse:
    """Tap a card. Taps that break the selection rules are ignored."""
    session = _get_game_or_raise(game_manager, game_id)
    accepted = session.select_card(request.index)
    return SelectCardResponse(**_to_response(session), accepted=accepted)


@router.post(
    "/{game_id}/tick",
    response_model=GameResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Game not found"},
        410: {"model": ErrorResponse, "description": "Game expired"},
    },
)
async def tick_game(game_id: str, game_manager: GameManagerDep) -> GameResponse:
    """Count one elapsed second (for clients driving the timer themselves)."""
    session = _get_game_or_raise(game_manager, game_id)
    session.on_tick()
    return GameResponse(**_to_response(session))


@router.post(
    "/{game_id}/reset",
    response_model=GameResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Game not found"},
        410: {"model": ErrorResponse, "description": "Game expired"},
    },
)
async def reset_game(game_id: str, game_manager: GameManagerDep) -> GameResponse:
    """Deal a new deck with the current pair count."""
    session = _get_game_or_raise(game_manager, game_id)
    session.reset()
    return GameResponse(**_to_response(session))


@router.delete(
    "/{game_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse, "description": "Game not found"}},
)
async def end_game(game_id: str, game_manager: GameManagerDep) -> Response:
    """End a game and release its timers."""
    try:
        game_manager.end_game(game_id)
    except GameNotFoundError:
        raise _error(
            status.HTTP_404_NOT_FOUND, "GAME_NOT_FOUND", f"Game {game_id} not found"
        ) from None
    return Response(status_code=status.HTTP_204_NO_CONTENT)
