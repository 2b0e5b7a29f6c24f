"""Games Routes: CRUD over the games collection, mounted at /games.

Invariants:
    - Every handler is a single GameCatalog call; failures go to the global handlers
    - POST and PUT bodies are validated by Pydantic before reaching the catalog
    - PUT returns the post-merge record (null for a missing id under the idempotent policy)
    - DELETE returns 200 with an empty body
"""

from fastapi import APIRouter, Depends, Response, status

from games_api.api.deps import get_catalog
from games_api.core.domain_types import GameId
from games_api.schemas.game import GameCreate, GameResponse, GameUpdate
from games_api.services.game_catalog import GameCatalog

router = APIRouter(prefix="/games", tags=["Video Games"])

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"description": "The video game was not found"}}


@router.get(
    "", response_model=list[GameResponse],
    summary="Returns the list of all the video games",
)
async def list_games(catalog: GameCatalog = Depends(get_catalog)):
    return await catalog.list_games()


@router.get(
    "/{game_id}", response_model=GameResponse,
    summary="Get the video game by id", responses=_NOT_FOUND,
)
async def get_game(game_id: str, catalog: GameCatalog = Depends(get_catalog)):
    return await catalog.get_game(GameId(game_id))


@router.post(
    "", response_model=GameResponse, status_code=status.HTTP_200_OK,
    summary="Create a new video game",
    responses={status.HTTP_409_CONFLICT: {"description": "The id is already taken"}},
)
async def create_game(
    body: GameCreate, catalog: GameCatalog = Depends(get_catalog),
):
    """Create a game. The server generates `id` unless the body carries one."""
    return await catalog.create_game(body.to_record())


@router.put(
    "/{game_id}", response_model=GameResponse | None,
    summary="Update the video game by the id", responses=_NOT_FOUND,
)
async def update_game(
    game_id: str, body: GameUpdate, catalog: GameCatalog = Depends(get_catalog),
):
    return await catalog.update_game(GameId(game_id), body.to_patch())


@router.delete(
    "/{game_id}", summary="Remove the video game by id", responses=_NOT_FOUND,
)
async def delete_game(game_id: str, catalog: GameCatalog = Depends(get_catalog)):
    await catalog.delete_game(GameId(game_id))
    return Response(status_code=status.HTTP_200_OK)
