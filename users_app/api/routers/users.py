from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, status

from users_app.api.deps import get_user_id_from_query, get_user_service
from users_app.api.routing import DecimalJSONRoute
from users_app.dto import UserDTO
from users_app.dto.mappers import user_from_dto
from users_app.schemas.common import ErrorResponse
from users_app.services.users import UserService

router = APIRouter(prefix="/users", tags=["users"], route_class=DecimalJSONRoute)

_ERRORS = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.get(
    "",
    response_model=UserDTO,
    responses={**_ERRORS, 404: {"model": ErrorResponse}},
    summary="Get a user by id",
)
async def get_user(
    user_id: uuid.UUID = Depends(get_user_id_from_query),
    svc: UserService = Depends(get_user_service),
):
    return await svc.get_user_by_id(user_id)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=UserDTO,
    responses={**_ERRORS, 409: {"model": ErrorResponse}},
    summary="Create a user with a caller-supplied id",
)
async def create_user(
    payload: UserDTO,
    svc: UserService = Depends(get_user_service),
):
    await svc.create_user(user_from_dto(payload))
    return payload


@router.put(
    "",
    response_model=str,
    responses={**_ERRORS, 404: {"model": ErrorResponse}},
    summary="Replace every field of an existing user",
)
async def update_user(
    payload: UserDTO,
    svc: UserService = Depends(get_user_service),
):
    await svc.update_user(user_from_dto(payload))
    return "user updated"


@router.delete(
    "",
    response_model=str,
    responses={**_ERRORS, 404: {"model": ErrorResponse}},
    summary="Delete a user by id",
)
async def delete_user(
    user_id: uuid.UUID = Depends(get_user_id_from_query),
    svc: UserService = Depends(get_user_service),
):
    await svc.delete_user(user_id)
    return "user deleted"
