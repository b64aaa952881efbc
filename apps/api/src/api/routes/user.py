"""User API routes."""

from api.services import get_user_service
from common.exceptions import UserNotFoundError
from common.models.user import User
from common.services.user_service import UserService
from fastapi import APIRouter, Depends, HTTPException, Response, status

router = APIRouter(prefix="/users", tags=["users"], redirect_slashes=False)


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found.")


@router.get("", response_model=list[User])
@router.get("/", response_model=list[User])
async def list_users(service: UserService = Depends(get_user_service)) -> list[User]:
    return service.list_users()


@router.get("/{user_id}", response_model=User)
async def get_user(user_id: int, service: UserService = Depends(get_user_service)) -> User:
    try:
        return service.get_user(user_id)
    except UserNotFoundError:
        raise _not_found() from None


@router.post("", response_model=User, status_code=status.HTTP_200_OK)
@router.post("/", response_model=User, status_code=status.HTTP_200_OK)
async def add_user(user: User, service: UserService = Depends(get_user_service)) -> User:
    return service.add_user(user)


@router.put("/{user_id}", response_model=User)
async def update_user(user_id: int, user: User, service: UserService = Depends(get_user_service)) -> User:
    try:
        return service.update_user(user_id, user)
    except UserNotFoundError:
        raise _not_found() from None


@router.delete("/{user_id}", status_code=status.HTTP_200_OK, response_class=Response)
async def delete_user(user_id: int, service: UserService = Depends(get_user_service)) -> Response:
    try:
        service.delete_user(user_id)
    except UserNotFoundError:
        raise _not_found() from None
    return Response(status_code=status.HTTP_200_OK)
