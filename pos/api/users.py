from fastapi import APIRouter, Depends, HTTPException, status
from typing import List

from pos.api.deps import get_user_service
from pos.config import get_settings
from pos.services.errors import (
    AuthenticationError,
    DuplicateKeyError,
    NotFoundError,
    PermissionDeniedError,
)
from pos.services.user_service import UserService
from pos.schemas.user import LoginRequest, UserResponse, UserSave

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("/all", response_model=List[UserResponse], summary="List all users")
def list_users(service: UserService = Depends(get_user_service)):
    return service.get_all()


@router.get("/user/{user_id}", response_model=UserResponse, summary="Get user by ID")
def get_user(
    user_id: int,
    service: UserService = Depends(get_user_service)
):
    try:
        return service.get_by_id(user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("/login", response_model=UserResponse, summary="Log in")
def login(
    credentials: LoginRequest,
    service: UserService = Depends(get_user_service)
):
    """Check username and password and mark the user as logged in."""
    try:
        return service.login(credentials.username, credentials.password)
    except AuthenticationError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))


@router.get("/logout/{user_id}", summary="Log out")
def logout(
    user_id: int,
    service: UserService = Depends(get_user_service)
):
    try:
        service.logout(user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return {"success": True}


@router.post(
    "/post",
    response_model=UserResponse,
    summary="Create or update a user",
    description="Creates a user when no `id` is given, otherwise updates the user with that ID."
)
def save_user(
    user_data: UserSave,
    service: UserService = Depends(get_user_service)
):
    try:
        return service.save(user_data)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except DuplicateKeyError:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Username '{user_data.username}' is already taken"
        )


@router.delete(
    "/user/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a user",
    description="The default administrator can't be deleted."
)
def delete_user(
    user_id: int,
    service: UserService = Depends(get_user_service)
):
    try:
        service.delete(user_id)
    except PermissionDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return None


@router.get(
    "/check",
    summary="Ensure the default admin exists",
    description="Creates the administrator account on first run."
)
def check_admin(service: UserService = Depends(get_user_service)):
    settings = get_settings()
    created = service.ensure_admin(settings.DEFAULT_ADMIN_USERNAME, settings.DEFAULT_ADMIN_PASSWORD)
    return {"created": created is not None}
