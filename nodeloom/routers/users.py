from fastapi import APIRouter, Depends, Response

from nodeloom.schemas.api_schemas import RegisterRequest, User, UserEnvelope, UserList, UserUpdate
from nodeloom.dependencies import get_user_service, require_token
from nodeloom.application.user_service import UserService

router = APIRouter()

@router.get("/users", response_model=UserList)
def get_users(users: UserService = Depends(get_user_service)):
    """
    Retrieve all users. Passwords are never included.
    """
    return {"users": users.list_users()}

# Protected routes. User ids are assigned by the store and kept as opaque strings.
protected = APIRouter(dependencies=[Depends(require_token)])

@protected.get("/users/{user_id}", response_model=User)
def get_user(user_id: str, users: UserService = Depends(get_user_service)):
    """
    Get a specific user by ID.
    """
    return users.get_user(user_id)

@protected.post("/users", response_model=UserEnvelope, status_code=201)
def create_user(
    user_data: RegisterRequest,
    users: UserService = Depends(get_user_service),
):
    """
    Create a user on behalf of an authenticated caller.
    """
    user = users.register(user_data.username, user_data.password, email=user_data.email)
    return {"user": user}

@protected.put("/users/{user_id}", response_model=User)
def update_user(
    user_id: str,
    user_data: UserUpdate,
    users: UserService = Depends(get_user_service),
):
    """
    Update a user's username and/or password.
    """
    return users.update_user(user_id, username=user_data.username, password=user_data.password)

@protected.delete("/users/{user_id}", status_code=204)
def delete_user(user_id: str, users: UserService = Depends(get_user_service)):
    """
    Delete a user account.
    """
    users.delete_user(user_id)
    return Response(status_code=204)

router.include_router(protected)
