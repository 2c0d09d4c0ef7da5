# storefront/api/routers/users.py
from fastapi import APIRouter, Depends, HTTPException

from storefront.data.context import StoreContext, get_context
from storefront.domain.schemas import LoginIn, UserRead
from storefront.services.user_service import AuthFacade

router = APIRouter(tags=["users"])


@router.post("/auth/login", response_model=UserRead)
def login(payload: LoginIn, ctx: StoreContext = Depends(get_context)):
    user = AuthFacade(ctx).login(payload.username, payload.password)
    if not user:
        raise HTTPException(status_code=401, detail="Invalid username or password")
    return user


@router.get("/users/{user_id}", response_model=UserRead)
def get_user(user_id: int, ctx: StoreContext = Depends(get_context)):
    user = ctx.users.get_by_id(user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user
