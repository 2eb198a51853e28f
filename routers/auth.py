import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from database.db import get_db
from models.users import User as UserModel
from schemas.users import RegisterRequest, LoginRequest, LoginResponse, UserOut
from utils.security import hash_password, verify_password, create_access_token

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


# ✅ [REGISTER] create a student or staff account
@router.post("/register", status_code=201)
def register(request: RegisterRequest, db: Session = Depends(get_db)):
    email = request.email.lower()
    if db.query(UserModel).filter(UserModel.email == email).first():
        raise HTTPException(status_code=409, detail="Email already exists")

    user = UserModel(
        name=request.name.strip(),
        email=email,
        password=hash_password(request.password),
        role=request.role,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Registered %s user id=%s", user.role, user.id)
    return {
        "success": True,
        "data": UserOut.model_validate(user).model_dump(mode="json"),
        "message": "Register success",
    }


# ✅ [LOGIN] verify credentials and hand out a bearer token
@router.post("/login")
def login(request: LoginRequest, db: Session = Depends(get_db)):
    user = db.query(UserModel).filter(UserModel.email == request.email.lower()).first()
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    if not verify_password(request.password, user.password):
        raise HTTPException(status_code=401, detail="Wrong password")

    payload = LoginResponse(
        user=UserOut.model_validate(user),
        token=create_access_token(user.id, user.role),
    )
    return {"success": True, "data": payload.model_dump(mode="json"), "message": "Login success"}
