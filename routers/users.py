from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from config.settings import settings
from database.db import get_db
from dependencies.security import get_current_user
from models.users import User as UserModel
from schemas.users import ProfileUpdate, ChangePasswordRequest, UserOut, UserStats
from services.gpa import cumulative_gpa
from services.result_service import load_records
from utils.security import hash_password, verify_password

router = APIRouter(prefix="/users", tags=["users"])


# ✅ [READ] own profile
@router.get("/me")
def read_profile(user: UserModel = Depends(get_current_user)):
    return {"success": True, "data": UserOut.model_validate(user).model_dump(mode="json")}


# ✅ [UPDATE] own profile (name, email)
@router.put("/me")
def update_profile(updated: ProfileUpdate, db: Session = Depends(get_db), user: UserModel = Depends(get_current_user)):
    email = updated.email.lower()
    taken = db.query(UserModel).filter(UserModel.email == email, UserModel.id != user.id).first()
    if taken:
        raise HTTPException(status_code=409, detail="Email already in use")

    user.name = updated.name.strip()
    user.email = email
    db.commit()
    db.refresh(user)
    return {
        "success": True,
        "data": UserOut.model_validate(user).model_dump(mode="json"),
        "message": "Profile updated successfully",
    }


# ✅ [UPDATE] password change
@router.put("/me/password")
def change_password(body: ChangePasswordRequest, db: Session = Depends(get_db), user: UserModel = Depends(get_current_user)):
    if len(body.new_password) < settings.MIN_PASSWORD_LENGTH:
        raise HTTPException(
            status_code=400,
            detail=f"Password must be at least {settings.MIN_PASSWORD_LENGTH} characters",
        )
    if not verify_password(body.current_password, user.password):
        raise HTTPException(status_code=401, detail="Current password is incorrect")

    user.password = hash_password(body.new_password)
    db.commit()
    return {"success": True, "data": {"user_id": user.id}, "message": "Password updated successfully"}


# ✅ [STATS] dashboard CGPA card
@router.get("/me/stats")
def read_stats(db: Session = Depends(get_db), user: UserModel = Depends(get_current_user)):
    records = load_records(db, user.id)
    stats = UserStats(cgpa=cumulative_gpa(records), credit_hours=sum(r.credit for r in records))
    return {"success": True, "data": stats.model_dump()}
