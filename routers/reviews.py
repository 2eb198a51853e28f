from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from database.db import get_db
from dependencies.security import get_current_user
from models.reviews import SemesterReview as ReviewModel
from models.users import User as UserModel
from schemas.reviews import Review, ReviewSummary, ReviewUpsert
from services.review_service import generate_insight, generate_summary

router = APIRouter(prefix="/reviews", tags=["semester reviews"])


def _serialize(review: ReviewModel) -> Review:
    return Review(
        id=review.id,
        semester_id=review.semester_id,
        gpa=review.gpa,
        time_management=review.time_management,
        difficulty=review.difficulty,
        engagement=review.engagement,
        notes=review.notes or "",
        insight=generate_insight(review),
    )


def _own_reviews(db: Session, user: UserModel):
    return (
        db.query(ReviewModel)
        .filter(ReviewModel.student_id == user.id)
        .order_by(ReviewModel.semester_id)
        .all()
    )


# ✅ [READ] all reviews with their insight line
@router.get("/")
def read_reviews(db: Session = Depends(get_db), user: UserModel = Depends(get_current_user)):
    return {"success": True, "data": [_serialize(r).model_dump() for r in _own_reviews(db, user)]}


# ✅ [SUMMARY] paragraph across all semesters
@router.get("/summary")
def read_review_summary(db: Session = Depends(get_db), user: UserModel = Depends(get_current_user)):
    reviews = _own_reviews(db, user)
    data = ReviewSummary(reviews=[_serialize(r) for r in reviews], summary=generate_summary(reviews))
    return {"success": True, "data": data.model_dump()}


# ✅ [UPSERT] saving a semester again replaces the previous review
@router.put("/{semester_id}")
def save_review(
    semester_id: str,
    body: ReviewUpsert,
    db: Session = Depends(get_db),
    user: UserModel = Depends(get_current_user),
):
    semester_id = semester_id.strip()
    review = (
        db.query(ReviewModel)
        .filter(ReviewModel.student_id == user.id, ReviewModel.semester_id == semester_id)
        .first()
    )
    if review is None:
        review = ReviewModel(student_id=user.id, semester_id=semester_id)
        db.add(review)

    for key, value in body.model_dump().items():
        setattr(review, key, value)

    db.commit()
    db.refresh(review)
    return {"success": True, "data": _serialize(review).model_dump(), "message": "Review saved!"}


# ✅ [DELETE]
@router.delete("/{semester_id}")
def delete_review(semester_id: str, db: Session = Depends(get_db), user: UserModel = Depends(get_current_user)):
    review = (
        db.query(ReviewModel)
        .filter(ReviewModel.student_id == user.id, ReviewModel.semester_id == semester_id)
        .first()
    )
    if review is None:
        raise HTTPException(status_code=404, detail="Review not found")

    db.delete(review)
    db.commit()
    return {"success": True, "data": {"semester_id": semester_id}, "message": "Review deleted"}
