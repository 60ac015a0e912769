"""
Data access for users and courses.

Handlers never touch the session directly; they go through a Store bound to
the request's session. Course reads join the creator explicitly.
"""

from __future__ import annotations

from sqlalchemy.orm import Session, joinedload

from courses_api.errors import RecordNotFound
from courses_api.models.course import Course
from courses_api.models.user import User

COURSE_FIELDS = ("title", "description", "estimated_time", "materials_needed")


class Store:
    def __init__(self, db: Session) -> None:
        self.db = db

    def find_user_by_email(self, email_address: str) -> User | None:
        return (
            self.db.query(User)
            .filter(User.email_address == email_address)
            .order_by(User.id)
            .first()
        )

    def create_user(
        self,
        *,
        first_name: str,
        last_name: str,
        email_address: str,
        password_hash: str,
    ) -> User:
        user = User(
            first_name=first_name,
            last_name=last_name,
            email_address=email_address,
            password=password_hash,
        )
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    def list_courses(self) -> list[Course]:
        return self.db.query(Course).options(joinedload(Course.creator)).order_by(Course.id).all()

    def find_course(self, course_id: int) -> Course | None:
        return (
            self.db.query(Course)
            .options(joinedload(Course.creator))
            .filter(Course.id == course_id)
            .first()
        )

    def load_course(self, course_id: int) -> Course:
        course = self.db.get(Course, course_id)
        if course is None:
            raise RecordNotFound(f"Course {course_id} does not exist")
        return course

    def create_course(self, *, owner: User, fields: dict) -> Course:
        course = Course(user_id=owner.id, **_course_columns(fields))
        self.db.add(course)
        self.db.commit()
        self.db.refresh(course)
        return course

    def update_course(self, course: Course, fields: dict) -> Course:
        for column, value in _course_columns(fields).items():
            setattr(course, column, value)
        self.db.commit()
        self.db.refresh(course)
        return course

    def delete_course(self, course: Course) -> None:
        self.db.delete(course)
        self.db.commit()


def _course_columns(fields: dict) -> dict:
    return {name: fields[name] for name in COURSE_FIELDS if name in fields}
