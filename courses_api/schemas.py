"""
Response bodies. Field names are the camelCase keys clients see on the wire.
"""

from __future__ import annotations

from pydantic import BaseModel

from courses_api.models.course import Course
from courses_api.models.user import User


class UserResponse(BaseModel):
    id: int
    firstName: str
    lastName: str
    emailAddress: str

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            firstName=user.first_name,
            lastName=user.last_name,
            emailAddress=user.email_address,
        )


class CourseResponse(BaseModel):
    id: int
    title: str
    description: str
    estimatedTime: str | None = None
    materialsNeeded: str | None = None
    creator: UserResponse

    @classmethod
    def from_course(cls, course: Course) -> "CourseResponse":
        return cls(
            id=course.id,
            title=course.title,
            description=course.description,
            estimatedTime=course.estimated_time,
            materialsNeeded=course.materials_needed,
            creator=UserResponse.from_user(course.creator),
        )
