from courses_api.errors import AuthorizationDenied
from courses_api.models.course import Course
from courses_api.models.user import User


def is_owner(user: User, course: Course) -> bool:
    return user.id == course.user_id


def ensure_owner(user: User, course: Course) -> None:
    if not is_owner(user, course):
        raise AuthorizationDenied()
