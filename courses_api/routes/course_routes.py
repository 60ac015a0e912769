from fastapi import APIRouter, Depends, status
from fastapi.responses import Response

from courses_api.auth.dependencies import get_current_user
from courses_api.auth.ownership import ensure_owner
from courses_api.dependencies import get_json_body, get_store
from courses_api.errors import ValidationFailed
from courses_api.models.user import User
from courses_api.schemas import CourseResponse
from courses_api.store import Store
from courses_api.validation import COURSE_RULES, collect_errors

router = APIRouter(tags=['courses'])

PAYLOAD_TO_COLUMN = {
    'title': 'title',
    'description': 'description',
    'estimatedTime': 'estimated_time',
    'materialsNeeded': 'materials_needed',
}


def course_fields(payload: dict) -> dict:
    """Map the writable keys present in a request body to column names.

    Anything else in the body (ids, userId) is ignored, so ownership can
    only come from the authenticated caller.
    """
    return {column: payload[key] for key, column in PAYLOAD_TO_COLUMN.items() if key in payload}


def validate_course_payload(payload: dict) -> None:
    errors = collect_errors(payload, COURSE_RULES)
    if errors:
        raise ValidationFailed(errors)


@router.get('/courses', response_model=list[CourseResponse])
def list_courses(store: Store = Depends(get_store)):
    return [CourseResponse.from_course(course) for course in store.list_courses()]


@router.get('/courses/{course_id}', response_model=CourseResponse | None)
def get_course(course_id: int, store: Store = Depends(get_store)):
    # A missing course is answered with 200 and a null body.
    course = store.find_course(course_id)
    if course is None:
        return None
    return CourseResponse.from_course(course)


@router.post('/courses', status_code=status.HTTP_201_CREATED, response_class=Response)
def create_course(
    payload: dict = Depends(get_json_body),
    current_user: User = Depends(get_current_user),
    store: Store = Depends(get_store),
):
    validate_course_payload(payload)

    course = store.create_course(owner=current_user, fields=course_fields(payload))
    return Response(
        status_code=status.HTTP_201_CREATED,
        headers={'Location': f'/courses/{course.id}'},
    )


@router.put('/courses/{course_id}', status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def update_course(
    course_id: int,
    payload: dict = Depends(get_json_body),
    current_user: User = Depends(get_current_user),
    store: Store = Depends(get_store),
):
    validate_course_payload(payload)

    course = store.load_course(course_id)
    ensure_owner(current_user, course)

    store.update_course(course, course_fields(payload))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete('/courses/{course_id}', status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_course(
    course_id: int,
    current_user: User = Depends(get_current_user),
    store: Store = Depends(get_store),
):
    course = store.load_course(course_id)
    ensure_owner(current_user, course)

    store.delete_course(course)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
