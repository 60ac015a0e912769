from fastapi import APIRouter, Depends, status
from fastapi.responses import Response

from courses_api.auth.dependencies import get_current_user
from courses_api.auth.passwords import hash_password
from courses_api.dependencies import get_json_body, get_store
from courses_api.errors import ValidationFailed
from courses_api.models.user import User
from courses_api.schemas import UserResponse
from courses_api.store import Store
from courses_api.validation import USER_RULES, collect_errors

router = APIRouter(tags=['users'])


@router.get('/users', response_model=UserResponse)
def get_authenticated_user(current_user: User = Depends(get_current_user)):
    return UserResponse.from_user(current_user)


@router.post('/users', status_code=status.HTTP_201_CREATED, response_class=Response)
def create_user(payload: dict = Depends(get_json_body), store: Store = Depends(get_store)):
    errors = collect_errors(payload, USER_RULES)
    if errors:
        raise ValidationFailed(errors)

    store.create_user(
        first_name=payload['firstName'],
        last_name=payload['lastName'],
        email_address=payload['emailAddress'],
        password_hash=hash_password(payload['password']),
    )
    return Response(status_code=status.HTTP_201_CREATED, headers={'Location': '/'})
