import pytest

from courses_api.validation import COURSE_RULES, USER_RULES, collect_errors, is_email, is_present


def test_collect_errors_reports_every_missing_user_field_in_order() -> None:
    errors = collect_errors({}, USER_RULES)

    assert errors == [
        'Please provide a value for "firstName"',
        'Please provide a value for "lastName"',
        'Please provide a value for "emailAddress"',
        'Please provide a value for "password"',
    ]


def test_collect_errors_returns_empty_list_for_valid_user() -> None:
    payload = {
        'firstName': 'Joe',
        'lastName': 'Smith',
        'emailAddress': 'joe@smith.com',
        'password': 'joepassword',
    }

    assert collect_errors(payload, USER_RULES) == []


def test_collect_errors_flags_malformed_email() -> None:
    payload = {'firstName': 'A', 'lastName': 'B', 'emailAddress': 'bad', 'password': 'x'}

    assert collect_errors(payload, USER_RULES) == [
        'Please provide a valid email address for "emailAddress"',
    ]


def test_collect_errors_keeps_declaration_order_for_mixed_failures() -> None:
    payload = {'lastName': 'B', 'emailAddress': 'not-an-email'}

    assert collect_errors(payload, USER_RULES) == [
        'Please provide a value for "firstName"',
        'Please provide a valid email address for "emailAddress"',
        'Please provide a value for "password"',
    ]


def test_collect_errors_for_course_payload() -> None:
    assert collect_errors({'estimatedTime': '2 hours'}, COURSE_RULES) == [
        'Please provide a value for "title"',
        'Please provide a value for "description"',
    ]


@pytest.mark.parametrize('value', [None, '', '   '])
def test_is_present_rejects_blank_values(value) -> None:
    assert is_present(value) is False


@pytest.mark.parametrize('value', ['x', 0, False, []])
def test_is_present_accepts_non_null_values(value) -> None:
    assert is_present(value) is True


def test_is_email_leaves_missing_values_to_presence_rule() -> None:
    assert is_email(None) is True


@pytest.mark.parametrize('value', ['bad', 'joe@', '@smith.com', 42])
def test_is_email_rejects_invalid_addresses(value) -> None:
    assert is_email(value) is False
