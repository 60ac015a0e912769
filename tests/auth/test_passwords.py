from courses_api.auth.passwords import hash_password, verify_password


def test_hash_password_never_stores_plaintext() -> None:
    hashed = hash_password('joepassword', rounds=4)

    assert hashed != 'joepassword'
    assert hashed.startswith('$2')


def test_verify_password_round_trip() -> None:
    hashed = hash_password('joepassword', rounds=4)

    assert verify_password('joepassword', hashed) is True
    assert verify_password('joepassword!', hashed) is False


def test_hash_password_salts_each_call() -> None:
    assert hash_password('same', rounds=4) != hash_password('same', rounds=4)


def test_verify_password_rejects_empty_or_malformed_hash() -> None:
    assert verify_password('joepassword', '') is False
    assert verify_password('joepassword', None) is False
    assert verify_password('joepassword', 'not-a-bcrypt-hash') is False
    assert verify_password(None, hash_password('x', rounds=4)) is False
