from helpdesk.infrastructure.security.password_hasher import PasswordHasher


def test_hash_is_self_describing():
    hashed = PasswordHasher.hash_password("s3cret-pass")
    algo, iterations, salt, digest = hashed.split("$")
    assert algo == "pbkdf2_sha256"
    assert int(iterations) == PasswordHasher.DEFAULT_ITERATIONS
    assert salt and digest


def test_verify_accepts_matching_password():
    hashed = PasswordHasher.hash_password("s3cret-pass")
    assert PasswordHasher.verify_password("s3cret-pass", hashed) is True


def test_verify_rejects_other_password():
    hashed = PasswordHasher.hash_password("s3cret-pass")
    assert PasswordHasher.verify_password("s3cret-pasS", hashed) is False


def test_same_password_hashes_differently():
    assert PasswordHasher.hash_password("same") != PasswordHasher.hash_password("same")


def test_cost_is_read_from_the_stored_hash():
    hashed = PasswordHasher.hash_password("s3cret-pass", iterations=500)
    assert hashed.split("$")[1] == "500"
    assert PasswordHasher.verify_password("s3cret-pass", hashed) is True
    assert PasswordHasher.needs_rehash(hashed) is True


def test_malformed_hash_fails_closed():
    for bad in ["", "garbage", "md5$1$abc$def", "pbkdf2_sha256$x$abc$def", "pbkdf2_sha256$10$!!!$???", None]:
        assert PasswordHasher.verify_password("whatever", bad) is False


def test_empty_password_cannot_be_hashed():
    try:
        PasswordHasher.hash_password("")
    except ValueError:
        pass
    else:
        raise AssertionError("expected ValueError")
