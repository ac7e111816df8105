from crm_core.adapter.services.bcrypt_password_hasher import BcryptPasswordHasher

hasher = BcryptPasswordHasher(rounds=4)


def test_hash_and_verify():
    password_hash = hasher.hash("SecurePass123!")

    assert password_hash.startswith("$2b$04$")
    assert hasher.verify("SecurePass123!", password_hash)
    assert not hasher.verify("WrongPass123!", password_hash)


def test_hashes_are_salted():
    assert hasher.hash("SecurePass123!") != hasher.hash("SecurePass123!")


def test_malformed_hash_does_not_verify():
    assert hasher.verify("SecurePass123!", "not-a-bcrypt-hash") is False


def test_long_passwords_are_accepted():
    password = "x" * 100

    assert hasher.verify(password, hasher.hash(password))
