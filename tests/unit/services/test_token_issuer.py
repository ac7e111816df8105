import hashlib

from crm_core.app.services.token_issuer import TOKEN_BYTES, hash_token, issue_token, verify_token


def test_issued_token_has_256_bits_of_entropy():
    issued = issue_token()

    assert len(issued.raw) == TOKEN_BYTES * 2
    int(issued.raw, 16)  # hex encoded


def test_issued_token_hash_is_sha256_of_raw():
    issued = issue_token()

    assert issued.token_hash == hashlib.sha256(issued.raw.encode()).hexdigest()
    assert issued.token_hash != issued.raw


def test_tokens_are_unique():
    assert len({issue_token().raw for _ in range(50)}) == 50


def test_repr_does_not_leak_raw_token():
    issued = issue_token()

    assert issued.raw not in repr(issued)
    assert issued.token_hash in repr(issued)


def test_verify_token():
    issued = issue_token()

    assert verify_token(issued.raw, issued.token_hash)
    assert not verify_token(issued.raw + "0", issued.token_hash)
    assert not verify_token("", issued.token_hash)


def test_hash_token_is_deterministic():
    assert hash_token("abc") == hash_token("abc")
    assert hash_token("abc") != hash_token("abd")
