"""Unit tests for password hashing."""

from quill.util.password import hash_password, verify_password


class TestPasswordHashing:
    """Tests for hash_password and verify_password."""

    def test_hash_verifies_and_is_salted(self):
        first = hash_password("open sesame")
        second = hash_password("open sesame")

        assert first != second
        assert verify_password("open sesame", first)
        assert verify_password("open sesame", second)
        assert not verify_password("open sesame!", first)

    def test_malformed_hash_does_not_verify(self):
        assert verify_password("anything", "not-a-bcrypt-hash") is False

    def test_long_passwords_are_accepted(self):
        password = "p" * 100

        assert verify_password(password, hash_password(password))
