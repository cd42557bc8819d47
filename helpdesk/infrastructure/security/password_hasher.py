import base64
import hashlib
import hmac
import os


class PasswordHasher:
    """
    PBKDF2-SHA256 hashes stored as one self-describing string:

        pbkdf2_sha256$<iterations>$<b64 salt>$<b64 digest>
    """

    DEFAULT_ALGO = "pbkdf2_sha256"
    DEFAULT_ITERATIONS = 600_000
    SALT_BYTES = 16

    @classmethod
    def _derive(cls, password: str, salt: bytes, iterations: int) -> bytes:
        return hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)

    @classmethod
    def hash_password(cls, password: str, *, iterations: int | None = None) -> str:
        if not password:
            raise ValueError("Password must not be empty.")

        it = iterations or cls.DEFAULT_ITERATIONS
        salt = os.urandom(cls.SALT_BYTES)
        dk = cls._derive(password, salt, it)

        return "$".join(
            [
                cls.DEFAULT_ALGO,
                str(it),
                base64.b64encode(salt).decode("ascii"),
                base64.b64encode(dk).decode("ascii"),
            ]
        )

    @classmethod
    def _parse(cls, password_hash: str) -> tuple[int, bytes, bytes] | None:
        try:
            algo, iterations, salt_b64, hash_b64 = password_hash.split("$")
            it = int(iterations)
            salt = base64.b64decode(salt_b64.encode("ascii"), validate=True)
            expected = base64.b64decode(hash_b64.encode("ascii"), validate=True)
        except (AttributeError, ValueError):
            return None

        if algo != cls.DEFAULT_ALGO or it <= 0 or not salt or not expected:
            return None
        return it, salt, expected

    @classmethod
    def verify_password(cls, password: str, password_hash: str | None) -> bool:
        parsed = cls._parse(password_hash) if password_hash else None
        if parsed is None:
            # same cost as a real check so malformed and mismatch look alike
            cls._derive(password or "", b"\x00" * cls.SALT_BYTES, cls.DEFAULT_ITERATIONS)
            return False

        iterations, salt, expected = parsed
        dk = cls._derive(password or "", salt, iterations)
        return hmac.compare_digest(dk, expected)

    @classmethod
    def dummy_verify(cls, password: str) -> None:
        cls.verify_password(password, None)

    @classmethod
    def needs_rehash(cls, password_hash: str) -> bool:
        parsed = cls._parse(password_hash)
        return parsed is None or parsed[0] < cls.DEFAULT_ITERATIONS
