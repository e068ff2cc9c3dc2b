from nacl.exceptions import BadSignatureError, CryptoError
from nacl.signing import SigningKey, VerifyKey


class Ed25519Signer:
    """SignerPort backed by libsodium Ed25519 verification."""

    def is_signer(self, owner: bytes, message: bytes, signature: bytes) -> bool:
        if len(owner) != 32 or len(signature) != 64:
            return False
        try:
            VerifyKey(owner).verify(message, signature)
            return True
        except (BadSignatureError, CryptoError):
            return False


def sign(signing_key: SigningKey, message: bytes) -> bytes:
    """Detached Ed25519 signature over message."""
    return bytes(signing_key.sign(message).signature)
