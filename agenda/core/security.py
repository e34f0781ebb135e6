import time
import hmac
import hashlib
import base64
import json
from typing import Any, Dict, Optional

from passlib.context import CryptContext

# Token assinado com HMAC-SHA256: base64url(payload) + "." + base64url(assinatura).
# O payload só carrega o id do usuário; papel e status vêm sempre do banco.

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def _b64url_encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("utf-8")

def _b64url_decode(data: str) -> bytes:
    padding = "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode((data + padding).encode("utf-8"))

def _digest(msg: bytes, secret: str) -> bytes:
    return hmac.new(secret.encode("utf-8"), msg, hashlib.sha256).digest()

def sign(payload: Dict[str, Any], secret: str, ttl_seconds: int = 60 * 60 * 24) -> str:
    now = int(time.time())
    body = {
        **payload,
        "iat": now,
        "exp": now + int(ttl_seconds),
    }
    msg = json.dumps(body, separators=(",", ":"), ensure_ascii=False).encode("utf-8")
    return _b64url_encode(msg) + "." + _b64url_encode(_digest(msg, secret))

def verify(token: str, secret: str) -> Optional[Dict[str, Any]]:
    """Devolve o payload se a assinatura confere e o token não expirou, senão None."""
    try:
        msg_b64, sig_b64 = token.split(".", 1)
        msg = _b64url_decode(msg_b64)
        sig = _b64url_decode(sig_b64)
    except (ValueError, UnicodeEncodeError):
        return None

    if not hmac.compare_digest(sig, _digest(msg, secret)):
        return None

    try:
        payload = json.loads(msg.decode("utf-8"))
        expires = int(payload.get("exp", 0))
    except (ValueError, TypeError, AttributeError):
        return None

    if expires < int(time.time()):
        return None
    return payload


def hash_password(password: str) -> str:
    return pwd_context.hash(password)

def verify_password(password: str, password_hash: str | None) -> bool:
    if not password_hash:
        return False
    return pwd_context.verify(password, password_hash)
