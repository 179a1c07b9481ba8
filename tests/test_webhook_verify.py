from __future__ import annotations

import base64
import hashlib
import hmac

from app.infrastructure.line.webhook_verify import compute_signature, verify_signature


SECRET = "channel-secret"
BODY = b'{"destination":"U1","events":[]}'


def test_compute_signature_matches_line_scheme():
    expected = base64.b64encode(hmac.new(SECRET.encode(), BODY, hashlib.sha256).digest()).decode()
    assert compute_signature(BODY, SECRET) == expected


def test_valid_signature():
    assert verify_signature(BODY, compute_signature(BODY, SECRET), SECRET)


def test_missing_signature():
    assert not verify_signature(BODY, None, SECRET)
    assert not verify_signature(BODY, "", SECRET)


def test_wrong_secret_or_tampered_body():
    signature = compute_signature(BODY, SECRET)
    assert not verify_signature(BODY, signature, "other-secret")
    assert not verify_signature(BODY + b" ", signature, SECRET)


def test_missing_secret_rejects():
    assert not verify_signature(BODY, compute_signature(BODY, SECRET), None)
