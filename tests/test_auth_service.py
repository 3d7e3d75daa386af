import os
import subprocess
import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest
from jose import JWTError, jwt

from models import UserRole
from services import auth_service
from services.auth_service import create_access_token, decode_access_token

PROJECT_ROOT = Path(__file__).resolve().parents[1]


def _import_without_secret(module):
    env = {k: v for k, v in os.environ.items() if k != "JWT_SECRET"}
    return subprocess.run(
        [sys.executable, "-c", f"import {module}"],
        cwd=PROJECT_ROOT,
        env=env,
        capture_output=True,
        text=True,
    )


def test_auth_module_refuses_to_load_without_secret():
    result = _import_without_secret("services.auth_service")

    assert result.returncode != 0
    assert "JWT_SECRET is not set" in result.stderr


def test_client_modules_load_without_secret():
    result = _import_without_secret("utils.api_client")

    assert result.returncode == 0, result.stderr


def test_token_signed_with_another_key_is_rejected():
    forged = jwt.encode({"sub": "1", "role": "admin", "jti": "x"}, "adora-dev-secret", algorithm="HS256")

    with pytest.raises(JWTError):
        decode_access_token(forged)


def test_revoked_ids_are_pruned_after_expiry(monkeypatch):
    monkeypatch.setattr(auth_service, "_revoked_token_ids", {})
    expired_claims = {"sub": "1", "jti": "old", "exp": int(datetime.now(timezone.utc).timestamp()) - 60}
    live_token = create_access_token(2, UserRole.BRAND_COMPANY)
    live_claims = decode_access_token(live_token)

    auth_service.AuthService.sign_out(expired_claims)
    auth_service.AuthService.sign_out(live_claims)
    assert set(auth_service._revoked_token_ids) == {"old", live_claims["jti"]}

    with pytest.raises(JWTError):
        decode_access_token(live_token)

    assert set(auth_service._revoked_token_ids) == {live_claims["jti"]}
