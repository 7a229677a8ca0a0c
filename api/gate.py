# api/gate.py
"""
Navigation gate for browser page loads.

* `/auth/...` pages bounce signed-in users to the dashboard
* protected pages bounce anonymous users to sign-in, remembering where
  they were headed in `?redirectedFrom=`
* everything else (API, docs, health, landing) passes through; API
  routes answer 401 on their own
"""
from __future__ import annotations

from urllib.parse import urlencode

from fastapi import Request
from fastapi.responses import RedirectResponse

from api.deps import optional_user

PROTECTED_PREFIXES = ("/dashboard", "/diet", "/exercise", "/profile")
PUBLIC_PATHS = ("/", "/auth/verify-email")
SIGNIN_PATH = "/auth/signin"
HOME_PATH = "/dashboard"


def _under(path: str, prefix: str) -> bool:
    return path == prefix or path.startswith(prefix + "/")


def gate_redirect(path: str, signed_in: bool) -> str | None:
    """Where to send this navigation, or None to let it through."""
    if path in PUBLIC_PATHS:
        return None
    if _under(path, "/auth"):
        return HOME_PATH if signed_in else None
    if any(_under(path, p) for p in PROTECTED_PREFIXES) and not signed_in:
        return f"{SIGNIN_PATH}?{urlencode({'redirectedFrom': path})}"
    return None


async def route_gate(request: Request, call_next):
    if request.method in ("GET", "HEAD"):
        target = gate_redirect(request.url.path, optional_user(request) is not None)
        if target is not None:
            return RedirectResponse(target, status_code=307)
    return await call_next(request)
