"""FastAPI gateway exposing action detection to automation pipelines.

``GET /actions?root=...`` reveals whether marker files exist at any path the
server process can stat. The default bind is loopback only; set
``AGEN_GATEWAY_CONFINE=1`` (or pass ``confine_root=True``) to reject roots
outside the configured repository.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from agen.config import Settings
from agen.runtime import inspect_repo


def _within(target: Path, base: Path) -> bool:
    try:
        return target.resolve().is_relative_to(base.resolve())
    except (OSError, ValueError):
        return False


def create_app(
    repo_root: Path | None = None,
    strict: bool | None = None,
    confine_root: bool | None = None,
) -> FastAPI:
    settings = Settings.from_env()

    app = FastAPI()
    app.state.repo_root = Path(repo_root or settings.repo)
    app.state.strict = settings.strict if strict is None else strict
    app.state.confine_root = settings.confine_root if confine_root is None else confine_root

    @app.get("/health")
    def health():
        return JSONResponse({"ok": True})

    @app.get("/actions")
    def actions(root: Optional[str] = None, strict: Optional[bool] = None):
        target = Path(root) if root else app.state.repo_root
        if app.state.confine_root and not _within(target, app.state.repo_root):
            return JSONResponse(
                {"success": False, "root": root, "actions": [], "error": "root is outside the configured repository"},
                status_code=403,
            )
        use_strict = app.state.strict if strict is None else strict
        result = inspect_repo(target, strict=use_strict)
        return JSONResponse(result, status_code=200 if result["success"] else 500)

    return app


app = create_app()
