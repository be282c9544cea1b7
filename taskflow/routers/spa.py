"""
Fichiers statiques du front + fallback single-page.

Toute requête GET qui ne correspond à aucune route renvoie le fichier demandé
s'il existe dans PUBLIC_DIR, sinon index.html.
"""

from pathlib import Path

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import FileResponse

from taskflow.core.config import settings

router = APIRouter(tags=["frontend"])


def resolve_asset(public_dir: Path, requested: str):
    root = public_dir.resolve()
    candidate = (root / requested).resolve()
    # pas de sortie du dossier public (../)
    if candidate != root and root not in candidate.parents:
        return None
    if candidate.is_file():
        return candidate
    return None


@router.get("/{full_path:path}", include_in_schema=False)
def serve_frontend(full_path: str):
    public_dir = Path(settings.PUBLIC_DIR)

    asset = resolve_asset(public_dir, full_path)
    if asset is not None:
        return FileResponse(asset)

    index = public_dir / "index.html"
    if index.is_file():
        return FileResponse(index)

    raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found")
