"""
Translation bundle endpoints.
"""
from fastapi import APIRouter, HTTPException, Request, status

from app.core.i18n import i18n, init_i18n

router = APIRouter(prefix="/translations", tags=["Translations"])


@router.get("/{lng}")
def get_bundle(lng: str):
    """Full translation bundle for one language."""
    translator = init_i18n(i18n)
    if lng not in translator.resources:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unsupported language: {lng}"
        )
    return translator.resources[lng]


@router.get("/{lng}/{key}")
def translate_key(lng: str, key: str, request: Request):
    """
    Translate one dotted key. Unknown keys come back unchanged.

    Every query parameter is an interpolation value, so
    `?company=Acme` fills `{{company}}`.
    """
    translator = init_i18n(i18n)
    if lng not in translator.resources:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unsupported language: {lng}"
        )
    # key and lng name the lookup itself
    values = {name: value for name, value in request.query_params.items() if name not in ("key", "lng")}
    return {"key": key, "language": lng, "text": translator.t(key, lng=lng, **values)}
