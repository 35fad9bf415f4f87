from __future__ import annotations

from collections.abc import Iterable

from sqlmodel import Session, col, select

from srimitha.models import Setting
from srimitha.schemas.site_settings import SiteSettings


def fold_settings(rows: Iterable[Setting]) -> dict[str, str]:
    folded: dict[str, str] = {}
    for row in rows:
        folded[row.key] = row.value
    return folded


def load_site_settings(session: Session) -> SiteSettings:
    rows = session.exec(select(Setting).order_by(col(Setting.id).asc())).all()
    return SiteSettings.model_validate(fold_settings(rows))


def get_all_settings(session: Session) -> dict[str, str]:
    """Flat key/value map for templates; known keys always present."""
    return load_site_settings(session).as_map()
