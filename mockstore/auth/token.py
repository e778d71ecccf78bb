"""
Jeton dynamique sans session.

token = sha256(identité + "YYYY-MM-DD" + secret), en hexadécimal.
- Jamais stocké: recalculé à chaque vérification
- Expire implicitement au changement de jour calendaire (TOKEN_TIMEZONE, UTC par défaut)
- Aucune révocation possible avant cette échéance
"""
import hashlib
import secrets
from datetime import date, datetime
from typing import Optional
from zoneinfo import ZoneInfo

from mockstore import config

def format_day(day: date | datetime) -> str:
    # datetime est une sous-classe de date: on tronque explicitement l'heure
    if isinstance(day, datetime):
        day = day.date()
    return day.isoformat()

def today(tz_name: Optional[str] = None) -> date:
    return datetime.now(ZoneInfo(tz_name or config.TOKEN_TIMEZONE)).date()

def derive_token(identity: str, secret: str, day: date | datetime) -> str:
    """Calcule le jeton de `identity` pour le jour `day` (fonction pure)."""
    payload = f"{identity}{format_day(day)}{secret}"
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()

def issue_token(identity: str, secret: Optional[str] = None) -> str:
    return derive_token(identity, secret if secret is not None else config.TOKEN_SECRET, today())

def verify_token(
    identity: Optional[str],
    presented: Optional[str],
    secret: Optional[str] = None,
    day: Optional[date] = None,
) -> bool:
    """
    Vrai si `presented` est exactement le jeton attendu pour `identity` aujourd'hui.
    - Ne lève jamais: entrée vide/None -> False
    - Comparaison via secrets.compare_digest
    """
    if not identity or not presented:
        return False
    expected = derive_token(
        identity,
        secret if secret is not None else config.TOKEN_SECRET,
        day or today(),
    )
    return secrets.compare_digest(expected.encode("utf-8"), presented.encode("utf-8"))
