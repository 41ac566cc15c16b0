from fastapi import Response

from ..config import Settings, settings


def cookie_secure(cfg: Settings = settings) -> bool:
    """Return whether the session cookie should be marked Secure.

    An explicit ``COOKIE_SECURE`` wins; otherwise cookies are Secure in production.
    Browsers reject SameSite=None without Secure, so that combination forces it on.
    """
    if cfg.cookie_samesite.lower() == "none":
        return True
    if cfg.cookie_secure is not None:
        return cfg.cookie_secure
    return cfg.is_production


def set_session_cookie(response: Response, token: str, cfg: Settings = settings) -> None:
    response.set_cookie(
        key=cfg.cookie_name,
        value=token,
        httponly=True,
        secure=cookie_secure(cfg),
        samesite=cfg.cookie_samesite.lower(),
        max_age=cfg.access_token_expire_minutes * 60,
        path="/",
    )


def clear_session_cookie(response: Response, cfg: Settings = settings) -> None:
    #Flags must match the ones used when setting or some browsers keep the cookie
    response.delete_cookie(
        key=cfg.cookie_name,
        httponly=True,
        secure=cookie_secure(cfg),
        samesite=cfg.cookie_samesite.lower(),
        path="/",
    )
