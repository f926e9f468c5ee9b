from fastapi import Response

from config import ApplicationConfig

SESSION_COOKIE = "sessionId"
BROWSER_SESSION_COOKIE = "authcord_session"


def set_session_cookie(response: Response, session_id: str) -> None:
    response.set_cookie(
        SESSION_COOKIE,
        session_id,
        httponly=True,
        samesite="lax",
        secure=ApplicationConfig.ENV == "production",
    )


def set_browser_session_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        BROWSER_SESSION_COOKIE,
        token,
        max_age=ApplicationConfig.BROWSER_SESSION_TTL_MINUTES * 60,
        httponly=True,
        samesite="lax",
        secure=ApplicationConfig.ENV == "production",
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(SESSION_COOKIE)


def clear_browser_session_cookie(response: Response) -> None:
    response.delete_cookie(BROWSER_SESSION_COOKIE)
