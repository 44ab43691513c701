from fastapi import HTTPException, Request, status

SESSION_USER_KEY = "user_id"


def current_user_id(request: Request) -> int:
    """Dependency guarding every business route: the session must carry a user id."""
    user_id = request.session.get(SESSION_USER_KEY)
    if not user_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    return int(user_id)
