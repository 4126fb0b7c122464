"""
Bearer token authentication

A request is authenticated when its JWT verifies against SECRET_KEY and a
login session row still exists for that exact token.
"""

from datetime import datetime, timedelta, timezone
from typing import Dict, Optional

import jwt

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import AuthenticationError
from src.platform.logging.loguru_io import Logger
from src.service.lodging.app.interface.i_session_query_repo import ISessionQueryRepo


class JwtAuth:
    def __init__(self, session_query_repo: ISessionQueryRepo) -> None:
        self.session_query_repo = session_query_repo
        self.secret = settings.SECRET_KEY.get_secret_value()
        self.algorithm = settings.ALGORITHM
        self.token_expire_days = 7

    def create_jwt_token(self, user_id: int) -> str:
        # The sign-in service issues production tokens
        payload = {
            'userId': user_id,
            'iat': datetime.now(timezone.utc),
            'exp': datetime.now(timezone.utc) + timedelta(days=self.token_expire_days),
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def decode_jwt_token(self, token: str) -> Dict:
        try:
            return jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.PyJWTError:
            raise AuthenticationError('Invalid token')

    @Logger.io
    async def authenticate(self, *, token: Optional[str]) -> int:
        """Return the user id carried by a valid, session-backed token"""
        if not token:
            raise AuthenticationError('Not authenticated')

        payload = self.decode_jwt_token(token)
        user_id = payload.get('userId')
        if not isinstance(user_id, int) or isinstance(user_id, bool):
            raise AuthenticationError('Invalid token')

        if not await self.session_query_repo.exists(token=token):
            raise AuthenticationError('Session not found')

        return user_id
