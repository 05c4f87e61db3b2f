"""Auth Classes for HttpX"""

from typing import Generator

from httpx import Auth, Request, Response


class BearerTokenAuth(Auth):
    """Auth class for authentication with Wavefront API token"""

    def __init__(self, token: str, prefix: str = "Bearer") -> None:
        super().__init__()
        self.token = str(token)
        self.prefix = prefix

    def auth_flow(self, request: Request) -> Generator[Request, Response, None]:
        request.headers["Authorization"] = f"{self.prefix} {self.token}"
        yield request

    def __repr__(self):
        return f"{self.__class__.__name__}(prefix={self.prefix!r}, token='***')"
