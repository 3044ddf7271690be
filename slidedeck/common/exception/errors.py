from typing import Any

from starlette.background import BackgroundTask

from slidedeck.common.response.response_code import CustomErrorCode, StandardResponseCode


class BaseExceptionError(Exception):
    """Base exception class"""

    code: int

    def __init__(self, *, msg: str | None = None, data: Any = None, background: BackgroundTask | None = None) -> None:
        self.msg = msg
        self.data = data
        # The original background task: https://www.starlette.io/background/
        self.background = background


class RequestError(BaseExceptionError):
    """Bad request"""

    code = StandardResponseCode.HTTP_400

    def __init__(self, *, msg: str = 'Bad Request', data: Any = None, background: BackgroundTask | None = None) -> None:
        super().__init__(msg=msg, data=data, background=background)


class NotFoundError(BaseExceptionError):
    """Resource does not exist"""

    code = StandardResponseCode.HTTP_404

    def __init__(self, *, msg: str = 'Not Found', data: Any = None, background: BackgroundTask | None = None) -> None:
        super().__init__(msg=msg, data=data, background=background)


class GatewayError(BaseExceptionError):
    """Upstream service error"""

    code = StandardResponseCode.HTTP_502

    def __init__(self, *, msg: str = 'Bad Gateway', data: Any = None, background: BackgroundTask | None = None) -> None:
        super().__init__(msg=msg, data=data, background=background)


class GenerationError(GatewayError):
    """The slide content generator failed or returned unusable output"""

    def __init__(
        self,
        *,
        msg: str = CustomErrorCode.GENERATION_FAILED.msg,
        data: Any = None,
        background: BackgroundTask | None = None,
    ) -> None:
        super().__init__(msg=msg, data=data, background=background)
