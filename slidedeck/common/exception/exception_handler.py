from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException
from starlette.responses import JSONResponse

from slidedeck.common.exception.errors import BaseExceptionError
from slidedeck.common.log import log
from slidedeck.common.response.response_code import CustomErrorCode, CustomResponseCode, StandardResponseCode
from slidedeck.core.conf import settings


def _get_exception_code(status_code: int) -> int:
    """
    Get the HTTP status code to return, falling back to 400 for unknown codes

    :param status_code:
    :return:
    """
    try:
        if 100 <= int(status_code) < 600:
            return int(status_code)
    except (TypeError, ValueError):
        pass
    return StandardResponseCode.HTTP_400


def _format_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return CustomResponseCode.HTTP_422.msg
    first = errors[0]
    loc = '.'.join(str(part) for part in first.get('loc', ()) if part != 'body')
    message = first.get('msg', '')
    return f'{CustomResponseCode.HTTP_422.msg}: {loc}: {message}' if loc else f'{CustomResponseCode.HTTP_422.msg}: {message}'


def register_exception(app: FastAPI) -> None:
    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
        """
        Global HTTP exception handler

        :param request:
        :param exc:
        :return:
        """
        return JSONResponse(
            status_code=_get_exception_code(exc.status_code),
            content={'code': exc.status_code, 'msg': str(exc.detail), 'data': None},
            headers=getattr(exc, 'headers', None),
        )

    @app.exception_handler(RequestValidationError)
    async def fastapi_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """
        Request parameter validation handler

        :param request:
        :param exc:
        :return:
        """
        data = {'errors': jsonable_encoder(exc.errors())} if settings.ENVIRONMENT == 'dev' else None
        return JSONResponse(
            status_code=StandardResponseCode.HTTP_422,
            content={'code': StandardResponseCode.HTTP_422, 'msg': _format_validation_error(exc), 'data': data},
        )

    @app.exception_handler(BaseExceptionError)
    async def custom_exception_handler(request: Request, exc: BaseExceptionError) -> JSONResponse:
        """
        Application exception handler

        :param request:
        :param exc:
        :return:
        """
        return JSONResponse(
            status_code=_get_exception_code(exc.code),
            content={'code': exc.code, 'msg': str(exc.msg), 'data': exc.data},
            background=exc.background,
        )

    @app.exception_handler(SQLAlchemyError)
    async def database_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        """
        Store failure handler, the request transaction has already been rolled back

        :param request:
        :param exc:
        :return:
        """
        log.opt(exception=exc).error(f'Database operation failed: {request.method} {request.url.path}')
        return JSONResponse(
            status_code=StandardResponseCode.HTTP_500,
            content={'code': CustomErrorCode.OPERATION_FAILED.code, 'msg': CustomErrorCode.OPERATION_FAILED.msg, 'data': None},
        )

    @app.exception_handler(Exception)
    async def all_unknown_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """
        Fallback handler for unexpected exceptions

        :param request:
        :param exc:
        :return:
        """
        log.opt(exception=exc).error(f'Unhandled exception: {request.method} {request.url.path}')
        return JSONResponse(
            status_code=StandardResponseCode.HTTP_500,
            content={'code': StandardResponseCode.HTTP_500, 'msg': CustomResponseCode.HTTP_500.msg, 'data': None},
        )
