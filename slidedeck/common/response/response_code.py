import dataclasses

from enum import Enum


class CustomCodeBase(Enum):
    """Custom status code base class"""

    @property
    def code(self) -> int:
        """Status code"""
        return self.value[0]

    @property
    def msg(self) -> str:
        """Status message"""
        return self.value[1]


class CustomResponseCode(CustomCodeBase):
    """Custom response status codes"""

    HTTP_200 = (200, 'Request succeeded')
    HTTP_201 = (201, 'Created')
    HTTP_204 = (204, 'Request succeeded, no content')
    HTTP_400 = (400, 'Bad request')
    HTTP_404 = (404, 'Resource not found')
    HTTP_409 = (409, 'Conflict')
    HTTP_422 = (422, 'Request parameter validation failed')
    HTTP_500 = (500, 'Internal server error')
    HTTP_502 = (502, 'Upstream service error')


class CustomErrorCode(CustomCodeBase):
    """Custom error status codes"""

    OPERATION_FAILED = (500, 'Operation failed')
    GENERATION_FAILED = (502, 'Slide content generation failed')


@dataclasses.dataclass
class CustomResponse:
    """Free-form response status for one-off use"""

    code: int
    msg: str


class StandardResponseCode:
    """Standard HTTP status codes"""

    HTTP_200 = 200
    HTTP_201 = 201
    HTTP_204 = 204
    HTTP_400 = 400
    HTTP_404 = 404
    HTTP_409 = 409
    HTTP_422 = 422
    HTTP_500 = 500
    HTTP_502 = 502
