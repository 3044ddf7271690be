from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

from slidedeck.common.response.response_code import CustomResponse, CustomResponseCode

SchemaT = TypeVar('SchemaT')


class ResponseModel(BaseModel):
    """
    Generic unified response model without a typed data field

    E.g. ::

        @router.get('/test', response_model=ResponseModel)
        def test():
            return ResponseModel(data={'test': 'test'})


        @router.get('/test')
        def test() -> ResponseModel:
            return ResponseModel(data={'test': 'test'})


        @router.get('/test')
        def test() -> ResponseModel:
            res = CustomResponseCode.HTTP_200
            return ResponseModel(code=res.code, msg=res.msg, data={'test': 'test'})
    """

    code: int = Field(CustomResponseCode.HTTP_200.code, description='Return status code')
    msg: str = Field(CustomResponseCode.HTTP_200.msg, description='Return message')
    data: Any | None = Field(None, description='Return data')


class ResponseSchemaModel(ResponseModel, Generic[SchemaT]):
    """
    Unified response model with a typed data field

    E.g. ::

        @router.get('/test')
        def test() -> ResponseSchemaModel[GetApiDetail]:
            return ResponseSchemaModel[GetApiDetail](data=GetApiDetail(...))
    """

    data: SchemaT


class ResponseBase:
    """Unified response helpers"""

    @staticmethod
    def __response(*, res: CustomResponseCode | CustomResponse, data: Any | None = None) -> ResponseModel:
        """
        Build a response for a request outcome

        :param res: response status
        :param data: response data
        :return:
        """
        return ResponseModel(code=res.code, msg=res.msg, data=data)

    def success(
        self,
        *,
        res: CustomResponseCode | CustomResponse = CustomResponseCode.HTTP_200,
        data: Any | None = None,
    ) -> ResponseModel:
        """
        Success response

        :param res: response status
        :param data: response data
        :return:
        """
        return self.__response(res=res, data=data)


response_base: ResponseBase = ResponseBase()
