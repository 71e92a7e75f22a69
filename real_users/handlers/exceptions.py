from .responses import ResponseMessage

GENERIC_ERROR_MESSAGE = 'sorry, there was an error processing your request'


class ApiException(Exception):
    "Any error answered with a non-200 response. `dev_msg` never reaches the `message` field."

    status_code = 500

    def __init__(self, dev_msg):
        self.dev_msg = dev_msg
        super().__init__(dev_msg)

    def serialize(self):
        return ResponseMessage(self.status_code, GENERIC_ERROR_MESSAGE, self.dev_msg).serialize()


class UnauthorizedException(ApiException):

    status_code = 401

    def __init__(self, dev_msg='user is Unauthorized'):
        super().__init__(dev_msg)

    def serialize(self):
        return {'message': 'Unauthorized'}


class ValidationException(ApiException):

    status_code = 400


class ServerException(ApiException):

    status_code = 500


class RequestParseException(Exception):
    "The request body does not have the expected shape"
