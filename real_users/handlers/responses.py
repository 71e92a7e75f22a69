import json

JSON_HEADERS = {'Content-Type': 'application/json'}


class SerializationError(Exception):
    "The response body could not be encoded as json"


class ResponseMessage:
    "Body of every json response: a status code, a user-facing message and a developer-facing one"

    def __init__(self, status_code, message, dev_msg):
        self.status_code = status_code
        self.message = message
        self.dev_msg = dev_msg

    def __repr__(self):
        return f'ResponseMessage({self.status_code}, {self.message!r}, {self.dev_msg!r})'

    def __eq__(self, other):
        if not isinstance(other, ResponseMessage):
            return NotImplemented
        return self.serialize() == other.serialize()

    def serialize(self):
        return {
            'statusCode': self.status_code,
            'message': self.message,
            'devMsg': self.dev_msg,
        }


def build_response(status_code, body):
    "Wrap `body` in an API Gateway proxy response"
    try:
        encoded = json.dumps(body)
    except (TypeError, ValueError) as err:
        raise SerializationError(str(err)) from err
    return {
        'statusCode': status_code,
        'headers': dict(JSON_HEADERS),
        'body': encoded,
    }
