import base64
import json

from .exceptions import RequestParseException


def get_body(event):
    body = event.get('body')
    if body is not None and event.get('isBase64Encoded'):
        body = base64.b64decode(body).decode('utf-8')
    return body


class UsernameForm:
    "The parsed body of a change username request"

    required_fields = ('oldUsername', 'newUsername')

    def __init__(self, old_username, new_username, user_id=None):
        self.user_id = user_id
        self.old_username = old_username
        self.new_username = new_username

    @classmethod
    def from_body(cls, body):
        if body is None:
            raise RequestParseException('Request body is required')
        try:
            data = json.loads(body)
        except json.JSONDecodeError as err:
            raise RequestParseException(f'Request body is not valid json: {err}') from err
        if not isinstance(data, dict):
            raise RequestParseException('Request body must be a json object')
        for field in cls.required_fields:
            if not isinstance(data.get(field), str):
                raise RequestParseException(f'Request body field `{field}` must be a string')
        # any user id in the body is dropped, the caller's identity is bound by the handler
        return cls(data['oldUsername'], data['newUsername'])
