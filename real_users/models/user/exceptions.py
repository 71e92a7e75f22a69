class UserException(Exception):
    pass


class UserValidationException(UserException):
    pass


class UserUpdateFailed(UserException):
    def __init__(self, user_id):
        self.user_id = user_id

    def __str__(self):
        return f'Update of username for user `{self.user_id}` reported failure'
