import logging

from .dynamo import UserDynamo
from .exceptions import UserUpdateFailed, UserValidationException

logger = logging.getLogger()


class UserManager:
    def __init__(self, clients, managers=None):
        managers = managers if managers is not None else {}
        managers['user'] = self

        if 'dynamo' in clients:
            self.dynamo_client = clients['dynamo']
            self.dynamo = UserDynamo(self.dynamo_client)

    def get_username(self, user_id):
        return self.dynamo.get_user_username(user_id, strongly_consistent=True)

    def validate_old_username(self, user_id, old_username):
        """
        Raise UserValidationException unless `old_username` is exactly what is stored.
        A user with no record fails the same way, so callers learn nothing about existence.
        """
        stored_username = self.get_username(user_id)
        if stored_username is None or stored_username != old_username:
            raise UserValidationException('old username is not valid')

    def change_username(self, user_id, old_username, new_username):
        "Verify `old_username` against the stored value, then overwrite it with `new_username`"
        assert user_id, 'Authenticated user id is required'
        self.validate_old_username(user_id, old_username)

        # Note the write is not conditioned on the value read above, so a concurrent
        # change between the two calls is overwritten
        attributes = self.dynamo.set_user_username(user_id, new_username)
        if not attributes:
            raise UserUpdateFailed(user_id)
        logger.info(f'User `{user_id}` changed username')
        return attributes['username']
