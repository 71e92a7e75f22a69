class UserDynamo:
    def __init__(self, dynamo_client):
        self.client = dynamo_client

    def pk(self, user_id):
        return {'user_id': user_id}

    def get_user_username(self, user_id, strongly_consistent=False):
        "Return the stored username, or None if the user or the attribute does not exist"
        item = self.client.get_item(self.pk(user_id), projection=['username'], strongly_consistent=strongly_consistent)
        return (item or {}).get('username')

    def set_user_username(self, user_id, username):
        """
        Unconditionally overwrite the user's username.
        Returns the updated item, or None if the store reported nothing was written.
        """
        return self.client.set_attributes(self.pk(user_id), username=username)
