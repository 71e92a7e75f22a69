import os

import moto
import pytest

# boto3 needs a region and credentials to build clients, even against the mocked backend
os.environ.setdefault('AWS_DEFAULT_REGION', 'us-east-1')
os.environ.setdefault('AWS_ACCESS_KEY_ID', 'testing')
os.environ.setdefault('AWS_SECRET_ACCESS_KEY', 'testing')

from real_users import clients, models  # noqa E402

# The schema of the users table
users_table_schema = {
    'KeySchema': [
        {'AttributeName': 'user_id', 'KeyType': 'HASH'},
    ],
    'AttributeDefinitions': [
        {'AttributeName': 'user_id', 'AttributeType': 'S'},
    ],
    'BillingMode': 'PAY_PER_REQUEST',
}


@pytest.fixture
def dynamo_client():
    with moto.mock_aws():
        yield clients.DynamoClient(table_name='users-table', create_table_schema=users_table_schema)


@pytest.fixture
def add_user(dynamo_client):
    "Put a user record straight into the table, bypassing the code under test"

    def inner(user_id, username=None, **attributes):
        item = {'user_id': user_id, **attributes}
        if username is not None:
            item['username'] = username
        dynamo_client.table.put_item(Item=item)
        return item

    yield inner


@pytest.fixture
def user_manager(dynamo_client):
    yield models.UserManager({'dynamo': dynamo_client})
