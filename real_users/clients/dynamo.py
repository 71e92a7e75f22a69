import os

import boto3

DYNAMO_USERS_TABLE = os.environ.get('DYNAMO_USERS_TABLE', 'users')


class DynamoClient:
    def __init__(self, table_name=DYNAMO_USERS_TABLE, create_table_schema=None):
        """
        If create_table_schema is not None, then the table will be created
        on-the-fly. Useful when testing with a mocked dynamodb backend.
        """
        assert table_name, "Table name is required"
        self.table_name = table_name

        boto3_resource = boto3.resource('dynamodb')
        self.table = (
            boto3_resource.create_table(TableName=table_name, **create_table_schema)
            if create_table_schema
            else boto3_resource.Table(table_name)
        )

    def get_item(self, key, projection=None, strongly_consistent=False):
        "Get an item by its key, or None. `projection` limits the attributes fetched."
        kwargs = {'Key': key, 'ConsistentRead': strongly_consistent}
        if projection:
            # attribute names go through placeholders so reserved words are safe
            kwargs['ProjectionExpression'] = ', '.join(f'#p{i}' for i in range(len(projection)))
            kwargs['ExpressionAttributeNames'] = {f'#p{i}': name for i, name in enumerate(projection)}
        return self.table.get_item(**kwargs).get('Item')

    def set_attributes(self, key, **attributes):
        """
        Set the given attributes for the given key and return the whole updated item.
        No condition is applied: if the item does not exist, it is created.
        """
        assert attributes, 'Must provide at least one attribute to set'
        names = list(attributes.keys())
        kwargs = {
            'Key': key,
            'UpdateExpression': 'SET ' + ', '.join(f'#a{i} = :a{i}' for i in range(len(names))),
            'ExpressionAttributeNames': {f'#a{i}': name for i, name in enumerate(names)},
            'ExpressionAttributeValues': {f':a{i}': attributes[name] for i, name in enumerate(names)},
            'ReturnValues': 'ALL_NEW',
        }
        return self.table.update_item(**kwargs).get('Attributes')
