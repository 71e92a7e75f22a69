#!/usr/bin/env python

import argparse
import sys

import dotenv

dotenv.load_dotenv()

from real_users.clients import DynamoClient  # noqa E402
from real_users.models import UserManager  # noqa E402
from real_users.models.user.exceptions import UserException  # noqa E402


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Change a User's username")
    parser.add_argument('-i', dest='user_id', required=True, help='user id')
    parser.add_argument('-c', dest='current_username', required=True, help='current username')
    parser.add_argument('-u', dest='new_username', required=True, help='desired username')
    args = parser.parse_args(argv)
    return args.user_id, args.current_username, args.new_username


def main(argv=None, clients=None):
    user_id, current_username, new_username = parse_args(argv)
    clients = clients or {'dynamo': DynamoClient()}
    user_manager = UserManager(clients)

    print(f"Changing user `{user_id}`'s username from `{current_username}` to `{new_username}`... ", end='')
    try:
        user_manager.change_username(user_id, current_username, new_username)
    except UserException as err:
        print('failed.')
        print(f'Error: {err}', file=sys.stderr)
        return 1
    print('done.')
    return 0


if __name__ == '__main__':
    sys.exit(main())
