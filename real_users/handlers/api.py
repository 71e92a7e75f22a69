from real_users import clients, models
from real_users.models.user.exceptions import UserUpdateFailed, UserValidationException

from . import xray
from .dispatch import api_handler
from .exceptions import ServerException, ValidationException
from .request import UsernameForm, get_body
from .responses import ResponseMessage

xray.patch_all()

clients = {
    'dynamo': clients.DynamoClient(),
}

managers = {}
user_manager = managers.get('user') or models.UserManager(clients, managers=managers)


@api_handler
def change_username(caller_user_id, event, context):
    form = UsernameForm.from_body(get_body(event))
    form.user_id = caller_user_id

    try:
        user_manager.change_username(form.user_id, form.old_username, form.new_username)
    except UserValidationException as err:
        raise ValidationException(str(err)) from err
    except UserUpdateFailed as err:
        raise ServerException('unknown error changing username') from err

    return ResponseMessage(200, 'username successfully changed!', 'no issues changing username')
