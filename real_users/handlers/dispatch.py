"API Gateway proxy handler plumbing"
import logging

from real_users.logging import LogLevelContext, handler_logging

from .exceptions import ApiException, ServerException, UnauthorizedException
from .identity import get_caller_user_id
from .responses import build_response

logger = logging.getLogger()


def event_to_extras(event):
    # headers carry the bearer token, keep them out of the logs
    return {
        'callerUserId': get_caller_user_id(event),
        'httpMethod': event.get('httpMethod'),
        'path': event.get('path'),
    }


def api_handler(func):
    """
    Decorator for API Gateway handlers.

    The wrapped function is called as `func(caller_user_id, event, context)` only once the
    caller is authenticated, and returns a ResponseMessage. Every failure, including failure
    to encode the response, is turned into a json error response here, so nothing is raised
    back to the gateway.
    """

    def inner(event, context):
        caller_user_id = get_caller_user_id(event)
        if caller_user_id is None:
            raise UnauthorizedException()
        message = func(caller_user_id, event, context)
        return build_response(message.status_code, message.serialize())

    @handler_logging(event_to_extras=event_to_extras)
    def outer(event, context):
        # we suppress INFO logging, except this message
        with LogLevelContext(logger, logging.INFO):
            logger.info(f'Handling `{func.__name__}` event')

        try:
            return inner(event, context)
        except ApiException as err:
            if err.status_code >= 500:
                logger.error(str(err))
            else:
                logger.warning(str(err))
            error = err
        except Exception as err:
            logger.exception(f'Unexpected error in `{func.__name__}`: {err}')
            error = ServerException(f'Unexpected server error: {err}')
        return build_response(error.status_code, error.serialize())

    outer.__name__ = func.__name__
    return outer
