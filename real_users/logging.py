import json
import logging


def handler_logging(*args, event_to_extras=None):
    """
    Lambda handler decorator that formats all log records as CloudWatch-friendly json.

        @handler_logging
        def my_handler(event, context):
    OR
        @handler_logging(event_to_extras=lambda event: {'callerUserId': ...})
        def my_handler(event, context):

    Anything that escapes the handler is logged with its traceback and re-raised.
    """

    def outer_wrapper(func):
        def inner_wrapper(event, context):
            extras = event_to_extras(event) if callable(event_to_extras) else {}
            request_id = getattr(context, 'aws_request_id', None)

            # the lambda runtime installs a handler on the root logger for us
            logger = logging.getLogger()
            for log_handler in logger.handlers:
                log_handler.setFormatter(CloudWatchFormatter(extras=extras, request_id=request_id))

            try:
                return func(event, context)
            except Exception as err:
                logger.exception(str(err))
                raise err

        inner_wrapper.__name__ = func.__name__
        inner_wrapper.__doc__ = func.__doc__
        return inner_wrapper

    if args:
        return outer_wrapper(args[0])
    return outer_wrapper


# https://docs.python.org/3/howto/logging-cookbook.html#using-a-context-manager-for-selective-logging
class LogLevelContext:
    def __init__(self, logger, level):
        self.logger = logger
        self.level = level

    def __enter__(self):
        self.old_level = self.logger.level
        self.logger.setLevel(self.level)

    def __exit__(self, et, ev, tb):
        self.logger.setLevel(self.old_level)


class CloudWatchFormatter(logging.Formatter):
    "One json object per record, so CloudWatch Insights can query the fields"

    def __init__(self, extras=None, request_id=None, **kwargs):
        "`extras` is a dict of data added to every record, `request_id` is the fallback lambda request id"
        self.extras = extras or {}
        self.request_id = request_id
        super().__init__(**kwargs)

    def format(self, record):
        prefix = '/var/task/'
        path = record.pathname[len(prefix) :] if record.pathname.startswith(prefix) else record.pathname

        # lambda tags records with the request id itself, fall back to the one from the context
        request_id = getattr(record, 'aws_request_id', None) or self.request_id

        # `message` goes first so it shows in the CloudWatch summary table
        data = {
            'message': record.getMessage(),
            'level': record.levelname,
            'requestId': request_id,
            **self.extras,
            'sourceFile': path,
            'sourceLine': record.lineno,
        }
        if record.exc_info:
            if not record.exc_text:
                record.exc_text = self.formatException(record.exc_info)
            data['exceptionInfo'] = record.exc_text.split('\n')
        if record.stack_info:
            data['stackInfo'] = record.stack_info.split('\n')
        return f'{record.levelname} RequestId: {request_id} Data: {json.dumps(data, default=str)}'
