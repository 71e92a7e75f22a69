import os

from aws_xray_sdk.core import patch_all as xray_patch_all

AWS_LAMBDA_FUNCTION_NAME = os.environ.get('AWS_LAMBDA_FUNCTION_NAME')


def patch_all(function_name=AWS_LAMBDA_FUNCTION_NAME):
    "Trace boto3 calls with X-Ray. Outside of lambda there is no segment to attach to, so do nothing."
    if not function_name:
        return False
    xray_patch_all()
    return True
