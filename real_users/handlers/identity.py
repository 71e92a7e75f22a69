def get_dict(container, key):
    "The dict at `container[key]`, or an empty dict if either isn't a dict"
    value = container.get(key) if isinstance(container, dict) else None
    return value if isinstance(value, dict) else {}


def get_authorizer_claims(event):
    """
    The verified token claims placed in the request context by the gateway's authorizer.
    REST APIs with a cognito authorizer put them under `authorizer.claims`,
    HTTP APIs with a jwt authorizer under `authorizer.jwt.claims`.
    Anything in the way that is not a json object is treated as missing.
    """
    authorizer = get_dict(get_dict(event, 'requestContext'), 'authorizer')
    return get_dict(authorizer, 'claims') or get_dict(get_dict(authorizer, 'jwt'), 'claims')


def get_caller_user_id(event):
    "The `sub` of the authenticated caller, or None if there isn't one"
    sub = get_authorizer_claims(event).get('sub')
    if not isinstance(sub, str) or not sub.strip():
        return None
    return sub
