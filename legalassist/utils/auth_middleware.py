import logging
from datetime import datetime, timedelta, timezone
from functools import wraps
from flask import current_app, g, request
from flask_login import LoginManager, UserMixin
from jose import jwt, JWTError
from legalassist.errors import BadRequest, Forbidden, Unauthorized

logger = logging.getLogger(__name__)

login_manager = LoginManager()


class TokenIdentity(UserMixin):
    """Identity decoded from a verified bearer token"""

    def __init__(self, user_id, email=None):
        self.id = user_id
        self.email = email

    def __repr__(self):
        return f"TokenIdentity(id={self.id}, email={self.email})"


def create_access_token(user):
    """Sign a token carrying the user's id and email"""
    config = current_app.config
    payload = {'userId': user.id, 'email': user.email}

    expire_minutes = config.get('JWT_EXPIRE_MINUTES')
    if expire_minutes:
        payload['exp'] = datetime.now(timezone.utc) + timedelta(minutes=expire_minutes)

    return jwt.encode(payload, config['JWT_SECRET'], algorithm=config['JWT_ALGORITHM'])


def decode_access_token(token):
    """Verify a token and return its payload; raises JWTError when invalid"""
    config = current_app.config
    return jwt.decode(token, config['JWT_SECRET'], algorithms=[config['JWT_ALGORITHM']])


def extract_token_from_header(authorization):
    """Extract the token from an ``Authorization: Bearer <token>`` header"""
    if not authorization:
        return None

    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != 'bearer':
        return None

    return parts[1]


@login_manager.request_loader
def load_user_from_request(req):
    token = extract_token_from_header(req.headers.get('Authorization'))
    if not token:
        return None

    try:
        payload = decode_access_token(token)
    except JWTError as e:
        logger.info("Rejected bearer token: %s", e)
        g.token_rejected = True
        return None

    user_id = payload.get('userId')
    if not user_id:
        g.token_rejected = True
        return None

    return TokenIdentity(user_id, payload.get('email'))


@login_manager.unauthorized_handler
def unauthorized():
    # A token was sent but failed verification
    if g.get('token_rejected'):
        raise Forbidden('Invalid or expired token')
    raise Unauthorized('Access token required')


def validate_json_data(required_fields):
    """Reject requests whose JSON body lacks any of ``required_fields``"""
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            data = request.get_json(silent=True)
            if not isinstance(data, dict):
                raise BadRequest('Request body must be JSON')

            missing = [field for field in required_fields if data.get(field) is None]
            if missing:
                raise BadRequest(f"Missing required fields: {', '.join(missing)}")

            return f(*args, **kwargs)
        return decorated_function
    return decorator
