from flask import Blueprint, request, jsonify
from legalassist.models.user import User
from legalassist.utils.auth_middleware import create_access_token, validate_json_data

auth_bp = Blueprint('auth', __name__)


def _token_response(user):
    return jsonify({
        'token': create_access_token(user),
        'user': user.to_dict()
    })


@auth_bp.route('/register', methods=['POST'])
@auth_bp.route('/auth/register', methods=['POST'])
@validate_json_data(['email', 'password'])
def register():
    """Register a new user and log them in"""
    data = request.get_json()
    user = User.register(data['email'], data['password'], data.get('name'))
    return _token_response(user), 200


@auth_bp.route('/login', methods=['POST'])
@auth_bp.route('/auth/login', methods=['POST'])
@validate_json_data(['email', 'password'])
def login():
    """Login user"""
    data = request.get_json()
    user = User.authenticate(data['email'], data['password'])
    return _token_response(user), 200
