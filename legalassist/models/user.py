import logging
from datetime import datetime, timezone
from werkzeug.security import generate_password_hash, check_password_hash
from legalassist.config.database import db_instance, DuplicateKeyError
from legalassist.errors import Conflict, Unauthorized

logger = logging.getLogger(__name__)


class User:
    def __init__(self, email, password_hash=None, name=None, _id=None, created_at=None):
        self.id = str(_id) if _id else None
        self.email = email
        self.password_hash = password_hash
        self.name = name
        self.created_at = created_at or datetime.now(timezone.utc)

    def set_password(self, password):
        """Hash and set password"""
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        """Check if password is correct"""
        if not self.password_hash:
            return False
        return check_password_hash(self.password_hash, password)

    def save(self):
        """Insert user into the store; users are never updated"""
        db = db_instance.get_db()
        user_data = {
            'email': self.email,
            'password_hash': self.password_hash,
            'name': self.name,
            'created_at': self.created_at
        }
        self.id = db.users.insert_one(user_data)
        return self

    @classmethod
    def register(cls, email, password, name=None):
        """Create a user, failing with Conflict if the email is taken"""
        if cls.find_by_email(email):
            raise Conflict('User already exists')

        user = cls(email=email, name=name)
        user.set_password(password)
        try:
            user.save()
        except DuplicateKeyError:
            # another request registered the same email in between
            raise Conflict('User already exists')

        logger.info("Registered user %s", user.id)
        return user

    @classmethod
    def authenticate(cls, email, password):
        """Return the user for valid credentials, else raise Unauthorized"""
        user = cls.find_by_email(email)
        if not user or not user.check_password(password):
            logger.info("Failed login attempt for %s", email)
            raise Unauthorized('Invalid credentials')
        return user

    @staticmethod
    def _from_record(user_data):
        return User(
            email=user_data['email'],
            password_hash=user_data['password_hash'],
            name=user_data.get('name'),
            _id=user_data['_id'],
            created_at=user_data.get('created_at')
        )

    @staticmethod
    def find_by_email(email):
        """Find user by email"""
        db = db_instance.get_db()
        user_data = db.users.find_one({'email': email})
        return User._from_record(user_data) if user_data else None

    def to_dict(self):
        """Public view of the user"""
        return {
            'id': self.id,
            'email': self.email,
            'name': self.name
        }
