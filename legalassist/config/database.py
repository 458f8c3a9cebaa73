import threading
import uuid


class DuplicateKeyError(Exception):
    """Raised when an insert would violate a unique index"""

    def __init__(self, table, field, value):
        super().__init__(f"Duplicate value for {table}.{field}: {value}")
        self.table = table
        self.field = field
        self.value = value


class Table:
    """In-process record table keeping insertion order"""

    def __init__(self, name, lock):
        self.name = name
        self._lock = lock
        self._rows = []
        self._unique = set()

    def create_index(self, field, unique=False):
        if unique:
            self._unique.add(field)

    def insert_one(self, record):
        """Insert a copy of the record and return its generated id"""
        with self._lock:
            for field in self._unique:
                value = record.get(field)
                if any(row.get(field) == value for row in self._rows):
                    raise DuplicateKeyError(self.name, field, value)

            row = dict(record)
            row.setdefault('_id', str(uuid.uuid4()))
            self._rows.append(row)
            return row['_id']

    def find_one(self, query):
        with self._lock:
            for row in self._rows:
                if _matches(row, query):
                    return dict(row)
        return None

    def find(self, query=None):
        with self._lock:
            return [dict(row) for row in self._rows if _matches(row, query or {})]

    def delete_one(self, query):
        """Remove the first matching record; returns how many were removed"""
        with self._lock:
            for index, row in enumerate(self._rows):
                if _matches(row, query):
                    del self._rows[index]
                    return 1
        return 0

    def count(self):
        with self._lock:
            return len(self._rows)

    def clear(self):
        with self._lock:
            self._rows.clear()


def _matches(row, query):
    return all(row.get(key) == value for key, value in query.items())


class Database:
    def __init__(self):
        self._lock = threading.RLock()
        self.users = None
        self.documents = None

    def initialize(self, app=None):
        """Create empty tables and their indexes"""
        self.users = Table('users', self._lock)
        self.documents = Table('documents', self._lock)

        self.users.create_index('email', unique=True)

    def get_db(self):
        """Get database instance"""
        if self.users is None:
            self.initialize()
        return self

    def close(self):
        """Drop all records"""
        if self.users is not None:
            self.users.clear()
            self.documents.clear()


# Global database instance
db_instance = Database()
