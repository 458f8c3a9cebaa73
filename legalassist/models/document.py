from datetime import datetime, timezone
from legalassist.config.database import db_instance
from legalassist.errors import NotFound


class Document:
    def __init__(self, user_id, title, filename, original_name, mimetype, size,
                 extracted_text='', _id=None, uploaded_at=None):
        self.id = str(_id) if _id else None
        self.user_id = user_id
        self.title = title
        self.filename = filename  # name on disk inside the upload folder
        self.original_name = original_name
        self.mimetype = mimetype
        self.size = size
        self.extracted_text = extracted_text
        self.uploaded_at = uploaded_at or datetime.now(timezone.utc)

    def save(self):
        """Insert document into the store"""
        db = db_instance.get_db()
        doc_data = {
            'user_id': self.user_id,
            'title': self.title,
            'filename': self.filename,
            'original_name': self.original_name,
            'mimetype': self.mimetype,
            'size': self.size,
            'extracted_text': self.extracted_text,
            'uploaded_at': self.uploaded_at
        }
        self.id = db.documents.insert_one(doc_data)
        return self

    def delete(self):
        db = db_instance.get_db()
        return db.documents.delete_one({'_id': self.id}) == 1

    @staticmethod
    def _from_record(doc_data):
        return Document(
            user_id=doc_data['user_id'],
            title=doc_data['title'],
            filename=doc_data['filename'],
            original_name=doc_data['original_name'],
            mimetype=doc_data['mimetype'],
            size=doc_data['size'],
            extracted_text=doc_data.get('extracted_text', ''),
            _id=doc_data['_id'],
            uploaded_at=doc_data.get('uploaded_at')
        )

    @staticmethod
    def find_by_user_id(user_id):
        """Find documents by user ID, oldest first"""
        db = db_instance.get_db()
        return [Document._from_record(doc_data)
                for doc_data in db.documents.find({'user_id': user_id})]

    @staticmethod
    def find_for_user(doc_id, user_id):
        """Find a document owned by the user or raise NotFound"""
        db = db_instance.get_db()
        doc_data = db.documents.find_one({'_id': doc_id, 'user_id': user_id})
        if not doc_data:
            raise NotFound('Document not found')
        return Document._from_record(doc_data)

    def to_dict(self):
        """Convert document to its wire representation"""
        return {
            'id': self.id,
            'title': self.title,
            'filename': self.filename,
            'originalName': self.original_name,
            'mimetype': self.mimetype,
            'size': self.size,
            'userId': self.user_id,
            'extractedText': self.extracted_text,
            'uploadedAt': self.uploaded_at.isoformat()
        }
