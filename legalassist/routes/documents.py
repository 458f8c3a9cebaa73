#routes/documents.py
import logging
from flask import Blueprint, request, jsonify, current_app
from flask_login import login_required, current_user
from legalassist.errors import APIError, BadRequest, UnsupportedType
from legalassist.models.document import Document
from legalassist.utils.file_handler import FileHandler, TEXT
from legalassist.utils.sample_contract import SAMPLE_CONTRACT, SAMPLE_FILENAME, SAMPLE_TITLE

logger = logging.getLogger(__name__)

documents_bp = Blueprint('documents', __name__)


def get_file_handler():
    return FileHandler(current_app.config['UPLOAD_FOLDER'])


def create_document_record(file_handler, stored, original_name, mimetype, title=None):
    """Extract text from a stored file and record it for the current user"""
    extraction = file_handler.extract_text(stored.path, mimetype)
    if not extraction.ok:
        logger.warning("Storing %s without text: %s", stored.filename, extraction.error)

    document = Document(
        user_id=current_user.id,
        title=title or original_name,
        filename=stored.filename,
        original_name=original_name,
        mimetype=mimetype,
        size=stored.size,
        extracted_text=extraction.text
    )
    document.save()
    logger.info("Stored document %s (%s, %d bytes)", document.id, mimetype, stored.size)
    return document


@documents_bp.route('/files', methods=['POST'])
@login_required
def upload_document():
    """Upload a document and extract its text"""
    if 'file' not in request.files:
        raise BadRequest('No file uploaded')

    file = request.files['file']
    if file.filename == '':
        raise BadRequest('No file uploaded')

    file_handler = get_file_handler()
    if not file_handler.is_allowed_mimetype(file.mimetype):
        raise UnsupportedType('Invalid file type')

    try:
        stored = file_handler.save_file(file)
        document = create_document_record(
            file_handler, stored, file.filename, file.mimetype,
            title=request.form.get('title')
        )
        return jsonify(document.to_dict()), 200

    except APIError:
        raise
    except Exception as e:
        logger.exception("Upload failed")
        return jsonify({'message': 'Error uploading file', 'error': str(e)}), 500


@documents_bp.route('/files/sample', methods=['POST'])
@login_required
def create_sample_document():
    """Add the bundled sample agreement to the user's documents"""
    try:
        file_handler = get_file_handler()
        stored = file_handler.save_bytes(SAMPLE_CONTRACT.encode('utf-8'), SAMPLE_FILENAME, TEXT)
        document = create_document_record(
            file_handler, stored, SAMPLE_FILENAME, TEXT, title=SAMPLE_TITLE
        )
        return jsonify(document.to_dict()), 200

    except APIError:
        raise
    except Exception as e:
        logger.exception("Sample document creation failed")
        return jsonify({'message': 'Error creating sample document', 'error': str(e)}), 500


@documents_bp.route('/files', methods=['GET'])
@login_required
def get_documents():
    """Get all documents for the current user"""
    documents = Document.find_by_user_id(current_user.id)
    return jsonify([doc.to_dict() for doc in documents]), 200


@documents_bp.route('/files/<document_id>', methods=['GET'])
@login_required
def get_document(document_id):
    """Get a specific document"""
    document = Document.find_for_user(document_id, current_user.id)
    return jsonify(document.to_dict()), 200


@documents_bp.route('/files/<document_id>', methods=['DELETE'])
@login_required
def delete_document(document_id):
    """Delete a document and its stored file"""
    document = Document.find_for_user(document_id, current_user.id)

    # The record goes even if the file could not be removed
    get_file_handler().cleanup_file(document.filename)
    document.delete()
    logger.info("Deleted document %s", document.id)

    return jsonify({'message': 'Document deleted successfully'}), 200
