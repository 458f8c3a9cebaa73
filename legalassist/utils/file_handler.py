#file_handler.py
import logging
import os
import time
from collections import namedtuple
from werkzeug.utils import secure_filename
from docx import Document as DocxDocument
from docx.oxml.ns import qn
from docx.table import Table
from docx.text.paragraph import Paragraph
from PyPDF2 import PdfReader
from legalassist.errors import UnsupportedType

logger = logging.getLogger(__name__)

PDF = 'application/pdf'
DOCX = 'application/vnd.openxmlformats-officedocument.wordprocessingml.document'
TEXT = 'text/plain'

StoredFile = namedtuple('StoredFile', ['filename', 'path', 'size'])


class ExtractionResult(namedtuple('ExtractionResult', ['text', 'error'])):
    """Extracted text, or an empty string plus the error that prevented it"""

    @property
    def ok(self):
        return self.error is None


class FileHandler:
    allowed_mimetypes = {PDF, DOCX, TEXT}

    def __init__(self, upload_folder):
        self.upload_folder = upload_folder

    def is_allowed_mimetype(self, mimetype):
        """Check if the declared content type is one we can extract"""
        return mimetype in self.allowed_mimetypes

    def _create_stored_file(self, original_name):
        """Create an empty ``<epoch-millis>-<name>`` file and open it for writing.

        Existing files are never overwritten: on a name clash the timestamp
        is bumped until an unused name is found.
        """
        filename = secure_filename(original_name) or 'upload'
        timestamp = int(time.time() * 1000)

        # Ensure upload directory exists
        os.makedirs(self.upload_folder, exist_ok=True)

        while True:
            stored_name = f"{timestamp}-{filename}"
            file_path = os.path.join(self.upload_folder, stored_name)
            try:
                return stored_name, file_path, open(file_path, 'xb')
            except FileExistsError:
                timestamp += 1

    def save_file(self, file):
        """Save an uploaded FileStorage and return its StoredFile"""
        if not self.is_allowed_mimetype(file.mimetype):
            raise UnsupportedType('Invalid file type')

        stored_name, file_path, f = self._create_stored_file(file.filename)
        with f:
            file.save(f)
        return StoredFile(stored_name, file_path, os.path.getsize(file_path))

    def save_bytes(self, data, original_name, mimetype):
        """Save raw bytes as if they had been uploaded under ``original_name``"""
        if not self.is_allowed_mimetype(mimetype):
            raise UnsupportedType('Invalid file type')

        stored_name, file_path, f = self._create_stored_file(original_name)
        with f:
            f.write(data)
        return StoredFile(stored_name, file_path, len(data))

    def extract_text(self, file_path, mimetype):
        """Extract text by content type; failures yield empty text"""
        try:
            if mimetype == PDF:
                text = self._extract_from_pdf(file_path)
            elif mimetype == DOCX:
                text = self._extract_from_docx(file_path)
            elif mimetype == TEXT:
                text = self._extract_from_text(file_path)
            else:
                text = ''
            return ExtractionResult(text, None)

        except Exception as e:
            logger.warning("Error extracting text from %s: %s", file_path, e)
            return ExtractionResult('', str(e))

    def _extract_from_pdf(self, file_path):
        """Extract text from PDF file"""
        with open(file_path, 'rb') as file:
            pdf_reader = PdfReader(file)
            return "\n".join(page.extract_text() or '' for page in pdf_reader.pages)

    def _extract_from_docx(self, file_path):
        """Extract paragraph and table text from DOCX file, in document order"""
        doc = DocxDocument(file_path)
        lines = []

        for child in doc.element.body.iterchildren():
            if child.tag == qn('w:p'):
                lines.append(Paragraph(child, doc).text)
            elif child.tag == qn('w:tbl'):
                lines.extend(self._docx_table_lines(Table(child, doc)))

        return "\n".join(lines)

    def _docx_table_lines(self, table):
        """One tab-separated line per row; merged cells appear once"""
        lines = []
        for row in table.rows:
            seen = []
            cells = []
            for cell in row.cells:
                if any(cell._tc is tc for tc in seen):
                    continue
                seen.append(cell._tc)
                cells.append(cell.text)
            lines.append("\t".join(cells))
        return lines

    def _extract_from_text(self, file_path):
        with open(file_path, 'rb') as file:
            return file.read().decode('utf-8', errors='replace')

    def cleanup_file(self, filename):
        """Delete a stored file; returns False when removal failed"""
        file_path = os.path.join(self.upload_folder, filename)
        try:
            os.remove(file_path)
            return True
        except OSError as e:
            logger.warning("Failed to cleanup file %s: %s", file_path, e)
            return False
