import PyPDF2
from PyPDF2.errors import PdfReadError
import re
import logging

logger = logging.getLogger(__name__)

class PDFProcessor:
    def __init__(self):
        # Line breaks are kept: formatting scores count them
        self.text_cleaning_patterns = [
            (r'\r\n?', '\n'),  # Normalize line endings
            (r'[ \t\f\v]+', ' '),  # Collapse runs of horizontal whitespace
            (r' *\n *', '\n'),  # Trim spaces around line breaks
            (r'\n{3,}', '\n\n'),  # At most one blank line
        ]
    
    def extract_text(self, file_path: str) -> str:
        """
        Extract text from a PDF file, returning an empty string when unreadable
        """
        try:
            with open(file_path, 'rb') as file:
                pdf_reader = PyPDF2.PdfReader(file)
                pages = [page.extract_text() or "" for page in pdf_reader.pages]
        except (OSError, PdfReadError) as e:
            logger.error(f"Error extracting text from PDF: {str(e)}")
            return ""

        cleaned_text = self.clean_text("\n".join(pages))
        logger.info(f"Extracted {len(cleaned_text)} characters from {len(pages)} PDF pages")
        return cleaned_text
    
    def clean_text(self, text: str) -> str:
        """
        Normalize whitespace in extracted text
        """
        for pattern, replacement in self.text_cleaning_patterns:
            text = re.sub(pattern, replacement, text)
        
        return text.strip()
