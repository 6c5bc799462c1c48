"""Word Counter: counts words in TXT, DOCX and PDF files."""
