"""Document loading and text chunking for store ingestion."""

from pathlib import Path

import pypdf

from .config import config
from .models import DocumentChunk

logger = config.get_logger(__name__)


class DocumentLoader:
    """Handles loading of PDF and TXT documents."""

    @staticmethod
    def load_pdf(file_path: Path) -> str:
        """Load text content from a PDF file.

        Returns:
            The extracted text content, one block per page.
        """
        try:
            with file_path.open("rb") as file:
                pdf_reader = pypdf.PdfReader(file)
                pages = [page.extract_text() or "" for page in pdf_reader.pages]
        except Exception:
            logger.exception("Error loading PDF %s", file_path)
            raise
        else:
            logger.info("Loaded %d pages from %s", len(pages), file_path.name)
            return "\n\n".join(pages)

    @staticmethod
    def load_txt(file_path: Path) -> str:
        """Load text content from a TXT file.

        Returns:
            The text content of the file.
        """
        try:
            text = file_path.read_text(encoding="utf-8")
        except Exception:
            logger.exception("Error loading TXT %s", file_path)
            raise
        else:
            logger.info("Loaded TXT file %s", file_path.name)
            return text

    @classmethod
    def load_document(cls, file_path: Path) -> str:
        """Load document based on file extension.

        Args:
            file_path: Path to the document file.

        Returns:
            The text content of the document as a string.

        Raises:
            ValueError: If the file type is not supported.
        """
        file_ext = file_path.suffix.lower()
        if file_ext == ".pdf":
            return cls.load_pdf(file_path)
        if file_ext == ".txt":
            return cls.load_txt(file_path)
        msg = f"Unsupported file type: {file_ext}"
        raise ValueError(msg)


class TextChunker:
    """Splits text into fixed-length overlapping chunks."""

    def __init__(self, chunk_size: int | None = None, overlap: int | None = None) -> None:
        """Initialize the TextChunker with chunk size and overlap.

        Args:
            chunk_size: Characters per chunk. If None, uses config.CHUNK_SIZE.
            overlap: Characters shared by consecutive chunks.
                If None, uses config.CHUNK_OVERLAP.

        Raises:
            ValueError: If overlap is not smaller than chunk_size.
        """
        self.chunk_size = chunk_size if chunk_size is not None else config.CHUNK_SIZE
        self.overlap = overlap if overlap is not None else config.CHUNK_OVERLAP
        if self.chunk_size <= 0 or not 0 <= self.overlap < self.chunk_size:
            msg = (
                f"Invalid chunking parameters: chunk_size={self.chunk_size}, "
                f"overlap={self.overlap}"
            )
            raise ValueError(msg)

    def chunk_text(self, text: str, source: str = "document") -> list[DocumentChunk]:
        """Split text into overlapping chunks.

        Returns:
            A list of DocumentChunk objects representing the text chunks.
        """
        chunks = []
        start = 0
        chunk_id = 0

        while start < len(text):
            end = start + self.chunk_size
            chunk_text = text[start:end]

            # Back off to the last space unless that leaves less than half a chunk
            if end < len(text) and not chunk_text.endswith(" "):
                last_space = chunk_text.rfind(" ")
                if last_space > self.chunk_size // 2:
                    end = start + last_space
                    chunk_text = text[start:end]

            if chunk_text.strip():
                chunks.append(
                    DocumentChunk(
                        content=chunk_text.strip(),
                        metadata={
                            "source": source,
                            "chunk_id": chunk_id,
                            "start_char": start,
                            "end_char": end,
                            "length": len(chunk_text.strip()),
                        },
                    )
                )
                chunk_id += 1

            if end >= len(text):
                break
            # A backed-off chunk can be shorter than the overlap
            next_start = end - self.overlap
            start = next_start if next_start > start else end

        logger.info("Text split into %d chunks", len(chunks))
        return chunks
