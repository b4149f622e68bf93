"""File utility for CSS Style Importer."""

import os
import aiofiles
from .config import MAX_CSS_SIZE
from .error import FileOperationError

async def safe_read_file(file_path: str, encoding: str = 'utf-8',
                         max_size: int = MAX_CSS_SIZE) -> str:
    """Safely read content from a file.
    
    Args:
        file_path: Path to the file
        encoding: File encoding
        max_size: Largest accepted file size in bytes
        
    Returns:
        File content
        
    Raises:
        FileOperationError: If the file is missing, too large or unreadable
    """
    try:
        size = os.path.getsize(file_path)
    except OSError as e:
        raise FileOperationError(f"Failed to read file {file_path}: {e}")

    if size > max_size:
        raise FileOperationError(
            f"File too large (max {max_size / 1024 / 1024}MB): {file_path}"
        )

    try:
        async with aiofiles.open(file_path, 'r', encoding=encoding) as f:
            return await f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise FileOperationError(f"Failed to read file {file_path}: {e}")

# Exported functions
__all__ = ['safe_read_file']
