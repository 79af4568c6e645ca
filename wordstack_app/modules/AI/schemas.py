from dataclasses import dataclass
from typing import Optional


@dataclass
class AIResponseDTO:
    """Standard response object from AI."""
    success: bool
    content: Optional[str] = None
    error: Optional[str] = None
