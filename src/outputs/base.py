"""
Base output generator interface.

Defines the contract that all output generators must implement.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from core.models import TableView
from outputs.config import GeneratorConfig


class OutputGenerator(ABC):
    """
    Abstract base class for table renderers.

    All output generators (HTML, XLSX, text) must implement this interface.
    """

    @abstractmethod
    def generate(
        self,
        view: TableView,
        output_path: Optional[Path],
        config: GeneratorConfig,
    ) -> None:
        """
        Render a table view.

        Args:
            view: Controller snapshot to render
            output_path: Where to write the output (None for terminal output)
            config: Generator-specific configuration
        """
        pass

    @abstractmethod
    def supports_format(self) -> str:
        """
        Return the format this generator supports.

        Returns:
            Format identifier (e.g., "html", "xlsx")
        """
        pass
