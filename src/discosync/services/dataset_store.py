"""
Reading and atomically rewriting the persisted discography document.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Optional, Union
from ..models.releases import CatalogDataset
from ..core.config import DATA_PATH, ERROR_MESSAGES
from ..core.exceptions import DatasetError
from ..core.logger import get_logger

logger = get_logger("services.dataset_store")


class DatasetStore:
    """Loads and saves the CatalogDataset JSON document."""
    
    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path else DATA_PATH
    
    def exists(self) -> bool:
        return self.path.is_file()
    
    def load(self, missing_ok: bool = False) -> CatalogDataset:
        """
        Read the whole document.
        
        Args:
            missing_ok: Return an empty dataset instead of failing when the
                file does not exist yet
                
        Raises:
            DatasetError: If the file is missing (and not allowed) or malformed
        """
        if not self.exists():
            if missing_ok:
                logger.debug(f"No dataset at {self.path}, starting empty")
                return CatalogDataset()
            raise DatasetError(f"{ERROR_MESSAGES['DATASET_UNREADABLE']}: {self.path} does not exist")
        
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise DatasetError(f"{ERROR_MESSAGES['DATASET_UNREADABLE']}: {self.path}: {e}") from e
        
        if not isinstance(data, dict):
            raise DatasetError(f"{ERROR_MESSAGES['DATASET_UNREADABLE']}: {self.path}: expected a JSON object")
        
        try:
            return CatalogDataset.from_dict(data)
        except (TypeError, ValueError) as e:
            raise DatasetError(f"{ERROR_MESSAGES['DATASET_UNREADABLE']}: {self.path}: {e}") from e
    
    def save(self, dataset: CatalogDataset) -> None:
        """
        Overwrite the document in one step.
        
        The content is written to a temporary file in the same directory and
        then moved over the target, so readers never see a partial file.
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        content = json.dumps(dataset.to_dict(), indent=2, ensure_ascii=False) + "\n"
        
        fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
            os.replace(tmp_name, self.path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
        
        logger.info(f"Wrote {len(dataset.releases)} releases to {self.path}")
