"""
Loader for the exported Action table.

The game data files themselves are read by an external exporter; this module
consumes its JSON output and turns each row into an ActionData with a decoded
description tree.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

from ..errors import ActionDataError
from ..models.action_data import ActionData, ClassJobData
from ..utils.logging_config import get_logger
from .node_decoder import decode_description

logger = get_logger(__name__)


class ActionSheet:
    """Exported Action table for one language."""
    
    def __init__(self, json_file_path: str, language: str = "en"):
        """Initialize sheet with path to the exported JSON file"""
        self.json_file_path = Path(json_file_path)
        self.language = language
        self.version: Optional[str] = None
        self.actions: List[ActionData] = []
        self._actions_by_id: Dict[int, ActionData] = {}
        
        self._load_data()
    
    def _load_data(self) -> None:
        """Load and parse the JSON data"""
        with open(self.json_file_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        
        if not isinstance(data, dict) or not isinstance(data.get('actions'), list):
            raise ActionDataError(f"No actions list found in {self.json_file_path}")
        
        self.version = data.get('version')
        for row in data['actions']:
            action = self._parse_action(row)
            self.actions.append(action)
            self._actions_by_id[action.id] = action
        
        logger.info(f"Loaded {len(self.actions)} actions from {self.json_file_path} (version {self.version or 'unknown'})")
    
    def _parse_action(self, row: Dict[str, Any]) -> ActionData:
        """Parse one exported row into ActionData."""
        if 'id' not in row:
            raise ActionDataError(f"Action row has no id: {row!r}")
        
        class_job = None
        class_job_data = row.get('classJob')
        if class_job_data:
            if not isinstance(class_job_data, dict):
                raise ActionDataError(f"Action {row['id']} has a malformed classJob: {class_job_data!r}")
            class_job = ClassJobData(
                name=class_job_data.get('name') or '',
                category=class_job_data.get('category') or '',
            )
        
        return ActionData(
            id=int(row['id']),
            name=row.get('name') or '',
            description=decode_description(self._localized(row.get('description'))),
            action_category=row.get('actionCategory') or '',
            class_job=class_job,
            is_pvp=bool(row.get('isPvP', False)),
        )
    
    def _localized(self, description: Any) -> Any:
        """Pick this sheet's language out of a multi-language description."""
        if isinstance(description, dict) and 'tag' not in description:
            return description.get(self.language)
        return description
    
    def get(self, action_id: int) -> Optional[ActionData]:
        return self._actions_by_id.get(action_id)
    
    def __iter__(self) -> Iterator[ActionData]:
        return iter(self.actions)
    
    def __len__(self) -> int:
        return len(self.actions)
