"""Action entities as handed over by the game data source."""

from dataclasses import dataclass
from typing import Optional

from .text_nodes import RichText


@dataclass
class ClassJobData:
    """Class/job an action belongs to."""
    name: str
    category: str = ""


@dataclass
class ActionData:
    """One row of the exported Action table."""
    id: int
    name: str
    description: RichText
    action_category: str = ""
    class_job: Optional[ClassJobData] = None
    is_pvp: bool = False
    
    @property
    def has_class_job(self) -> bool:
        return self.class_job is not None and bool(self.class_job.name)
