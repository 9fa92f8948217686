"""Selects player actions and runs the filter/extract pipeline over them."""

from pathlib import Path
from typing import Iterable, List, Optional

from .config import GeneratorConfig
from .errors import MalformedTreeError
from .loaders.action_sheet import ActionSheet
from .models.action_data import ActionData
from .models.action_record import ActionRecord
from .output.cpp_writer import CppWriter
from .parsing.field_extractor import FieldExtractor
from .parsing.text_filter import filter_description
from .utils.logging_config import get_logger

logger = get_logger(__name__)

EXCLUDED_CLASS_JOB_CATEGORIES = frozenset({
    "Disciple of the Land",
    "Disciple of the Hand",
})

COMBAT_ACTION_CATEGORIES = frozenset({
    "Ability",
    "Auto-attack",
    "Spell",
    "Weaponskill",
    "Limit Break",
})


def is_player_action(action: ActionData) -> bool:
    """Whether an action is a named, non-PvP combat action of a combat class/job."""
    if not action.name:
        return False
    if not action.has_class_job:
        return False
    if action.is_pvp:
        return False
    if action.class_job.category in EXCLUDED_CLASS_JOB_CATEGORIES:
        return False
    return action.action_category in COMBAT_ACTION_CATEGORIES


class ActionLutGenerator:
    """Builds the potency records for every qualifying action."""
    
    def __init__(self, extractor: Optional[FieldExtractor] = None, skip_malformed: bool = False):
        self.extractor = extractor or FieldExtractor()
        self.skip_malformed = skip_malformed
    
    def process_action(self, action: ActionData) -> ActionRecord:
        """Filter an action's description and extract its record."""
        nodes = filter_description(action.description.children)
        return self.extractor.extract_record(action.id, action.name, nodes)
    
    def generate(self, actions: Iterable[ActionData]) -> List[ActionRecord]:
        """Return the non-empty records of all player actions, in input order."""
        records: List[ActionRecord] = []
        for action in actions:
            if not is_player_action(action):
                continue
            
            logger.info(f"{action.id} - {action.name}")
            
            try:
                record = self.process_action(action)
            except MalformedTreeError as e:
                if not self.skip_malformed:
                    raise
                logger.warning(f"Skipping {action.id} - {action.name}: {e}")
                continue
            
            # Records without any potency carry nothing for the server
            if record.is_empty:
                logger.debug(f"Dropping {action.id} - {action.name}: no potency values")
                continue
            records.append(record)
        
        logger.info(f"Found {len(records)} player actions")
        return records
    
    @classmethod
    def run(cls, config: GeneratorConfig) -> Path:
        """Load the action sheet, generate records and write the output file."""
        config.validate()
        sheet = ActionSheet(config.data_path, language=config.language)
        generator = cls(skip_malformed=config.skip_malformed)
        records = generator.generate(sheet)
        writer = CppWriter(config.template_path)
        return writer.write(records, config.output_path)
