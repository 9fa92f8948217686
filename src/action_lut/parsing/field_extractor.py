"""Regex extraction of potency values from flattened description text."""

import re
from typing import Dict, Iterable, Mapping, Optional

from ..models.action_record import ActionRecord
from ..models.text_nodes import RichText
from ..utils.logging_config import get_logger

logger = get_logger(__name__)

UINT_MAX = 0xFFFFFFFF


def _positional(phrase: str) -> re.Pattern:
    """Numeral before the phrase, or directly after it when one follows."""
    escaped = re.escape(phrase)
    return re.compile(rf"([\d,]+) {escaped}(?! [\d,])|{escaped} ([\d,]+)")


# Applied independently; each field takes the first match of its own pattern
FIELD_PATTERNS: Dict[str, re.Pattern] = {
    'potency': re.compile(r"with a potency of ([\d,]+)"),
    'rear_potency': _positional("when executed from a target's rear"),
    'flank_potency': _positional("when executed from a target's flank"),
    'front_potency': _positional("when executed in front of target"),
    'combo_potency': re.compile(r"Combo Potency: ([\d,]+)"),
    'cure_potency': re.compile(r"Cure Potency: ([\d,]+)"),
    'restore_percentage': re.compile(r"Restores (\d+%)"),
}


def parse_uint(value: str) -> int:
    """Parse a captured numeral, returning 0 for anything that is not an unsigned 32-bit integer."""
    cleaned = value.strip().replace(",", "").rstrip("%")
    if not cleaned.isascii() or not cleaned.isdigit():
        return 0
    number = int(cleaned)
    if number > UINT_MAX:
        return 0
    return number


def flatten(nodes: Iterable) -> str:
    """Render a filtered node sequence as one plain-text string."""
    return RichText(list(nodes)).to_text()


class FieldExtractor:
    """Populate the numeric fields of an ActionRecord from description text."""
    
    def __init__(self, patterns: Optional[Mapping[str, re.Pattern]] = None):
        self.patterns = dict(FIELD_PATTERNS if patterns is None else patterns)
        unknown = set(self.patterns) - set(ActionRecord.value_fields())
        if unknown:
            raise ValueError(f"Patterns given for unknown fields: {sorted(unknown)}")
    
    def extract_field(self, text: str, field_name: str) -> int:
        match = self.patterns[field_name].search(text)
        if match is None:
            return 0
        captured = next((group for group in match.groups() if group is not None), "")
        return parse_uint(captured)
    
    def extract(self, text: str) -> Dict[str, int]:
        """Return a value for every numeric field, 0 where nothing matched."""
        values = {name: 0 for name in ActionRecord.value_fields()}
        for field_name in self.patterns:
            values[field_name] = self.extract_field(text, field_name)
        return values
    
    def extract_record(self, action_id: int, name: str, nodes: Iterable) -> ActionRecord:
        """Build the record for one action from its filtered description nodes."""
        text = flatten(nodes)
        record = ActionRecord(id=action_id, name=name, **self.extract(text))
        logger.debug(f"{action_id} - {name}: {record}")
        return record
