"""Structured potency record produced for each player action."""

from dataclasses import dataclass, fields


@dataclass
class ActionRecord:
    """Potency values extracted from one action's description."""
    
    # Identity
    id: int
    name: str
    
    # Extracted values, zero when the description has no matching phrase
    potency: int = 0
    combo_potency: int = 0
    flank_potency: int = 0
    front_potency: int = 0
    rear_potency: int = 0
    cure_potency: int = 0
    restore_percentage: int = 0
    
    def __post_init__(self) -> None:
        """Validate record data after creation."""
        if not self.name:
            raise ValueError("Action name cannot be empty")
        for name in self.value_fields():
            if getattr(self, name) < 0:
                raise ValueError(f"{name} cannot be negative: {getattr(self, name)}")
    
    @classmethod
    def value_fields(cls) -> tuple:
        """Names of the seven numeric fields, in declaration order."""
        return tuple(f.name for f in fields(cls) if f.name not in ("id", "name"))
    
    @property
    def is_empty(self) -> bool:
        """True when no potency value was found at all."""
        return all(getattr(self, name) == 0 for name in self.value_fields())
    
    def to_initializer(self) -> str:
        """Render the record as a C++ aggregate initializer line.
        
        The consuming table has a trailing slot that is always written as 0;
        restore_percentage is not part of that layout.
        """
        values = ", ".join(str(v) for v in (
            self.potency,
            self.combo_potency,
            self.flank_potency,
            self.front_potency,
            self.rear_potency,
            self.cure_potency,
            0,
        ))
        return f"  // {self.name}\n  {{ {self.id}, {{ {values} }} }},"
    
    def __str__(self) -> str:
        return self.to_initializer()
