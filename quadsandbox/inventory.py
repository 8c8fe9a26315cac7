"""Equipment slots that items from an inventory can be fitted into."""

from __future__ import annotations

from dataclasses import dataclass, field

SLOT_LABELS = (
    "Left Mouse Button",
    "Right Mouse Button",
    "Middle Mouse Button",
    "Space",
    '"1"',
    '"2"',
    '"3"',
)


@dataclass
class Slot:
    """A slot with a unique id, holding at most one item."""

    id: int
    item: str | None = None


@dataclass(frozen=True)
class Unfit:
    """Remove the item from a slot."""

    target_slot: int


@dataclass(frozen=True)
class Fit:
    """Put an item from the inventory into a slot."""

    target_slot: int
    item: str


@dataclass(frozen=True)
class Refit:
    """Move the item from one slot to another."""

    target_slot: int
    origin_slot: int


FittingCommand = Unfit | Fit | Refit


def _default_slots() -> list[tuple[str, Slot]]:
    return [(label, Slot(slot_id)) for slot_id, label in enumerate(SLOT_LABELS, start=1)]


@dataclass
class Data:
    """Inventory contents, labelled slots and the pending fitting command."""

    inventory: list[str] = field(default_factory=list)
    item_dragging: bool = False
    slots: list[tuple[str, Slot]] = field(default_factory=_default_slots)
    fit_command: FittingCommand | None = None

    def _find(self, slot_id: int) -> Slot | None:
        return next((slot for _, slot in self.slots if slot.id == slot_id), None)

    def set_item(self, slot_id: int, item: str | None) -> None:
        """Put ``item`` into a slot; unknown slots are ignored."""
        slot = self._find(slot_id)
        if slot is not None:
            slot.item = item

    def item_in(self, slot_id: int) -> str | None:
        """The item held by a slot."""
        slot = self._find(slot_id)
        if slot is None:
            raise KeyError(slot_id)
        return slot.item

    def apply(self, command: FittingCommand | None) -> None:
        """Carry out a fitting command."""
        match command:
            case Unfit(target_slot=target):
                self.set_item(target, None)
            case Fit(target_slot=target, item=item):
                self.set_item(target, item)
            case Refit(target_slot=target, origin_slot=origin):
                origin_slot = self._find(origin)
                moved = origin_slot.item if origin_slot is not None else None
                self.set_item(target, moved)
                self.set_item(origin, None)
            case None:
                pass
            case _:
                raise TypeError(f"not a fitting command: {command!r}")